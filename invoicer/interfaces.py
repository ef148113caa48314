"""
模块接口契约 - 定义各模块的抽象接口

设计原则：
1. 模块间通过接口通信，不直接依赖具体实现
2. 每个接口定义清晰的输入输出类型
3. 便于单元测试和mock替换

使用方式：
    from invoicer.interfaces import IRecordExtractor

    class MyExtractor(IRecordExtractor):
        def extract(self, sheet_name: str) -> WorkRecord | None:
            ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from openpyxl.workbook.workbook import Workbook

    from .models import BillingPeriod, WorkRecord


# ============================================================================
# 文档存取接口
# ============================================================================

class IDocumentStore(ABC):
    """文档存取接口 - 按标识打开/保存工作簿"""

    @abstractmethod
    def open(self, doc_id: str, *, values_only: bool = False) -> Workbook | None:
        """
        按标识打开工作簿

        Args:
            doc_id: 文档标识
            values_only: True时读取公式缓存值（只读用途）

        Returns:
            工作簿；标识为空或文档不存在时返回None
        """
        ...

    @abstractmethod
    def save(self, doc_id: str, workbook: Workbook) -> None:
        """保存工作簿"""
        ...


# ============================================================================
# 提取/生成接口
# ============================================================================

class IRecordExtractor(ABC):
    """作业明细提取器接口"""

    @abstractmethod
    def extract(self, sheet_name: str) -> WorkRecord | None:
        """
        从作业明细文档中提取指定sheet

        Args:
            sheet_name: 源sheet名（如 "2024/5月分"）

        Returns:
            提取结果；sheet或锚点缺失时返回None（不抛异常）
        """
        ...


class IInvoiceGenerator(ABC):
    """请求书生成器接口"""

    @abstractmethod
    def generate(
        self,
        record: WorkRecord,
        period: BillingPeriod,
        now: datetime | None = None,
    ) -> str:
        """
        复制模板并写入请求书

        Args:
            record: 作业明细
            period: 请求月
            now: 请求日（默认当前时间）

        Returns:
            新建sheet名

        Raises:
            DuplicateTargetError: 同名sheet已存在
        """
        ...


# ============================================================================
# 异常定义
# ============================================================================

class InvoicerError(Exception):
    """基础异常"""
    pass


class NotFoundError(InvoicerError):
    """文档/sheet/锚点不存在"""
    pass


class DuplicateTargetError(InvoicerError):
    """目标sheet已存在"""
    pass


class MalformedInputError(InvoicerError):
    """输入或单元格值格式错误"""
    pass


class GridBoundsError(InvoicerError):
    """单元格坐标越界"""
    pass


class LayoutError(InvoicerError):
    """模板版式与配置不一致"""
    pass
