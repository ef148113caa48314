"""
表单提交处理 - 事件入口

流程：
1. 解析「請求月」→ 源sheet名（"2024/5月分"）
2. 提取作业明细；未找到则记录日志并返回（不抛异常）
3. 生成请求书；同名冲突等错误记录后抛出

测试要点：
- test_handle_end_to_end: 完整流程
- test_handle_missing_sheet: 源sheet不存在时无操作
- test_handle_duplicate: 重复提交抛 DuplicateTargetError
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import TYPE_CHECKING, Any

from ..config import get_config, load_layout
from ..doc_gen import InvoiceGenerator
from ..extract import RecordExtractor
from ..grid import DocumentStore
from ..interfaces import InvoicerError
from ..models import FormSubmission

if TYPE_CHECKING:
    from ..config import InvoiceLayout, RuntimeConfig
    from ..interfaces import IDocumentStore

logger = logging.getLogger(__name__)


class SubmissionHandler:
    """表单提交处理器"""

    def __init__(
        self,
        config: RuntimeConfig | None = None,
        layout: InvoiceLayout | None = None,
        store: IDocumentStore | None = None,
    ):
        self.config = config or get_config()
        if layout is None:
            layout = load_layout(self.config.layout_path if self.config.layout_path.exists() else None)
        self.layout = layout
        self.store = store or DocumentStore(self.config)

        self.extractor = RecordExtractor(self.config, self.layout, self.store)
        self.generator = InvoiceGenerator(self.config, self.layout, self.store)

    def handle(
        self,
        event: Mapping[str, Any] | list[Mapping[str, Any]],
        now: datetime | None = None,
    ) -> str | None:
        """处理一次提交；返回生成的sheet名，源数据缺失时返回None"""
        period = FormSubmission.from_event(event).billing_period
        sheet_name = period.source_sheet_name(self.layout.source.sheet_name_format)
        logger.info(f"收到提交: 请求月 {period.year}-{period.month} → {sheet_name}")

        record = self.extractor.extract(sheet_name)
        if record is None:
            logger.error(f"sheet not found: {sheet_name}")
            return None

        try:
            title = self.generator.generate(record, period, now=now)
        except InvoicerError as e:
            logger.error(f"请求书生成失败 [{sheet_name}]: {e}")
            raise

        logger.info(f"请求书已生成: {title}")
        return title


def submit(event: Mapping[str, Any] | list[Mapping[str, Any]]) -> str | None:
    """触发器入口（使用全局配置）"""
    return SubmissionHandler().handle(event)
