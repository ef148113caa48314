"""
版式规范加载器 - 读取 documents/invoice_layout.yaml

职责：
- 以「字段 → 锚点文本 + 相对偏移」的声明式表格描述源表与请求书模板
- 解析YAML并提供类型安全访问
- 缓存加载结果（避免重复解析）

偏移统一为 (行, 列)，相对锚点单元格；行向下为正，列向右为正。

使用方式：
    layout = LayoutLoader.load("documents/invoice_layout.yaml")
    layout.source.items.columns["amount"]   # → 3
    layout.invoice.template_sheet           # → "テンプレート"
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

DEFAULT_LAYOUT_PATH = Path("documents/invoice_layout.yaml")

ITEM_FIELDS = ("required_unit", "amount", "unit", "unit_price", "subtotal")
TOTAL_FIELDS = ("total", "tax", "subtotal")


def _require_keys(value: dict, keys: tuple[str, ...], what: str) -> dict:
    missing = [k for k in keys if k not in value]
    if missing:
        raise ValueError(f"{what}缺少字段: {', '.join(missing)}")
    return value


# ============================================================================
# 源表（作业明细）
# ============================================================================

class SourceItemsLayout(BaseModel):
    """明细行：锚点下方逐行读取，各字段为相对品名单元格的列偏移"""
    anchor: str = "項目名"
    columns: dict[str, int] = Field(
        default_factory=lambda: {
            "required_unit": 1,
            "amount": 3,
            "unit": 4,
            "unit_price": 5,
            "subtotal": 6,
        }
    )

    @field_validator("columns")
    @classmethod
    def _check_columns(cls, v: dict[str, int]) -> dict[str, int]:
        return _require_keys(v, ITEM_FIELDS, "明细列偏移")


class SourceTotalsLayout(BaseModel):
    """合计块：小计/税/合计 自上而下位于合计标签右侧一列"""
    anchor: str = "合計"
    cells: dict[str, tuple[int, int]] = Field(
        default_factory=lambda: {
            "total": (0, 1),
            "tax": (-1, 1),
            "subtotal": (-2, 1),
        }
    )

    @field_validator("cells")
    @classmethod
    def _check_cells(cls, v: dict[str, tuple[int, int]]) -> dict[str, tuple[int, int]]:
        return _require_keys(v, TOTAL_FIELDS, "合计偏移")


class SourceLayout(BaseModel):
    """作业明细sheet版式"""
    sheet_name_format: str = "{year}/{month}月分"
    sentinel_item: str = "工程管理"
    items: SourceItemsLayout = Field(default_factory=SourceItemsLayout)
    totals: SourceTotalsLayout = Field(default_factory=SourceTotalsLayout)


# ============================================================================
# 请求书模板
# ============================================================================

class FieldBinding(BaseModel):
    """锚点落点"""
    anchor: str
    offset: tuple[int, int] = (0, 1)


class DateBinding(FieldBinding):
    """日期落点（strftime格式 + 固定后缀）"""
    format: str
    suffix: str = ""


class RemarksBinding(FieldBinding):
    """备注落点：在已有文字后追加月末日期"""
    offset: tuple[int, int] = (1, 0)
    date_format: str = "{month}/{day:02d}"
    month_offset: int = 0


class InvoiceItemsLayout(BaseModel):
    """明细写入：三个列锚点各自向下移动"""
    name_anchor: str = "品 番 • 品 名"
    amount_anchor: str = "数 量"
    unit_price_anchor: str = "単 価"
    unit_offset: tuple[int, int] = (0, 1)   # 相对数量单元格
    separated_item: str = "工程管理"
    separator_rows: int = Field(1, ge=0)


class InvoiceSheetLayout(BaseModel):
    """请求书模板版式"""
    template_sheet: str = "テンプレート"
    position: int = Field(2, ge=1)            # sheet标签位置（1起算）
    invoice_date: DateBinding = Field(
        default_factory=lambda: DateBinding(anchor="請求日: ", format="%Y/%m/%d")
    )
    invoice_number: DateBinding = Field(
        default_factory=lambda: DateBinding(anchor="請求番号: ", format="%Y%m%d", suffix="-01")
    )
    items: InvoiceItemsLayout = Field(default_factory=InvoiceItemsLayout)
    remarks: RemarksBinding = Field(default_factory=lambda: RemarksBinding(anchor="備考"))


class InvoiceLayout(BaseModel):
    """版式规范（invoice_layout.yaml 的结构化表示）"""
    schema_version: str = "1.0"
    source: SourceLayout = Field(default_factory=SourceLayout)
    invoice: InvoiceSheetLayout = Field(default_factory=InvoiceSheetLayout)


class LayoutLoader:
    """版式规范加载器（缓存）"""

    @classmethod
    @lru_cache(maxsize=4)
    def load(cls, layout_path: str | Path = DEFAULT_LAYOUT_PATH) -> InvoiceLayout:
        """加载并缓存版式规范"""
        path = Path(layout_path)
        if not path.exists():
            raise FileNotFoundError(f"版式文件不存在: {path}")

        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        return InvoiceLayout(**data)

    @classmethod
    def reload(cls, layout_path: str | Path = DEFAULT_LAYOUT_PATH) -> InvoiceLayout:
        """强制重新加载（清除缓存）"""
        cls.load.cache_clear()
        return cls.load(layout_path)


# 便捷函数
def load_layout(layout_path: str | Path | None = None) -> InvoiceLayout:
    """加载版式规范；未指定路径且默认文件不存在时使用内置版式"""
    if layout_path is None:
        if not DEFAULT_LAYOUT_PATH.exists():
            return InvoiceLayout()
        layout_path = DEFAULT_LAYOUT_PATH
    return LayoutLoader.load(layout_path)
