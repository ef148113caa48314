"""
作业明细提取器 - 源sheet → WorkRecord

职责：
1. 按「項目名」锚点向下逐行读取明细，空行跳过，读到「工程管理」为止（含）
2. 按「合計」锚点读取 合计/税/小计（自下而上）
3. 文档/sheet/锚点缺失时返回None，由调用方作为无操作处理

依赖：
- invoice_layout.yaml: source 版式（锚点+偏移）

测试要点：
- test_extract_items_in_order: 明细顺序与终止项
- test_blank_rows_skipped: 空行不产生明细
- test_rows_after_sentinel_not_read: 终止项之后不读取
- test_missing_sentinel: 无终止项返回None
- test_totals_block: 合计块偏移
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..config import get_config, load_layout
from ..grid import DocumentStore, Sheet
from ..interfaces import IRecordExtractor
from ..models import LineItem, WorkRecord

if TYPE_CHECKING:
    from ..config import InvoiceLayout, RuntimeConfig
    from ..grid import GridCell
    from ..interfaces import IDocumentStore

logger = logging.getLogger(__name__)


class RecordExtractor(IRecordExtractor):
    """作业明细提取器实现"""

    def __init__(
        self,
        config: RuntimeConfig | None = None,
        layout: InvoiceLayout | None = None,
        store: IDocumentStore | None = None,
    ):
        self.config = config or get_config()
        self.layout = layout or load_layout()
        self.store = store or DocumentStore(self.config)

    def extract(self, sheet_name: str) -> WorkRecord | None:
        """从作业明细文档提取指定sheet"""
        doc_id = self.config.documents.work_detail_id
        workbook = self.store.open(doc_id, values_only=True)
        if workbook is None:
            logger.warning(f"作业明细文档未找到: {doc_id!r}")
            return None

        sheet = Sheet.get(workbook, sheet_name)
        if sheet is None:
            logger.warning(f"sheet不存在: {sheet_name}")
            return None

        return self.extract_from_sheet(sheet, name=sheet_name)

    def extract_from_sheet(self, sheet: Sheet, name: str | None = None) -> WorkRecord | None:
        """提取核心（不涉及文档打开）；name 为逻辑sheet名，默认取sheet标题"""
        source = self.layout.source

        header = sheet.find_text(source.items.anchor)
        if header is None:
            logger.warning(f"[{sheet.title}] 锚点未找到: {source.items.anchor}")
            return None

        items = self._read_items(sheet, header)
        if items is None:
            return None

        totals_anchor = sheet.find_text(source.totals.anchor)
        if totals_anchor is None:
            logger.warning(f"[{sheet.title}] 锚点未找到: {source.totals.anchor}")
            return None

        totals = {
            field: totals_anchor.offset(*offset).read().as_number(f"({sheet.title} {field})")
            for field, offset in source.totals.cells.items()
        }

        record = WorkRecord(
            name=name or sheet.title,
            items=tuple(items),
            subtotal=totals["subtotal"],
            tax=totals["tax"],
            total=totals["total"],
            sentinel=source.sentinel_item,
        )
        logger.info(f"[{sheet.title}] 提取明细 {len(record.items)} 行, 合计 {record.total}")
        return record

    def _read_items(self, sheet: Sheet, header: GridCell) -> list[LineItem] | None:
        """自锚点向下读取明细，直到终止项（含）"""
        sentinel = self.layout.source.sentinel_item
        last_row = sheet.last_row

        items: list[LineItem] = []
        cell = header
        while cell.row < last_row:
            cell = cell.neighbor("down")
            item = self._read_item(cell)
            if item is None:
                continue

            items.append(item)
            if item.name == sentinel:
                return items

        logger.warning(f"[{sheet.title}] 未找到终止项: {sentinel}")
        return None

    def _read_item(self, name_cell: GridCell) -> LineItem | None:
        """读取单行；品名为空返回None"""
        name = name_cell.read().as_text(f"({name_cell!r})")
        if not name:
            return None

        columns = self.layout.source.items.columns

        def number(field: str) -> int | float:
            target = name_cell.offset(columns=columns[field])
            return target.read().as_number(f"({target!r} {field})")

        unit_cell = name_cell.offset(columns=columns["unit"])
        return LineItem(
            name=name,
            required_unit=number("required_unit"),
            unit_price=number("unit_price"),
            amount=number("amount"),
            unit=unit_cell.read().as_text(f"({unit_cell!r} unit)"),
            subtotal=number("subtotal"),
        )
