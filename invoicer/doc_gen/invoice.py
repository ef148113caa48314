"""
请求书生成器 - 复制模板sheet并写入

职责：
1. 同名sheet检查（存在则中止，不做任何修改）
2. 模板版式校验
3. 复制「テンプレート」，重命名为源sheet名，移动到第2个标签
4. 写入请求日/请求番号
5. 写入明细（品名/数量/单位/单价；工程管理前空一行）
6. 备注追加月末日期
7. 保存

依赖：
- openpyxl: Excel操作
- invoice_layout.yaml: invoice 版式（锚点+偏移）

测试要点：
- test_generate_header: 请求日/请求番号
- test_generate_items_separator: 工程管理前空一行
- test_duplicate_target: 同名sheet中止且不修改
- test_remarks_append: 备注追加
- test_sheet_position: 标签位置
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from ..config import get_config, load_layout
from ..grid import DocumentStore, Sheet
from ..interfaces import DuplicateTargetError, IInvoiceGenerator, NotFoundError
from .layout_validator import LayoutValidator

if TYPE_CHECKING:
    from ..config import InvoiceLayout, RuntimeConfig
    from ..interfaces import IDocumentStore
    from ..models import BillingPeriod, LineItem, WorkRecord

logger = logging.getLogger(__name__)


class InvoiceGenerator(IInvoiceGenerator):
    """请求书生成器实现"""

    def __init__(
        self,
        config: RuntimeConfig | None = None,
        layout: InvoiceLayout | None = None,
        store: IDocumentStore | None = None,
    ):
        self.config = config or get_config()
        self.layout = (layout or load_layout()).invoice
        self.store = store or DocumentStore(self.config)
        self.validator = LayoutValidator(self.layout)

    def generate(
        self,
        record: WorkRecord,
        period: BillingPeriod,
        now: datetime | None = None,
    ) -> str:
        """生成请求书sheet，返回sheet名"""
        now = now or datetime.now(ZoneInfo(self.config.timezone))

        doc_id = self.config.documents.invoice_id
        workbook = self.store.open(doc_id)
        if workbook is None:
            raise NotFoundError(f"请求书文档未找到: {doc_id!r}")

        template = Sheet.get(workbook, self.layout.template_sheet)
        if template is None:
            raise NotFoundError(f"模板sheet不存在: {self.layout.template_sheet}")

        # 1. 同名检查（先于任何修改）
        if Sheet.exists(workbook, record.name):
            raise DuplicateTargetError(f"sheet「{record.name}」已存在")

        # 2. 版式校验
        self.validator.validate(template)

        # 3. 复制模板
        sheet = template.copy(record.name)
        sheet.move_to(self.layout.position)
        logger.info(f"复制模板 → {record.name} (位置 {self.layout.position})")

        # 4-6. 写入
        self._write_header(sheet, now)
        self._write_items(sheet, record.items)
        self._write_remarks(sheet, period)

        # 7. 保存
        self.store.save(doc_id, workbook)
        return sheet.title

    def _write_header(self, sheet: Sheet, now: datetime) -> None:
        """请求日/请求番号"""
        for binding in (self.layout.invoice_date, self.layout.invoice_number):
            cell = sheet.find_text(binding.anchor).offset(*binding.offset)
            cell.value = now.strftime(binding.format) + binding.suffix

    def _write_items(self, sheet: Sheet, items: tuple[LineItem, ...]) -> None:
        """明细行；分隔项（工程管理）前三列同时多下移 separator_rows 行"""
        layout = self.layout.items
        item_cell = sheet.find_text(layout.name_anchor)
        amount_cell = sheet.find_text(layout.amount_anchor)
        unit_price_cell = sheet.find_text(layout.unit_price_anchor)

        for item in items:
            item_cell = item_cell.neighbor("down")
            if item.name == layout.separated_item:
                item_cell = item_cell.offset(rows=layout.separator_rows)
                amount_cell = amount_cell.offset(rows=layout.separator_rows)
                unit_price_cell = unit_price_cell.offset(rows=layout.separator_rows)
            item_cell.value = item.name

            amount_cell = amount_cell.neighbor("down")
            amount_cell.value = item.amount
            amount_cell.offset(*layout.unit_offset).value = item.unit

            unit_price_cell = unit_price_cell.neighbor("down")
            unit_price_cell.value = item.unit_price

    def _write_remarks(self, sheet: Sheet, period: BillingPeriod) -> None:
        """备注：在模板已有文字后追加月末日期"""
        binding = self.layout.remarks
        limited = period.month_end(binding.month_offset)
        cell = sheet.find_text(binding.anchor).offset(*binding.offset)
        existing = cell.read().as_text()
        cell.value = existing + binding.date_format.format(month=limited.month, day=limited.day)
