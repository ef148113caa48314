"""
模板版式校验 - 复制模板前核对锚点与落点

模板列被调整后锚点偏移会整体错位，这里在写入前一次性报出所有问题
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from openpyxl.cell.cell import MergedCell

from ..interfaces import LayoutError

if TYPE_CHECKING:
    from ..config.layout_loader import InvoiceSheetLayout
    from ..grid import GridCell, Sheet


class LayoutValidator:
    """请求书模板版式校验"""

    def __init__(self, layout: InvoiceSheetLayout):
        self.layout = layout

    def validate(self, template: Sheet) -> None:
        """校验失败抛 LayoutError（列出全部问题）"""
        problems: list[str] = []
        layout = self.layout

        bindings = {
            "invoice_date": (layout.invoice_date.anchor, layout.invoice_date.offset),
            "invoice_number": (layout.invoice_number.anchor, layout.invoice_number.offset),
            "remarks": (layout.remarks.anchor, layout.remarks.offset),
            "item_name": (layout.items.name_anchor, (1, 0)),
            "amount": (layout.items.amount_anchor, (1, 0)),
            "unit_price": (layout.items.unit_price_anchor, (1, 0)),
        }

        for field, (anchor, offset) in bindings.items():
            anchor_cell = template.find_text(anchor)
            if anchor_cell is None:
                problems.append(f"{field}: 锚点「{anchor}」不存在")
                continue
            target = anchor_cell.offset(*offset)
            problems.extend(self._check_target(field, target))
            if field == "amount":
                problems.extend(
                    self._check_target("unit", target.offset(*layout.items.unit_offset))
                )

        if problems:
            raise LayoutError(f"模板「{template.title}」版式不符: " + "; ".join(problems))

    @staticmethod
    def _check_target(field: str, target: GridCell) -> list[str]:
        if not target.in_bounds:
            return [f"{field}: 落点越界 {target!r}"]
        if isinstance(target.sheet.worksheet[target.address], MergedCell):
            return [f"{field}: 落点 {target.address} 位于合并区域内"]
        return []
