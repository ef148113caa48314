"""
sheet封装 - 锚点查找 / 单元格定位 / 复制 / 移动

锚点查找是唯一的搜索原语，其余定位均相对锚点进行
"""

from __future__ import annotations

from copy import deepcopy
from typing import TYPE_CHECKING

from .cell import GridCell

if TYPE_CHECKING:
    from openpyxl.workbook.workbook import Workbook
    from openpyxl.worksheet.worksheet import Worksheet

# xlsx sheet名禁用字符 → 全角
_TITLE_TRANS = str.maketrans({
    "/": "／",
    "\\": "＼",
    "*": "＊",
    "?": "？",
    ":": "：",
    "[": "［",
    "]": "］",
})


def to_sheet_title(name: str) -> str:
    """逻辑名（如 "2024/5月分"）→ 合法sheet名（"2024／5月分"）"""
    return name.translate(_TITLE_TRANS)


class Sheet:
    """openpyxl worksheet 封装"""

    def __init__(self, workbook: Workbook, worksheet: Worksheet):
        self.workbook = workbook
        self.worksheet = worksheet

    @classmethod
    def get(cls, workbook: Workbook, name: str) -> Sheet | None:
        """按逻辑名取sheet，不存在返回None"""
        title = to_sheet_title(name)
        if title not in workbook.sheetnames:
            return None
        return cls(workbook, workbook[title])

    @staticmethod
    def exists(workbook: Workbook, name: str) -> bool:
        return to_sheet_title(name) in workbook.sheetnames

    @property
    def title(self) -> str:
        return self.worksheet.title

    @property
    def last_row(self) -> int:
        return self.worksheet.max_row

    def cell(self, row: int, column: int) -> GridCell:
        return GridCell(self, row, column)

    def find_text(self, text: str) -> GridCell | None:
        """按行优先顺序查找首个值完全等于text的单元格"""
        for row in self.worksheet.iter_rows():
            for c in row:
                if isinstance(c.value, str) and c.value == text:
                    return GridCell(self, c.row, c.column)
        return None

    def copy(self, name: str) -> Sheet:
        """
        在同一工作簿内复制并重命名

        copy_worksheet 只复制单元格/行列尺寸/合并/页面设置，
        其余sheet级设置由 _copy_sheet_settings 补齐
        """
        new_ws = self.workbook.copy_worksheet(self.worksheet)
        new_ws.title = to_sheet_title(name)
        _copy_sheet_settings(self.worksheet, new_ws)
        return Sheet(self.workbook, new_ws)

    def move_to(self, position: int) -> None:
        """移动到第position个标签（1起算）并设为活动sheet"""
        sheets = self.workbook.worksheets
        current = sheets.index(self.worksheet)
        target = min(max(position, 1), len(sheets)) - 1
        self.workbook.move_sheet(self.worksheet, offset=target - current)
        for ws in self.workbook.worksheets:
            ws.sheet_view.tabSelected = ws is self.worksheet
        self.workbook.active = self.worksheet


def _local_ranges(ref: str | None) -> list[str]:
    """引用串 → 本sheet内范围列表，如 'テンプレート'!$A$1:$H$30 → ["A1:H30"]"""
    if not ref:
        return []
    return [part.rsplit("!", 1)[-1].replace("$", "") for part in ref.split(",")]


def _copy_sheet_settings(source: Worksheet, target: Worksheet) -> None:
    """视图/打印区域/页眉页脚/条件格式/数据验证"""
    target.views = deepcopy(source.views)

    print_area = _local_ranges(source.print_area)
    if print_area:
        target.print_area = print_area
    rows = _local_ranges(source.print_title_rows)
    if rows:
        target.print_title_rows = rows[0]
    cols = _local_ranges(source.print_title_cols)
    if cols:
        target.print_title_cols = cols[0]

    target.HeaderFooter = deepcopy(source.HeaderFooter)

    for cf in source.conditional_formatting:
        for rule in cf.rules:
            target.conditional_formatting.add(str(cf.sqref), deepcopy(rule))

    for dv in source.data_validations.dataValidation:
        target.add_data_validation(deepcopy(dv))
