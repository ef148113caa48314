"""
单元格游标 - 位置 + 值读写 + 四向邻格

邻格计算本身不做越界检查；越界坐标在读写时抛 GridBoundsError
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from openpyxl.cell.cell import MergedCell

from ..interfaces import GridBoundsError, LayoutError
from ..models import CellValue
from .notation import MAX_COLUMN, MAX_ROW, index_to_notation

if TYPE_CHECKING:
    from .sheet import Sheet


class Direction(str, Enum):
    """移动方向"""
    FORWARD = "next"
    BACKWARD = "previous"
    UP = "up"
    DOWN = "down"


_STEPS: dict[Direction, tuple[int, int]] = {
    Direction.FORWARD: (0, 1),
    Direction.BACKWARD: (0, -1),
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
}


class GridCell:
    """sheet上的单个单元格位置"""

    def __init__(self, sheet: Sheet, row: int, column: int):
        self.sheet = sheet
        self._row = row
        self._column = column

    @property
    def row(self) -> int:
        return self._row

    @property
    def column(self) -> int:
        return self._column

    @property
    def in_bounds(self) -> bool:
        return 1 <= self._row <= MAX_ROW and 1 <= self._column <= MAX_COLUMN

    @property
    def address(self) -> str:
        """A1形式地址"""
        self._check_bounds()
        return f"{index_to_notation(self._column)}{self._row}"

    @property
    def value(self) -> Any:
        return self.sheet.worksheet[self.address].value

    @value.setter
    def value(self, new_value: Any) -> None:
        cell = self.sheet.worksheet[self.address]
        if isinstance(cell, MergedCell):
            raise LayoutError(f"{self.sheet.title}!{self.address} 位于合并区域内，无法写入")
        cell.value = new_value

    def read(self) -> CellValue:
        """按类型读取"""
        return CellValue.of(self.value)

    def neighbor(self, direction: Direction | str) -> GridCell:
        """相邻单元格（不做越界检查）"""
        d_row, d_col = _STEPS[Direction(direction)]
        return GridCell(self.sheet, self._row + d_row, self._column + d_col)

    def offset(self, rows: int = 0, columns: int = 0) -> GridCell:
        """相对偏移（等价于多次 neighbor）"""
        return GridCell(self.sheet, self._row + rows, self._column + columns)

    def _check_bounds(self) -> None:
        if not self.in_bounds:
            raise GridBoundsError(
                f"{self.sheet.title}: 坐标越界 row={self._row} column={self._column}"
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GridCell):
            return NotImplemented
        return (
            self.sheet.worksheet is other.sheet.worksheet
            and self._row == other._row
            and self._column == other._column
        )

    def __hash__(self) -> int:
        return hash((id(self.sheet.worksheet), self._row, self._column))

    def __repr__(self) -> str:
        where = self.address if self.in_bounds else f"R{self._row}C{self._column}"
        return f"GridCell({self.sheet.title}!{where})"
