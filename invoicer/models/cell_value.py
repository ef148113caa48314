"""
单元格值 - 空/文本/数值 三态

读取点显式转换，类型不符时抛 MalformedInputError，避免静默读错类型
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

from ..interfaces import MalformedInputError


class CellKind(str, Enum):
    """单元格值类型"""
    EMPTY = "empty"
    TEXT = "text"
    NUMBER = "number"


@dataclass(frozen=True)
class CellValue:
    kind: CellKind
    raw: Any = None

    @classmethod
    def of(cls, raw: Any) -> CellValue:
        """按原始值分类"""
        if raw is None:
            return cls(CellKind.EMPTY)
        if isinstance(raw, bool):
            return cls(CellKind.TEXT, str(raw))
        if isinstance(raw, Decimal):
            return cls(CellKind.NUMBER, float(raw))
        if isinstance(raw, (int, float)):
            return cls(CellKind.NUMBER, raw)
        text = raw if isinstance(raw, str) else str(raw)
        if not text.strip():
            return cls(CellKind.EMPTY)
        return cls(CellKind.TEXT, text)

    @property
    def is_empty(self) -> bool:
        return self.kind is CellKind.EMPTY

    def as_text(self, where: str = "") -> str:
        """取文本（空 → ""）"""
        if self.kind is CellKind.EMPTY:
            return ""
        if self.kind is CellKind.TEXT:
            return self.raw
        raise MalformedInputError(f"期望文本，实际为数值 {self.raw!r} {where}".rstrip())

    def as_number(self, where: str = "") -> int | float:
        """取数值（空/文本均视为格式错误）"""
        if self.kind is CellKind.NUMBER:
            return self.raw
        raise MalformedInputError(
            f"期望数值，实际为{'空' if self.is_empty else '文本'} {self.raw!r} {where}".rstrip()
        )
