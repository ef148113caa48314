"""
列号换算 - 1起算列号 ↔ 字母列名（A..Z, AA..）

双射26进制：没有「0」，Z之后进位为AA
"""

from __future__ import annotations

MAX_COLUMN = 16384   # XFD
MAX_ROW = 1048576


def index_to_notation(index: int) -> str:
    """列号 → 列名（1 → A, 27 → AA）"""
    if index < 1:
        raise ValueError(f"列号必须 >= 1: {index}")
    out = []
    while index > 0:
        index, rem = divmod(index - 1, 26)
        out.append(chr(ord("A") + rem))
    return "".join(reversed(out))


def notation_to_index(notation: str) -> int:
    """列名 → 列号（A → 1, AA → 27）"""
    col = notation.strip().upper()
    if not col:
        raise ValueError("列名为空")
    n = 0
    for ch in col:
        if not ("A" <= ch <= "Z"):
            raise ValueError(f"非法列名: {notation!r}")
        n = n * 26 + (ord(ch) - ord("A") + 1)
    return n
