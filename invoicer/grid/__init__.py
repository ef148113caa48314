"""
表格访问层 - 列号换算/单元格导航/锚点查找/文档存取
"""

from .cell import Direction, GridCell
from .notation import index_to_notation, notation_to_index
from .sheet import Sheet, to_sheet_title
from .store import DocumentStore

__all__ = [
    "Direction",
    "GridCell",
    "index_to_notation",
    "notation_to_index",
    "Sheet",
    "to_sheet_title",
    "DocumentStore",
]
