"""
文档生成模块 - 请求书

子模块：
- layout_validator: 模板版式校验
- invoice: 请求书生成（复制模板+写入）
"""

from .invoice import InvoiceGenerator
from .layout_validator import LayoutValidator

__all__ = [
    "InvoiceGenerator",
    "LayoutValidator",
]
