"""
流水线模块 - 表单提交事件处理

子模块：
- handler: 事件入口（解析 → 提取 → 生成）
"""

from .handler import SubmissionHandler, submit

__all__ = [
    "SubmissionHandler",
    "submit",
]
