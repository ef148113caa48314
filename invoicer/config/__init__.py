"""
配置层 - 加载运行期配置与版式规范

职责：
- 加载 documents/runtime.yaml（文档标识/存储目录/时区/日志）
- 加载 documents/invoice_layout.yaml（锚点与相对偏移）
- 提供类型安全的配置访问接口
"""

from .layout_loader import InvoiceLayout, LayoutLoader, load_layout
from .runtime_config import RuntimeConfig, get_config, reload_config, setup_logging

__all__ = [
    "InvoiceLayout",
    "LayoutLoader",
    "load_layout",
    "RuntimeConfig",
    "get_config",
    "reload_config",
    "setup_logging",
]
