"""
文档存取 - 文档标识 → 存储目录下的工作簿文件

标识为空、文件不存在均视为「未找到」返回None
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from openpyxl import load_workbook

from ..config import get_config
from ..interfaces import IDocumentStore

if TYPE_CHECKING:
    from openpyxl.workbook.workbook import Workbook

    from ..config import RuntimeConfig

logger = logging.getLogger(__name__)


class DocumentStore(IDocumentStore):
    """基于文件目录的文档存取"""

    def __init__(self, config: RuntimeConfig | None = None):
        self.config = config or get_config()

    def open(self, doc_id: str, *, values_only: bool = False) -> Workbook | None:
        """打开工作簿（values_only=True 读取公式缓存值）"""
        if not doc_id:
            logger.warning("文档标识未配置")
            return None

        path = self.config.get_document_path(doc_id)
        if not path.exists():
            logger.warning(f"文档不存在: {doc_id} ({path})")
            return None

        return load_workbook(path, data_only=values_only)

    def save(self, doc_id: str, workbook: Workbook) -> None:
        """保存工作簿"""
        path = self.config.get_document_path(doc_id)
        path.parent.mkdir(parents=True, exist_ok=True)
        workbook.save(path)
        logger.info(f"已保存: {path}")
