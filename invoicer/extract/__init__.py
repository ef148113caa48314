"""
提取模块 - 作业明细sheet → WorkRecord
"""

from .record_extractor import RecordExtractor

__all__ = ["RecordExtractor"]
