"""
数据模型层 - 定义系统核心数据结构

- CellValue: 单元格值（空/文本/数值）
- LineItem / WorkRecord: 作业明细
- BillingPeriod / FormSubmission: 请求月与表单事件
"""

from .cell_value import CellKind, CellValue
from .period import BILLING_MONTH_LABEL, BillingPeriod, FormSubmission
from .work_record import SENTINEL_ITEM, LineItem, WorkRecord

__all__ = [
    "CellKind",
    "CellValue",
    "BILLING_MONTH_LABEL",
    "BillingPeriod",
    "FormSubmission",
    "SENTINEL_ITEM",
    "LineItem",
    "WorkRecord",
]
