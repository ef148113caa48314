"""
请求月与表单提交 - 事件解析

表单载荷中仅使用「請求月」一项（值形如 YYYY-M），其余字段忽略
"""

from __future__ import annotations

import calendar
import re
from collections.abc import Mapping
from datetime import date
from typing import Any

from pydantic import BaseModel, Field

from ..interfaces import MalformedInputError

BILLING_MONTH_LABEL = "請求月"

_PERIOD_RE = re.compile(r"^\s*(\d{4})-(\d{1,2})\s*$")


class BillingPeriod(BaseModel):
    """请求月（年+月）"""
    year: int = Field(..., ge=1)
    month: int = Field(..., ge=1, le=12)

    model_config = {"frozen": True}

    @classmethod
    def parse(cls, value: str) -> BillingPeriod:
        """解析 "2024-5" / "2024-05" """
        m = _PERIOD_RE.match(value) if isinstance(value, str) else None
        if not m:
            raise MalformedInputError(f"请求月格式错误: {value!r}（应为 YYYY-M）")
        year, month = int(m.group(1)), int(m.group(2))
        if not 1 <= month <= 12:
            raise MalformedInputError(f"请求月月份越界: {value!r}")
        return cls(year=year, month=month)

    def source_sheet_name(self, fmt: str = "{year}/{month}月分") -> str:
        """源sheet名（月份不补零）"""
        return fmt.format(year=self.year, month=self.month)

    def month_end(self, offset_months: int = 0) -> date:
        """偏移 offset_months 个月后的月末日期"""
        index = self.year * 12 + (self.month - 1) + offset_months
        year, month = divmod(index, 12)
        month += 1
        return date(year, month, calendar.monthrange(year, month)[1])


class FormSubmission(BaseModel):
    """表单提交事件"""
    billing_period: BillingPeriod

    @classmethod
    def from_event(
        cls,
        event: Mapping[str, Any] | list[Mapping[str, Any]],
        label: str = BILLING_MONTH_LABEL,
    ) -> FormSubmission:
        """
        从事件载荷解析

        支持两种形状：
        - {"請求月": "2024-5", ...}
        - [{"title": "請求月", "response": "2024-5"}, ...]
        """
        value: Any = None
        if isinstance(event, Mapping):
            value = event.get(label)
        else:
            for item in event:
                if item.get("title") == label:
                    value = item.get("response")

        if value is None:
            raise MalformedInputError(f"表单中缺少「{label}」")

        return cls(billing_period=BillingPeriod.parse(value))
