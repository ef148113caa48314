"""
作业明细模型 - 提取器输出、生成器输入

WorkRecord 构建后不再修改，按值传给请求书生成器
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

SENTINEL_ITEM = "工程管理"

Number = int | float


class LineItem(BaseModel):
    """明细行（源表一行一条，保持原顺序）"""
    name: str = Field(..., min_length=1, description="项目名")
    required_unit: Number = Field(..., description="所要单位")
    unit_price: Number = Field(..., description="单价")
    amount: Number = Field(..., description="数量")
    unit: str = Field("", description="单位")
    subtotal: Number = Field(..., description="小计")

    model_config = {"frozen": True}


class WorkRecord(BaseModel):
    """作业明细（一个请求月）"""
    name: str = Field(..., description="源sheet名，同时作为请求书sheet名")
    items: tuple[LineItem, ...]
    subtotal: Number
    tax: Number
    total: Number

    # 终止项名；与版式配置中的 sentinel_item 一致
    sentinel: str = SENTINEL_ITEM

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_items(self) -> WorkRecord:
        if not self.items:
            raise ValueError("明细为空")
        if self.items[-1].name != self.sentinel:
            raise ValueError(f"明细末项应为 {self.sentinel}，实际为 {self.items[-1].name}")
        return self
