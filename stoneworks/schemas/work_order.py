"""工单与工序数据结构定义"""

from pydantic import BaseModel
from typing import List, Literal, Optional
from datetime import date, datetime

StageStatus = Literal["not_started", "in_progress", "completed", "delayed", "on_hold"]


class StageRead(BaseModel):
    """读取工序时的模型"""
    id: int
    order_detail_id: Optional[int] = None
    stage_name: str
    status: StageStatus = "not_started"
    planned_start_date: Optional[date] = None
    planned_finish_date: Optional[date] = None
    actual_start_date: Optional[date] = None
    actual_finish_date: Optional[date] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class StageUpdate(BaseModel):
    """更新工序时的模型"""
    status: Optional[StageStatus] = None
    planned_start_date: Optional[date] = None
    planned_finish_date: Optional[date] = None
    actual_start_date: Optional[date] = None
    actual_finish_date: Optional[date] = None
    notes: Optional[str] = None


class OrderDetailRead(BaseModel):
    """读取工单时的模型"""
    detail_id: int
    order_id: int
    assigned_to: Optional[str] = None
    due_date: Optional[date] = None
    price: float = 0
    total_cost: float = 0
    notes: Optional[str] = None
    img_url: Optional[str] = None
    process_stage: Optional[str] = None
    updated_date: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class OrderDetailWithStages(OrderDetailRead):
    """包含工序列表的工单模型"""
    stages: List[StageRead] = []
