"""排班数据结构定义"""

from pydantic import BaseModel
from typing import Optional
from datetime import date, datetime


class AssignmentBase(BaseModel):
    """排班基础模型"""
    order_stage_id: Optional[int] = None
    employee_name: str = ""
    work_date: Optional[date] = None
    is_done: bool = False
    note: Optional[str] = None
    employee_rate: Optional[float] = None


class AssignmentCreate(AssignmentBase):
    """创建排班时的模型，必填项在写入前统一校验"""
    pass


class AssignmentUpdate(BaseModel):
    """更新排班时的模型，只发送显式设置的字段"""
    order_stage_id: Optional[int] = None
    employee_name: Optional[str] = None
    work_date: Optional[date] = None
    is_done: Optional[bool] = None
    note: Optional[str] = None
    employee_rate: Optional[float] = None


class AssignmentRead(AssignmentBase):
    """读取排班时的模型"""
    id: int
    work_date: date
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
