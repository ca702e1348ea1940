"""客户数据结构定义"""

from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class CustomerBase(BaseModel):
    """客户基础模型"""
    name: str
    company: Optional[str] = None
    phone_number: Optional[str] = None
    address: Optional[str] = None


class CustomerCreate(CustomerBase):
    """创建客户时的模型"""
    pass


class CustomerUpdate(BaseModel):
    """更新客户时的模型"""
    name: Optional[str] = None
    company: Optional[str] = None
    phone_number: Optional[str] = None
    address: Optional[str] = None


class CustomerRead(CustomerBase):
    """读取客户时的模型"""
    id: int
    paid_total: float = 0
    to_be_paid: float = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
