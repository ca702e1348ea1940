"""物料明细数据结构定义"""

from pydantic import BaseModel
from typing import Optional


class MeasurementBase(BaseModel):
    """物料明细基础模型"""
    material_name: Optional[str] = None
    material_type: Optional[str] = None
    unit: Optional[str] = None
    quantity: float = 0
    cost: float = 0


class MeasurementCreate(MeasurementBase):
    """创建物料明细时的模型，total_cost 由服务端计算"""
    pass


class MeasurementUpdate(BaseModel):
    """更新物料明细时的模型"""
    material_name: Optional[str] = None
    material_type: Optional[str] = None
    unit: Optional[str] = None
    quantity: Optional[float] = None
    cost: Optional[float] = None


class MeasurementRead(MeasurementBase):
    """读取物料明细时的模型"""
    id: int
    order_id: int
    total_cost: float = 0

    class Config:
        from_attributes = True
