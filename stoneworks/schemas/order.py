"""订单数据结构定义

定义订单相关的Pydantic模型
"""

from pydantic import BaseModel
from typing import List, Optional
from datetime import date, datetime

from .customer import CustomerCreate
from .measurement import MeasurementCreate
from .work_order import OrderDetailWithStages


class OrderRead(BaseModel):
    """读取订单时的模型"""
    id: int
    code: str = "TEMP"
    customer_id: Optional[int] = None
    customer_name: Optional[str] = None
    company: Optional[str] = None
    address: Optional[str] = None
    order_status: str = "sale"
    order_price: float = 0
    work_types: List[str] = []
    sales_person: Optional[str] = None
    discount: Optional[float] = None
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class OrderWithDetails(OrderRead):
    """包含工单及工序的订单模型"""
    order_details: List[OrderDetailWithStages] = []


class SaleOrderCreate(BaseModel):
    """创建销售单时的模型"""
    customer: CustomerCreate
    work_types: List[str] = []
    measurements: List[MeasurementCreate] = []
    order_price: float = 0
    sales_person: Optional[str] = None
    discount: Optional[float] = None
    created_by: Optional[str] = None


class WorkOrderInfo(BaseModel):
    """工单基本信息"""
    assigned_to: Optional[str] = None  # 负责工程师，必填，由转换流程校验
    due_date: Optional[date] = None
    price: float = 0
    notes: Optional[str] = None
    img_url: Optional[str] = None


class WorkOrderConversionCreate(BaseModel):
    """销售单转工单的请求模型

    order_id 为空时按新单处理；customer_id 为空时根据 customer 信息查找或创建客户
    """
    order_id: Optional[int] = None
    customer_id: Optional[int] = None
    customer: Optional[CustomerCreate] = None
    work_types: List[str] = []
    measurements: List[MeasurementCreate] = []
    work_order: WorkOrderInfo = WorkOrderInfo()
    sales_person: Optional[str] = None
    discount: Optional[float] = None
    created_by: Optional[str] = None


class ConversionResult(BaseModel):
    """转换结果"""
    order: OrderRead
    detail: OrderDetailWithStages
    customer_id: Optional[int] = None
    total_cost: float = 0
    profit: float = 0
    profit_margin: float = 0
