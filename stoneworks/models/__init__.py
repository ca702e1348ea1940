"""数据库模型模块

定义所有 SQLAlchemy ORM 模型
"""

from ..database.connection import Base
from .customer import Customer
from .order import Order
from .measurement import Measurement
from .order_detail import OrderDetail
from .order_stage import OrderStage
from .assignment import OrderStageAssignment
from .employee import Employee

__all__ = [
    "Base",
    "Customer",
    "Order",
    "Measurement",
    "OrderDetail",
    "OrderStage",
    "OrderStageAssignment",
    "Employee",
]
