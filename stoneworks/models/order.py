"""订单模型定义"""

from sqlalchemy import Column, Integer, String, DateTime, Float, ForeignKey, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database.connection import Base


class Order(Base):
    """订单模型（销售单，转换后即为工单的主单）"""
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    # 订单编号：{排序后的工种代码}-{订单ID}，插入后才能确定
    code = Column(String(64), nullable=False, default="TEMP")
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=True, index=True)
    customer_name = Column(String(255), nullable=True)
    company = Column(String(255), nullable=True)
    address = Column(String(512), nullable=True)
    # sale / working / converted / cancelled ...
    order_status = Column(String(32), nullable=False, default="sale", index=True)
    order_price = Column(Float, nullable=False, default=0)
    work_types = Column(JSON, nullable=False, default=list)
    sales_person = Column(String(255), nullable=True)
    discount = Column(Float, nullable=True)
    created_by = Column(String(255), nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    customer = relationship("Customer", back_populates="orders")
    measurements = relationship(
        "Measurement", back_populates="order", cascade="all, delete-orphan", order_by="Measurement.id"
    )
    order_details = relationship(
        "OrderDetail", back_populates="order", cascade="all, delete-orphan", order_by="OrderDetail.detail_id"
    )
