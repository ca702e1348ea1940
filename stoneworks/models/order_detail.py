"""工单（订单明细）模型定义"""

from sqlalchemy import Column, Integer, String, DateTime, Date, Float, Text, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database.connection import Base


class OrderDetail(Base):
    """工单表，转换后的订单的生产信息"""
    __tablename__ = "order_details"

    detail_id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=False, index=True)
    assigned_to = Column(String(255), nullable=True)  # 负责工程师
    due_date = Column(Date, nullable=True)
    price = Column(Float, nullable=False, default=0)
    total_cost = Column(Float, nullable=False, default=0)
    notes = Column(Text, nullable=True)
    img_url = Column(String(1024), nullable=True)
    process_stage = Column(String(64), nullable=True)
    updated_date = Column(DateTime, nullable=True)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    order = relationship("Order", back_populates="order_details")
    stages = relationship(
        "OrderStage", back_populates="order_detail", cascade="all, delete-orphan", order_by="OrderStage.id"
    )
