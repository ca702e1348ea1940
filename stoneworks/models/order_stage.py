"""工序模型定义"""

from sqlalchemy import Column, Integer, String, DateTime, Date, Text, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database.connection import Base


class OrderStage(Base):
    """工单工序表"""
    __tablename__ = "order_stages"

    id = Column(Integer, primary_key=True, index=True)
    order_detail_id = Column(Integer, ForeignKey("order_details.detail_id"), nullable=True, index=True)
    stage_name = Column(String(64), nullable=False)
    # not_started / in_progress / completed / delayed / on_hold
    status = Column(String(32), nullable=False, default="not_started")
    planned_start_date = Column(Date, nullable=True)
    planned_finish_date = Column(Date, nullable=True)
    actual_start_date = Column(Date, nullable=True)
    actual_finish_date = Column(Date, nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    order_detail = relationship("OrderDetail", back_populates="stages")
    assignments = relationship("OrderStageAssignment", back_populates="stage")
