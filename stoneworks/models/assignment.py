"""排班模型定义"""

from sqlalchemy import Column, Integer, String, DateTime, Date, Float, Boolean, Text, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database.connection import Base


class OrderStageAssignment(Base):
    """排班表：某员工某天在某道工序上的工作"""
    __tablename__ = "order_stage_assignments"

    id = Column(Integer, primary_key=True, index=True)
    order_stage_id = Column(Integer, ForeignKey("order_stages.id"), nullable=True, index=True)
    # 自由文本，不关联 employees 表
    employee_name = Column(String(255), nullable=False)
    work_date = Column(Date, nullable=False, index=True)
    is_done = Column(Boolean, nullable=False, default=False)
    note = Column(Text, nullable=True)
    employee_rate = Column(Float, nullable=True)  # 费率倍数
    created_at = Column(DateTime, server_default=func.now())

    stage = relationship("OrderStage", back_populates="assignments")
