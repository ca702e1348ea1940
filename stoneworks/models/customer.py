"""客户模型定义"""

from sqlalchemy import Column, Integer, String, DateTime, Float
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database.connection import Base


class Customer(Base):
    """客户表"""
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    company = Column(String(255), nullable=True)
    phone_number = Column(String(32), nullable=True, index=True)
    address = Column(String(512), nullable=True)
    # 累计金额由外部维护，本系统不重新计算
    paid_total = Column(Float, nullable=False, default=0)
    to_be_paid = Column(Float, nullable=False, default=0)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    orders = relationship("Order", back_populates="customer")
