"""物料明细模型定义"""

from sqlalchemy import Column, Integer, String, Float, ForeignKey
from sqlalchemy.orm import relationship
from ..database.connection import Base


class Measurement(Base):
    """物料明细表"""
    __tablename__ = "measurements"

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=False, index=True)
    material_name = Column(String(255), nullable=True)
    material_type = Column(String(64), nullable=True)  # marble / quartz / granite
    unit = Column(String(64), nullable=True)
    quantity = Column(Float, nullable=False, default=0)
    cost = Column(Float, nullable=False, default=0)
    # 冗余存储 quantity * cost，每次修改数量或单价时重新计算
    total_cost = Column(Float, nullable=False, default=0)

    order = relationship("Order", back_populates="measurements")
