"""员工模型定义"""

from sqlalchemy import Column, Integer, String
from ..database.connection import Base


class Employee(Base):
    """员工表"""
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, unique=True)
    role = Column(String(255), nullable=True)
