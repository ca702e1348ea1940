"""员工数据结构定义"""

from pydantic import BaseModel
from typing import Optional


class EmployeeRead(BaseModel):
    id: int
    name: str
    role: Optional[str] = None

    class Config:
        from_attributes = True
