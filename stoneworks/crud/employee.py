"""数据库操作（CRUD）- 员工相关"""

from sqlalchemy.orm import Session

from .. import models
from ..constants import STATIC_EMPLOYEES


def list_employees(db: Session):
    return db.query(models.Employee).order_by(models.Employee.name).all()


def ensure_employees(db: Session, employees=None):
    """补齐员工表中缺失的员工，返回新增的记录"""
    existing = {name for (name,) in db.query(models.Employee.name).all()}
    created = []
    for item in employees or STATIC_EMPLOYEES:
        if item["name"] in existing:
            continue
        employee = models.Employee(name=item["name"], role=item.get("role"))
        db.add(employee)
        created.append(employee)
        existing.add(item["name"])
    if created:
        db.commit()
    return created
