"""数据库操作（CRUD）- 排班相关

- get_calendar_rows 按 work_date 闭区间查询排班，并预加载 工序 -> 工单 -> 订单
- get_assignments 返回同一窗口内不带嵌套数据的原始排班，用于交叉校验
"""

from datetime import date

from sqlalchemy.orm import Session, joinedload

from .. import models, schemas


def _window(query, date_from: date, date_to: date):
    Assignment = models.OrderStageAssignment
    if date_from is not None:
        query = query.filter(Assignment.work_date >= date_from)
    if date_to is not None:
        query = query.filter(Assignment.work_date <= date_to)
    return query.order_by(Assignment.work_date, Assignment.id)


def get_calendar_rows(db: Session, date_from: date, date_to: date):
    """获取窗口内的排班及其嵌套的工序、工单、订单"""
    query = db.query(models.OrderStageAssignment).options(
        joinedload(models.OrderStageAssignment.stage)
        .joinedload(models.OrderStage.order_detail)
        .joinedload(models.OrderDetail.order)
    )
    return _window(query, date_from, date_to).all()


def get_assignments(db: Session, date_from: date, date_to: date):
    """获取窗口内的排班（不含嵌套数据）"""
    return _window(db.query(models.OrderStageAssignment), date_from, date_to).all()


def get_assignment(db: Session, assignment_id: int):
    return db.query(models.OrderStageAssignment).filter(models.OrderStageAssignment.id == assignment_id).first()


def create_assignment(db: Session, assignment: schemas.AssignmentCreate):
    db_assignment = models.OrderStageAssignment(**assignment.model_dump())
    db.add(db_assignment)
    db.commit()
    db.refresh(db_assignment)
    return db_assignment


def update_assignment(db: Session, assignment_id: int, assignment_update: schemas.AssignmentUpdate):
    """更新排班，只写入显式设置的字段"""
    db_assignment = get_assignment(db, assignment_id)
    if not db_assignment:
        return None

    update_data = assignment_update.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(db_assignment, field, value)

    db.commit()
    db.refresh(db_assignment)
    return db_assignment


def delete_assignment(db: Session, assignment_id: int):
    db_assignment = get_assignment(db, assignment_id)
    if not db_assignment:
        return None
    db.delete(db_assignment)
    db.commit()
    return db_assignment
