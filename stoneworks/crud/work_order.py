"""数据库操作（CRUD）- 工单与工序相关"""

from sqlalchemy.orm import Session

from .. import models, schemas
from ..constants import DEFAULT_STAGE_STATUS, WORK_ORDER_STAGES


def create_order_detail(db: Session, order_id: int, **fields):
    db_detail = models.OrderDetail(order_id=order_id, **fields)
    db.add(db_detail)
    db.commit()
    db.refresh(db_detail)
    return db_detail


def get_order_detail(db: Session, detail_id: int):
    return db.query(models.OrderDetail).filter(models.OrderDetail.detail_id == detail_id).first()


def create_stages(db: Session, detail_id: int, template=None):
    """按工序模板为工单批量创建工序，初始状态为 not_started"""
    stages = [
        models.OrderStage(order_detail_id=detail_id, stage_name=stage["value"], status=DEFAULT_STAGE_STATUS)
        for stage in (template or WORK_ORDER_STAGES)
    ]
    db.add_all(stages)
    db.commit()
    for stage in stages:
        db.refresh(stage)
    return stages


def get_stages(db: Session, detail_id: int):
    return (
        db.query(models.OrderStage)
        .filter(models.OrderStage.order_detail_id == detail_id)
        .order_by(models.OrderStage.id)
        .all()
    )


def get_stage(db: Session, stage_id: int):
    return db.query(models.OrderStage).filter(models.OrderStage.id == stage_id).first()


def update_stage(db: Session, stage_id: int, stage_update: schemas.StageUpdate):
    db_stage = get_stage(db, stage_id)
    if not db_stage:
        return None

    update_data = stage_update.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(db_stage, field, value)

    db.commit()
    db.refresh(db_stage)
    return db_stage


def delete_order_detail(db: Session, detail_id: int):
    """删除工单及其工序；记录不存在时什么也不做"""
    db_detail = get_order_detail(db, detail_id)
    if not db_detail:
        return None
    db.delete(db_detail)
    db.commit()
    return db_detail
