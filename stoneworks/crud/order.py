"""数据库操作（CRUD）- 订单相关

- create_order 先写入占位编号 TEMP，拿到 ID 后再由 set_order_code 回写正式编号
- list_working_orders 预加载 工单 -> 工序，供日历的订单筛选使用
"""

from sqlalchemy.orm import Session, selectinload

from .. import models


def create_order(db: Session, **fields):
    fields.setdefault("code", "TEMP")
    db_order = models.Order(**fields)
    db.add(db_order)
    db.commit()
    db.refresh(db_order)
    return db_order


def update_order(db: Session, order_id: int, **fields):
    db_order = get_order(db, order_id)
    if not db_order:
        return None
    for field, value in fields.items():
        setattr(db_order, field, value)
    db.commit()
    db.refresh(db_order)
    return db_order


def set_order_code(db: Session, order_id: int, code: str):
    return update_order(db, order_id, code=code)


def get_order(db: Session, order_id: int):
    return db.query(models.Order).filter(models.Order.id == order_id).first()


def get_order_with_details(db: Session, order_id: int):
    return (
        db.query(models.Order)
        .options(selectinload(models.Order.order_details).selectinload(models.OrderDetail.stages))
        .filter(models.Order.id == order_id)
        .first()
    )


def list_orders(db: Session, status: str = None, customer_id: int = None, skip: int = 0, limit: int = 100):
    """获取订单列表，按创建时间倒序"""
    query = db.query(models.Order)
    if status:
        query = query.filter(models.Order.order_status == status)
    if customer_id is not None:
        query = query.filter(models.Order.customer_id == customer_id)
    return query.order_by(models.Order.created_at.desc(), models.Order.id.desc()).offset(skip).limit(limit).all()


def list_working_orders(db: Session, status: str = "working"):
    """获取生产中的订单，包含工单和工序"""
    return (
        db.query(models.Order)
        .options(selectinload(models.Order.order_details).selectinload(models.OrderDetail.stages))
        .filter(models.Order.order_status == status)
        .order_by(models.Order.id)
        .all()
    )


def delete_order(db: Session, order_id: int):
    """删除订单；先删除物料明细，再删除订单本身"""
    db_order = get_order(db, order_id)
    if not db_order:
        return None
    db.query(models.Measurement).filter(models.Measurement.order_id == order_id).delete(synchronize_session=False)
    db.expire(db_order, ["measurements"])
    db.delete(db_order)
    db.commit()
    return db_order
