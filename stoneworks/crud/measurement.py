"""数据库操作（CRUD）- 物料明细相关"""

from sqlalchemy.orm import Session

from .. import models, schemas
from ..utils.helpers import measurement_total


def list_measurements(db: Session, order_id: int):
    return db.query(models.Measurement).filter(models.Measurement.order_id == order_id).order_by(models.Measurement.id).all()


def get_measurement(db: Session, measurement_id: int):
    return db.query(models.Measurement).filter(models.Measurement.id == measurement_id).first()


def replace_measurements(db: Session, order_id: int, measurements):
    """替换订单的全部物料明细：先全部删除，再全部插入，金额重新计算"""
    db.query(models.Measurement).filter(models.Measurement.order_id == order_id).delete(synchronize_session=False)
    rows = []
    for item in measurements:
        data = item.model_dump()
        data["total_cost"] = measurement_total(data.get("quantity"), data.get("cost"))
        row = models.Measurement(order_id=order_id, **data)
        db.add(row)
        rows.append(row)
    db.commit()
    for row in rows:
        db.refresh(row)
    return rows


def update_measurement(db: Session, measurement_id: int, measurement_update: schemas.MeasurementUpdate):
    """更新物料明细，数量或单价变化时重新计算 total_cost"""
    db_measurement = get_measurement(db, measurement_id)
    if not db_measurement:
        return None

    update_data = measurement_update.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(db_measurement, field, value)
    db_measurement.total_cost = measurement_total(db_measurement.quantity, db_measurement.cost)

    db.commit()
    db.refresh(db_measurement)
    return db_measurement
