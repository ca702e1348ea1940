"""物料明细API路由"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ... import crud, schemas
from ...database.connection import get_db
from ...exceptions import ValidationFailed
from ...utils.helpers import validate_measurement_update

router = APIRouter()


@router.patch("/measurements/{measurement_id}", response_model=schemas.MeasurementRead)
def update_measurement(measurement_id: int, changes: schemas.MeasurementUpdate, db: Session = Depends(get_db)):
    """修改物料明细，total_cost 随数量或单价重新计算"""
    try:
        validate_measurement_update(changes)
    except ValidationFailed as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    db_measurement = crud.update_measurement(db, measurement_id, changes)
    if not db_measurement:
        raise HTTPException(status_code=404, detail="物料明细未找到")
    return db_measurement
