"""工单API路由"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from ... import crud, schemas
from ...core.conversion import convert_to_work_order
from ...core.repository import ShopRepository
from ...database.connection import get_db
from ...exceptions import NotFound, ValidationFailed
from ..deps import get_drafts

router = APIRouter()


@router.post("/work-orders/convert", response_model=schemas.ConversionResult)
def convert_work_order(
    payload: schemas.WorkOrderConversionCreate,
    request: Request,
    db: Session = Depends(get_db),
    drafts=Depends(get_drafts),
):
    """销售单转工单；不带 order_id 时直接新建工单"""
    try:
        created = convert_to_work_order(
            ShopRepository(db),
            payload,
            drafts=drafts,
            created_by=request.app.state.settings.DEFAULT_ORDER_CREATOR,
        )
    except ValidationFailed as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except NotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc))

    return schemas.ConversionResult(
        order=schemas.OrderRead.model_validate(created.order),
        detail=schemas.OrderDetailWithStages.model_validate(created.detail),
        customer_id=created.customer_id,
        total_cost=created.total_cost,
        profit=created.profit,
        profit_margin=created.profit_margin,
    )


@router.get("/work-orders/{detail_id}/stages", response_model=List[schemas.StageRead])
def read_work_order_stages(detail_id: int, db: Session = Depends(get_db)):
    if not crud.get_order_detail(db, detail_id):
        raise HTTPException(status_code=404, detail="工单未找到")
    return crud.get_stages(db, detail_id)


@router.patch("/work-orders/stages/{stage_id}", response_model=schemas.StageRead)
def update_work_order_stage(stage_id: int, stage_update: schemas.StageUpdate, db: Session = Depends(get_db)):
    """更新工序状态或计划/实际日期"""
    db_stage = crud.update_stage(db, stage_id, stage_update)
    if not db_stage:
        raise HTTPException(status_code=404, detail="工序未找到")
    return db_stage
