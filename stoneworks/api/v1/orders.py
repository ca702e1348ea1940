"""订单API路由"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ... import crud, schemas
from ...core.conversion import create_sale_order
from ...core.repository import ShopRepository
from ...database.connection import get_db
from ...exceptions import ValidationFailed
from ..deps import get_drafts

router = APIRouter()


@router.post("/orders", response_model=schemas.OrderRead)
def create_sale_order_endpoint(
    payload: schemas.SaleOrderCreate,
    db: Session = Depends(get_db),
    drafts=Depends(get_drafts),
):
    """新建销售单"""
    try:
        return create_sale_order(ShopRepository(db), payload, drafts=drafts)
    except ValidationFailed as exc:
        raise HTTPException(status_code=400, detail=str(exc))


@router.get("/orders", response_model=List[schemas.OrderRead])
def read_orders(
    status: Optional[str] = None,
    customer_id: Optional[int] = None,
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
):
    """获取订单列表，可按状态、客户筛选"""
    return crud.list_orders(db, status=status, customer_id=customer_id, skip=skip, limit=limit)


@router.get("/orders/working", response_model=List[schemas.OrderWithDetails])
def read_working_orders(db: Session = Depends(get_db)):
    """获取生产中的订单（含工单和工序），用于日历的订单筛选"""
    return crud.list_working_orders(db)


@router.get("/orders/{order_id}", response_model=schemas.OrderWithDetails)
def read_order(order_id: int, db: Session = Depends(get_db)):
    order = crud.get_order_with_details(db, order_id)
    if not order:
        raise HTTPException(status_code=404, detail="订单未找到")
    return order


@router.get("/orders/{order_id}/measurements", response_model=List[schemas.MeasurementRead])
def read_order_measurements(order_id: int, db: Session = Depends(get_db)):
    if not crud.get_order(db, order_id):
        raise HTTPException(status_code=404, detail="订单未找到")
    return crud.list_measurements(db, order_id)


@router.delete("/orders/{order_id}")
def delete_order(order_id: int, db: Session = Depends(get_db)):
    """删除订单及其物料明细"""
    if not crud.delete_order(db, order_id):
        raise HTTPException(status_code=404, detail="订单未找到")
    return {"message": "订单删除成功"}
