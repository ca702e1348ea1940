"""客户API路由"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ... import crud, schemas
from ...database.connection import get_db
from ...utils.helpers import validate_phone_number

router = APIRouter()


@router.get("/customers", response_model=List[schemas.CustomerRead])
def read_customers(skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    return crud.list_customers(db, skip=skip, limit=limit)


@router.post("/customers", response_model=schemas.CustomerRead)
def create_customer(customer: schemas.CustomerCreate, db: Session = Depends(get_db)):
    """新建客户，电话号码必须合法"""
    if not validate_phone_number(customer.phone_number):
        raise HTTPException(status_code=400, detail="invalid phone number (e.g. 01012345678)")
    return crud.create_customer(db, customer)


@router.get("/customers/{customer_id}", response_model=schemas.CustomerRead)
def read_customer(customer_id: int, db: Session = Depends(get_db)):
    customer = crud.get_customer(db, customer_id)
    if not customer:
        raise HTTPException(status_code=404, detail="客户未找到")
    return customer
