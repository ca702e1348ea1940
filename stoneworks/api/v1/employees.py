"""员工API路由"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ... import crud, schemas
from ...constants import EMPLOYEE_RATES
from ...database.connection import get_db

router = APIRouter()


@router.get("/employees", response_model=List[schemas.EmployeeRead])
def read_employees(db: Session = Depends(get_db)):
    return crud.list_employees(db)


@router.get("/employees/rates")
def read_employee_rates():
    """可选的费率倍数"""
    return list(EMPLOYEE_RATES)
