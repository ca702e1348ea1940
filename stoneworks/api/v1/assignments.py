"""排班API路由"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ... import schemas
from ...core.backend import SchedulingBackend
from ...core.navigation import resolve_window
from ...exceptions import NotFound, ValidationFailed
from ...utils.helpers import validate_assignment_fields, validate_assignment_update
from ..deps import get_backend

router = APIRouter()


@router.get("/assignments", response_model=List[schemas.AssignmentRead])
async def read_assignments(
    date_from: Optional[date] = Query(None, alias="from"),
    date_to: Optional[date] = Query(None, alias="to"),
    backend: SchedulingBackend = Depends(get_backend),
):
    """获取窗口内的排班（不含嵌套数据）"""
    date_from, date_to = resolve_window(date_from, date_to)
    return await backend.fetch_assignments(date_from, date_to)


@router.post("/assignments", response_model=schemas.AssignmentRead)
async def create_assignment(
    assignment: schemas.AssignmentCreate,
    backend: SchedulingBackend = Depends(get_backend),
):
    """新建排班"""
    try:
        validate_assignment_fields(
            assignment.employee_name, assignment.work_date, assignment.order_stage_id, assignment.employee_rate
        )
    except ValidationFailed as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return await backend.insert_assignment(assignment)


@router.patch("/assignments/{assignment_id}", response_model=schemas.AssignmentRead)
async def update_assignment(
    assignment_id: int,
    changes: schemas.AssignmentUpdate,
    backend: SchedulingBackend = Depends(get_backend),
):
    """更新排班，只修改请求中给出的字段"""
    try:
        validate_assignment_update(changes)
        return await backend.update_assignment(assignment_id, changes)
    except ValidationFailed as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except NotFound:
        raise HTTPException(status_code=404, detail="排班记录未找到")


@router.delete("/assignments/{assignment_id}")
async def delete_assignment(assignment_id: int, backend: SchedulingBackend = Depends(get_backend)):
    """删除排班"""
    try:
        await backend.delete_assignment(assignment_id)
    except NotFound:
        raise HTTPException(status_code=404, detail="排班记录未找到")
    return {"message": "排班记录删除成功"}
