"""日历API路由

/calendar 返回嵌套的排班数据，/calendar/normalized 返回归一化并筛选后的三个集合
"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ... import schemas
from ...core.backend import SchedulingBackend
from ...core.filters import AssignmentFilters, filter_assignments, unique_statuses
from ...core.navigation import WeekNavigator, resolve_window
from ...core.store import AssignmentStore
from ..deps import get_backend

router = APIRouter()


@router.get("/calendar", response_model=List[schemas.CalendarRow])
async def read_calendar(
    date_from: Optional[date] = Query(None, alias="from"),
    date_to: Optional[date] = Query(None, alias="to"),
    backend: SchedulingBackend = Depends(get_backend),
):
    """获取窗口内的嵌套排班数据"""
    start, end = resolve_window(date_from, date_to)
    return await backend.fetch_calendar_rows(start, end)


@router.get("/calendar/normalized", response_model=schemas.CalendarView)
async def read_normalized_calendar(
    date_from: Optional[date] = Query(None, alias="from"),
    date_to: Optional[date] = Query(None, alias="to"),
    order_id: Optional[int] = None,
    employee: List[str] = Query(default=[]),
    status: List[str] = Query(default=[]),
    backend: SchedulingBackend = Depends(get_backend),
):
    """获取归一化后的日历数据，可按订单、员工、工序状态筛选"""
    start, end = resolve_window(date_from, date_to)
    store = AssignmentStore(backend)
    await store.load(start, end)

    filters = AssignmentFilters(order_id=order_id, employee_names=employee, statuses=status)
    return schemas.CalendarView(
        assignments=filter_assignments(store.assignments, store.stages, store.orders, filters),
        stages=store.stages,
        orders=store.orders,
        week_start=start,
        week_end=end,
        week_range_text=WeekNavigator(start).week_range_text,
        status_options=unique_statuses(store.stages),
    )
