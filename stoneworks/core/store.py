"""排班状态管理

AssignmentStore 持有当前周窗口内归一化后的排班、工序、订单三个集合。
所有写操作先落库，成功后再修改本地状态。
"""

import logging
from datetime import date
from typing import Dict, List, Optional

from .. import schemas
from ..utils.helpers import validate_assignment_fields, validate_assignment_update
from .filters import AssignmentFilters, filter_assignments
from .normalizer import normalize_calendar_data

logger = logging.getLogger(__name__)


class AssignmentStore:
    def __init__(self, backend):
        self.backend = backend
        self.assignments: List[schemas.AssignmentRead] = []
        self.stages: List[schemas.StageRead] = []
        self.orders: List[schemas.OrderWithDetails] = []
        self.error: Optional[Exception] = None
        self.week_start: Optional[date] = None
        self.week_end: Optional[date] = None
        self._pending = 0
        # 每次 load 自增，返回时发现已被更新的 load 取代则丢弃结果
        self._generation = 0

    @property
    def loading(self) -> bool:
        return self._pending > 0

    async def _perform(self, name: str, call, *args):
        self._pending += 1
        try:
            return await call(*args)
        except Exception as exc:
            self.error = exc
            logger.error("[AssignmentStore] %s failed: %s", name, exc)
            raise
        finally:
            self._pending -= 1

    async def load(self, week_start: date, week_end: date) -> bool:
        """加载 [week_start, week_end] 窗口内的数据；结果过期被丢弃时返回 False"""
        self._generation += 1
        generation = self._generation
        self.week_start, self.week_end = week_start, week_end

        self._pending += 1
        try:
            rows = await self.backend.fetch_calendar_rows(week_start, week_end)
            raw_assignments = await self.backend.fetch_assignments(week_start, week_end)
        except Exception as exc:
            if generation == self._generation:
                self.error = exc
            logger.error("[AssignmentStore] load %s..%s failed: %s", week_start, week_end, exc)
            raise
        finally:
            self._pending -= 1

        if generation != self._generation:
            logger.debug("[AssignmentStore] discarding stale load for %s..%s", week_start, week_end)
            return False

        data = normalize_calendar_data(rows)
        logger.debug(
            "[AssignmentStore] normalized %d assignments, %d stages, %d orders",
            len(data.assignments), len(data.stages), len(data.orders),
        )

        normalized_ids = {a.id for a in data.assignments}
        missing = [a.id for a in raw_assignments if a.id not in normalized_ids]
        if missing:
            logger.warning("[AssignmentStore] raw assignments missing from normalized data: %s", missing)

        self.assignments = data.assignments
        self.stages = data.stages
        self.orders = data.orders
        self.error = None
        return True

    async def refetch(self) -> bool:
        if self.week_start is None or self.week_end is None:
            return False
        return await self.load(self.week_start, self.week_end)

    async def add(self, assignment) -> schemas.AssignmentRead:
        """新增排班；校验在任何远程调用之前完成，落库成功后追加服务端返回的记录"""
        if isinstance(assignment, dict):
            assignment = schemas.AssignmentCreate(**assignment)
        validate_assignment_fields(
            assignment.employee_name, assignment.work_date, assignment.order_stage_id, assignment.employee_rate
        )
        record = await self._perform("add", self.backend.insert_assignment, assignment)
        self.assignments.append(record)
        return record

    async def update(self, assignment_id: int, changes) -> schemas.AssignmentRead:
        if isinstance(changes, dict):
            changes = schemas.AssignmentUpdate(**changes)
        validate_assignment_update(changes)
        record = await self._perform("update", self.backend.update_assignment, assignment_id, changes)
        self.assignments = [record if a.id == record.id else a for a in self.assignments]
        return record

    async def remove(self, assignment_id: int) -> None:
        await self._perform("remove", self.backend.delete_assignment, assignment_id)
        self.assignments = [a for a in self.assignments if a.id != assignment_id]

    def visible_assignments(self, filters: Optional[AssignmentFilters] = None) -> List[schemas.AssignmentRead]:
        if filters is None:
            return list(self.assignments)
        return filter_assignments(self.assignments, self.stages, self.orders, filters)

    def assignments_for_day(self, day: date, filters: Optional[AssignmentFilters] = None):
        return [a for a in self.visible_assignments(filters) if a.work_date == day]

    def assignments_by_day(self, filters: Optional[AssignmentFilters] = None) -> Dict[date, List[schemas.AssignmentRead]]:
        grouped: Dict[date, List[schemas.AssignmentRead]] = {}
        for assignment in self.visible_assignments(filters):
            grouped.setdefault(assignment.work_date, []).append(assignment)
        return grouped
