"""排班日历

组合周导航、排班状态和筛选条件；周窗口变化时重新加载数据。
"""

from datetime import date
from typing import List, Optional

from .filters import AssignmentFilters, unique_statuses
from .navigation import WeekNavigator
from .store import AssignmentStore


class SchedulingCalendar:
    def __init__(self, store: AssignmentStore, navigator: Optional[WeekNavigator] = None,
                 filters: Optional[AssignmentFilters] = None):
        self.store = store
        self.navigator = navigator or WeekNavigator()
        self.filters = filters or AssignmentFilters()

    async def open(self) -> bool:
        return await self.store.load(*self.navigator.window)

    async def _reload_if(self, changed: bool) -> bool:
        if changed:
            await self.store.load(*self.navigator.window)
        return changed

    async def previous_week(self) -> bool:
        return await self._reload_if(self.navigator.previous_week())

    async def next_week(self) -> bool:
        return await self._reload_if(self.navigator.next_week())

    async def today(self) -> bool:
        return await self._reload_if(self.navigator.today())

    async def go_to(self, day: date) -> bool:
        return await self._reload_if(self.navigator.go_to(day))

    def visible_assignments(self):
        return self.store.visible_assignments(self.filters)

    def assignments_for_day(self, day: date):
        return self.store.assignments_for_day(day, self.filters)

    def status_options(self) -> List[str]:
        return unique_statuses(self.store.stages)

    def employee_options(self) -> List[str]:
        return sorted({a.employee_name for a in self.store.assignments if a.employee_name})
