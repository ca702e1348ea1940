"""周视图导航

以周一为一周的开始，计算当前显示的7天窗口。
"""

from datetime import date, timedelta
from typing import Callable, List, Optional, Tuple

WEEK_RANGE_FORMAT = "%b %d"


def week_bounds(day: date) -> Tuple[date, date]:
    """返回 day 所在周的周一和周日"""
    start = day - timedelta(days=day.weekday())
    return start, start + timedelta(days=6)


def resolve_window(date_from: Optional[date], date_to: Optional[date], today: Optional[date] = None) -> Tuple[date, date]:
    """补全查询窗口：都缺省时取本周；只给出一端时取该日期所在周的另一端"""
    if date_from is None and date_to is None:
        return week_bounds(today or date.today())
    if date_from is None:
        date_from = week_bounds(date_to)[0]
    if date_to is None:
        date_to = week_bounds(date_from)[1]
    return date_from, date_to


class WeekNavigator:
    """维护当前参考日期；移动后返回窗口是否变化，调用方据此决定是否重新加载"""

    def __init__(self, current_date: Optional[date] = None, today_provider: Callable[[], date] = date.today):
        self._today = today_provider
        self.current_date = current_date or today_provider()

    @property
    def week_start(self) -> date:
        return week_bounds(self.current_date)[0]

    @property
    def week_end(self) -> date:
        return week_bounds(self.current_date)[1]

    @property
    def window(self) -> Tuple[date, date]:
        return week_bounds(self.current_date)

    @property
    def week_days(self) -> List[date]:
        start = self.week_start
        return [start + timedelta(days=offset) for offset in range(7)]

    @property
    def week_range_text(self) -> str:
        """例如 "Jan 01 - Jan 07, 2024" """
        start, end = self.window
        return f"{start.strftime(WEEK_RANGE_FORMAT)} - {end.strftime(WEEK_RANGE_FORMAT)}, {end.year}"

    def go_to(self, day: date) -> bool:
        before = self.window
        self.current_date = day
        return self.window != before

    def previous_week(self) -> bool:
        return self.go_to(self.current_date - timedelta(days=7))

    def next_week(self) -> bool:
        return self.go_to(self.current_date + timedelta(days=7))

    def today(self) -> bool:
        return self.go_to(self._today())

    def is_current_day(self, day: date) -> bool:
        return day == self._today()
