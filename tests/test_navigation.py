from datetime import date

from stoneworks.core.navigation import WeekNavigator, resolve_window, week_bounds


def test_week_starts_on_monday():
    # 2024-01-03 is a Wednesday
    assert week_bounds(date(2024, 1, 3)) == (date(2024, 1, 1), date(2024, 1, 7))
    assert week_bounds(date(2024, 1, 7)) == (date(2024, 1, 1), date(2024, 1, 7))


def test_week_days_and_range_text():
    nav = WeekNavigator(date(2024, 1, 3))
    assert nav.week_days[0] == date(2024, 1, 1)
    assert nav.week_days[-1] == date(2024, 1, 7)
    assert len(nav.week_days) == 7
    assert nav.week_range_text == "Jan 01 - Jan 07, 2024"


def test_previous_and_next_week_change_window():
    nav = WeekNavigator(date(2024, 1, 3))
    assert nav.next_week() is True
    assert nav.window == (date(2024, 1, 8), date(2024, 1, 14))
    assert nav.previous_week() is True
    assert nav.previous_week() is True
    assert nav.window == (date(2023, 12, 25), date(2023, 12, 31))
    assert nav.week_range_text == "Dec 25 - Dec 31, 2023"


def test_go_to_same_week_does_not_change_window():
    nav = WeekNavigator(date(2024, 1, 3))
    assert nav.go_to(date(2024, 1, 6)) is False
    assert nav.go_to(date(2024, 1, 9)) is True


def test_today_and_is_current_day():
    nav = WeekNavigator(date(2024, 1, 3), today_provider=lambda: date(2024, 2, 14))
    assert nav.is_current_day(date(2024, 2, 14))
    assert not nav.is_current_day(date(2024, 1, 3))
    assert nav.today() is True
    assert nav.week_start == date(2024, 2, 12)
    assert nav.today() is False


def test_resolve_window_fills_missing_ends():
    today = date(2024, 2, 14)
    assert resolve_window(None, None, today=today) == (date(2024, 2, 12), date(2024, 2, 18))
    assert resolve_window(date(2024, 1, 3), None) == (date(2024, 1, 3), date(2024, 1, 7))
    assert resolve_window(None, date(2024, 1, 5)) == (date(2024, 1, 1), date(2024, 1, 5))
    assert resolve_window(date(2024, 1, 2), date(2024, 1, 20)) == (date(2024, 1, 2), date(2024, 1, 20))
