from datetime import date

from stoneworks.core.normalizer import normalize_calendar_data
from stoneworks.schemas import CalendarRow


def _row(assignment_id, stage=None, employee="Alice", work_date=date(2024, 1, 2)):
    return CalendarRow.model_validate({
        "id": assignment_id,
        "order_stage_id": stage["id"] if stage else None,
        "employee_name": employee,
        "work_date": work_date,
        "order_stages": stage,
    })


def _stage(stage_id, detail=None, status="not_started", name="cutting"):
    return {
        "id": stage_id,
        "order_detail_id": detail["detail_id"] if detail else None,
        "stage_name": name,
        "status": status,
        "order_details": detail,
    }


def _detail(detail_id, order=None):
    return {"detail_id": detail_id, "order_id": order["id"] if order else 0, "orders": order}


def _order(order_id, code="K-1"):
    return {"id": order_id, "code": code, "order_status": "working", "work_types": ["kitchen"]}


def test_full_chain_is_flattened():
    order = _order(1)
    rows = [_row(10, _stage(100, _detail(1000, order)))]
    data = normalize_calendar_data(rows)

    assert [a.id for a in data.assignments] == [10]
    assert [s.id for s in data.stages] == [100]
    assert [o.id for o in data.orders] == [1]
    assert data.orders[0].order_details[0].detail_id == 1000
    assert [s.id for s in data.orders[0].order_details[0].stages] == [100]


def test_assignments_keep_input_order_and_drop_nested_fields():
    order = _order(1)
    rows = [
        _row(3, _stage(100, _detail(1000, order))),
        _row(1, _stage(100, _detail(1000, order))),
        _row(2, None),
    ]
    data = normalize_calendar_data(rows)

    assert [a.id for a in data.assignments] == [3, 1, 2]
    assert not hasattr(data.assignments[0], "order_stages")


def test_stage_dedup_keeps_first_seen_record():
    order = _order(1)
    rows = [
        _row(1, _stage(100, _detail(1000, order), status="completed")),
        _row(2, _stage(100, _detail(1000, order), status="delayed")),
    ]
    data = normalize_calendar_data(rows)

    assert len(data.stages) == 1
    assert data.stages[0].status == "completed"


def test_orphan_assignment_only_appears_in_assignments():
    data = normalize_calendar_data([_row(7, None)])

    assert [a.id for a in data.assignments] == [7]
    assert data.stages == []
    assert data.orders == []


def test_stage_without_detail_is_kept_but_adds_no_order():
    data = normalize_calendar_data([_row(1, _stage(100, None))])

    assert [s.id for s in data.stages] == [100]
    assert data.orders == []


def test_detail_without_order_adds_no_order():
    data = normalize_calendar_data([_row(1, _stage(100, _detail(1000, None)))])

    assert [s.id for s in data.stages] == [100]
    assert data.orders == []


def test_order_keeps_only_first_detail():
    order = _order(1)
    rows = [
        _row(1, _stage(100, _detail(1000, order))),
        _row(2, _stage(200, _detail(2000, order))),
        _row(3, _stage(101, _detail(1000, order))),
    ]
    data = normalize_calendar_data(rows)

    assert len(data.orders) == 1
    details = data.orders[0].order_details
    assert [d.detail_id for d in details] == [1000]
    assert [s.id for s in details[0].stages] == [100, 101]
    assert [s.id for s in data.stages] == [100, 200, 101]


def test_normalizer_is_deterministic():
    order = _order(1)
    rows = [
        _row(1, _stage(100, _detail(1000, order))),
        _row(2, None),
        _row(3, _stage(101, None)),
        _row(4, _stage(102, _detail(1001, None))),
    ]
    first = normalize_calendar_data(rows)
    second = normalize_calendar_data(rows)

    assert first.model_dump() == second.model_dump()


def test_empty_input():
    data = normalize_calendar_data([])
    assert data.assignments == [] and data.stages == [] and data.orders == []
