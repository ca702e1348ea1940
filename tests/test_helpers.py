import pytest

from stoneworks.exceptions import ValidationFailed
from stoneworks.schemas import AssignmentUpdate, MeasurementCreate, MeasurementUpdate
from stoneworks.utils.helpers import (
    apply_measurement_edit,
    generate_order_code,
    measurement_total,
    order_totals,
    validate_assignment_update,
    validate_measurement_update,
    validate_phone_number,
)


def test_order_code_uses_sorted_work_type_codes():
    assert generate_order_code(["kitchen", "walls"], 42) == "KW-42"
    assert generate_order_code(["walls", "kitchen"], 42) == "KW-42"
    assert generate_order_code(["floor", "other", "kitchen"], 7) == "FKX-7"


def test_order_code_unknown_type_uses_first_letter():
    assert generate_order_code(["stairs", "kitchen"], 3) == "KS-3"
    assert generate_order_code([], 3) == "-3"


@pytest.mark.parametrize("phone,valid", [
    ("01012345678", True),
    ("01112345678", True),
    ("01212345678", True),
    ("01512345678", True),
    ("01312345678", False),
    ("0101234567", False),
    ("010123456789", False),
    ("", False),
    (None, False),
])
def test_phone_validation(phone, valid):
    assert validate_phone_number(phone) is valid


def test_measurement_total_recomputed_on_edit():
    measurement = {"quantity": 5, "cost": 10, "total_cost": measurement_total(5, 10)}
    assert measurement["total_cost"] == 50

    edited = apply_measurement_edit(measurement, "quantity", 7)
    assert edited["total_cost"] == 70
    assert measurement["total_cost"] == 50

    edited = apply_measurement_edit(edited, "material_name", "Galala")
    assert edited["total_cost"] == 70


def test_total_cost_cannot_be_edited_directly():
    with pytest.raises(ValidationFailed):
        apply_measurement_edit({"quantity": 1, "cost": 1}, "total_cost", 99)


def test_order_totals():
    totals = order_totals(200, [MeasurementCreate(quantity=5, cost=10), MeasurementCreate(quantity=1, cost=50)])
    assert totals == {"total_cost": 100, "profit": 100, "profit_margin": 50}
    assert order_totals(0, [])["profit_margin"] == 0


def test_assignment_update_checks_only_given_fields():
    validate_assignment_update(AssignmentUpdate())
    validate_assignment_update(AssignmentUpdate(is_done=True, employee_rate=None, note=None))
    validate_assignment_update(AssignmentUpdate(employee_rate=0.5))
    for changes in (
        AssignmentUpdate(employee_name=""),
        AssignmentUpdate(employee_name=None),
        AssignmentUpdate(work_date=None),
        AssignmentUpdate(order_stage_id=None),
        AssignmentUpdate(employee_rate=3),
    ):
        with pytest.raises(ValidationFailed):
            validate_assignment_update(changes)


def test_measurement_update_rejects_explicit_nulls():
    validate_measurement_update(MeasurementUpdate(material_name="Galala"))
    validate_measurement_update(MeasurementUpdate(quantity=2, cost=0))
    for changes in (
        MeasurementUpdate(quantity=None),
        MeasurementUpdate(cost=None),
        MeasurementUpdate(quantity=0),
        MeasurementUpdate(cost=-5),
    ):
        with pytest.raises(ValidationFailed):
            validate_measurement_update(changes)
