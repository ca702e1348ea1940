from types import SimpleNamespace

import pytest

from stoneworks import crud, models, schemas
from stoneworks.constants import WORK_ORDER_DRAFT, WORK_ORDER_STAGES, SALE_ORDER_DRAFT
from stoneworks.core.conversion import convert_to_work_order, create_sale_order
from stoneworks.core.drafts import InMemoryDraftRepository
from stoneworks.core.repository import ShopRepository
from stoneworks.exceptions import NotFound, ValidationFailed


class FakeRepository:
    """Records every call; fail_on names the method that should raise"""

    def __init__(self, fail_on=None, cleanup_fails=False):
        self.calls = []
        self.fail_on = fail_on
        self.cleanup_fails = cleanup_fails
        self.orders = {}
        self.customers = {}

    def _log(self, name, *args):
        self.calls.append((name,) + args)
        if name == self.fail_on:
            raise RuntimeError(f"{name} failed")

    def reset(self):
        self._log("reset")

    def get_customer(self, customer_id):
        self._log("get_customer", customer_id)
        return self.customers.get(customer_id)

    def find_customer(self, name, phone_number):
        self._log("find_customer", name, phone_number)
        return None

    def create_customer(self, customer):
        self._log("create_customer", customer.name)
        row = SimpleNamespace(id=5, name=customer.name, company=customer.company, address=customer.address)
        self.customers[5] = row
        return row

    def update_customer(self, customer_id, changes):
        self._log("update_customer", customer_id)

    def delete_customer(self, customer_id):
        self._log("delete_customer", customer_id)
        if self.cleanup_fails:
            raise RuntimeError("cleanup failed")

    def get_order(self, order_id):
        self._log("get_order", order_id)
        return self.orders.get(order_id)

    def create_order(self, **fields):
        self._log("create_order", fields["code"])
        row = SimpleNamespace(id=42, **fields)
        self.orders[42] = row
        return row

    def update_order(self, order_id, **fields):
        self._log("update_order", order_id)
        row = self.orders[order_id]
        for key, value in fields.items():
            setattr(row, key, value)
        return row

    def set_order_code(self, order_id, code):
        self._log("set_order_code", order_id, code)
        return self.update_order(order_id, code=code)

    def delete_order(self, order_id):
        self._log("delete_order", order_id)
        if self.cleanup_fails:
            raise RuntimeError("cleanup failed")

    def replace_measurements(self, order_id, measurements):
        self._log("replace_measurements", order_id, len(measurements))

    def create_order_detail(self, order_id, **fields):
        self._log("create_order_detail", order_id)
        return SimpleNamespace(detail_id=7, order_id=order_id, **fields)

    def create_stages(self, detail_id):
        self._log("create_stages", detail_id)
        return [SimpleNamespace(id=i, stage_name=s["value"]) for i, s in enumerate(WORK_ORDER_STAGES, start=1)]

    def delete_order_detail(self, detail_id):
        self._log("delete_order_detail", detail_id)
        if self.cleanup_fails:
            raise RuntimeError("cleanup failed")

    def names(self):
        return [c[0] for c in self.calls]


def _request(**overrides):
    data = {
        "customer": {"name": "Omar", "phone_number": "01012345678", "address": "Cairo"},
        "work_types": ["walls", "kitchen"],
        "measurements": [{"material_name": "Galala", "material_type": "marble", "unit": "count",
                          "quantity": 5, "cost": 10}],
        "work_order": {"assigned_to": "eng-1", "price": 100},
    }
    data.update(overrides)
    return schemas.WorkOrderConversionCreate.model_validate(data)


def test_successful_conversion_runs_steps_in_order():
    repo = FakeRepository()
    drafts = InMemoryDraftRepository()
    drafts.save(WORK_ORDER_DRAFT, {"customer": "Omar"})

    result = convert_to_work_order(repo, _request(), drafts=drafts)

    assert repo.names() == [
        "find_customer", "create_customer", "create_order", "set_order_code", "update_order",
        "replace_measurements", "create_order_detail", "create_stages",
    ]
    assert ("create_order", "TEMP") in repo.calls
    assert ("set_order_code", 42, "KW-42") in repo.calls
    assert result.order.order_status == "working"
    assert result.detail.process_stage == "pending"
    assert result.detail.total_cost == 50
    assert result.profit == 50
    assert result.profit_margin == 50
    assert len(result.stages) == len(WORK_ORDER_STAGES)
    assert drafts.load(WORK_ORDER_DRAFT) is None


@pytest.mark.parametrize("overrides", [
    {"work_order": {"assigned_to": "", "price": 100}},
    {"work_types": []},
    {"measurements": []},
    {"measurements": [{"unit": "count", "quantity": 0, "cost": 10}]},
    {"measurements": [{"unit": "count", "quantity": 1, "cost": -1}]},
    {"measurements": [{"quantity": 1, "cost": 1}]},
    {"customer": {"name": "Omar", "phone_number": "0123"}},
    {"customer": {"name": "Omar"}},
])
def test_validation_happens_before_any_write(overrides):
    repo = FakeRepository()
    with pytest.raises(ValidationFailed):
        convert_to_work_order(repo, _request(**overrides))
    assert repo.calls == []


def test_unknown_order_is_reported_before_writes():
    repo = FakeRepository()
    with pytest.raises(NotFound):
        convert_to_work_order(repo, _request(order_id=99))
    assert repo.names() == ["get_order"]


def test_detail_failure_triggers_reverse_cleanup():
    repo = FakeRepository(fail_on="create_order_detail")

    with pytest.raises(RuntimeError, match="create_order_detail failed"):
        convert_to_work_order(repo, _request())

    names = repo.names()
    tail = names[names.index("create_order_detail") + 1:]
    assert tail == ["reset", "delete_order", "delete_customer"]


def test_stage_failure_also_removes_the_work_order():
    repo = FakeRepository(fail_on="create_stages")

    with pytest.raises(RuntimeError):
        convert_to_work_order(repo, _request())

    names = repo.names()
    tail = names[names.index("create_stages") + 1:]
    assert tail == ["reset", "delete_order_detail", "delete_order", "delete_customer"]


def test_cleanup_failure_never_masks_original_error():
    repo = FakeRepository(fail_on="create_stages", cleanup_fails=True)

    with pytest.raises(RuntimeError, match="create_stages failed"):
        convert_to_work_order(repo, _request())
    # every cleanup step is still attempted
    assert {"delete_order_detail", "delete_order", "delete_customer"} <= set(repo.names())


def test_existing_order_is_updated_not_deleted_on_failure():
    repo = FakeRepository(fail_on="create_order_detail")
    repo.orders[42] = SimpleNamespace(id=42, customer_id=3, code="K-42", order_status="sale")

    with pytest.raises(RuntimeError):
        convert_to_work_order(repo, _request(order_id=42, customer=None))

    assert "create_order" not in repo.names()
    assert "delete_order" not in repo.names()
    assert "delete_customer" not in repo.names()
    assert repo.orders[42].order_status == "working"


def test_failure_after_updating_existing_order_names_it_in_the_log(caplog):
    repo = FakeRepository(fail_on="replace_measurements")
    repo.orders[42] = SimpleNamespace(id=42, customer_id=3, code="K-42", order_status="sale")

    with caplog.at_level("ERROR", logger="stoneworks.core.conversion"):
        with pytest.raises(RuntimeError):
            convert_to_work_order(repo, _request(order_id=42, customer=None))

    assert any("order 42 was modified" in record.getMessage() for record in caplog.records)


def test_failure_on_new_order_does_not_report_modified_order(caplog):
    repo = FakeRepository(fail_on="create_order_detail")

    with caplog.at_level("ERROR", logger="stoneworks.core.conversion"):
        with pytest.raises(RuntimeError):
            convert_to_work_order(repo, _request())

    assert not any("was modified" in record.getMessage() for record in caplog.records)


def test_conversion_against_database(db):
    drafts = InMemoryDraftRepository()
    result = convert_to_work_order(ShopRepository(db), _request(), drafts=drafts)

    order = crud.get_order(db, result.order.id)
    assert order.code == f"KW-{order.id}"
    assert order.order_status == "working"
    stages = crud.get_stages(db, result.detail.detail_id)
    assert [s.stage_name for s in stages] == [s["value"] for s in WORK_ORDER_STAGES]
    assert {s.status for s in stages} == {"not_started"}
    measurements = crud.list_measurements(db, order.id)
    assert [m.total_cost for m in measurements] == [50]


def test_existing_customer_is_reused(db):
    customer = crud.create_customer(db, schemas.CustomerCreate(name="Omar", phone_number="01012345678"))
    result = convert_to_work_order(ShopRepository(db), _request())

    assert result.customer_id == customer.id
    assert db.query(models.Customer).count() == 1
    # address was missing on the stored customer and is filled in by the upsert
    db.refresh(customer)
    assert customer.address == "Cairo"


def test_failed_conversion_leaves_no_rows(db, monkeypatch):
    repo = ShopRepository(db)

    def broken(detail_id):
        raise RuntimeError("stages insert failed")

    monkeypatch.setattr(repo, "create_stages", broken)
    with pytest.raises(RuntimeError, match="stages insert failed"):
        convert_to_work_order(repo, _request())

    assert db.query(models.Customer).count() == 0
    assert db.query(models.Order).count() == 0
    assert db.query(models.OrderDetail).count() == 0
    assert db.query(models.Measurement).count() == 0


def test_create_sale_order(db):
    drafts = InMemoryDraftRepository()
    drafts.save(SALE_ORDER_DRAFT, {"step": 2})
    payload = schemas.SaleOrderCreate.model_validate({
        "customer": {"name": "Sara", "phone_number": "01112345678", "company": "ACME"},
        "work_types": ["floor", "kitchen"],
        "measurements": [{"unit": "square_meter_M²", "quantity": 2, "cost": 7.5}],
        "order_price": 300,
    })

    order = create_sale_order(ShopRepository(db), payload, drafts=drafts)

    assert order.code == f"FK-{order.id}"
    assert order.order_status == "sale"
    assert order.created_by == "system"
    assert crud.list_measurements(db, order.id)[0].total_cost == 15
    assert drafts.load(SALE_ORDER_DRAFT) is None


def test_sale_order_requires_valid_phone(db):
    payload = schemas.SaleOrderCreate.model_validate({
        "customer": {"name": "Sara", "phone_number": "02112345678"},
        "measurements": [{"unit": "count", "quantity": 1, "cost": 1}],
    })
    with pytest.raises(ValidationFailed):
        create_sale_order(ShopRepository(db), payload)
    assert db.query(models.Order).count() == 0
