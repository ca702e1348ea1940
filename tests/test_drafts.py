import base64
import os

from stoneworks.core.drafts import InMemoryDraftRepository, JsonFileDraftRepository


def _draft_file(directory, key):
    return directory / (base64.urlsafe_b64encode(key.encode("utf-8")).decode("ascii") + ".json")


def test_in_memory_round_trip_and_clear():
    drafts = InMemoryDraftRepository()
    assert drafts.load("sale_order") is None

    drafts.save("sale_order", {"customer": {"name": "Omar"}, "work_types": ["kitchen"]})
    assert drafts.load("sale_order") == {"customer": {"name": "Omar"}, "work_types": ["kitchen"]}

    drafts.clear("sale_order")
    assert drafts.load("sale_order") is None
    drafts.clear("sale_order")


def test_json_file_round_trip_and_clear(tmp_path):
    drafts = JsonFileDraftRepository(str(tmp_path / "drafts"))
    drafts.save("work_order", {"measurements": [{"quantity": 2, "cost": 3}]})

    assert _draft_file(tmp_path / "drafts", "work_order").exists()
    assert drafts.load("work_order") == {"measurements": [{"quantity": 2, "cost": 3}]}

    drafts.clear("work_order")
    assert drafts.load("work_order") is None
    assert os.listdir(tmp_path / "drafts") == []


def test_json_file_keys_never_share_a_file(tmp_path):
    drafts = JsonFileDraftRepository(str(tmp_path))
    drafts.save("sale.order", {"step": 1})
    drafts.save("sale_order", {"step": 2})
    drafts.save("sale/order", {"step": 3})

    assert drafts.load("sale.order") == {"step": 1}
    assert drafts.load("sale_order") == {"step": 2}
    assert drafts.load("sale/order") == {"step": 3}
    assert len(os.listdir(tmp_path)) == 3

    drafts.clear("sale.order")
    assert drafts.load("sale_order") == {"step": 2}


def test_json_file_ignores_corrupt_draft(tmp_path):
    _draft_file(tmp_path, "work_order").write_text("{not json", encoding="utf-8")
    drafts = JsonFileDraftRepository(str(tmp_path))
    assert drafts.load("work_order") is None
