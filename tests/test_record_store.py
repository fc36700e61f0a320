# /tests/test_record_store.py

import asyncio
from datetime import datetime, timedelta

import pytest

from section_hub.core.exceptions import RecordStoreError, UnknownCollectionError
from section_hub.services import section_service


def test_insert_returns_stored_record_with_defaults(store):
    created = store.insert("teachers", {"name": "Ms. Rao", "subject": "Maths", "section": "10A"})

    assert created["id"].startswith("tch_")
    assert created["name"] == "Ms. Rao"
    assert created["created_at"] is not None


def test_select_filters_by_section(store):
    store.insert("students", {"roll": "1", "name": "Asha", "section": "10A"})
    store.insert("students", {"roll": "2", "name": "Meera", "section": "10B"})

    rows = store.select("students", section="10A")

    assert [r["roll"] for r in rows] == ["1"]
    assert isinstance(rows[0], dict)


def test_select_membership_filter_and_descending_order(store):
    base = datetime(2025, 1, 10, 8, 0, 0)
    store.insert("announcements", {"title": "First", "section": "10A", "created_at": base})
    store.insert("announcements", {"title": "School-wide", "section": "all", "created_at": base + timedelta(minutes=30)})
    store.insert("announcements", {"title": "Latest", "section": "10A", "created_at": base + timedelta(hours=1)})
    store.insert("announcements", {"title": "Elsewhere", "section": "10B", "created_at": base + timedelta(hours=2)})

    rows = store.select("announcements", sections=["10A", "all"], order_by="created_at", descending=True)

    assert [r["title"] for r in rows] == ["Latest", "School-wide", "First"]


def test_update_by_key_changes_only_matching_rows(store):
    store.insert("students", {"roll": "1", "name": "Asha", "section": "10A"})
    store.insert("students", {"roll": "2", "name": "Ravi", "section": "10A"})

    matched = store.update("students", "roll", "1", {"fee_status": "paid"})

    assert matched == 1
    by_roll = {r["roll"]: r for r in store.select("students", section="10A")}
    assert by_roll["1"]["fee_status"] == "paid"
    assert by_roll["2"]["fee_status"] is None


def test_update_and_delete_of_missing_key_match_nothing(store):
    assert store.update("students", "roll", "404", {"name": "Nobody"}) == 0
    assert store.delete("announcements", "id", "ann_missing") == 0


def test_delete_removes_record(store):
    created = store.insert("materials", {"title": "Notes", "section": "10A"})

    assert store.delete("materials", "id", created["id"]) == 1
    assert store.select("materials", section="10A") == []


def test_unknown_collection_is_rejected(store):
    with pytest.raises(UnknownCollectionError):
        store.select("parents", section="10A")


def test_unknown_column_is_rejected(store):
    with pytest.raises(RecordStoreError, match="nickname"):
        store.insert("students", {"roll": "1", "name": "Asha", "section": "10A", "nickname": "A"})


def test_duplicate_roll_surfaces_as_store_error(store):
    store.insert("students", {"roll": "1", "name": "Asha", "section": "10A"})
    with pytest.raises(RecordStoreError):
        store.insert("students", {"roll": "1", "name": "Asha again", "section": "10A"})


def test_store_failure_is_wrapped(store, session_factory):
    # Dropping the table underneath the store turns the next read into a driver error.
    with session_factory() as db:
        db.connection().exec_driver_sql("DROP TABLE timetables")
        db.commit()

    with pytest.raises(RecordStoreError):
        store.select("timetables", section="10A")


@pytest.mark.asyncio
async def test_section_aggregation_against_database(store):
    store.insert("teachers", {"name": "Ms. Rao", "section": "10A"})
    store.insert("students", {"roll": "1", "name": "Asha", "section": "10A"})
    store.insert("students", {"roll": "2", "name": "Meera", "section": "10B"})
    store.insert("timetables", {"day": "Monday", "subject": "Maths", "section": "10A"})
    store.insert("materials", {"title": "Poems", "section": "10B"})
    base = datetime(2025, 2, 1, 12, 0, 0)
    store.insert("announcements", {"title": "Exam", "section": "10A", "created_at": base})
    store.insert("announcements", {"title": "Holiday", "section": "all", "created_at": base + timedelta(days=1)})

    data_a, data_b = await asyncio.gather(
        section_service.fetch_section_data("10A", store),
        section_service.fetch_section_data("10B", store),
    )

    assert [s["name"] for s in data_a["students"]["10A"]] == ["Asha"]
    assert [s["name"] for s in data_b["students"]["10B"]] == ["Meera"]
    assert [a["title"] for a in data_a["announcements"]] == ["Holiday", "Exam"]
    assert [a["title"] for a in data_b["announcements"]] == ["Holiday"]
    assert data_a["materials"] == {"10A": []}
    assert data_b["timetables"] == {"10B": []}
