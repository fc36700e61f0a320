# /tests/test_section_service.py

import asyncio
import threading
from datetime import datetime, timedelta

import pytest

from section_hub.core.exceptions import AggregationFailure, RecordStoreError
from section_hub.services import section_service

ENVELOPE_KEYS = {"teachers", "students", "announcements", "materials", "timetables", "fees"}


class FakeStore:
    """
    In-memory stand-in for RecordStore.select. `failures` maps a collection
    name to the exception its read should raise.
    """

    def __init__(self, records=None, failures=None):
        self.records = records or {}
        self.failures = failures or {}
        self.calls = []
        self._lock = threading.Lock()

    def select(self, collection, *, section=None, sections=None, order_by=None, descending=False):
        with self._lock:
            self.calls.append(collection)
        if collection in self.failures:
            raise self.failures[collection]
        rows = list(self.records.get(collection, []))
        if section is not None:
            rows = [r for r in rows if r["section"] == section]
        if sections is not None:
            rows = [r for r in rows if r["section"] in sections]
        if order_by is not None:
            rows.sort(key=lambda r: r[order_by], reverse=descending)
        return rows


@pytest.fixture
def mixed_records():
    base = datetime(2025, 3, 1, 9, 0, 0)
    return {
        "teachers": [
            {"id": "tch_1", "name": "Ms. Rao", "section": "10A"},
            {"id": "tch_2", "name": "Mr. Sen", "section": "10B"},
        ],
        "students": [
            {"roll": "1", "name": "Asha", "section": "10A"},
            {"roll": "2", "name": "Ravi", "section": "10A"},
            {"roll": "3", "name": "Meera", "section": "10B"},
        ],
        "announcements": [
            {"id": "ann_old", "title": "Old", "section": "10A", "created_at": base},
            {"id": "ann_all", "title": "Holiday", "section": "all", "created_at": base + timedelta(hours=2)},
            {"id": "ann_new", "title": "New", "section": "10A", "created_at": base + timedelta(hours=5)},
            {"id": "ann_b", "title": "Other section", "section": "10B", "created_at": base + timedelta(hours=9)},
        ],
        "materials": [{"id": "mat_1", "title": "Algebra notes", "section": "10B"}],
        "timetables": [{"id": "tt_1", "day": "Monday", "section": "10A"}],
    }


@pytest.mark.asyncio
async def test_envelope_has_exactly_six_keys(mixed_records):
    data = await section_service.fetch_section_data("10A", FakeStore(mixed_records))
    assert set(data.keys()) == ENVELOPE_KEYS


@pytest.mark.asyncio
async def test_scoped_collections_are_keyed_by_section(mixed_records):
    data = await section_service.fetch_section_data("10A", FakeStore(mixed_records))

    for key in ("teachers", "students", "materials", "timetables"):
        assert list(data[key].keys()) == ["10A"]
        assert all(record["section"] == "10A" for record in data[key]["10A"])

    assert [s["roll"] for s in data["students"]["10A"]] == ["1", "2"]
    assert data["materials"]["10A"] == []


@pytest.mark.asyncio
async def test_announcements_include_all_and_are_newest_first(mixed_records):
    data = await section_service.fetch_section_data("10A", FakeStore(mixed_records))
    announcements = data["announcements"]

    assert isinstance(announcements, list)
    assert [a["id"] for a in announcements] == ["ann_new", "ann_all", "ann_old"]
    assert all(a["section"] in ("10A", "all") for a in announcements)
    for newer, older in zip(announcements, announcements[1:]):
        assert newer["created_at"] >= older["created_at"]


@pytest.mark.asyncio
async def test_unknown_section_yields_empty_lists_and_fees():
    data = await section_service.fetch_section_data("no-such-section", FakeStore())

    assert set(data.keys()) == ENVELOPE_KEYS
    for key in ("teachers", "students", "materials", "timetables"):
        assert data[key] == {"no-such-section": []}
    assert data["announcements"] == []
    assert data["fees"] == {"amount": 5000, "recipient": "Hardik Bhandari"}


@pytest.mark.asyncio
async def test_single_failure_fails_whole_aggregation(mixed_records):
    store = FakeStore(mixed_records, failures={"materials": RecordStoreError("materials table unavailable")})

    with pytest.raises(AggregationFailure) as exc_info:
        await section_service.fetch_section_data("10A", store)

    assert exc_info.value.collection == "materials"
    assert str(exc_info.value) == "materials table unavailable"
    # Every read still ran to completion; nothing was cancelled.
    assert sorted(store.calls) == sorted(["teachers", "students", "announcements", "materials", "timetables"])


@pytest.mark.asyncio
async def test_first_failure_in_collection_order_is_reported():
    store = FakeStore(failures={
        "timetables": RecordStoreError("timetables down"),
        "students": RecordStoreError("students down"),
        "materials": RecordStoreError("materials down"),
    })

    with pytest.raises(AggregationFailure) as exc_info:
        await section_service.fetch_section_data("10A", store)

    assert exc_info.value.collection == "students"
    assert str(exc_info.value) == "students down"
    assert isinstance(exc_info.value.cause, RecordStoreError)


@pytest.mark.asyncio
async def test_reads_run_concurrently():
    """
    Each read waits on a five-party barrier, so the aggregation can only finish
    if all five reads are in flight at the same time.
    """
    barrier = threading.Barrier(5, timeout=5)

    class BarrierStore(FakeStore):
        def select(self, collection, **kwargs):
            barrier.wait()
            return super().select(collection, **kwargs)

    data = await section_service.fetch_section_data("10A", BarrierStore())
    assert set(data.keys()) == ENVELOPE_KEYS


@pytest.mark.asyncio
async def test_concurrent_aggregations_do_not_leak(mixed_records):
    store = FakeStore(mixed_records)
    data_a, data_b = await asyncio.gather(
        section_service.fetch_section_data("10A", store),
        section_service.fetch_section_data("10B", store),
    )

    assert "10B" not in data_a["students"]
    assert all(s["section"] == "10A" for s in data_a["students"]["10A"])
    assert all(s["section"] == "10B" for s in data_b["students"]["10B"])
    assert all(a["section"] in ("10B", "all") for a in data_b["announcements"])
    assert [t["id"] for t in data_b["teachers"]["10B"]] == ["tch_2"]


@pytest.mark.asyncio
async def test_records_are_passed_through_untouched():
    record = {"roll": "7", "section": "9C", "marks": [90, 85], "meta": {"house": "Blue"}}
    data = await section_service.fetch_section_data("9C", FakeStore({"students": [record]}))
    assert data["students"]["9C"] == [record]
