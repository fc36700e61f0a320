# /section_hub/services/section_service.py

"""
Builds the single read model the frontend loads for a section: its teachers,
students, announcements, materials and timetables, plus the fee record.

The five reads are independent, so they are issued together on worker threads
and joined before anything is assembled. The aggregation is all-or-nothing: if
any read fails, the caller gets an AggregationFailure for the first failed
collection (in the order below) and never a partial envelope.
"""

import asyncio
import logging
from typing import Any, Dict, List, Tuple

from ..core.exceptions import AggregationFailure
from .record_store import RecordStore

logger = logging.getLogger(__name__)

# Announcements tagged with this section are shown to every section.
ALL_SECTIONS = "all"

# Fixed fee record; it is not stored anywhere.
FEE_AMOUNT = 5000
FEE_RECIPIENT = "Hardik Bhandari"

# (envelope key, keyword arguments for RecordStore.select), in error-precedence order.
def _section_queries(section: str) -> List[Tuple[str, Dict[str, Any]]]:
    return [
        ("teachers", {"section": section}),
        ("students", {"section": section}),
        ("announcements", {"sections": [section, ALL_SECTIONS], "order_by": "created_at", "descending": True}),
        ("materials", {"section": section}),
        ("timetables", {"section": section}),
    ]


def fee_record() -> Dict[str, Any]:
    return {"amount": FEE_AMOUNT, "recipient": FEE_RECIPIENT}


async def fetch_section_data(section: str, store: RecordStore) -> Dict[str, Any]:
    """
    Concurrently reads every collection scoped to `section` and merges them
    into the section envelope.

    Args:
        section: The section identifier. An unknown section is not an error;
            it simply yields empty lists.
        store: The record store to read from.

    Returns:
        A dict with exactly the keys teachers, students, announcements,
        materials, timetables and fees. Announcements are a flat list, newest
        first; the other four collections are `{section: [records]}`.

    Raises:
        AggregationFailure: if any of the five reads failed.
    """
    queries = _section_queries(section)

    # Scatter, then wait for every read to settle. return_exceptions keeps the
    # barrier intact so no read is abandoned mid-flight.
    outcomes = await asyncio.gather(
        *(asyncio.to_thread(store.select, collection, **filters) for collection, filters in queries),
        return_exceptions=True,
    )

    results: Dict[str, List[Dict[str, Any]]] = {}
    for (collection, _), outcome in zip(queries, outcomes):
        if isinstance(outcome, BaseException):
            logger.error("Error fetching %s for section '%s': %s", collection, section, outcome)
            raise AggregationFailure(collection, outcome) from outcome
        results[collection] = outcome

    return {
        "teachers": {section: results["teachers"]},
        "students": {section: results["students"]},
        "announcements": results["announcements"],
        "materials": {section: results["materials"]},
        "timetables": {section: results["timetables"]},
        "fees": fee_record(),
    }
