# /section_hub/services/record_service.py

"""
Single-record writes. These are direct delegations to the RecordStore; the
only logic here is turning Pydantic payloads into plain dictionaries.
"""

import logging
from typing import Any, Dict

from pydantic import BaseModel

from .record_store import RecordStore

logger = logging.getLogger(__name__)

# The column each collection is addressed by in PATCH/DELETE routes.
KEY_FIELDS: Dict[str, str] = {
    "teachers": "id",
    "students": "roll",
    "announcements": "id",
    "materials": "id",
    "timetables": "id",
}


def create_record(collection: str, payload: BaseModel, store: RecordStore) -> Dict[str, Any]:
    record = payload.model_dump(exclude_none=True)
    created = store.insert(collection, record)
    logger.info("Created %s record in section '%s'", collection, created.get("section"))
    return created


def update_record(collection: str, key_value: str, payload: BaseModel, store: RecordStore) -> int:
    changes = payload.model_dump(exclude_unset=True)
    if not changes:
        raise ValueError("No update data provided.")
    return store.update(collection, KEY_FIELDS[collection], key_value, changes)


def delete_record(collection: str, key_value: str, store: RecordStore) -> int:
    return store.delete(collection, KEY_FIELDS[collection], key_value)
