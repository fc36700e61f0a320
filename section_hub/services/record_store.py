# /section_hub/services/record_store.py

"""
This module is the direct interface to the relational store for the five
section-scoped collections (teachers, students, announcements, materials,
timetables).

Records go in and come out as plain dictionaries: callers never see ORM
objects, and the store does not interpret a record beyond checking that its
fields are real columns. Every public method opens and closes its own session,
so a single RecordStore can be shared by concurrent reads running on worker
threads.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Type

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from ..core.exceptions import RecordStoreError, UnknownCollectionError
from ..db.base import Base, Teacher, Student, Announcement, Material, Timetable
from ..db.database import SessionLocal

logger = logging.getLogger(__name__)

COLLECTIONS: Dict[str, Type[Base]] = {
    "teachers": Teacher,
    "students": Student,
    "announcements": Announcement,
    "materials": Material,
    "timetables": Timetable,
}


def _row_to_dict(row: Base) -> Dict[str, Any]:
    return {c.name: getattr(row, c.name) for c in row.__table__.columns}


class RecordStore:
    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    # --- Helpers ---

    def _model_for(self, collection: str) -> Type[Base]:
        model = COLLECTIONS.get(collection)
        if model is None:
            raise UnknownCollectionError(collection)
        return model

    def _column(self, model: Type[Base], field: str):
        if field not in model.__table__.columns:
            raise RecordStoreError(f"Could not find the '{field}' column of '{model.__tablename__}'")
        return model.__table__.columns[field]

    def _check_fields(self, model: Type[Base], record: Dict[str, Any]) -> None:
        for field in record:
            self._column(model, field)

    # --- Reads ---

    def select(
        self,
        collection: str,
        *,
        section: Optional[str] = None,
        sections: Optional[Iterable[str]] = None,
        order_by: Optional[str] = None,
        descending: bool = False,
    ) -> List[Dict[str, Any]]:
        """
        Returns every record in `collection` matching the section filters.

        `section` is an equality filter, `sections` a membership filter; both
        may be combined. `order_by` names a column to sort on.
        """
        model = self._model_for(collection)
        try:
            with self.session_factory() as db:
                query = db.query(model)
                if section is not None:
                    query = query.filter(model.section == section)
                if sections is not None:
                    query = query.filter(model.section.in_(list(sections)))
                if order_by is not None:
                    column = self._column(model, order_by)
                    query = query.order_by(column.desc() if descending else column.asc())
                return [_row_to_dict(row) for row in query.all()]
        except SQLAlchemyError as e:
            logger.error("Select on '%s' failed: %s", collection, e)
            raise RecordStoreError(str(e)) from e

    # --- Writes ---

    def insert(self, collection: str, record: Dict[str, Any]) -> Dict[str, Any]:
        """Creates one record and returns it as stored, server defaults included."""
        model = self._model_for(collection)
        self._check_fields(model, record)
        try:
            with self.session_factory() as db:
                new_row = model(**record)
                db.add(new_row)
                db.commit()
                db.refresh(new_row)
                return _row_to_dict(new_row)
        except SQLAlchemyError as e:
            logger.error("Insert into '%s' failed: %s", collection, e)
            raise RecordStoreError(str(e)) from e

    def update(self, collection: str, key_field: str, key_value: Any, changes: Dict[str, Any]) -> int:
        """Applies `changes` to every record whose `key_field` equals `key_value`. Returns the match count."""
        model = self._model_for(collection)
        key_column = self._column(model, key_field)
        self._check_fields(model, changes)
        try:
            with self.session_factory() as db:
                matched = (
                    db.query(model)
                    .filter(key_column == key_value)
                    .update(changes, synchronize_session=False)
                )
                db.commit()
                return matched
        except SQLAlchemyError as e:
            logger.error("Update on '%s' (%s=%s) failed: %s", collection, key_field, key_value, e)
            raise RecordStoreError(str(e)) from e

    def delete(self, collection: str, key_field: str, key_value: Any) -> int:
        model = self._model_for(collection)
        key_column = self._column(model, key_field)
        try:
            with self.session_factory() as db:
                removed = db.query(model).filter(key_column == key_value).delete(synchronize_session=False)
                db.commit()
                return removed
        except SQLAlchemyError as e:
            logger.error("Delete on '%s' (%s=%s) failed: %s", collection, key_field, key_value, e)
            raise RecordStoreError(str(e)) from e


# --- DEPENDENCY PROVIDER ---
def get_record_store() -> RecordStore:
    """
    FastAPI dependency that provides the RecordStore bound to the process-wide
    session factory. Tests replace it through `app.dependency_overrides`.
    """
    return RecordStore(SessionLocal)
