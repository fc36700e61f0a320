# /section_hub/db/models/section_models.py

"""
SQLAlchemy ORM models for the five section-scoped collections.

Every table carries a `section` column, the partition key the aggregator
filters on. Announcements may also use the sentinel section "all", which makes
them visible to every section.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, Text, DateTime

from ..base_class import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _prefixed_id(prefix: str):
    return lambda: f"{prefix}_{uuid.uuid4().hex[:12]}"


class Teacher(Base):
    id = Column(String, primary_key=True, default=_prefixed_id("tch"))
    name = Column(String, nullable=False)
    subject = Column(String, nullable=True)
    email = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    section = Column(String, index=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)


class Student(Base):
    # Students are addressed by their roll number, which the school assigns.
    roll = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    parent_phone = Column(String, nullable=True)
    fee_status = Column(String, nullable=True)
    section = Column(String, index=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)


class Announcement(Base):
    id = Column(String, primary_key=True, default=_prefixed_id("ann"))
    title = Column(String, nullable=False)
    content = Column(Text, nullable=True)
    author = Column(String, nullable=True)
    section = Column(String, index=True, nullable=False)  # a section id, or "all"
    created_at = Column(DateTime(timezone=True), default=_utcnow, index=True, nullable=False)


class Material(Base):
    id = Column(String, primary_key=True, default=_prefixed_id("mat"))
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    file_url = Column(String, nullable=True)
    uploaded_by = Column(String, nullable=True)
    section = Column(String, index=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)


class Timetable(Base):
    id = Column(String, primary_key=True, default=_prefixed_id("tt"))
    day = Column(String, nullable=False)
    period = Column(String, nullable=True)
    subject = Column(String, nullable=True)
    teacher = Column(String, nullable=True)
    start_time = Column(String, nullable=True)
    end_time = Column(String, nullable=True)
    section = Column(String, index=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
