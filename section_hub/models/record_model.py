# /section_hub/models/record_model.py

"""
Pydantic request models for the single-record write endpoints.

Create models require the section (the partition key every collection is
filtered on); update models make every field optional so that PATCH can send
partial changes.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RecordBase(BaseModel):
    model_config = ConfigDict(extra="forbid")

    section: str = Field(..., min_length=1, description="The section this record belongs to.")


# --- Students ---

class StudentCreate(RecordBase):
    roll: str = Field(..., min_length=1, description="The roll number assigned by the school.")
    name: str = Field(..., min_length=1, description="The full name of the student.")
    email: Optional[str] = None
    phone: Optional[str] = None
    parent_phone: Optional[str] = None
    fee_status: Optional[str] = Field(default=None, description="e.g. 'paid', 'pending'.")


class StudentUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = None
    phone: Optional[str] = None
    parent_phone: Optional[str] = None
    fee_status: Optional[str] = None
    section: Optional[str] = Field(default=None, min_length=1)


# --- Announcements ---

class AnnouncementCreate(RecordBase):
    section: str = Field(..., min_length=1, description="A section identifier, or 'all' for every section.")
    title: str = Field(..., min_length=1)
    content: Optional[str] = None
    author: Optional[str] = None
    created_at: Optional[datetime] = Field(default=None, description="Defaults to the time of insertion.")


# --- Teachers ---

class TeacherCreate(RecordBase):
    name: str = Field(..., min_length=1)
    subject: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


# --- Materials ---

class MaterialCreate(RecordBase):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    file_url: Optional[str] = Field(default=None, description="Usually the URL returned by /api/materials/upload.")
    uploaded_by: Optional[str] = None


# --- Timetables ---

class TimetableCreate(RecordBase):
    day: str = Field(..., min_length=1)
    period: Optional[str] = None
    subject: Optional[str] = None
    teacher: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None


class MessageResponse(BaseModel):
    message: str


class UploadResponse(BaseModel):
    url: str
