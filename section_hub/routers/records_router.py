# /section_hub/routers/records_router.py

"""
Create/delete endpoints for the collections that only need the plain
pass-through behaviour (teachers, materials, timetables). Each call to
`build_record_router` returns an APIRouter that main.py mounts under the
collection's prefix.
"""

from typing import Type

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from ..core.exceptions import SectionHubError
from ..models.record_model import MaterialCreate, MessageResponse, TeacherCreate, TimetableCreate
from ..services import record_service
from ..services.record_store import RecordStore, get_record_store


def build_record_router(collection: str, create_model: Type[BaseModel], label: str) -> APIRouter:
    router = APIRouter()

    @router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED, summary=f"Create a {label}")
    def create_record(payload: create_model, store: RecordStore = Depends(get_record_store)):
        try:
            record_service.create_record(collection, payload, store)
        except SectionHubError as e:
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
        return {"message": f"{label} created"}

    @router.delete("/{record_id}", response_model=MessageResponse, summary=f"Delete a {label}")
    def delete_record(record_id: str, store: RecordStore = Depends(get_record_store)):
        try:
            record_service.delete_record(collection, record_id, store)
        except SectionHubError as e:
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
        return {"message": f"{label} deleted"}

    return router


teachers_router = build_record_router("teachers", TeacherCreate, "Teacher")
materials_router = build_record_router("materials", MaterialCreate, "Material")
timetables_router = build_record_router("timetables", TimetableCreate, "Timetable")
