# /section_hub/routers/students_router.py

from fastapi import APIRouter, Depends, HTTPException, status

from ..core.exceptions import SectionHubError
from ..models.record_model import MessageResponse, StudentCreate, StudentUpdate
from ..services import record_service
from ..services.record_store import RecordStore, get_record_store

router = APIRouter()


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED, summary="Create a Student")
def create_student(student: StudentCreate, store: RecordStore = Depends(get_record_store)):
    try:
        record_service.create_record("students", student, store)
    except SectionHubError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    return {"message": "Student created"}


@router.patch("/{roll}", response_model=MessageResponse, summary="Update a Student by Roll Number")
def update_student(roll: str, student_update: StudentUpdate, store: RecordStore = Depends(get_record_store)):
    try:
        record_service.update_record("students", roll, student_update, store)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except SectionHubError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    return {"message": "Student updated"}


@router.delete("/{roll}", response_model=MessageResponse, summary="Delete a Student by Roll Number")
def delete_student(roll: str, store: RecordStore = Depends(get_record_store)):
    try:
        record_service.delete_record("students", roll, store)
    except SectionHubError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    return {"message": "Student deleted"}
