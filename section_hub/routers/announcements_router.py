# /section_hub/routers/announcements_router.py

from fastapi import APIRouter, Depends, HTTPException, status

from ..core.exceptions import SectionHubError
from ..models.record_model import AnnouncementCreate, MessageResponse
from ..services import record_service
from ..services.record_store import RecordStore, get_record_store

router = APIRouter()


@router.post(
    "",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an Announcement",
    description="Use section 'all' to show the announcement to every section.",
)
def create_announcement(announcement: AnnouncementCreate, store: RecordStore = Depends(get_record_store)):
    try:
        record_service.create_record("announcements", announcement, store)
    except SectionHubError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    return {"message": "Announcement created"}


@router.delete("/{announcement_id}", response_model=MessageResponse, summary="Delete an Announcement")
def delete_announcement(announcement_id: str, store: RecordStore = Depends(get_record_store)):
    try:
        record_service.delete_record("announcements", announcement_id, store)
    except SectionHubError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    return {"message": "Announcement deleted"}
