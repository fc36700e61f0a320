# /section_hub/routers/section_router.py

from fastapi import APIRouter, Depends, HTTPException, status

from ..core.exceptions import AggregationFailure
from ..models.section_model import SectionData
from ..services import section_service
from ..services.record_store import RecordStore, get_record_store

router = APIRouter()


@router.get(
    "/{section:path}",
    response_model=SectionData,
    summary="Get All Data for a Section",
    description="Loads teachers, students, announcements, materials and timetables for one section in a single call.",
)
async def get_section_data(section: str, store: RecordStore = Depends(get_record_store)):
    try:
        return await section_service.fetch_section_data(section=section, store=store)
    except AggregationFailure as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
