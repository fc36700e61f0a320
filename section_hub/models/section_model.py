# /section_hub/models/section_model.py

from typing import Any, Dict, List

from pydantic import BaseModel, Field

Record = Dict[str, Any]


class FeeInfo(BaseModel):
    amount: int = Field(..., examples=[5000])
    recipient: str = Field(..., examples=["Hardik Bhandari"])


class SectionData(BaseModel):
    """
    The envelope returned by GET /api/data/{section}. Four collections are
    keyed by the requested section; announcements are a flat list, newest first.
    Records are passed through untouched.
    """

    teachers: Dict[str, List[Record]]
    students: Dict[str, List[Record]]
    announcements: List[Record]
    materials: Dict[str, List[Record]]
    timetables: Dict[str, List[Record]]
    fees: FeeInfo
