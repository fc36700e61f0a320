# /section_hub/routers/uploads_router.py

from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile, status
from fastapi.responses import FileResponse

from ..models.record_model import UploadResponse
from ..services import upload_service

router = APIRouter()

# Mounted without the /api prefix: serves what /api/materials/upload stored.
files_router = APIRouter()

UPLOAD_FIELD = "materialFile"


@router.post(
    "/upload",
    response_model=UploadResponse,
    summary="Upload a Material File",
    description="Saves the file to the server's uploads directory and returns the URL it is served from.",
)
async def upload_material(
    request: Request,
    materialFile: Optional[UploadFile] = File(default=None),
    uploads_dir: Path = Depends(upload_service.get_uploads_dir),
):
    if materialFile is None or not materialFile.filename:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file was uploaded.")

    try:
        filename = await upload_service.save_upload(materialFile, UPLOAD_FIELD, uploads_dir)
    except OSError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Could not save the file: {e}")

    host = request.headers.get("host", request.url.netloc)
    return {"url": f"{request.url.scheme}://{host}/uploads/{filename}"}


@files_router.get("/uploads/{filename}", summary="Download an Uploaded Material", response_class=FileResponse)
def get_uploaded_file(filename: str, uploads_dir: Path = Depends(upload_service.get_uploads_dir)):
    try:
        path = upload_service.resolve_stored_file(filename, uploads_dir)
    except FileNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="File not found.")
    return FileResponse(path)
