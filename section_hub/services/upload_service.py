# /section_hub/services/upload_service.py

import logging
import os
import random
import time
from pathlib import Path

from fastapi import UploadFile

from ..core.config import settings

logger = logging.getLogger(__name__)


def get_uploads_dir() -> Path:
    uploads_dir = Path(settings.uploads_dir)
    uploads_dir.mkdir(parents=True, exist_ok=True)
    return uploads_dir


def build_stored_filename(field_name: str, original_filename: str) -> str:
    """`<field>-<epoch millis>-<random up to 1e9><original extension>`, unique enough for a single disk."""
    unique_suffix = f"{int(time.time() * 1000)}-{round(random.random() * 1e9)}"
    extension = os.path.splitext(original_filename or "")[1]
    return f"{field_name}-{unique_suffix}{extension}"


async def save_upload(file: UploadFile, field_name: str, uploads_dir: Path) -> str:
    """Writes the uploaded file into `uploads_dir` and returns the stored filename."""
    filename = build_stored_filename(field_name, file.filename)
    contents = await file.read()
    (uploads_dir / filename).write_bytes(contents)
    logger.info("Saved upload '%s' as %s (%d bytes)", file.filename, filename, len(contents))
    return filename


def resolve_stored_file(filename: str, uploads_dir: Path) -> Path:
    """
    Maps a filename from an /uploads URL back to a file inside `uploads_dir`.

    Raises:
        FileNotFoundError: if the name escapes the directory or no such file exists.
    """
    root = uploads_dir.resolve()
    candidate = (root / filename).resolve()
    if candidate.parent != root or not candidate.is_file():
        raise FileNotFoundError(filename)
    return candidate
