# /section_hub/main.py

import logging
from contextlib import asynccontextmanager
from pathlib import Path

# --- Core FastAPI Imports ---
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import settings
from .db.base import Base
from .db.database import engine
from .routers import (
    section_router,
    students_router,
    announcements_router,
    records_router,
    uploads_router,
    ai_router,
    whatsapp_router,
)
from .services import upload_service
from .services.gemini_service import get_gemini_service

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Fail fast on a missing API key rather than on the first AI request.
    get_gemini_service()
    Base.metadata.create_all(bind=engine)
    uploads_dir = upload_service.get_uploads_dir()
    logger.info("SectionHub backend started (uploads in %s)", uploads_dir.resolve())
    yield


app = FastAPI(
    title="SectionHub Backend API",
    description="Backend-for-frontend for the section management web app.",
    version="1.0.0",
    lifespan=lifespan,
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Error Envelope ---
# Every error leaves the API as {"error": <message>}, which is what the frontend reads.
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else error.get("msg", "Invalid request"))
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": "; ".join(messages) or "Invalid request"})


# --- API Router Inclusion ---
app.include_router(section_router.router, prefix="/api/data", tags=["Section Data"])
app.include_router(students_router.router, prefix="/api/students", tags=["Students"])
app.include_router(announcements_router.router, prefix="/api/announcements", tags=["Announcements"])
app.include_router(records_router.teachers_router, prefix="/api/teachers", tags=["Teachers"])
app.include_router(uploads_router.router, prefix="/api/materials", tags=["Materials"])
app.include_router(records_router.materials_router, prefix="/api/materials", tags=["Materials"])
app.include_router(records_router.timetables_router, prefix="/api/timetables", tags=["Timetables"])
app.include_router(ai_router.router, prefix="/api", tags=["AI"])
app.include_router(whatsapp_router.router, prefix="/api/whatsapp", tags=["Messaging"])
app.include_router(uploads_router.files_router, tags=["Materials"])


# --- Health Check Endpoint ---
@app.get("/api/health", tags=["Health Check"])
async def health_check():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "SectionHub backend is running!", "version": app.version}


# --- Frontend ---
def mount_frontend(app: FastAPI, directory: Path) -> bool:
    """
    Serves the built web app from `directory` at the site root. Must run after
    every API route is registered, since the mount matches any path.
    """
    if not directory.is_dir():
        logger.warning("Frontend directory %s not found; serving the API only", directory.resolve())
        return False
    app.mount("/", StaticFiles(directory=directory, html=True), name="frontend")
    return True


mount_frontend(app, Path(settings.frontend_dir))
