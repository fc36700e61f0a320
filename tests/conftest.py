# /tests/conftest.py

import pytest
from unittest.mock import AsyncMock, MagicMock
from fastapi.testclient import TestClient

from section_hub.db.base import Base
from section_hub.db.database import build_engine, build_session_factory
from section_hub.main import app
from section_hub.services.gemini_service import GeminiService, get_gemini_service
from section_hub.services.record_store import RecordStore, get_record_store
from section_hub.services.upload_service import get_uploads_dir


@pytest.fixture
def session_factory(tmp_path):
    """A fresh SQLite database file per test, with every table created."""
    engine = build_engine(f"sqlite:///{tmp_path / 'sectionhub_test.db'}")
    Base.metadata.create_all(bind=engine)
    yield build_session_factory(engine)
    engine.dispose()


@pytest.fixture
def store(session_factory):
    return RecordStore(session_factory)


@pytest.fixture
def mock_gemini():
    """Stands in for the Gemini client so no test ever reaches the network."""
    gemini = MagicMock(spec=GeminiService)
    gemini.generate_text = AsyncMock(return_value="Generated text")
    gemini.generate_multimodal_response = AsyncMock(return_value="**VERIFIED:** Amount and recipient match.")
    return gemini


@pytest.fixture
def uploads_dir(tmp_path):
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def client(store, mock_gemini, uploads_dir):
    # The client is not used as a context manager, so lifespan (schema creation
    # against the real DATABASE_URL, API key check) never runs in tests.
    app.dependency_overrides[get_record_store] = lambda: store
    app.dependency_overrides[get_gemini_service] = lambda: mock_gemini
    app.dependency_overrides[get_uploads_dir] = lambda: uploads_dir
    yield TestClient(app)
    app.dependency_overrides.clear()
