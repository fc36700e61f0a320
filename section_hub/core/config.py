# /section_hub/core/config.py

"""
Environment-driven configuration for the SectionHub backend.

Values are read once from the process environment (and a local `.env` file,
if present). Nothing here talks to an external service, so importing this
module never fails because a key is missing.
"""

import os
from typing import List
from dotenv import load_dotenv

load_dotenv()


class Settings:
    def __init__(self):
        # The hosted Postgres (Supabase) URL in production; SQLite for local dev.
        self.database_url: str = os.getenv("DATABASE_URL", "sqlite:///./sectionhub.db")

        self.google_api_key: str = os.getenv("GOOGLE_API_KEY", "")
        self.gemini_model: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
        self.gemini_vision_model: str = os.getenv("GEMINI_VISION_MODEL", self.gemini_model)

        self.uploads_dir: str = os.getenv("UPLOADS_DIR", "uploads")
        # Built web app served at /; skipped when the directory is absent.
        self.frontend_dir: str = os.getenv("FRONTEND_DIR", "frontend")
        self.cors_origins: List[str] = [
            origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
        ]
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
