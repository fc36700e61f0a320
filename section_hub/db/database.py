# /section_hub/db/database.py

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from ..core.config import settings


def build_engine(database_url: str):
    # The 'check_same_thread' argument is only needed for SQLite. Section reads
    # run on worker threads, each with its own session.
    engine_args = {"connect_args": {"check_same_thread": False}} if database_url.startswith("sqlite") else {"pool_pre_ping": True}
    return create_engine(database_url, **engine_args)


def build_session_factory(engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


engine = build_engine(settings.database_url)

# Each instance of this class is a database session.
SessionLocal = build_session_factory(engine)

