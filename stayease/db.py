import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from sqlalchemy.pool import StaticPool
from .config import settings

logger = logging.getLogger(__name__)

class Base(DeclarativeBase):
    pass


def engine_options(url: str) -> dict:
    """Connection options for a database URL.

    SQLite connections are shared across the threadpool FastAPI runs sync
    endpoints in. A bare in-memory URL additionally pins a single connection,
    otherwise every session would see its own empty database.
    """
    if not url.startswith("sqlite"):
        return {}
    options: dict = {"connect_args": {"check_same_thread": False}}
    if url in ("sqlite://", "sqlite:///:memory:"):
        options["poolclass"] = StaticPool
    return options


engine = create_engine(settings.DATABASE_URL, **engine_options(settings.DATABASE_URL))

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None) -> None:
    """Create any missing tables. Alembic owns schema changes after that."""
    from . import models  # noqa: F401  registers every table on Base.metadata

    target = bind if bind is not None else engine
    Base.metadata.create_all(bind=target)
    logger.info("Database tables ensured (%s)", target.url.render_as_string(hide_password=True))
