# backend/database.py
import logging
import threading
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker

from config import settings

logger = logging.getLogger(__name__)

Base = declarative_base()


def _normalize_url(url: str) -> str:
    # Azure hands out postgres:// while SQLAlchemy requires postgresql://
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql://", 1)
    return url


class Store:
    """Process-wide database handle, built on first use and then reused."""

    _engine: Optional[Engine] = None
    _session_factory: Optional[sessionmaker] = None
    _lock = threading.Lock()

    @classmethod
    def get_session_factory(cls) -> Optional[sessionmaker]:
        if cls._session_factory is not None or not settings.DATABASE_URL:
            return cls._session_factory
        with cls._lock:
            if cls._session_factory is None:
                cls._connect(settings.DATABASE_URL)
        return cls._session_factory

    @classmethod
    def _connect(cls, raw_url: str) -> None:
        # Caller holds the lock
        url = _normalize_url(raw_url)
        connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
        try:
            cls._engine = create_engine(url, connect_args=connect_args)
            cls._session_factory = sessionmaker(autocommit=False, autoflush=False, bind=cls._engine)
        except (SQLAlchemyError, ImportError) as e:
            logger.warning("[Database] Failed to connect: %s", e)
            cls._engine = None
            cls._session_factory = None

    @classmethod
    def get_engine(cls) -> Optional[Engine]:
        cls.get_session_factory()
        return cls._engine

    @classmethod
    def reset(cls):
        with cls._lock:
            if cls._engine is not None:
                cls._engine.dispose()
            cls._engine = None
            cls._session_factory = None


def get_db():
    factory = Store.get_session_factory()
    if factory is None:
        # Handlers receive None and degrade according to read/write policy
        yield None
        return
    db = factory()
    try:
        yield db
    finally:
        db.close()


def init_db():
    engine = Store.get_engine()
    if engine is None:
        logger.warning("[Database] DATABASE_URL not configured, skipping table creation")
        return
    # Register every model on Base.metadata before creating tables
    import models.users, models.event, models.news, models.attendance, models.resource, models.log  # noqa: F401
    Base.metadata.create_all(bind=engine)
