# backend/crud/base.py
"""Shared plumbing for the persistence accessors.

Read accessors degrade to an empty result when the store is missing or
unreachable; write accessors refuse to run without a store and never hide
a failed statement.
"""
import functools
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable

from sqlalchemy import and_, select, update
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session

from utils.errors import StoreUnavailableError

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    # Timestamps are stored as naive UTC
    return datetime.now(timezone.utc).replace(tzinfo=None)


def read_accessor(default_factory):
    """Return ``default_factory()`` instead of failing when the store is down."""
    def decorator(func):
        @functools.wraps(func)
        def wrapper(db, *args, **kwargs):
            if db is None:
                logger.warning("[Database] Cannot run %s: database not available", func.__name__)
                return default_factory()
            try:
                return func(db, *args, **kwargs)
            except OperationalError as e:
                logger.warning("[Database] %s failed, store unreachable: %s", func.__name__, e)
                db.rollback()
                return default_factory()
        return wrapper
    return decorator


def write_accessor(func):
    """Refuse writes without a store; roll back, log and re-raise on failure."""
    @functools.wraps(func)
    def wrapper(db, *args, **kwargs):
        if db is None:
            raise StoreUnavailableError()
        try:
            return func(db, *args, **kwargs)
        except OperationalError as e:
            db.rollback()
            logger.error("[Database] %s failed, store unreachable: %s", func.__name__, e)
            raise StoreUnavailableError() from e
        except SQLAlchemyError:
            db.rollback()
            logger.exception("[Database] %s failed", func.__name__)
            raise
    return wrapper


def insert_or_update(
    db: Session,
    model,
    values: Dict[str, Any],
    conflict_columns: Iterable[str],
    update_set: Dict[str, Any],
) -> None:
    """Atomic insert keyed by a unique constraint, updating ``update_set`` on conflict."""
    conflict_columns = list(conflict_columns)
    dialect = db.get_bind().dialect.name

    if dialect in ("sqlite", "postgresql"):
        if dialect == "sqlite":
            from sqlalchemy.dialects.sqlite import insert
        else:
            from sqlalchemy.dialects.postgresql import insert
        stmt = insert(model).values(**values).on_conflict_do_update(
            index_elements=conflict_columns,
            set_=update_set,
        )
        db.execute(stmt)
    elif dialect in ("mysql", "mariadb"):
        from sqlalchemy.dialects.mysql import insert
        stmt = insert(model).values(**values).on_duplicate_key_update(**update_set)
        db.execute(stmt)
    else:
        # No native conflict clause: locked read, then insert or update
        key = and_(*[getattr(model, c) == values[c] for c in conflict_columns])
        existing = db.execute(select(model.id).where(key).with_for_update()).first()
        if existing is None:
            db.add(model(**values))
        else:
            db.execute(update(model).where(model.id == existing.id).values(**update_set))
    db.commit()
