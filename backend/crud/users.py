# backend/crud/users.py
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session

from config import settings
from crud.base import insert_or_update, read_accessor, utcnow, write_accessor
from models.users import User
from utils.errors import StoreUnavailableError

logger = logging.getLogger(__name__)

_PROFILE_FIELDS = ("name", "email", "login_method")
_UNSET = object()


def upsert_user(
    db: Optional[Session],
    open_id: str,
    *,
    name: Any = _UNSET,
    email: Any = _UNSET,
    login_method: Any = _UNSET,
    role: Optional[str] = None,
    last_signed_in: Optional[datetime] = None,
) -> None:
    """Create the user on first login, otherwise refresh its profile.

    Profile fields left out of the call are not touched on an existing
    row, while an explicit ``None`` clears them. The role is only written
    when given, except for the configured owner identity which is always
    promoted to admin. ``last_signed_in`` is refreshed on every call.
    Failures are logged and re-raised.
    """
    if not open_id:
        raise ValueError("User openId is required for upsert")
    if db is None:
        logger.error("[Database] Cannot upsert user: database not available")
        raise StoreUnavailableError()

    profile = {"name": name, "email": email, "login_method": login_method}
    values: Dict[str, Any] = {"open_id": open_id}
    update_set: Dict[str, Any] = {}
    for field in _PROFILE_FIELDS:
        if profile[field] is _UNSET:
            continue
        values[field] = profile[field]
        update_set[field] = profile[field]

    if role is not None:
        values["role"] = role
        update_set["role"] = role
    elif settings.OWNER_OPEN_ID and open_id == settings.OWNER_OPEN_ID:
        values["role"] = "admin"
        update_set["role"] = "admin"

    signed_in = last_signed_in or utcnow()
    values["last_signed_in"] = signed_in
    update_set["last_signed_in"] = signed_in
    update_set["updated_at"] = func.now()

    try:
        insert_or_update(db, User, values, ["open_id"], update_set)
    except OperationalError as e:
        db.rollback()
        logger.error("[Database] Failed to upsert user %s: %s", open_id, e)
        raise StoreUnavailableError() from e
    except SQLAlchemyError:
        db.rollback()
        logger.exception("[Database] Failed to upsert user %s", open_id)
        raise


@read_accessor(lambda: None)
def get_user_by_open_id(db: Session, open_id: str) -> Optional[User]:
    return db.query(User).filter(User.open_id == open_id).first()


@read_accessor(list)
def get_all_users(db: Session) -> List[User]:
    return db.query(User).order_by(User.created_at.desc(), User.id.desc()).all()


@read_accessor(lambda: None)
def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


@write_accessor
def update_user(db: Session, user_id: int, data: Dict[str, Any]) -> None:
    if not data:
        return
    db.query(User).filter(User.id == user_id).update(data, synchronize_session=False)
    db.commit()


@write_accessor
def delete_user(db: Session, user_id: int) -> None:
    db.query(User).filter(User.id == user_id).delete(synchronize_session=False)
    db.commit()
