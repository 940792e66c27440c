# utils/tokenJWT.py
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError
from sqlalchemy.orm import Session

from config import settings
from crud import users as users_crud
from database import get_db
from models.users import User
from utils.errors import FORBIDDEN_ADMIN_MSG, StoreUnavailableError

logger = logging.getLogger(__name__)

# Authorization scheme; the session cookie is accepted as a fallback
bearer_scheme = HTTPBearer(auto_error=False)

# Generate a signed session token for an identity
def create_session_token(
    open_id: str,
    *,
    name: Optional[str] = None,
    email: Optional[str] = None,
    login_method: Optional[str] = None,
    user_id: Optional[int] = None,
    role: Optional[str] = None,
    expires_delta: timedelta = None,
) -> str:
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode = {
        "sub": open_id,
        "name": name,
        "email": email,
        "loginMethod": login_method,
        "uid": user_id,
        "role": role,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def _extract_token(request: Request, credentials: Optional[HTTPAuthorizationCredentials]) -> Optional[str]:
    if credentials is not None:
        return credentials.credentials
    return request.cookies.get(settings.COOKIE_NAME)


def _decode(token: str) -> Optional[dict]:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        logger.info("Rejected session token: %s", e)
        return None
    if not payload.get("sub"):
        return None
    return payload


def _claims_user(payload: dict) -> Optional[User]:
    # Store is down: rebuild a detached caller from the signed claims
    if payload.get("uid") is None:
        return None
    return User(
        id=payload["uid"],
        open_id=payload["sub"],
        name=payload.get("name"),
        email=payload.get("email"),
        login_method=payload.get("loginMethod"),
        role=payload.get("role") or "user",
    )


def resolve_session_user(token: Optional[str], db: Optional[Session]) -> Optional[User]:
    """Map a session token to its user, recording the sign-in."""
    if not token:
        return None
    payload = _decode(token)
    if payload is None:
        return None
    open_id = payload["sub"]

    if db is None:
        return _claims_user(payload)

    try:
        if users_crud.get_user_by_open_id(db, open_id) is None:
            # First sign-in creates the account from the token profile
            users_crud.upsert_user(
                db,
                open_id,
                name=payload.get("name"),
                email=payload.get("email"),
                login_method=payload.get("loginMethod"),
            )
        else:
            users_crud.upsert_user(db, open_id)
    except StoreUnavailableError:
        logger.warning("[Database] Could not record sign-in for %s, using token claims", open_id)
        return _claims_user(payload)
    return users_crud.get_user_by_open_id(db, open_id)

# Resolve the caller if any; used by public procedures
def get_optional_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Optional[Session] = Depends(get_db),
) -> Optional[User]:
    return resolve_session_user(_extract_token(request, credentials), db)

# Retrieve the currently authenticated user based on the session token
def get_current_user(current_user: Optional[User] = Depends(get_optional_user)) -> User:
    if current_user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return current_user

# Dependency factory for Role-Based Access Control
def role_required(*allowed_roles):
    def _checker(current_user: User = Depends(get_current_user)) -> User:
        if allowed_roles and current_user.role not in allowed_roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=FORBIDDEN_ADMIN_MSG,
            )
        return current_user
    return _checker


admin_required = role_required("admin")
