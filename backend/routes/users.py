# backend/routes/users.py
import secrets
from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from crud import users as crud
from database import get_db
from models.users import User
from schemas import user as schemas
from schemas.common import SuccessResponse, changes
from utils.audit import client_ip, write_log
from utils.tokenJWT import admin_required

router = APIRouter(prefix="/users", tags=["Users"])


def _new_open_id() -> str:
    # Accounts created by hand get a local identity token
    return f"local_{secrets.token_urlsafe(16)}"


@router.get("", response_model=List[schemas.UserResponse])
def list_users(db: Session = Depends(get_db), current_user: User = Depends(admin_required)):
    return crud.get_all_users(db)


@router.post("", response_model=schemas.UserCreatedResponse)
def create_user(
    payload: schemas.UserCreate,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(admin_required),
):
    open_id = _new_open_id()
    crud.upsert_user(
        db,
        open_id,
        name=payload.name,
        email=payload.email,
        login_method="manual",
        role=payload.role,
    )
    write_log(db, user_id=current_user.id, action="USER_CREATE", resource="users",
              ip=client_ip(request), meta={"open_id": open_id, "role": payload.role})
    return {"success": True, "open_id": open_id, "password": payload.password}


@router.patch("/{user_id}", response_model=SuccessResponse)
def update_user(
    user_id: int,
    payload: schemas.UserUpdate,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(admin_required),
):
    data = changes(payload)
    crud.update_user(db, user_id, data)
    write_log(db, user_id=current_user.id, action="USER_UPDATE", resource="users",
              ip=client_ip(request), meta={"id": user_id, "fields": sorted(data)})
    return {"success": True}


@router.delete("/{user_id}", response_model=SuccessResponse)
def delete_user(
    user_id: int,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(admin_required),
):
    crud.delete_user(db, user_id)
    write_log(db, user_id=current_user.id, action="USER_DELETE", resource="users",
              ip=client_ip(request), meta={"id": user_id})
    return {"success": True}
