# backend/routes/events.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from crud import events as crud
from database import get_db
from models.users import User
from schemas import event as schemas
from schemas.common import CreatedResponse, SuccessResponse, changes
from utils.audit import client_ip, write_log
from utils.tokenJWT import admin_required, get_current_user

router = APIRouter(prefix="/events", tags=["Events"])


# All events, earliest first
@router.get("", response_model=List[schemas.EventResponse])
def list_events(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return crud.get_all_events(db)


# Events from now on, earliest first
@router.get("/upcoming", response_model=List[schemas.EventResponse])
def upcoming_events(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return crud.get_upcoming_events(db)


@router.get("/{event_id}", response_model=Optional[schemas.EventResponse])
def get_event(event_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return crud.get_event_by_id(db, event_id)


@router.post("", response_model=CreatedResponse)
def create_event(
    payload: schemas.EventCreate,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(admin_required),
):
    event_id = crud.create_event(db, payload.model_dump(exclude_none=True))
    write_log(db, user_id=current_user.id, action="EVENT_CREATE", resource="events",
              ip=client_ip(request), meta={"id": event_id})
    return {"success": True, "id": event_id}


@router.patch("/{event_id}", response_model=SuccessResponse)
def update_event(
    event_id: int,
    payload: schemas.EventUpdate,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(admin_required),
):
    data = changes(payload)
    crud.update_event(db, event_id, data)
    write_log(db, user_id=current_user.id, action="EVENT_UPDATE", resource="events",
              ip=client_ip(request), meta={"id": event_id, "fields": sorted(data)})
    return {"success": True}


@router.delete("/{event_id}", response_model=SuccessResponse)
def delete_event(
    event_id: int,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(admin_required),
):
    crud.delete_event(db, event_id)
    write_log(db, user_id=current_user.id, action="EVENT_DELETE", resource="events",
              ip=client_ip(request), meta={"id": event_id})
    return {"success": True}
