# backend/routes/attendances.py
from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from crud import attendances as crud
from database import get_db
from models.users import User
from schemas import attendance as schemas
from schemas.common import SuccessResponse
from utils.audit import client_ip, write_log
from utils.tokenJWT import get_current_user

router = APIRouter(prefix="/attendances", tags=["Attendances"])


# The caller's own answers across all events
@router.get("/me", response_model=List[schemas.AttendanceResponse])
def my_attendances(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return crud.get_user_attendances(db, current_user.id)


# Roster for one event
@router.get("/event/{event_id}", response_model=List[schemas.AttendanceResponse])
def attendances_by_event(event_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return crud.get_attendances_by_event(db, event_id)


# Confirm, decline or reset the caller's attendance; the user always comes from the session
@router.put("", response_model=SuccessResponse)
def upsert_attendance(
    payload: schemas.AttendanceUpsert,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    crud.upsert_attendance(db, payload.event_id, current_user.id, payload.status)
    write_log(db, user_id=current_user.id, action="ATTENDANCE_UPSERT", resource="attendances",
              ip=client_ip(request), meta={"event_id": payload.event_id, "status": payload.status})
    return {"success": True}
