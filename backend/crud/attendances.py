# backend/crud/attendances.py
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from crud.base import insert_or_update, read_accessor, write_accessor
from models.attendance import Attendance


@write_accessor
def upsert_attendance(db: Session, event_id: int, user_id: int, status: str) -> None:
    insert_or_update(
        db,
        Attendance,
        {"event_id": event_id, "user_id": user_id, "status": status},
        ["event_id", "user_id"],
        {"status": status, "updated_at": func.now()},
    )


@read_accessor(list)
def get_attendances_by_event(db: Session, event_id: int) -> List[Attendance]:
    return db.query(Attendance).filter(Attendance.event_id == event_id).order_by(Attendance.id).all()


@read_accessor(lambda: None)
def get_attendance_by_user_and_event(db: Session, user_id: int, event_id: int) -> Optional[Attendance]:
    return (
        db.query(Attendance)
        .filter(Attendance.user_id == user_id, Attendance.event_id == event_id)
        .first()
    )


@read_accessor(list)
def get_user_attendances(db: Session, user_id: int) -> List[Attendance]:
    return db.query(Attendance).filter(Attendance.user_id == user_id).order_by(Attendance.id).all()
