# backend/crud/events.py
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from crud.base import read_accessor, utcnow, write_accessor
from models.event import Event


@write_accessor
def create_event(db: Session, data: Dict[str, Any]) -> int:
    event = Event(**data)
    db.add(event)
    db.commit()
    db.refresh(event)
    return event.id


@read_accessor(list)
def get_all_events(db: Session) -> List[Event]:
    return db.query(Event).order_by(Event.date.asc(), Event.id.asc()).all()


@read_accessor(list)
def get_upcoming_events(db: Session) -> List[Event]:
    return (
        db.query(Event)
        .filter(Event.date >= utcnow())
        .order_by(Event.date.asc(), Event.id.asc())
        .all()
    )


@read_accessor(lambda: None)
def get_event_by_id(db: Session, event_id: int) -> Optional[Event]:
    return db.query(Event).filter(Event.id == event_id).first()


@write_accessor
def update_event(db: Session, event_id: int, data: Dict[str, Any]) -> None:
    if not data:
        return
    db.query(Event).filter(Event.id == event_id).update(data, synchronize_session=False)
    db.commit()


@write_accessor
def delete_event(db: Session, event_id: int) -> None:
    # Attendances for the event are intentionally left in place
    db.query(Event).filter(Event.id == event_id).delete(synchronize_session=False)
    db.commit()
