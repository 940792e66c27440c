# backend/schemas/event.py
from datetime import datetime, timezone
from typing import Annotated, Optional

from pydantic import AfterValidator, Field

from schemas.common import ORMBase


def _to_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


# Aware datetimes are stored as naive UTC; naive ones are taken as UTC already
EventDate = Annotated[datetime, AfterValidator(_to_naive_utc)]


# Shared optional details of an event
class EventDetails(ORMBase):
    sound_check_time: Optional[str] = None
    location_map_url: Optional[str] = None
    uniform_description: Optional[str] = None
    uniform_image_url: Optional[str] = None
    notes: Optional[str] = None


class EventCreate(EventDetails):
    title: str = Field(min_length=1)
    date: EventDate
    show_time: str
    location: str = Field(min_length=1)


# Schema for partial event updates - all fields optional
class EventUpdate(EventDetails):
    title: Optional[str] = Field(None, min_length=1)
    date: Optional[EventDate] = None
    show_time: Optional[str] = None
    location: Optional[str] = None


class EventResponse(EventDetails):
    id: int
    title: str
    date: datetime
    show_time: str
    location: str
    created_at: datetime
    updated_at: datetime
