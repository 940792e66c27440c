# backend/schemas/attendance.py
from datetime import datetime
from typing import Literal

from schemas.common import ORMBase

AttendanceStatus = Literal["confirmed", "declined", "pending"]


# The caller is always the attendee; there is no userId field on purpose
class AttendanceUpsert(ORMBase):
    event_id: int
    status: AttendanceStatus


class AttendanceResponse(ORMBase):
    id: int
    event_id: int
    user_id: int
    status: AttendanceStatus
    created_at: datetime
    updated_at: datetime
