# backend/models/attendance.py
from sqlalchemy import Column, Integer, String, DateTime, CheckConstraint, UniqueConstraint, func
from database import Base

# A member's answer for one event; one row per (event, user) pair
class Attendance(Base):
    __tablename__ = "attendances"
    __table_args__ = (
        UniqueConstraint("event_id", "user_id", name="uq_attendances_event_user"),
    )

    id = Column(Integer, primary_key=True, index=True)
    # Plain id references: deleting an event leaves its attendances in place
    event_id = Column(Integer, nullable=False, index=True)
    user_id = Column(Integer, nullable=False, index=True)
    status = Column(
        String(16),
        CheckConstraint("status IN ('confirmed', 'declined', 'pending')"),
        nullable=False,
        default="pending",
        server_default="pending",
    )

    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())
