# backend/models/event.py
from sqlalchemy import Column, Integer, String, Text, DateTime, func
from database import Base

# Represents a gig or rehearsal the band has to attend
class Event(Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    date = Column(DateTime, nullable=False, index=True)

    # Free-form times as the admin types them (e.g. "20:00")
    show_time = Column(String(50), nullable=False)
    sound_check_time = Column(String(50), nullable=True)

    location = Column(Text, nullable=False)
    location_map_url = Column(Text, nullable=True)
    uniform_description = Column(Text, nullable=True)
    uniform_image_url = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())
