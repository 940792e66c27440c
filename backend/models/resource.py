# backend/models/resource.py
from sqlalchemy import Column, Integer, String, Text, DateTime, CheckConstraint, func
from database import Base

# Shared material for the band: recordings, scores, videos
class Resource(Base):
    __tablename__ = "resources"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    type = Column(String(16), CheckConstraint("type IN ('audio', 'document', 'video')"), nullable=False)
    url = Column(Text, nullable=False)
    created_by = Column(Integer, nullable=False)

    created_at = Column(DateTime, nullable=False, server_default=func.now(), index=True)
    updated_at = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())
