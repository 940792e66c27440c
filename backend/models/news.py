# backend/models/news.py
from sqlalchemy import Column, Integer, String, Text, DateTime, CheckConstraint, func
from database import Base

# Represents an announcement; urgent items are pinned on the dashboard
class News(Base):
    __tablename__ = "news"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    is_urgent = Column(Integer, CheckConstraint("is_urgent IN (0, 1)"), nullable=False, default=0, server_default="0")
    created_by = Column(Integer, nullable=False)  # users.id, not enforced

    created_at = Column(DateTime, nullable=False, server_default=func.now(), index=True)
    updated_at = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())
