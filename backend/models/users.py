# backend/models/users.py
from sqlalchemy import Column, Integer, String, Text, DateTime, CheckConstraint, func
from database import Base

# Represents a band member account keyed by its external identity token
class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    open_id = Column(String(64), unique=True, nullable=False, index=True)
    name = Column(Text, nullable=True)
    email = Column(String(320), nullable=True)
    login_method = Column(String(64), nullable=True)
    role = Column(String(16), CheckConstraint("role IN ('user', 'admin')"), nullable=False, default="user", server_default="user")

    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())
    last_signed_in = Column(DateTime, nullable=False, server_default=func.now())
