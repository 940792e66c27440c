# backend/schemas/news.py
from datetime import datetime
from typing import Optional

from pydantic import Field

from schemas.common import ORMBase


class NewsCreate(ORMBase):
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    is_urgent: bool


class NewsUpdate(ORMBase):
    title: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = Field(None, min_length=1)
    is_urgent: Optional[bool] = None


class NewsResponse(ORMBase):
    id: int
    title: str
    content: str
    # Stored as 0/1, exposed as a boolean
    is_urgent: bool
    created_by: int
    created_at: datetime
    updated_at: datetime
