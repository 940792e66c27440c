# backend/schemas/resource.py
from datetime import datetime
from typing import Annotated, Literal, Optional

from pydantic import AfterValidator, AnyUrl, Field, TypeAdapter, ValidationError

from schemas.common import ORMBase

ResourceType = Literal["audio", "document", "video"]

_url_adapter = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    # Validate the format but keep the exact string the admin entered
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise ValueError("Invalid url")
    return value


ResourceUrl = Annotated[str, AfterValidator(_check_url)]


class ResourceCreate(ORMBase):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    type: ResourceType
    url: ResourceUrl


class ResourceUpdate(ORMBase):
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    type: Optional[ResourceType] = None
    url: Optional[ResourceUrl] = None


class ResourceResponse(ORMBase):
    id: int
    title: str
    description: Optional[str] = None
    type: ResourceType
    url: str
    created_by: int
    created_at: datetime
    updated_at: datetime
