# backend/schemas/common.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


# Base configuration: ORM compatible, camelCase on the wire, snake_case in Python
class ORMBase(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


# Acknowledgement returned by update/delete/upsert procedures
class SuccessResponse(BaseModel):
    success: bool = True


# Acknowledgement returned by create procedures
class CreatedResponse(SuccessResponse):
    id: int


def changes(payload: BaseModel) -> dict:
    """Fields the caller actually sent, without explicit nulls."""
    return payload.model_dump(exclude_unset=True, exclude_none=True)
