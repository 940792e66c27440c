from pydantic import EmailStr, Field
from typing import Optional, Literal
from datetime import datetime

from schemas.common import ORMBase

UserRole = Literal["admin", "user"]

# Output schema for user profile details
class UserResponse(ORMBase):
    id: int
    open_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    login_method: Optional[str] = None
    role: UserRole
    # Missing only for callers rebuilt from token claims while the store is down
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    last_signed_in: Optional[datetime] = None

# Schema for manual account creation by an admin
class UserCreate(ORMBase):
    name: str = Field(min_length=1)
    email: Optional[EmailStr] = None
    password: str = Field(min_length=6)
    role: UserRole

# Schema for administrative user edits
class UserUpdate(ORMBase):
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    role: Optional[UserRole] = None

# Credentials are relayed to the musician out-of-band; the password is not stored here
class UserCreatedResponse(ORMBase):
    success: bool = True
    open_id: str
    password: str
