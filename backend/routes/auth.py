# backend/routes/auth.py
from typing import Optional

from fastapi import APIRouter, Depends, Response

from config import settings
from models.users import User
from schemas import user as schemas
from schemas.common import SuccessResponse
from utils.tokenJWT import get_optional_user

router = APIRouter(prefix="/auth", tags=["Auth"])


# Current session user, or null for anonymous callers
@router.get("/me", response_model=Optional[schemas.UserResponse])
def me(current_user: Optional[User] = Depends(get_optional_user)):
    return current_user


# Drop the session cookie; bearer tokens are simply discarded by the client
@router.post("/logout", response_model=SuccessResponse)
def logout(response: Response):
    response.delete_cookie(settings.COOKIE_NAME, path="/")
    return {"success": True}
