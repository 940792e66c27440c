# backend/routes/logs.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional, Any
from datetime import datetime

from crud import logs as logs_crud
from database import get_db
from models.users import User
from schemas.common import ORMBase
from utils.tokenJWT import admin_required

router = APIRouter(prefix="/logs", tags=["Logs"])

# --- SCHEMAS ---
class LogResponse(ORMBase):
    id: int
    user_id: Optional[int] = None
    action: str
    resource: str
    status: str
    ip: Optional[str] = None
    ts: datetime
    meta: Optional[Any] = None

class LogPage(ORMBase):
    items: List[LogResponse]
    total: int
    page: int
    page_size: int

# --- ENDPOINT ---
@router.get("", response_model=LogPage)
def get_logs(
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100, alias="pageSize"),
    action: Optional[str] = Query(None, description="Filter by action"),
    user_id: Optional[int] = Query(None, alias="userId", description="Filter by user id"),
    resource: Optional[str] = Query(None, description="Filter by resource"),
    db: Session = Depends(get_db),
    current_user: User = Depends(admin_required),
):
    logs, total = logs_crud.get_logs_page(
        db, page, page_size, action=action, user_id=user_id, resource=resource,
    )
    return {
        "items": logs,
        "total": total,
        "page": page,
        "page_size": page_size,
    }
