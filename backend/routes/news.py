# backend/routes/news.py
from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from crud import news as crud
from database import get_db
from models.users import User
from schemas import news as schemas
from schemas.common import CreatedResponse, SuccessResponse, changes
from utils.audit import client_ip, write_log
from utils.tokenJWT import admin_required, get_current_user

router = APIRouter(prefix="/news", tags=["News"])


@router.get("", response_model=List[schemas.NewsResponse])
def list_news(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return crud.get_all_news(db)


# Zero or one item: the latest urgent announcement
@router.get("/urgent", response_model=List[schemas.NewsResponse])
def urgent_news(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return crud.get_urgent_news(db)


@router.post("", response_model=CreatedResponse)
def create_news(
    payload: schemas.NewsCreate,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(admin_required),
):
    news_id = crud.create_news(db, {
        "title": payload.title,
        "content": payload.content,
        "is_urgent": 1 if payload.is_urgent else 0,
        "created_by": current_user.id,
    })
    write_log(db, user_id=current_user.id, action="NEWS_CREATE", resource="news",
              ip=client_ip(request), meta={"id": news_id, "urgent": payload.is_urgent})
    return {"success": True, "id": news_id}


@router.patch("/{news_id}", response_model=SuccessResponse)
def update_news(
    news_id: int,
    payload: schemas.NewsUpdate,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(admin_required),
):
    data = changes(payload)
    # Urgency is only rewritten when the flag was sent
    if "is_urgent" in data:
        data["is_urgent"] = 1 if data["is_urgent"] else 0
    crud.update_news(db, news_id, data)
    write_log(db, user_id=current_user.id, action="NEWS_UPDATE", resource="news",
              ip=client_ip(request), meta={"id": news_id, "fields": sorted(data)})
    return {"success": True}


@router.delete("/{news_id}", response_model=SuccessResponse)
def delete_news(
    news_id: int,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(admin_required),
):
    crud.delete_news(db, news_id)
    write_log(db, user_id=current_user.id, action="NEWS_DELETE", resource="news",
              ip=client_ip(request), meta={"id": news_id})
    return {"success": True}
