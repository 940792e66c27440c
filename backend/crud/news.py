# backend/crud/news.py
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from crud.base import read_accessor, write_accessor
from models.news import News


@write_accessor
def create_news(db: Session, data: Dict[str, Any]) -> int:
    item = News(**data)
    db.add(item)
    db.commit()
    db.refresh(item)
    return item.id


@read_accessor(list)
def get_all_news(db: Session) -> List[News]:
    return db.query(News).order_by(News.created_at.desc(), News.id.desc()).all()


@read_accessor(list)
def get_urgent_news(db: Session) -> List[News]:
    """At most one row: the latest item flagged as urgent."""
    return (
        db.query(News)
        .filter(News.is_urgent == 1)
        .order_by(News.created_at.desc(), News.id.desc())
        .limit(1)
        .all()
    )


@write_accessor
def update_news(db: Session, news_id: int, data: Dict[str, Any]) -> None:
    if not data:
        return
    db.query(News).filter(News.id == news_id).update(data, synchronize_session=False)
    db.commit()


@write_accessor
def delete_news(db: Session, news_id: int) -> None:
    db.query(News).filter(News.id == news_id).delete(synchronize_session=False)
    db.commit()
