# backend/crud/logs.py
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from crud.base import read_accessor
from models.log import Log


@read_accessor(lambda: ([], 0))
def get_logs_page(
    db: Session,
    page: int,
    page_size: int,
    action: Optional[str] = None,
    user_id: Optional[int] = None,
    resource: Optional[str] = None,
) -> Tuple[List[Log], int]:
    """Return one page of audit entries, newest first, and the filtered total."""
    query = db.query(Log)

    if action:
        query = query.filter(Log.action.ilike(f"%{action}%"))
    if user_id is not None:
        query = query.filter(Log.user_id == user_id)
    if resource:
        query = query.filter(Log.resource.ilike(f"%{resource}%"))

    query = query.order_by(Log.ts.desc(), Log.id.desc())

    total = query.count()
    logs = query.offset((page - 1) * page_size).limit(page_size).all()
    return logs, total
