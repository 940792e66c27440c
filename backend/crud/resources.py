# backend/crud/resources.py
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from crud.base import read_accessor, write_accessor
from models.resource import Resource


@write_accessor
def create_resource(db: Session, data: Dict[str, Any]) -> int:
    resource = Resource(**data)
    db.add(resource)
    db.commit()
    db.refresh(resource)
    return resource.id


@read_accessor(list)
def get_all_resources(db: Session) -> List[Resource]:
    return db.query(Resource).order_by(Resource.created_at.desc(), Resource.id.desc()).all()


@write_accessor
def update_resource(db: Session, resource_id: int, data: Dict[str, Any]) -> None:
    if not data:
        return
    db.query(Resource).filter(Resource.id == resource_id).update(data, synchronize_session=False)
    db.commit()


@write_accessor
def delete_resource(db: Session, resource_id: int) -> None:
    db.query(Resource).filter(Resource.id == resource_id).delete(synchronize_session=False)
    db.commit()
