# backend/routes/resources.py
from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from crud import resources as crud
from database import get_db
from models.users import User
from schemas import resource as schemas
from schemas.common import CreatedResponse, SuccessResponse, changes
from utils.audit import client_ip, write_log
from utils.tokenJWT import admin_required, get_current_user

router = APIRouter(prefix="/resources", tags=["Resources"])


@router.get("", response_model=List[schemas.ResourceResponse])
def list_resources(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return crud.get_all_resources(db)


@router.post("", response_model=CreatedResponse)
def create_resource(
    payload: schemas.ResourceCreate,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(admin_required),
):
    data = payload.model_dump(exclude_none=True)
    data["created_by"] = current_user.id
    resource_id = crud.create_resource(db, data)
    write_log(db, user_id=current_user.id, action="RESOURCE_CREATE", resource="resources",
              ip=client_ip(request), meta={"id": resource_id, "type": payload.type})
    return {"success": True, "id": resource_id}


@router.patch("/{resource_id}", response_model=SuccessResponse)
def update_resource(
    resource_id: int,
    payload: schemas.ResourceUpdate,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(admin_required),
):
    data = changes(payload)
    crud.update_resource(db, resource_id, data)
    write_log(db, user_id=current_user.id, action="RESOURCE_UPDATE", resource="resources",
              ip=client_ip(request), meta={"id": resource_id, "fields": sorted(data)})
    return {"success": True}


@router.delete("/{resource_id}", response_model=SuccessResponse)
def delete_resource(
    resource_id: int,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(admin_required),
):
    crud.delete_resource(db, resource_id)
    write_log(db, user_id=current_user.id, action="RESOURCE_DELETE", resource="resources",
              ip=client_ip(request), meta={"id": resource_id})
    return {"success": True}
