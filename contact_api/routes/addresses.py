from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Path
from sqlalchemy.orm import Session

from contact_api import models, schemas
from contact_api.auth import get_current_user
from contact_api.db import get_db
from contact_api.services import address_service

router = APIRouter(prefix="/api/contacts/{contact_id}/addresses", tags=["addresses"])


@router.post("", response_model=schemas.WebResponse[schemas.AddressResponse])
def create_address(contact_id: int = Path(gt=0, le=schemas.MAX_ID), payload: Optional[Dict[str, Any]] = Body(None),
                   db: Session = Depends(get_db), current_user: models.User = Depends(get_current_user)):
    """
    Додає адресу до контакту поточного користувача.

    :param contact_id: Ідентифікатор контакту.
    :param payload: Дані адреси (street?, city?, province?, country, postal_code).
    :return: Створена адреса.
    """
    payload = {**(payload or {}), "contact_id": contact_id}
    return {"data": address_service.create(db, current_user, payload)}


@router.get("", response_model=schemas.WebResponse[List[schemas.AddressResponse]])
def list_addresses(contact_id: int = Path(gt=0, le=schemas.MAX_ID), db: Session = Depends(get_db),
                   current_user: models.User = Depends(get_current_user)):
    return {"data": address_service.list_addresses(db, current_user, contact_id)}


@router.get("/{address_id}", response_model=schemas.WebResponse[schemas.AddressResponse])
def get_address(contact_id: int = Path(gt=0, le=schemas.MAX_ID), address_id: int = Path(gt=0, le=schemas.MAX_ID), db: Session = Depends(get_db),
                current_user: models.User = Depends(get_current_user)):
    return {"data": address_service.get(db, current_user, contact_id, address_id)}


@router.put("/{address_id}", response_model=schemas.WebResponse[schemas.AddressResponse])
def update_address(contact_id: int = Path(gt=0, le=schemas.MAX_ID), address_id: int = Path(gt=0, le=schemas.MAX_ID),
                   payload: Optional[Dict[str, Any]] = Body(None), db: Session = Depends(get_db),
                   current_user: models.User = Depends(get_current_user)):
    payload = {**(payload or {}), "id": address_id, "contact_id": contact_id}
    return {"data": address_service.update(db, current_user, payload)}


@router.delete("/{address_id}", response_model=schemas.WebResponse[str])
def remove_address(contact_id: int = Path(gt=0, le=schemas.MAX_ID), address_id: int = Path(gt=0, le=schemas.MAX_ID), db: Session = Depends(get_db),
                   current_user: models.User = Depends(get_current_user)):
    address_service.remove(db, current_user, contact_id, address_id)
    return {"data": "OK"}
