from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Path
from sqlalchemy.orm import Session

from contact_api import models, schemas
from contact_api.auth import get_current_user
from contact_api.db import get_db
from contact_api.services import contact_service

router = APIRouter(prefix="/api/contacts", tags=["contacts"])


@router.post("", response_model=schemas.WebResponse[schemas.ContactResponse])
def create_contact(payload: Optional[Dict[str, Any]] = Body(None), db: Session = Depends(get_db),
                   current_user: models.User = Depends(get_current_user)):
    """
    Створює новий контакт для поточного користувача.

    :param payload: Дані контакту (first_name, last_name?, email?, phone?).
    :param db: Сесія бази даних.
    :param current_user: Поточний користувач, який додає контакт.
    :return: Створений контакт разом з id.
    """
    return {"data": contact_service.create(db, current_user, payload)}


@router.get("/{contact_id}", response_model=schemas.WebResponse[schemas.ContactResponse])
def get_contact(contact_id: int = Path(gt=0, le=schemas.MAX_ID), db: Session = Depends(get_db),
                current_user: models.User = Depends(get_current_user)):
    return {"data": contact_service.get(db, current_user, contact_id)}


@router.put("/{contact_id}", response_model=schemas.WebResponse[schemas.ContactResponse])
def update_contact(contact_id: int = Path(gt=0, le=schemas.MAX_ID), payload: Optional[Dict[str, Any]] = Body(None),
                   db: Session = Depends(get_db), current_user: models.User = Depends(get_current_user)):
    payload = {**(payload or {}), "id": contact_id}
    return {"data": contact_service.update(db, current_user, payload)}


@router.delete("/{contact_id}", response_model=schemas.WebResponse[str])
def remove_contact(contact_id: int = Path(gt=0, le=schemas.MAX_ID), db: Session = Depends(get_db),
                   current_user: models.User = Depends(get_current_user)):
    contact_service.remove(db, current_user, contact_id)
    return {"data": "OK"}


@router.get("", response_model=schemas.PageResponse[schemas.ContactResponse])
def search_contacts(name: Optional[str] = None, email: Optional[str] = None, phone: Optional[str] = None,
                    page: Optional[str] = None, size: Optional[str] = None,
                    db: Session = Depends(get_db), current_user: models.User = Depends(get_current_user)):
    """
    Шукає контакти поточного користувача.

    Параметри page та size приймаються як рядки й перевіряються разом з іншими
    полями, тож нечислові значення дають 400 з переліком помилок. Порожні
    параметри (``?name=``) вважаються відсутніми.

    :return: Список контактів і блок ``paging``.
    """
    params = {
        key: value
        for key, value in {"name": name, "email": email, "phone": phone, "page": page, "size": size}.items()
        if value not in (None, "")
    }
    return contact_service.search(db, current_user, params)
