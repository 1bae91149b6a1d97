from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from contact_api import models, schemas
from contact_api.auth import get_current_user
from contact_api.db import get_db
from contact_api.services import user_service

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=schemas.WebResponse[schemas.UserResponse])
def register_user(payload: Optional[Dict[str, Any]] = Body(None), db: Session = Depends(get_db)):
    """
    Реєструє нового користувача.

    :param payload: Дані нового користувача (username, password, name).
    :param db: Сесія бази даних.
    :return: Інформація про нового користувача.
    """
    return {"data": user_service.register(db, payload)}


@router.post("/login", response_model=schemas.WebResponse[schemas.LoginResponse])
def login_user(payload: Optional[Dict[str, Any]] = Body(None), db: Session = Depends(get_db)):
    """
    Логін користувача за username та паролем.

    :param payload: Облікові дані користувача.
    :param db: Сесія бази даних.
    :return: Користувач і токен для заголовка ``X-API-TOKEN``.
    """
    return {"data": user_service.login(db, payload)}


@router.get("/current", response_model=schemas.WebResponse[schemas.UserResponse])
def get_user(current_user: models.User = Depends(get_current_user)):
    return {"data": user_service.get(current_user)}


@router.patch("/current", response_model=schemas.WebResponse[schemas.UserResponse])
def update_user(payload: Optional[Dict[str, Any]] = Body(None), db: Session = Depends(get_db),
                current_user: models.User = Depends(get_current_user)):
    return {"data": user_service.update(db, current_user, payload)}


@router.delete("/current", response_model=schemas.WebResponse[str])
def logout_user(db: Session = Depends(get_db), current_user: models.User = Depends(get_current_user)):
    """
    Вихід користувача: токен очищується, подальші запити з ним отримують 401.
    """
    return {"data": user_service.logout(db, current_user)}
