import uuid
from typing import Optional

from fastapi import Depends, Security
from fastapi.security import APIKeyHeader
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from contact_api import config, crud, models
from contact_api.db import get_db
from contact_api.errors import Unauthorized

TOKEN_HEADER = "X-API-TOKEN"

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=config.BCRYPT_ROUNDS)
api_token_scheme = APIKeyHeader(name=TOKEN_HEADER, auto_error=False)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def generate_token() -> str:
    """
    Генерує непрозорий токен сесії, що видається під час логіну.

    :return: Токен у вигляді рядка.
    """
    return str(uuid.uuid4())


def get_current_user(token: Optional[str] = Security(api_token_scheme), db: Session = Depends(get_db)) -> models.User:
    """
    Отримує поточного користувача за токеном із заголовка ``X-API-TOKEN``.

    :param token: Токен користувача з заголовка запиту.
    :param db: Сесія для роботи з базою даних.
    :return: Користувач, якому належить токен.
    :raises Unauthorized: Якщо токен відсутній або не належить жодному користувачу.
    """
    if not token:
        raise Unauthorized()
    user = crud.get_user_by_token(db, token)
    if user is None:
        raise Unauthorized()
    return user
