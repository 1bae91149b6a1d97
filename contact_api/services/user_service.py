import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from contact_api import auth, crud, models, schemas
from contact_api.errors import Conflict, Unauthorized
from contact_api.validation import validate

logger = logging.getLogger(__name__)

LOGIN_FAILED = "Username or password is wrong"


def register(db: Session, payload) -> schemas.UserResponse:
    """
    Реєструє нового користувача з хешованим паролем.

    :param db: Сесія бази даних.
    :param payload: Сирі дані запиту (username, password, name).
    :return: Інформація про нового користувача без пароля та токена.
    :raises ValidationError: Якщо дані запиту некоректні.
    :raises Conflict: Якщо користувач із таким username уже існує.
    """
    request = validate(schemas.RegisterUserRequest, payload)

    if crud.count_users(db, request.username) > 0:
        raise Conflict("Username already exists")

    try:
        user = crud.create_user(
            db,
            username=request.username,
            name=request.name,
            hashed_password=auth.hash_password(request.password),
        )
    except IntegrityError:
        db.rollback()
        raise Conflict("Username already exists")

    logger.info("Registered user %s", user.username)
    return schemas.UserResponse.model_validate(user)


def login(db: Session, payload) -> schemas.LoginResponse:
    """
    Логін користувача: перевіряє пароль і видає новий токен.

    Неправильний username і неправильний пароль дають однакову відповідь,
    щоб не розкривати, які користувачі існують.

    :param db: Сесія бази даних.
    :param payload: Сирі дані запиту (username, password).
    :return: Користувач разом із токеном.
    :raises Unauthorized: Якщо облікові дані не співпадають.
    """
    request = validate(schemas.LoginUserRequest, payload)

    user = crud.get_user(db, request.username)
    if user is None or not auth.verify_password(request.password, user.password):
        logger.info("Failed login attempt")
        raise Unauthorized(LOGIN_FAILED)

    user = crud.update_user(db, user, {"token": auth.generate_token()})
    logger.info("User %s logged in", user.username)
    return schemas.LoginResponse.model_validate(user)


def get(user: models.User) -> schemas.UserResponse:
    return schemas.UserResponse.model_validate(user)


def update(db: Session, user: models.User, payload) -> schemas.UserResponse:
    """
    Оновлює ім'я та/або пароль поточного користувача.

    :param db: Сесія бази даних.
    :param user: Поточний користувач.
    :param payload: Сирі дані запиту (name?, password?).
    :return: Оновлений користувач.
    """
    request = validate(schemas.UpdateUserRequest, payload)

    values = {}
    if request.name is not None:
        values["name"] = request.name
    if request.password is not None:
        values["password"] = auth.hash_password(request.password)

    if values:
        user = crud.update_user(db, user, values)
        logger.info("Updated user %s: %s", user.username, ", ".join(sorted(values)))
    return schemas.UserResponse.model_validate(user)


def logout(db: Session, user: models.User) -> str:
    crud.update_user(db, user, {"token": None})
    logger.info("User %s logged out", user.username)
    return "OK"
