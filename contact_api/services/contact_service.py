import logging
import math

from sqlalchemy.orm import Session

from contact_api import crud, models, schemas
from contact_api.errors import NotFound
from contact_api.validation import validate

logger = logging.getLogger(__name__)


def check_contact_must_exist(db: Session, username: str, contact_id: int) -> models.Contact:
    """
    Шукає контакт одночасно за id та власником.

    Чужий контакт не відрізняється від неіснуючого: в обох випадках 404.

    :param db: Сесія бази даних.
    :param username: Власник контакту.
    :param contact_id: Ідентифікатор контакту.
    :return: Знайдений контакт.
    :raises NotFound: Якщо контакт відсутній або належить іншому користувачу.
    """
    contact = crud.get_contact(db, contact_id, username)
    if contact is None:
        raise NotFound("contact not found")
    return contact


def create(db: Session, user: models.User, payload) -> schemas.ContactResponse:
    request = validate(schemas.CreateContactRequest, payload)
    contact = crud.create_contact(db, request.model_dump(), username=user.username)
    logger.info("User %s created contact %s", user.username, contact.id)
    return schemas.ContactResponse.model_validate(contact)


def get(db: Session, user: models.User, contact_id: int) -> schemas.ContactResponse:
    contact = check_contact_must_exist(db, user.username, contact_id)
    return schemas.ContactResponse.model_validate(contact)


def update(db: Session, user: models.User, payload) -> schemas.ContactResponse:
    request = validate(schemas.UpdateContactRequest, payload)
    contact = check_contact_must_exist(db, user.username, request.id)

    contact = crud.update_contact(db, contact, request.model_dump(exclude={"id"}))
    logger.info("User %s updated contact %s", user.username, contact.id)
    return schemas.ContactResponse.model_validate(contact)


def remove(db: Session, user: models.User, contact_id: int) -> schemas.ContactResponse:
    contact = check_contact_must_exist(db, user.username, contact_id)
    response = schemas.ContactResponse.model_validate(contact)

    crud.delete_contact(db, contact)
    logger.info("User %s removed contact %s", user.username, contact_id)
    return response


def search(db: Session, user: models.User, params) -> schemas.PageResponse[schemas.ContactResponse]:
    """
    Шукає контакти поточного користувача з пагінацією.

    Фільтри ``name``, ``email`` та ``phone`` поєднуються через AND.
    Сторінка за межами ``total_page`` повертає порожній список, а не помилку.

    :param db: Сесія бази даних.
    :param user: Поточний користувач.
    :param params: Сирі параметри запиту (name?, email?, phone?, page?, size?).
    :return: Сторінка контактів разом із блоком ``paging``.
    """
    request = validate(schemas.SearchContactRequest, params)

    filters = crud.contact_filters(
        user.username, name=request.name, email=request.email, phone=request.phone
    )
    total = crud.count_contacts(db, filters)
    contacts = crud.search_contacts(
        db, filters, skip=(request.page - 1) * request.size, limit=request.size
    )

    return schemas.PageResponse[schemas.ContactResponse](
        data=[schemas.ContactResponse.model_validate(contact) for contact in contacts],
        paging=schemas.Paging(
            current_page=request.page,
            total_page=math.ceil(total / request.size),
            size=request.size,
        ),
    )
