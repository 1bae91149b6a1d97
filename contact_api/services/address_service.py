import logging
from typing import List

from sqlalchemy.orm import Session

from contact_api import crud, models, schemas
from contact_api.errors import NotFound
from contact_api.services.contact_service import check_contact_must_exist
from contact_api.validation import validate

logger = logging.getLogger(__name__)


def check_address_must_exist(db: Session, contact_id: int, address_id: int) -> models.Address:
    address = crud.get_address(db, address_id, contact_id)
    if address is None:
        raise NotFound("address not found")
    return address


def create(db: Session, user: models.User, payload) -> schemas.AddressResponse:
    request = validate(schemas.CreateAddressRequest, payload)
    check_contact_must_exist(db, user.username, request.contact_id)

    address = crud.create_address(db, request.model_dump())
    logger.info("User %s added address %s to contact %s", user.username, address.id, request.contact_id)
    return schemas.AddressResponse.model_validate(address)


def get(db: Session, user: models.User, contact_id: int, address_id: int) -> schemas.AddressResponse:
    check_contact_must_exist(db, user.username, contact_id)
    address = check_address_must_exist(db, contact_id, address_id)
    return schemas.AddressResponse.model_validate(address)


def update(db: Session, user: models.User, payload) -> schemas.AddressResponse:
    request = validate(schemas.UpdateAddressRequest, payload)
    check_contact_must_exist(db, user.username, request.contact_id)
    address = check_address_must_exist(db, request.contact_id, request.id)

    address = crud.update_address(db, address, request.model_dump(exclude={"id", "contact_id"}))
    logger.info("User %s updated address %s", user.username, address.id)
    return schemas.AddressResponse.model_validate(address)


def remove(db: Session, user: models.User, contact_id: int, address_id: int) -> schemas.AddressResponse:
    check_contact_must_exist(db, user.username, contact_id)
    address = check_address_must_exist(db, contact_id, address_id)
    response = schemas.AddressResponse.model_validate(address)

    crud.delete_address(db, address)
    logger.info("User %s removed address %s", user.username, address_id)
    return response


def list_addresses(db: Session, user: models.User, contact_id: int) -> List[schemas.AddressResponse]:
    check_contact_must_exist(db, user.username, contact_id)
    return [schemas.AddressResponse.model_validate(address) for address in crud.get_addresses(db, contact_id)]
