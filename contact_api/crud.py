from typing import Any, Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from contact_api import models


# users

def get_user(db: Session, username: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.username == username).first()


def count_users(db: Session, username: str) -> int:
    return db.query(models.User).filter(models.User.username == username).count()


def get_user_by_token(db: Session, token: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.token == token).first()


def create_user(db: Session, username: str, name: str, hashed_password: str) -> models.User:
    db_user = models.User(username=username, name=name, password=hashed_password)
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user


def update_user(db: Session, user: models.User, values: Dict[str, Any]) -> models.User:
    for key, value in values.items():
        setattr(user, key, value)
    db.commit()
    db.refresh(user)
    return user


# contacts

def create_contact(db: Session, values: Dict[str, Any], username: str) -> models.Contact:
    db_contact = models.Contact(**values, username=username)
    db.add(db_contact)
    db.commit()
    db.refresh(db_contact)
    return db_contact


def get_contact(db: Session, contact_id: int, username: str) -> Optional[models.Contact]:
    return (
        db.query(models.Contact)
        .filter(models.Contact.id == contact_id, models.Contact.username == username)
        .first()
    )


def update_contact(db: Session, contact: models.Contact, values: Dict[str, Any]) -> models.Contact:
    for key, value in values.items():
        setattr(contact, key, value)
    db.commit()
    db.refresh(contact)
    return contact


def delete_contact(db: Session, contact: models.Contact) -> None:
    db.delete(contact)
    db.commit()


def contact_filters(username: str, name: Optional[str] = None, email: Optional[str] = None,
                    phone: Optional[str] = None) -> list:
    filters = [models.Contact.username == username]
    if name:
        full_name = models.Contact.first_name + " " + func.coalesce(models.Contact.last_name, "")
        filters.append(full_name.icontains(name, autoescape=True))
    if email:
        filters.append(models.Contact.email.icontains(email, autoescape=True))
    if phone:
        filters.append(models.Contact.phone.contains(phone, autoescape=True))
    return filters


def count_contacts(db: Session, filters: list) -> int:
    return db.query(models.Contact).filter(*filters).count()


def search_contacts(db: Session, filters: list, skip: int, limit: int) -> List[models.Contact]:
    return (
        db.query(models.Contact)
        .filter(*filters)
        .order_by(models.Contact.id)
        .offset(skip)
        .limit(limit)
        .all()
    )


# addresses

def create_address(db: Session, values: Dict[str, Any]) -> models.Address:
    db_address = models.Address(**values)
    db.add(db_address)
    db.commit()
    db.refresh(db_address)
    return db_address


def get_address(db: Session, address_id: int, contact_id: int) -> Optional[models.Address]:
    return (
        db.query(models.Address)
        .filter(models.Address.id == address_id, models.Address.contact_id == contact_id)
        .first()
    )


def get_addresses(db: Session, contact_id: int) -> List[models.Address]:
    return (
        db.query(models.Address)
        .filter(models.Address.contact_id == contact_id)
        .order_by(models.Address.id)
        .all()
    )


def update_address(db: Session, address: models.Address, values: Dict[str, Any]) -> models.Address:
    for key, value in values.items():
        setattr(address, key, value)
    db.commit()
    db.refresh(address)
    return address


def delete_address(db: Session, address: models.Address) -> None:
    db.delete(address)
    db.commit()
