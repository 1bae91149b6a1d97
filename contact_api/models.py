from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from contact_api.db import Base


class User(Base):
    __tablename__ = "users"

    username = Column(String(100), primary_key=True)
    name = Column(String(100), nullable=False)
    password = Column(String(100), nullable=False)
    token = Column(String(100), unique=True, index=True, nullable=True)

    contacts = relationship("Contact", back_populates="owner")


class Contact(Base):
    __tablename__ = "contacts"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=True)
    email = Column(String(100), nullable=True)
    phone = Column(String(20), nullable=True)
    username = Column(String(100), ForeignKey("users.username"), nullable=False, index=True)

    owner = relationship("User", back_populates="contacts")
    addresses = relationship("Address", back_populates="contact", cascade="all, delete-orphan")


class Address(Base):
    __tablename__ = "addresses"

    id = Column(Integer, primary_key=True, index=True)
    street = Column(String(255), nullable=True)
    city = Column(String(100), nullable=True)
    province = Column(String(100), nullable=True)
    country = Column(String(100), nullable=False)
    postal_code = Column(String(10), nullable=False)
    contact_id = Column(Integer, ForeignKey("contacts.id"), nullable=False, index=True)

    contact = relationship("Contact", back_populates="addresses")
