import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from contact_api import auth, models
from contact_api.db import Base, get_db
from contact_api.main import app

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

TOKEN = "test"


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    db_session = TestingSessionLocal()
    yield db_session
    db_session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def test_user(db):
    user = models.User(username="test", name="test", password=auth.hash_password("test"), token=TOKEN)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def other_user(db):
    user = models.User(username="other", name="other", password=auth.hash_password("other"), token="other-token")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def test_contact(db, test_user):
    contact = models.Contact(
        first_name="akmal",
        last_name="fauzi",
        email="akmalfauzi@gmail.com",
        phone="123456",
        username=test_user.username,
    )
    db.add(contact)
    db.commit()
    db.refresh(contact)
    return contact


@pytest.fixture
def test_address(db, test_contact):
    address = models.Address(
        street="Jalan Merdeka",
        city="Jakarta",
        province="DKI Jakarta",
        country="Indonesia",
        postal_code="10110",
        contact_id=test_contact.id,
    )
    db.add(address)
    db.commit()
    db.refresh(address)
    return address


@pytest.fixture
def auth_headers():
    return {"X-API-TOKEN": TOKEN}
