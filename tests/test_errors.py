from fastapi import FastAPI
from fastapi.testclient import TestClient

from contact_api import errors


def make_app():
    app = FastAPI()
    errors.register_exception_handlers(app)

    @app.get("/conflict")
    def conflict():
        raise errors.Conflict("Username already exists")

    @app.get("/not-found")
    def not_found():
        raise errors.NotFound("contact not found")

    @app.get("/boom")
    def boom():
        raise RuntimeError("database password is hunter2")

    return app


def test_conflict_envelope():
    response = TestClient(make_app()).get("/conflict")

    assert response.status_code == 409
    assert response.json() == {"errors": "Username already exists"}


def test_not_found_envelope():
    response = TestClient(make_app()).get("/not-found")

    assert response.status_code == 404
    assert response.json() == {"errors": "contact not found"}


def test_unhandled_error_does_not_leak_details():
    client = TestClient(make_app(), raise_server_exceptions=False)

    response = client.get("/boom")

    assert response.status_code == 500
    assert response.json() == {"errors": "Internal server error"}


def test_unknown_route_uses_envelope():
    response = TestClient(make_app()).get("/missing")

    assert response.status_code == 404
    assert response.json() == {"errors": "Not Found"}
