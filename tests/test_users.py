from contact_api import auth, crud, models


def test_register_user(client, db):
    user_data = {"username": "test", "password": "test", "name": "test name"}

    response = client.post("/api/users", json=user_data)

    assert response.status_code == 200
    assert response.json() == {"data": {"username": "test", "name": "test name"}}
    user = db.query(models.User).filter(models.User.username == "test").first()
    assert user.password != "test"
    assert auth.verify_password("test", user.password)


def test_register_user_invalid_request(client):
    response = client.post("/api/users", json={"username": "", "password": "", "name": ""})

    assert response.status_code == 400
    fields = {error["field"] for error in response.json()["errors"]}
    assert fields == {"username", "password", "name"}


def test_register_user_without_body(client):
    response = client.post("/api/users")

    assert response.status_code == 400
    assert len(response.json()["errors"]) == 3


def test_register_user_duplicate(client, db, test_user):
    response = client.post("/api/users", json={"username": "test", "password": "secret", "name": "again"})

    assert response.status_code == 409
    assert response.json() == {"errors": "Username already exists"}
    assert db.query(models.User).filter(models.User.username == "test").count() == 1


def test_login_user(client, db, test_user):
    response = client.post("/api/users/login", json={"username": "test", "password": "test"})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["username"] == "test"
    assert data["name"] == "test"
    assert data["token"]
    assert "password" not in data
    db.refresh(test_user)
    assert test_user.token == data["token"]


def test_login_wrong_username_and_wrong_password_look_the_same(client, test_user):
    wrong_username = client.post("/api/users/login", json={"username": "wrong", "password": "test"})
    wrong_password = client.post("/api/users/login", json={"username": "test", "password": "wrong"})

    assert wrong_username.status_code == 401
    assert wrong_password.status_code == 401
    assert wrong_username.json() == wrong_password.json()
    assert wrong_username.json()["errors"]


def test_get_current_user(client, test_user, auth_headers):
    response = client.get("/api/users/current", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {"data": {"username": "test", "name": "test"}}


def test_get_current_user_without_token(client, test_user):
    response = client.get("/api/users/current")

    assert response.status_code == 401
    assert response.json() == {"errors": "Unauthorized"}


def test_get_current_user_wrong_token(client, test_user):
    response = client.get("/api/users/current", headers={"X-API-TOKEN": "salah"})

    assert response.status_code == 401
    assert response.json() == {"errors": "Unauthorized"}


def test_update_user_invalid_request(client, test_user, auth_headers):
    response = client.patch("/api/users/current", json={"password": "", "name": ""}, headers=auth_headers)

    assert response.status_code == 400
    assert len(response.json()["errors"]) == 2


def test_update_user_wrong_token(client, test_user):
    response = client.patch(
        "/api/users/current", json={"password": "benar", "name": "benar"}, headers={"X-API-TOKEN": "salah"}
    )

    assert response.status_code == 401
    assert response.json()["errors"] == "Unauthorized"


def test_update_user_wrong_token_is_checked_before_body(client, test_user):
    response = client.patch("/api/users/current", json={"name": ""}, headers={"X-API-TOKEN": "salah"})

    assert response.status_code == 401


def test_update_user_name(client, test_user, auth_headers):
    response = client.patch("/api/users/current", json={"name": "benar"}, headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["data"]["name"] == "benar"


def test_update_user_password(client, db, test_user, auth_headers):
    response = client.patch("/api/users/current", json={"password": "benar"}, headers=auth_headers)

    assert response.status_code == 200
    db.refresh(test_user)
    assert auth.verify_password("benar", test_user.password)


def test_logout_user(client, db, test_user, auth_headers):
    response = client.delete("/api/users/current", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {"data": "OK"}
    db.refresh(test_user)
    assert test_user.token is None

    response = client.get("/api/users/current", headers=auth_headers)
    assert response.status_code == 401


def test_logout_user_wrong_token(client, test_user):
    response = client.delete("/api/users/current", headers={"X-API-TOKEN": "salah"})

    assert response.status_code == 401
    assert response.json()["errors"]


def test_register_user_duplicate_caught_by_database(client, db, test_user, monkeypatch):
    monkeypatch.setattr(crud, "count_users", lambda db, username: 0)
    db.expunge_all()

    response = client.post("/api/users", json={"username": "test", "password": "secret", "name": "again"})

    assert response.status_code == 409
    assert response.json() == {"errors": "Username already exists"}
    assert db.query(models.User).filter(models.User.username == "test").count() == 1
