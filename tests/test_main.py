from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from contact_api import main


def test_startup_creates_tables(monkeypatch):
    create_all = MagicMock()
    monkeypatch.setattr(main.models.Base.metadata, "create_all", create_all)

    with TestClient(main.app) as client:
        response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    create_all.assert_called_once_with(bind=main.db.engine)
