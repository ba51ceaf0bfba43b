# recetario/tests/test_app.py
from sqlalchemy.exc import OperationalError

from recetario.services import recipes as recipes_service


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["message"] == "Recetario API"


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_unexpected_database_error_is_generic_500(client, monkeypatch):

    def broken(db):
        raise OperationalError("SELECT", {}, Exception("connection refused"))

    monkeypatch.setattr(recipes_service, "list_recipes", broken)

    response = client.get("/api/recipes")

    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}
