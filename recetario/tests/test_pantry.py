# recetario/tests/test_pantry.py
import pytest
from sqlalchemy import event
from sqlalchemy.exc import OperationalError

from recetario.services import pantry as pantry_service
from recetario.utils.errors import StoreError, ValidationError


def test_replace_pantry_overwrites_previous_items(db, user):
    pantry_service.replace_pantry(db, user.id, ["huevo", "tomate"])
    pantry_service.replace_pantry(db, user.id, ["arroz"])

    assert pantry_service.list_ingredients(db, user.id) == ["arroz"]


def test_replace_pantry_collapses_duplicates(db, user):
    stored = pantry_service.replace_pantry(db, user.id, ["tomate", "huevo", "tomate"])

    assert stored == ["tomate", "huevo"]
    assert pantry_service.list_ingredients(db, user.id) == ["huevo", "tomate"]


def test_replace_pantry_with_empty_list_clears_it(db, user):
    pantry_service.replace_pantry(db, user.id, ["huevo"])
    pantry_service.replace_pantry(db, user.id, [])

    assert pantry_service.list_ingredients(db, user.id) == []


def test_replace_pantry_rejects_non_strings(db, user):
    with pytest.raises(ValidationError):
        pantry_service.replace_pantry(db, user.id, ["huevo", 3])


def test_replace_pantry_keeps_old_items_when_commit_fails(db, user, monkeypatch):
    pantry_service.replace_pantry(db, user.id, ["huevo", "tomate"])

    def failing_commit():
        raise OperationalError("COMMIT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(db, "commit", failing_commit)

    with pytest.raises(StoreError):
        pantry_service.replace_pantry(db, user.id, ["arroz"])

    monkeypatch.undo()
    assert pantry_service.list_ingredients(db, user.id) == ["huevo", "tomate"]


def test_pantries_are_per_user(db, user, make_user):
    other = make_user()
    pantry_service.replace_pantry(db, user.id, ["huevo"])
    pantry_service.replace_pantry(db, other.id, ["arroz"])

    assert pantry_service.list_ingredients(db, user.id) == ["huevo"]
    assert pantry_service.list_ingredients(db, other.id) == ["arroz"]


# --- Endpoints ---
def test_pantry_endpoints(client, user, headers_for):
    assert client.get("/api/users/me/pantry", headers=headers_for(user)).json() == []

    response = client.put(
        "/api/users/me/pantry",
        json={"ingredients": ["tomate", "huevo"]},
        headers=headers_for(user),
    )
    assert response.status_code == 204

    pantry = client.get("/api/users/me/pantry", headers=headers_for(user))
    assert pantry.status_code == 200
    assert pantry.json() == ["huevo", "tomate"]


@pytest.mark.parametrize("payload", [{}, {"ingredients": "huevo"}, {"ingredients": ["huevo", 3]}])
def test_pantry_update_rejects_bad_payload(client, user, headers_for, payload):
    response = client.put("/api/users/me/pantry", json=payload, headers=headers_for(user))

    assert response.status_code == 400
    assert "message" in response.json()


def test_rejected_pantry_update_leaves_pantry_unchanged(client, user, headers_for):
    client.put("/api/users/me/pantry", json={"ingredients": ["huevo"]}, headers=headers_for(user))

    response = client.put(
        "/api/users/me/pantry",
        json={"ingredients": "not-an-array"},
        headers=headers_for(user),
    )

    assert response.status_code == 400
    assert client.get("/api/users/me/pantry", headers=headers_for(user)).json() == ["huevo"]


def test_replace_pantry_locks_owner_before_deleting(db, engine, user):
    statements = []

    def record(conn, cursor, statement, parameters, context, executemany):
        statements.append(" ".join(statement.lower().split()))

    event.listen(engine, "before_cursor_execute", record)
    try:
        pantry_service.replace_pantry(db, user.id, ["huevo"])
    finally:
        event.remove(engine, "before_cursor_execute", record)

    lock = next(i for i, s in enumerate(statements) if s.startswith("select users.id from users"))
    wipe = next(i for i, s in enumerate(statements) if s.startswith("delete from user_pantry_items"))
    assert lock < wipe
