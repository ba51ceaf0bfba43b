# recetario/tests/conftest.py
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import recetario.models  # noqa: F401  registers tables on Base.metadata
from recetario.database import Base, enable_sqlite_foreign_keys, get_db
from recetario.schemas.user import RegisterRequest
from recetario.services import planner as planner_service
from recetario.services import recipes as recipes_service
from recetario.services import users as users_service
from settings import settings


@pytest.fixture(autouse=True)
def patch_settings(monkeypatch):
    """
    Fast password hashing and the legacy header enabled.
    Tests can override attributes with monkeypatch as needed.
    """
    monkeypatch.setattr(settings, "BCRYPT_ROUNDS", 4)
    monkeypatch.setattr(settings, "ALLOW_USER_ID_HEADER", True)
    return monkeypatch


@pytest.fixture
def engine():
    # One shared in-memory database per test
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    from main import app

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    # No context manager: the lifespan would touch the configured database
    yield TestClient(app)
    app.dependency_overrides.clear()


# --- Factories ---
@pytest.fixture
def make_user(db):
    counter = {"n": 0}

    def _make_user(email=None, password="contraseña", **fields):
        counter["n"] += 1
        data = {
            "name": f"Usuario {counter['n']}",
            "email": email or f"user{counter['n']}@recetario.com",
            "password": password,
            "calorie_goal": 2000,
            "phone": "123-456-7890",
            "address": "Calle Falsa 123",
            "id_number": f"{counter['n']:09d}",
        }
        data.update(fields)
        return users_service.register_user(db, RegisterRequest(**data))

    return _make_user


@pytest.fixture
def user(make_user):
    return make_user(email="ana@recetario.com")


@pytest.fixture
def make_recipe(db, user):

    def _make_recipe(title="Receta", kcal=100, ingredients=(), steps=("Paso único",), author=None):
        return recipes_service.create_recipe(
            db,
            author_id=(author or user).id,
            title=title,
            description=f"Descripción de {title}",
            kcal=kcal,
            time="10 min",
            level="Fácil",
            ingredients=ingredients,
            steps=steps,
        )

    return _make_recipe


@pytest.fixture
def make_plan(db):

    def _make_plan(owner, day: date, recipes=()):
        plan = planner_service.get_or_create_plan(db, owner.id, day)
        for recipe in recipes:
            planner_service.add_entry(db, owner.id, plan.id, recipe.id)
        return plan

    return _make_plan


@pytest.fixture
def headers_for():
    """Legacy identity header for a user."""

    def _headers_for(owner) -> dict:
        return {"X-User-Id": str(owner.id)}

    return _headers_for
