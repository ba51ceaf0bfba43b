# recetario/tests/test_recipes.py
import pytest

from recetario.services import recipes as recipes_service
from recetario.utils.errors import ValidationError


def test_create_recipe_numbers_steps(db, make_recipe):
    recipe = make_recipe("Sopa", ingredients=["lentejas", "papa"], steps=["Enjuagar", "Cocer", "Servir"])

    assert [(s.order, s.description) for s in recipe.steps] == [(1, "Enjuagar"), (2, "Cocer"), (3, "Servir")]
    assert {i.name for i in recipe.ingredients} == {"lentejas", "papa"}


def test_create_recipe_rejects_negative_kcal(make_recipe):
    with pytest.raises(ValidationError):
        make_recipe(kcal=-1)


def test_search_is_case_insensitive_substring(db, make_recipe):
    eggs = make_recipe("Huevos", ingredients=["Huevo", "tomate"])
    make_recipe("Sopa", ingredients=["lentejas"])

    assert [r.id for r in recipes_service.search_recipes(db, "HUEV")] == [eggs.id]
    assert recipes_service.search_recipes(db, "pollo") == []


def test_search_treats_wildcards_literally(db, make_recipe):
    make_recipe("Huevos", ingredients=["huevo"])

    assert recipes_service.search_recipes(db, "%") == []
    assert recipes_service.search_recipes(db, "_") == []


@pytest.mark.parametrize("term", [None, "", "   "])
def test_search_requires_term(db, term):
    with pytest.raises(ValidationError):
        recipes_service.search_recipes(db, term)


def test_unique_ingredient_names(db, make_recipe):
    make_recipe("Huevos", ingredients=["huevo", "tomate"])
    make_recipe("Tortilla", ingredients=["huevo", "espinaca"])

    assert recipes_service.unique_ingredient_names(db) == ["espinaca", "huevo", "tomate"]


def test_catalog_ingredient_sets_includes_recipes_without_ingredients(db, make_recipe):
    bare = make_recipe("Agua")
    eggs = make_recipe("Huevos", ingredients=["huevo", "huevo"])

    assert recipes_service.catalog_ingredient_sets(db) == [(bare.id, set()), (eggs.id, {"huevo"})]


# --- Endpoints ---
def test_list_recipes_endpoint(client, make_recipe):
    make_recipe("Sopa", kcal=300, ingredients=["lentejas"], steps=["Cocer", "Servir"])

    response = client.get("/api/recipes")

    assert response.status_code == 200
    body = response.json()
    assert len(body) == 1
    recipe = body[0]
    assert recipe["title"] == "Sopa"
    assert recipe["kcal"] == 300
    assert "authorId" in recipe
    assert [s["description"] for s in recipe["steps"]] == ["Cocer", "Servir"]
    assert [i["name"] for i in recipe["ingredients"]] == ["lentejas"]


def test_search_endpoint(client, make_recipe):
    make_recipe("Huevos", ingredients=["huevo"])

    response = client.get("/api/recipes/search", params={"ingredient": "hue"})

    assert response.status_code == 200
    assert [r["title"] for r in response.json()] == ["Huevos"]


def test_search_endpoint_requires_ingredient(client):
    response = client.get("/api/recipes/search")

    assert response.status_code == 400
    assert "message" in response.json()


def test_unique_ingredients_endpoint(client, make_recipe):
    make_recipe("Huevos", ingredients=["tomate", "huevo"])

    response = client.get("/api/ingredients/unique")

    assert response.status_code == 200
    assert response.json() == ["huevo", "tomate"]
