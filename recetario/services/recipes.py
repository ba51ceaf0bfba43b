"""
Recetario API - Recipe Catalog Service.

Queries over recipes with their ingredients and ordered steps.
"""

from typing import List, Optional, Sequence, Tuple, Set
import logging

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from recetario.models import Ingredient, Recipe, Step
from recetario.utils.errors import StoreError, ValidationError

logger = logging.getLogger(__name__)


def _with_details(stmt):
    """Eager-load ingredients and steps (steps follow their ``order``)."""
    return stmt.options(selectinload(Recipe.ingredients), selectinload(Recipe.steps))


def list_recipes(db: Session) -> List[Recipe]:
    """Every recipe with details, by id."""
    return list(db.scalars(_with_details(select(Recipe)).order_by(Recipe.id)))


def sample_recipes(db: Session, take: int) -> List[Recipe]:
    """Bounded sample of the catalog (lowest ids first)."""
    return list(db.scalars(_with_details(select(Recipe)).order_by(Recipe.id).limit(take)))


def get_recipes_by_ids(db: Session, recipe_ids: Sequence[int]) -> List[Recipe]:
    """
    Fetch recipes with details for the given ids.

    The result order is unspecified.
    """
    if not recipe_ids:
        return []
    return list(db.scalars(_with_details(select(Recipe)).where(Recipe.id.in_(recipe_ids))))


def search_recipes(db: Session, ingredient: Optional[str]) -> List[Recipe]:
    """
    Recipes with at least one ingredient containing ``ingredient``.

    Matching is case-insensitive and literal (``%`` and ``_`` are not wildcards).

    Raises:
        ValidationError: If the search term is missing or blank.
    """
    term = (ingredient or "").strip()
    if not term:
        raise ValidationError("The 'ingredient' parameter is required")

    stmt = (
        _with_details(select(Recipe))
        .where(
            Recipe.ingredients.any(
                func.lower(Ingredient.name).contains(term.lower(), autoescape=True)
            )
        )
        .order_by(Recipe.id)
    )
    return list(db.scalars(stmt))


def unique_ingredient_names(db: Session) -> List[str]:
    """Distinct ingredient names across the catalog, ascending."""
    stmt = select(Ingredient.name).distinct().order_by(Ingredient.name)
    return list(db.scalars(stmt))


def catalog_ingredient_sets(db: Session) -> List[Tuple[int, Set[str]]]:
    """
    ``(recipe_id, ingredient_names)`` for every recipe, by id.

    Recipes without ingredients are included with an empty set.
    """
    recipe_ids = list(db.scalars(select(Recipe.id).order_by(Recipe.id)))
    names_by_recipe = {recipe_id: set() for recipe_id in recipe_ids}

    rows = db.execute(select(Ingredient.recipe_id, Ingredient.name))
    for recipe_id, name in rows:
        if recipe_id in names_by_recipe:
            names_by_recipe[recipe_id].add(name)

    return [(recipe_id, names_by_recipe[recipe_id]) for recipe_id in recipe_ids]


def create_recipe(
    db: Session,
    author_id: int,
    title: str,
    description: str,
    kcal: int,
    time: str,
    level: str,
    ingredients: Sequence[str] = (),
    steps: Sequence[str] = (),
    image: Optional[str] = None,
) -> Recipe:
    """
    Create a recipe with its ingredients and steps in one transaction.

    Steps are numbered from 1 in the given order.

    Raises:
        ValidationError: If ``kcal`` is negative.
        StoreError: If the database rejects the write.
    """
    if kcal < 0:
        raise ValidationError("kcal must be non-negative")

    recipe = Recipe(
        title=title,
        description=description,
        kcal=kcal,
        time=time,
        level=level,
        image=image,
        author_id=author_id,
        ingredients=[Ingredient(name=name) for name in ingredients],
        steps=[
            Step(description=text, order=position)
            for position, text in enumerate(steps, start=1)
        ],
    )
    try:
        db.add(recipe)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to create recipe {title!r}: {e}")
        raise StoreError("Error creating recipe") from e

    logger.info(f"Recipe created: {recipe.id} {recipe.title}")
    return recipe
