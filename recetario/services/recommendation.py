"""
Recetario API - Recipe Recommendation Service.

Ranks the catalog by how much of each recipe the user can cook with what is
in their pantry. The score of a recipe is the share of its distinct
ingredients present in the pantry:

    score = |pantry ∩ ingredients| / |ingredients|

Recipes without ingredients score 0. Ties keep catalog order.
"""

from dataclasses import dataclass
from typing import AbstractSet, Callable, Iterable, List, Sequence, Tuple, TypeVar
import logging

from sqlalchemy.orm import Session

from recetario.models import Recipe
from recetario.services import pantry as pantry_service
from recetario.services import recipes as recipes_service
from recetario.utils.errors import ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RankedRecipe:
    """Recipe identity with its match score."""

    recipe_id: int
    score: float


def match_score(pantry: AbstractSet[str], ingredient_names: Iterable[str]) -> float:
    """
    Share of a recipe's distinct ingredients found in the pantry.

    Args:
        pantry: Ingredient names the user has.
        ingredient_names: Ingredient names of one recipe; duplicates count once.

    Returns:
        float: Value in [0, 1]; 0 for a recipe without ingredients.

    Example:
        >>> match_score({"huevo", "tomate"}, ["huevo", "tomate", "cebolla"])
        0.6666666666666666
    """
    names = set(ingredient_names)
    if not names:
        return 0.0
    return len(names & pantry) / len(names)


def rank_recipes(
    pantry: AbstractSet[str],
    catalog: Iterable[Tuple[int, Iterable[str]]],
    take: int,
) -> List[RankedRecipe]:
    """
    Score every recipe and keep the best ``take``.

    Args:
        pantry: Ingredient names the user has.
        catalog: ``(recipe_id, ingredient_names)`` pairs in catalog order.
        take: Number of recipes to keep (>= 1).

    Returns:
        List[RankedRecipe]: Highest score first, catalog order on ties.

    Raises:
        ValidationError: If ``take`` is lower than 1.
    """
    if take < 1:
        raise ValidationError("take must be at least 1")

    scored = [
        RankedRecipe(recipe_id=recipe_id, score=match_score(pantry, names))
        for recipe_id, names in catalog
    ]
    # list.sort is stable, also with reverse=True
    scored.sort(key=lambda ranked: ranked.score, reverse=True)
    return scored[:take]


def merge_in_rank_order(
    ranking: Sequence[RankedRecipe],
    details: Iterable[T],
    key: Callable[[T], int] = lambda recipe: recipe.id,
) -> List[T]:
    """
    Reorder an unordered detail fetch to follow ``ranking``.

    Details whose id is absent from the ranking indicate an inconsistent
    fetch; they are logged and placed last.
    """
    position = {ranked.recipe_id: index for index, ranked in enumerate(ranking)}
    details = list(details)

    unexpected = [key(item) for item in details if key(item) not in position]
    if unexpected:
        logger.warning(f"Fetched recipes missing from ranking: {unexpected}")

    return sorted(details, key=lambda item: position.get(key(item), len(position)))


def recommend_recipes(db: Session, user_id: int, take: int) -> List[Recipe]:
    """
    Recommend up to ``take`` recipes for a user's pantry.

    With an empty pantry there is nothing to match, so a bounded sample of
    the catalog is returned instead.

    Args:
        db: Database session.
        user_id: Owner of the pantry.
        take: Maximum number of recipes.

    Returns:
        List[Recipe]: Recipes with ingredients and steps, best match first.
    """
    if take < 1:
        raise ValidationError("take must be at least 1")

    pantry = set(pantry_service.list_ingredients(db, user_id))

    if not pantry:
        logger.info(f"Empty pantry for user {user_id}, returning catalog sample")
        return recipes_service.sample_recipes(db, take)

    ranking = rank_recipes(pantry, recipes_service.catalog_ingredient_sets(db), take)
    details = recipes_service.get_recipes_by_ids(db, [ranked.recipe_id for ranked in ranking])
    return merge_in_rank_order(ranking, details)
