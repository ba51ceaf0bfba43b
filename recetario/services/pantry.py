"""
Recetario API - Pantry Service.

A user's pantry is the set of ingredient names they currently have. Updates
replace the whole set in one transaction, so readers see either the old set
or the new one. The owning user row is locked first, so concurrent replaces
of one pantry run one after the other.
"""

from typing import List, Sequence
import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from recetario.models import PantryItem, User
from recetario.utils.errors import StoreError, ValidationError

logger = logging.getLogger(__name__)


def list_ingredients(db: Session, user_id: int) -> List[str]:
    """Ingredient names in the user's pantry, ascending."""
    stmt = (
        select(PantryItem.ingredient_name)
        .where(PantryItem.user_id == user_id)
        .order_by(PantryItem.ingredient_name)
    )
    return list(db.scalars(stmt))


def replace_pantry(db: Session, user_id: int, ingredients: Sequence[str]) -> List[str]:
    """
    Replace the user's pantry with ``ingredients``.

    Exact duplicates collapse to one item (first occurrence wins).

    Args:
        db: Database session.
        user_id: Pantry owner.
        ingredients: New ingredient names.

    Returns:
        List[str]: Names stored, in input order.

    Raises:
        ValidationError: If an element is not a string.
        StoreError: If the transaction fails; the previous pantry is kept.
    """
    if any(not isinstance(name, str) for name in ingredients):
        raise ValidationError("Expected an array of ingredient names")

    names = list(dict.fromkeys(ingredients))

    try:
        # Serializes concurrent replaces of the same pantry (no-op on SQLite)
        db.execute(select(User.id).where(User.id == user_id).with_for_update())
        db.execute(delete(PantryItem).where(PantryItem.user_id == user_id))
        db.add_all(PantryItem(user_id=user_id, ingredient_name=name) for name in names)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Pantry replace failed for user {user_id}: {e}")
        raise StoreError("Error updating pantry") from e

    logger.info(f"Pantry replaced for user {user_id}: {len(names)} items")
    return names
