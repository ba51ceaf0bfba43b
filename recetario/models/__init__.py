"""
Recetario API - ORM Models Package.

Export all SQLAlchemy models so they register on the shared metadata.
"""

from recetario.models.user import User
from recetario.models.recipe import Recipe, Ingredient, Step
from recetario.models.daily_plan import DailyPlan, PlanEntry
from recetario.models.pantry import PantryItem

__all__ = [
    "User",
    "Recipe",
    "Ingredient",
    "Step",
    "DailyPlan",
    "PlanEntry",
    "PantryItem",
]
