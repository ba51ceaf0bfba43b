"""
Recetario API - Recipe Schemas.

Pydantic schemas for recipe catalog responses.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from recetario.schemas.base import CamelModel


class IngredientResponse(CamelModel):
    """Ingredient attached to a recipe."""

    id: int
    name: str
    recipe_id: int


class StepResponse(CamelModel):
    """Preparation step, 1-based ``order``."""

    id: int
    description: str
    order: int
    recipe_id: int


class RecipeSummary(CamelModel):
    """
    Recipe without nested collections.

    Attributes:
        id: Recipe identifier.
        title: Recipe title.
        description: Short description.
        kcal: Calories per serving.
        time: Preparation time label.
        level: Difficulty label.
        image: Optional image reference.
        author_id: Authoring user.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
    """

    id: int = Field(..., description="Recipe ID")
    title: str = Field(..., description="Recipe title")
    description: str = Field(..., description="Short description")
    kcal: int = Field(..., ge=0, description="Calories per serving")
    time: str = Field(..., description="Preparation time label")
    level: str = Field(..., description="Difficulty label")
    image: Optional[str] = Field(None, description="Image reference")
    author_id: int = Field(..., description="Author user ID")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")


class RecipeResponse(RecipeSummary):
    """Recipe with its ingredients and ordered steps."""

    ingredients: List[IngredientResponse] = Field(default_factory=list)
    steps: List[StepResponse] = Field(default_factory=list)
