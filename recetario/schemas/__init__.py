"""Recetario API - Pydantic Schemas Package."""

from recetario.schemas.recipe import (
    IngredientResponse,
    StepResponse,
    RecipeSummary,
    RecipeResponse,
)
from recetario.schemas.planner import (
    PlanEntryCreate,
    PlanEntryResponse,
    DailyPlanResponse,
    FirstEntryDateResponse,
    CalorieHistoryPoint,
)
from recetario.schemas.user import (
    RegisterRequest,
    LoginRequest,
    LoginResponse,
    ProfileUpdateRequest,
    UserResponse,
    PantryUpdateRequest,
)

__all__ = [
    # Recipes
    "IngredientResponse",
    "StepResponse",
    "RecipeSummary",
    "RecipeResponse",
    # Planner
    "PlanEntryCreate",
    "PlanEntryResponse",
    "DailyPlanResponse",
    "FirstEntryDateResponse",
    "CalorieHistoryPoint",
    # User
    "RegisterRequest",
    "LoginRequest",
    "LoginResponse",
    "ProfileUpdateRequest",
    "UserResponse",
    "PantryUpdateRequest",
]
