"""
Recetario API - Planner Schemas.

Pydantic schemas for daily plans, plan entries and calorie history.
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from recetario.schemas.base import CamelModel
from recetario.schemas.recipe import RecipeSummary


class PlanEntryCreate(CamelModel):
    """
    Schema for scheduling a recipe in a daily plan.

    Attributes:
        recipe_id: Recipe to schedule.
        plan_id: Target plan (must belong to the caller).
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "recipeId": 3,
                "planId": 12
            }
        }
    )

    recipe_id: int = Field(..., ge=1, description="Recipe ID")
    plan_id: int = Field(..., ge=1, description="Daily plan ID")


class PlanEntryResponse(CamelModel):
    """Scheduled recipe with its scalar recipe data."""

    id: int
    plan_id: int
    recipe_id: int
    recipe: RecipeSummary


class DailyPlanResponse(CamelModel):
    """
    Daily plan with its entries in insertion order.

    ``total_calories`` is computed from the entries on every read.
    """

    id: int
    date: datetime
    user_id: int
    entries: List[PlanEntryResponse] = Field(default_factory=list)
    total_calories: int = Field(..., ge=0, description="Sum of scheduled recipe kcal")


class FirstEntryDateResponse(CamelModel):
    """Date of the user's earliest plan, or null when there is none."""

    first_entry_date: Optional[datetime] = None


class CalorieHistoryPoint(CamelModel):
    """One calendar day of calorie history."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        json_schema_extra={
            "example": {
                "date": "2024-01-02",
                "totalCalories": 0
            }
        }
    )

    day: date = Field(..., alias="date")
    total_calories: int = Field(..., ge=0)
