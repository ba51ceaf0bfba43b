# recetario/routes/user.py
"""
Recetario API - User Routes.

Profile, pantry, recommendations and calorie history of the caller.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from recetario.database import get_db
from recetario.dependencies import get_current_user
from recetario.models import User
from recetario.schemas.planner import CalorieHistoryPoint, FirstEntryDateResponse
from recetario.schemas.recipe import RecipeResponse
from recetario.schemas.user import PantryUpdateRequest, ProfileUpdateRequest, UserResponse
from recetario.services import pantry as pantry_service
from recetario.services import planner as planner_service
from recetario.services import users as users_service
from recetario.services.calorie_history import resolve_week_window
from recetario.services.recommendation import recommend_recipes
from settings import settings

router = APIRouter()


@router.put("/me", response_model=UserResponse)
async def update_profile(
    request: ProfileUpdateRequest,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Update the caller's profile. Every editable field is required."""
    return users_service.update_profile(db, user, request)


@router.get("/me/first-entry-date", response_model=FirstEntryDateResponse)
async def get_first_entry_date(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Date of the caller's earliest plan, null when there is none."""
    return FirstEntryDateResponse(first_entry_date=planner_service.first_entry_date(db, user.id))


@router.get("/me/recommended-recipes", response_model=List[RecipeResponse])
async def get_recommended_recipes(
    take: int = Query(
        settings.DEFAULT_RECOMMENDATION_TAKE,
        ge=1,
        le=settings.MAX_RECOMMENDATION_TAKE,
        description="Number of recipes to return"
    ),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Recipes ranked by how many of their ingredients are in the caller's pantry.

    An empty pantry returns a sample of the catalog instead.
    """
    return recommend_recipes(db, user.id, take)


@router.get("/me/calorie-history", response_model=List[CalorieHistoryPoint])
async def get_calorie_history(
    start_date: Optional[str] = Query(None, alias="startDate", description="YYYY-MM-DD"),
    timezone_offset: Optional[str] = Query(
        None,
        alias="timezoneOffset",
        description="Client offset in minutes, positive behind UTC"
    ),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Seven days of calorie totals starting at ``startDate`` in the client's zone."""
    window = resolve_week_window(start_date, timezone_offset)
    return planner_service.calorie_history(db, user.id, day_range=window)


@router.get("/me/full-calorie-history", response_model=List[CalorieHistoryPoint])
async def get_full_calorie_history(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Calorie totals from the first planned day to today, gaps filled with 0."""
    return planner_service.calorie_history(db, user.id)


@router.get("/me/pantry", response_model=List[str])
async def get_pantry(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Ingredient names in the caller's pantry, sorted."""
    return pantry_service.list_ingredients(db, user.id)


@router.put("/me/pantry", status_code=status.HTTP_204_NO_CONTENT)
async def replace_pantry(
    request: PantryUpdateRequest,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Replace the caller's pantry with the given ingredient list."""
    pantry_service.replace_pantry(db, user.id, request.ingredients)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
