# recetario/routes/planner.py
"""Recetario API - Daily Planner Routes."""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from recetario.database import get_db
from recetario.dependencies import get_current_user, get_current_user_id
from recetario.models import User
from recetario.schemas.planner import DailyPlanResponse, PlanEntryCreate, PlanEntryResponse
from recetario.services import planner as planner_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/today", response_model=DailyPlanResponse)
async def get_today(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Get or create the caller's plan for the current UTC day."""
    return planner_service.get_or_create_today(db, user.id)


@router.post("/entries", response_model=PlanEntryResponse, status_code=status.HTTP_201_CREATED)
async def add_entry(
    request: PlanEntryCreate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Schedule a recipe in one of the caller's plans."""
    entry = planner_service.add_entry(db, user_id, request.plan_id, request.recipe_id)
    logger.info(f"Recipe {entry.recipe_id} added to plan {entry.plan_id}")
    return entry


@router.delete("/entries/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entry(
    entry_id: int,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Remove a scheduled recipe from the caller's plan."""
    planner_service.remove_entry(db, user_id, entry_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
