# recetario/routes/recipes.py
"""Recetario API - Recipe Catalog Routes."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from recetario.database import get_db
from recetario.schemas.recipe import RecipeResponse
from recetario.services import recipes as recipes_service

router = APIRouter()


@router.get("/recipes", response_model=List[RecipeResponse])
async def list_recipes(db: Session = Depends(get_db)):
    """All recipes with ingredients and ordered steps."""
    return recipes_service.list_recipes(db)


@router.get("/recipes/search", response_model=List[RecipeResponse])
async def search_recipes(
    ingredient: Optional[str] = Query(None, description="Ingredient name or fragment"),
    db: Session = Depends(get_db),
):
    """Recipes containing an ingredient (case-insensitive substring match)."""
    return recipes_service.search_recipes(db, ingredient)


@router.get("/ingredients/unique", response_model=List[str])
async def unique_ingredients(db: Session = Depends(get_db)):
    """Flat, sorted list of distinct ingredient names, for autocompletion."""
    return recipes_service.unique_ingredient_names(db)
