"""Recetario API - Routes Package."""

from recetario.routes import (
    auth,
    recipes,
    planner,
    user,
)

__all__ = [
    "auth",
    "recipes",
    "planner",
    "user",
]
