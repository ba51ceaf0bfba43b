"""Recetario API - recipes, daily plans, pantry recommendations and calorie history."""
