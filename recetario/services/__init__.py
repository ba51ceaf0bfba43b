"""Recetario API - Services Package."""
