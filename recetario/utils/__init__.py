"""Recetario API - Utilities Package."""

from recetario.utils.errors import (
    RecetarioException,
    AuthenticationError,
    NotFoundError,
    ValidationError,
    ConflictError,
    StoreError,
)
from recetario.utils.dates import utc_today, utc_midnight, to_utc_day

__all__ = [
    "RecetarioException",
    "AuthenticationError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "StoreError",
    "utc_today",
    "utc_midnight",
    "to_utc_day",
]
