"""
Recetario API - User Schemas.

Pydantic schemas for registration, login and profile operations.
"""

from typing import List, Optional

from pydantic import ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

from recetario.schemas.base import CamelModel


class RegisterRequest(CamelModel):
    """
    Schema for creating a new user. Every field is required.

    Attributes:
        name: Display name.
        email: Email address (unique).
        password: Plain password, hashed before storage.
        calorie_goal: Daily calorie goal.
        phone: Phone number.
        address: Postal address.
        id_number: Identity document number.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "name": "Ana Pérez",
                "email": "ana@example.com",
                "password": "contraseña",
                "calorieGoal": 2000,
                "phone": "123-456-7890",
                "address": "Calle Falsa 123",
                "idNumber": "000000000"
            }
        }
    )

    name: str = Field(..., min_length=1, description="Display name")
    email: EmailStr = Field(..., description="Email address")
    password: str = Field(..., min_length=1, description="Password")
    calorie_goal: int = Field(..., gt=0, description="Daily calorie goal")
    phone: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    id_number: str = Field(..., min_length=1)


class LoginRequest(CamelModel):
    """Schema for login."""

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class ProfileUpdateRequest(CamelModel):
    """Schema for updating the caller's profile. Every field is required."""

    name: str = Field(..., min_length=1)
    calorie_goal: int = Field(..., gt=0)
    phone: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    id_number: str = Field(..., min_length=1)


class UserResponse(CamelModel):
    """User as returned to clients; the password hash is never included."""

    id: int
    name: str
    email: str
    calorie_goal: int
    avatar: Optional[str] = None
    phone: str
    address: str
    id_number: str


class LoginResponse(UserResponse):
    """Authenticated user plus a bearer token for subsequent requests."""

    access_token: str
    token_type: str = "bearer"


class PantryUpdateRequest(CamelModel):
    """Full replacement of the caller's pantry."""

    ingredients: List[str] = Field(..., description="Ingredient names")
