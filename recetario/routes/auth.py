# recetario/routes/auth.py
"""
Recetario API - Authentication Routes.

Register and login endpoints.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from recetario.database import get_db
from recetario.schemas.user import LoginRequest, LoginResponse, RegisterRequest, UserResponse
from recetario.services import users as users_service
from recetario.services.auth import create_access_token

router = APIRouter()


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(request: RegisterRequest, db: Session = Depends(get_db)):
    """
    Register a new user.

    Raises:
        ValidationError 400: A required field is missing.
        ConflictError 409: Email already registered.
    """
    return users_service.register_user(db, request)


@router.post("/login", response_model=LoginResponse)
async def login(request: LoginRequest, db: Session = Depends(get_db)):
    """
    Check credentials and return the user with an access token.

    Raises:
        AuthenticationError 401: Invalid credentials.
    """
    user = users_service.authenticate(db, request.email, request.password)
    access_token = create_access_token(data={"sub": str(user.id)})

    return LoginResponse(
        **UserResponse.model_validate(user).model_dump(),
        access_token=access_token,
    )
