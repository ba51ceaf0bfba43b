"""
Recetario API - User Service.

Registration, credential checks and profile updates.
"""

from typing import Optional
from urllib.parse import quote
import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from recetario.models import User
from recetario.schemas.user import ProfileUpdateRequest, RegisterRequest
from recetario.services.auth import hash_password, verify_password
from recetario.utils.errors import AuthenticationError, ConflictError, StoreError

logger = logging.getLogger(__name__)

AVATAR_URL_TEMPLATE = "https://i.pravatar.cc/150?u={email}"


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.scalars(select(User).where(User.email == email)).first()


def register_user(db: Session, request: RegisterRequest) -> User:
    """
    Create a user with a hashed password and a generated avatar.

    Raises:
        ConflictError: If the email is already registered.
        StoreError: If the insert fails for another reason.
    """
    email = str(request.email)
    if get_user_by_email(db, email) is not None:
        raise ConflictError("An account with this email already exists")

    user = User(
        name=request.name,
        email=email,
        password_hash=hash_password(request.password),
        calorie_goal=request.calorie_goal,
        avatar=AVATAR_URL_TEMPLATE.format(email=quote(email, safe="")),
        phone=request.phone,
        address=request.address,
        id_number=request.id_number,
    )
    try:
        db.add(user)
        db.commit()
    except IntegrityError as e:
        # Lost a race against another registration with the same email
        db.rollback()
        raise ConflictError("An account with this email already exists") from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to register user: {e}")
        raise StoreError("Error registering the user") from e

    logger.info(f"New user registered: {user.email}")
    return user


def authenticate(db: Session, email: str, password: str) -> User:
    """
    Check credentials.

    Raises:
        AuthenticationError: On unknown email or wrong password (same message).
    """
    user = get_user_by_email(db, email)
    if user is None:
        logger.info(f"Login failure, unknown email: {email}")
        raise AuthenticationError("Invalid email or password")

    if not verify_password(password, user.password_hash):
        logger.info(f"Login failure, wrong password for: {email}")
        raise AuthenticationError("Invalid email or password")

    logger.info(f"User logged in: {email}")
    return user


def update_profile(db: Session, user: User, request: ProfileUpdateRequest) -> User:
    """Overwrite the editable profile fields of ``user``."""
    user.name = request.name
    user.calorie_goal = request.calorie_goal
    user.phone = request.phone
    user.address = request.address
    user.id_number = request.id_number

    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to update profile of user {user.id}: {e}")
        raise StoreError("Error updating the profile") from e

    return user
