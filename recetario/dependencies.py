"""
Recetario API - FastAPI Dependencies.

Resolves the caller's identity for routes acting on "me".
"""

from typing import Optional

from fastapi import Depends, Header
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from recetario.database import get_db, is_storable_id
from recetario.models import User
from recetario.services.auth import get_user_id_from_token
from recetario.utils.errors import AuthenticationError
from settings import settings

bearer_scheme = HTTPBearer(auto_error=False)


def _parse_user_id(raw: str) -> int:
    """Numeric, positive user id or 401."""
    value = raw.strip()
    if not (value.isascii() and value.isdigit()) or not is_storable_id(int(value)):
        raise AuthenticationError("Not authorized: invalid user id")
    return int(value)


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    x_user_id: Optional[str] = Header(None, alias="X-User-Id"),
) -> int:
    """
    Get the caller's user id.

    A bearer token issued by ``POST /api/login`` is preferred. Without one,
    the ``X-User-Id`` header is accepted while ``ALLOW_USER_ID_HEADER`` is on.

    Returns:
        int: Caller's user id.

    Raises:
        AuthenticationError: 401 if no valid identity is supplied.
    """
    if credentials is not None:
        subject = get_user_id_from_token(credentials.credentials)
        if subject is None:
            raise AuthenticationError("Not authorized: invalid or expired token")
        return _parse_user_id(str(subject))

    if settings.ALLOW_USER_ID_HEADER and x_user_id:
        return _parse_user_id(x_user_id)

    raise AuthenticationError("Not authorized: user id not provided")


async def get_current_user(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> User:
    """
    Get the caller from the database.

    Raises:
        AuthenticationError: 401 if the user does not exist.
    """
    user = db.get(User, user_id)
    if user is None:
        raise AuthenticationError("Not authorized: user does not exist")
    return user
