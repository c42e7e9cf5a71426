"""
FastAPI dependencies for authentication.

``get_current_user`` is the gate in front of every protected route: it
turns the ``Authorization: Bearer <token>`` header into an
:class:`AuthenticatedUser`, or rejects the request.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import AsyncGenerator, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from auth.jwt import TokenService
from core.exceptions import NotFound, Unauthorized
from database.repositories import UserRepository
from database.session import get_db_session

logger = logging.getLogger(__name__)

_bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class AuthenticatedUser:
    username: str
    user_id: uuid.UUID


async def db_session(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AsyncSession, None]:
    """Yield a DB session for route handlers."""
    yield session


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
    session: AsyncSession = Depends(db_session),
) -> AuthenticatedUser:
    """
    Verify the Bearer token and make sure its account still exists.

    Missing or malformed header and bad signatures are ``Unauthorized``;
    a valid token for an account that is gone is ``NotFound``.
    """
    if credentials is None or not credentials.credentials:
        raise Unauthorized("Missing Bearer token")

    username = tokens.verify(credentials.credentials)
    if username is None:
        logger.info("Rejected request with invalid token")
        raise Unauthorized("Invalid token")

    account = await UserRepository(session).find_by_username(username)
    if account is None:
        logger.info("Rejected token for unknown user %s", username)
        raise NotFound("User not found")

    return AuthenticatedUser(username=account.username, user_id=account.user_id)
