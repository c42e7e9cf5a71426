"""
FastAPI dependencies (shared across routes).

Builds the request-scoped services on top of the request's DB session.
"""

from __future__ import annotations

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from auth.dependencies import db_session, get_token_service
from auth.jwt import TokenService
from core.auth_service import AuthService
from core.points_service import PointsService
from database.repositories import PointsRepository, UserRepository


def get_auth_service(
    request: Request,
    session: AsyncSession = Depends(db_session),
    tokens: TokenService = Depends(get_token_service),
) -> AuthService:
    return AuthService(
        UserRepository(session),
        tokens,
        salt_rounds=request.app.state.settings.bcrypt_rounds,
    )


def get_points_service(session: AsyncSession = Depends(db_session)) -> PointsService:
    return PointsService(UserRepository(session), PointsRepository(session))
