"""
Auth API routes: signup, signin.

Route prefix: /auth
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_auth_service
from auth.dependencies import db_session
from core.auth_service import AuthService
from utils.schemas import Credentials, SignUpRequest, TokenResponse

router = APIRouter(tags=["auth"])


@router.post("/signup", response_model=TokenResponse)
async def sign_up(
    req: SignUpRequest,
    auth: AuthService = Depends(get_auth_service),
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    """Register a new user."""
    token = await auth.sign_up(req.username, req.password)
    # The account must be durable before the client holds a token for it
    await session.commit()
    return {"token": token}


@router.post("/signin", response_model=TokenResponse)
async def sign_in(
    req: Credentials,
    auth: AuthService = Depends(get_auth_service),
) -> Dict[str, Any]:
    """Login with username + password."""
    token = await auth.sign_in(req.username, req.password)
    return {"token": token}
