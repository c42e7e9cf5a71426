"""
Points API routes. Every route here requires a Bearer token.
"""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_points_service
from auth.dependencies import AuthenticatedUser, db_session, get_current_user
from core.points_service import PointsService
from utils.schemas import PointRequest, PointResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/points", tags=["points"])


@router.get("", response_model=List[PointResponse])
async def list_points(
    user: AuthenticatedUser = Depends(get_current_user),
    points: PointsService = Depends(get_points_service),
) -> List[PointResponse]:
    """All samples submitted by the caller, oldest first."""
    samples = await points.list(user.username)
    return [PointResponse.from_sample(s) for s in samples]


@router.post("/check", response_model=PointResponse)
async def check_point(
    req: PointRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    points: PointsService = Depends(get_points_service),
    session: AsyncSession = Depends(db_session),
) -> PointResponse:
    sample = await points.submit(user.username, req.x, req.y, req.r)
    await session.commit()
    logger.info(
        "Point checked for %s: (%s, %s, r=%s) -> %s",
        user.username, req.x, req.y, req.r, sample.inside,
    )
    return PointResponse.from_sample(sample)
