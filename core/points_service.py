"""
Points service: evaluates submitted samples and keeps per-user history.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List

from core.area import evaluate
from core.exceptions import NotFound
from database.models import Account, Sample
from database.repositories import PointsRepository, UserRepository

logger = logging.getLogger(__name__)


class PointsService:
    def __init__(self, users: UserRepository, points: PointsRepository) -> None:
        self._users = users
        self._points = points

    async def _account(self, username: str) -> Account:
        account = await self._users.find_by_username(username)
        if account is None:
            raise NotFound("User not found")
        return account

    async def submit(self, username: str, x: float, y: float, r: float) -> Sample:
        """Check ``(x, y)`` against the area for ``r`` and store the result."""
        account = await self._account(username)
        verdict = evaluate(x, y, r)
        sample = Sample(
            user_id=account.user_id,
            x=x,
            y=y,
            r=r,
            inside=verdict.inside,
            created_at=datetime.now(timezone.utc),
        )
        await self._points.insert(sample)
        logger.debug(
            "Sample (%s, %s, r=%s) for %s: inside=%s matched=%s",
            x, y, r, username, verdict.inside, verdict.matched,
        )
        return sample

    async def list(self, username: str) -> List[Sample]:
        account = await self._account(username)
        return await self._points.list_by_owner(account.user_id)
