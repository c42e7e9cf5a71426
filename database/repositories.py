"""
Repositories for accounts and samples.

Each repository wraps the request's ``AsyncSession``. ``insert`` adds and
flushes a single row; routes commit before responding and the session
dependency rolls back on any error, so a create either fully lands or not
at all.
"""

from __future__ import annotations

import uuid
from typing import List, Optional

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import Account, Sample


class UserRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def insert(self, account: Account) -> Account:
        self._session.add(account)
        await self._session.flush()
        return account

    async def find_by_username(self, username: str) -> Optional[Account]:
        result = await self._session.execute(
            select(Account).where(Account.username == username)
        )
        return result.scalar_one_or_none()

    async def exists_by_username(self, username: str) -> bool:
        result = await self._session.execute(
            select(exists().where(Account.username == username))
        )
        return bool(result.scalar())


class PointsRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def insert(self, sample: Sample) -> Sample:
        self._session.add(sample)
        await self._session.flush()
        return sample

    async def list_by_owner(self, user_id: uuid.UUID) -> List[Sample]:
        """All samples of one account, oldest first."""
        result = await self._session.execute(
            select(Sample)
            .where(Sample.user_id == user_id)
            .order_by(Sample.sample_id.asc())
        )
        return list(result.scalars().all())
