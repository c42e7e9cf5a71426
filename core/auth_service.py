"""
Auth service: signup and signin on top of the user repository.
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError

from auth.jwt import TokenService
from auth.password import generate_salt, hash_password, verify_password
from core.exceptions import AlreadyExists, InvalidCredentials, NotFound
from database.models import Account
from database.repositories import UserRepository

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(
        self,
        users: UserRepository,
        tokens: TokenService,
        salt_rounds: int = 12,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._salt_rounds = salt_rounds

    async def sign_up(self, username: str, password: str) -> str:
        """Create an account and return a token for it."""
        if await self._users.exists_by_username(username):
            logger.info("Signup rejected, username taken: %s", username)
            raise AlreadyExists("User already exists")

        salt = generate_salt(self._salt_rounds)
        account = Account(
            username=username,
            password_hash=hash_password(password, salt),
            salt=salt,
        )
        try:
            await self._users.insert(account)
        except IntegrityError as exc:
            # lost a race against a concurrent signup for the same name
            raise AlreadyExists("User already exists") from exc

        logger.info("Registered user %s (%s)", username, account.user_id)
        return self._tokens.issue(username)

    async def sign_in(self, username: str, password: str) -> str:
        account = await self._users.find_by_username(username)
        if account is None:
            raise NotFound("User not found")

        if not verify_password(password, account.salt, account.password_hash):
            logger.info("Signin rejected, bad password for %s", username)
            raise InvalidCredentials("Invalid password")

        logger.info("Login: %s (%s)", username, account.user_id)
        return self._tokens.issue(username)
