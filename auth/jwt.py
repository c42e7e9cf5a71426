"""
JWT-style token creation and verification.

Tokens are base64url-encoded JSON payloads signed with HMAC-SHA256.
The secret is passed to :class:`TokenService` at construction (the app
factory reads it from ``config.jwt_secret``, env var: ``JWT_SECRET``).

Tokens carry no expiry: a correctly signed token stays valid forever.
"""

from __future__ import annotations

import binascii
import hashlib
import hmac
import json
import logging
import time
from base64 import urlsafe_b64decode, urlsafe_b64encode
from typing import Optional

logger = logging.getLogger(__name__)


class TokenService:
    """Issues and verifies signed tokens whose subject is a username."""

    def __init__(self, secret: str) -> None:
        if not secret:
            raise ValueError("Token secret must not be empty")
        self._secret = secret.encode()

    def _sign(self, raw: bytes) -> str:
        return hmac.new(self._secret, raw, hashlib.sha256).hexdigest()

    def issue(self, username: str) -> str:
        """Create a signed token with ``username`` as subject."""
        payload = {"sub": username, "iat": int(time.time())}
        raw = json.dumps(payload, separators=(",", ":")).encode()
        return urlsafe_b64encode(raw).decode() + "." + self._sign(raw)

    def verify(self, token: str) -> Optional[str]:
        """
        Return the username embedded in ``token``.

        Returns ``None`` for malformed tokens, bad signatures and payloads
        without a usable subject.
        """
        parts = token.split(".", 1)
        if len(parts) != 2:
            return None
        try:
            raw = urlsafe_b64decode(parts[0].encode())
        except (binascii.Error, ValueError):
            return None
        if not hmac.compare_digest(parts[1].encode(), self._sign(raw).encode()):
            logger.debug("Rejected token with bad signature")
            return None
        try:
            payload = json.loads(raw)
        except ValueError:
            return None
        subject = payload.get("sub") if isinstance(payload, dict) else None
        if not isinstance(subject, str) or not subject:
            return None
        return subject
