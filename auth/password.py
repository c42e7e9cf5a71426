"""
Password hashing and verification.

Uses bcrypt with an explicit salt: the salt is generated once at signup and
stored next to the digest, so a digest can be recomputed from
``(password, salt)`` at signin.
"""

from __future__ import annotations

import hmac

import bcrypt

# bcrypt only looks at the first 72 bytes of its input.
MAX_PASSWORD_BYTES = 72


def generate_salt(rounds: int = 12) -> str:
    """Fresh random bcrypt salt with the given work factor."""
    return bcrypt.gensalt(rounds=rounds).decode()


def hash_password(password: str, salt: str) -> str:
    """Derive the digest for ``password`` under ``salt`` (deterministic)."""
    return bcrypt.hashpw(password.encode(), salt.encode()).decode()


def verify_password(password: str, salt: str, digest: str) -> bool:
    """Constant-time comparison of a recomputed digest against the stored one."""
    if len(password.encode()) > MAX_PASSWORD_BYTES:
        return False
    try:
        candidate = hash_password(password, salt)
    except (ValueError, TypeError):
        return False
    return hmac.compare_digest(candidate.encode(), digest.encode())
