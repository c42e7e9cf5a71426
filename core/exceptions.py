"""
Error kinds raised by the services and the request gateway.

Each kind maps to exactly one HTTP status; ``main.py`` renders them as
``{"error": message}``.
"""

from __future__ import annotations

from fastapi import status


class AreaCheckError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationFailed(AreaCheckError):
    status_code = 422
    default_message = "Validation failed"


class AlreadyExists(AreaCheckError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "User already exists"


class NotFound(AreaCheckError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "User not found"


class InvalidCredentials(AreaCheckError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid password"


class Unauthorized(AreaCheckError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"
