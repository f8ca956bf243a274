"""
Builders for Supabase responses and errors used across tests.
"""

from __future__ import annotations

from unittest.mock import MagicMock

from postgrest.exceptions import APIError
from supabase import AuthError


class ProviderAuthError(AuthError):
    """AuthError carrying a fixed message, independent of the auth library's constructor."""

    def __init__(self, message: str) -> None:
        Exception.__init__(self, message)
        self.message = message


def create_store_error(message: str, code: str = "23505") -> APIError:
    return APIError({"message": message, "code": code, "hint": None, "details": None})


def create_user(user_id: str = "user-123", email: str = "a@b.com") -> MagicMock:
    user = MagicMock()
    user.id = user_id
    user.email = email
    user.model_dump.return_value = {"id": user_id, "email": email, "role": "authenticated"}
    return user


def create_session(access_token: str = "access-token") -> MagicMock:
    session = MagicMock()
    session.access_token = access_token
    session.model_dump.return_value = {
        "access_token": access_token,
        "token_type": "bearer",
        "expires_in": 3600,
    }
    return session
