"""
Shared fixtures.

The Supabase clients are replaced with mocks through FastAPI dependency
overrides so no test touches the network.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from tests.factories import create_session, create_user

# app.main builds the app at import time, which reads settings
os.environ.setdefault("SUPABASE_URL", "https://example.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "anon-key")

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset cached settings and clients before and after each test."""
    from app.config import get_settings
    from app.supabase_client import get_supabase_admin_client, get_supabase_client

    cached = (get_settings, get_supabase_client, get_supabase_admin_client)
    for factory in cached:
        factory.cache_clear()
    yield
    for factory in cached:
        factory.cache_clear()


@pytest.fixture
def supabase() -> MagicMock:
    """Supabase client mock whose auth and table calls succeed."""
    client = MagicMock()
    user = create_user()
    client.auth.sign_up.return_value = MagicMock(user=user, session=None)
    client.auth.sign_in_with_password.return_value = MagicMock(user=user, session=create_session())

    table = client.table.return_value
    table.insert.return_value.execute.return_value = MagicMock(data=[{"user_id": user.id}])
    table.select.return_value.eq.return_value.single.return_value.execute.return_value = MagicMock(
        data={"firstname": "A", "lastname": "B", "email": "a@b.com"}
    )
    return client


@pytest.fixture
def admin_client() -> MagicMock | None:
    """No admin client by default, so orphaned identities are kept."""
    return None


@pytest.fixture
def test_client(supabase: MagicMock, admin_client: MagicMock | None) -> Generator[TestClient, None, None]:
    """Test client with both Supabase clients overridden."""
    from app.main import app
    from app.supabase_client import get_supabase_admin_client, get_supabase_client

    app.dependency_overrides[get_supabase_client] = lambda: supabase
    app.dependency_overrides[get_supabase_admin_client] = lambda: admin_client
    # Startup builds the cached clients; keep that off the network
    with patch("app.supabase_client.create_client", return_value=supabase), TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
