"""Pytest configuration and shared fixtures for API tests."""

import os
import time
import uuid

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from jose import jwt

# Credentials must be set before app imports so Settings picks them up
os.environ.setdefault("SHOPIFY_API_KEY", "test-api-key")
os.environ.setdefault("SHOPIFY_API_SECRET", "test-api-secret")
os.environ.setdefault("SHOPIFY_ADMIN_ACCESS_TOKEN", "shpat_test_token")
os.environ.setdefault("APP_ENV", "test")

from storefront_admin.config import settings
from storefront_admin.main import app
from storefront_admin.services.http_client import close_http_client, init_http_client

TEST_SHOP = "test-shop.myshopify.com"


def make_session_token(shop: str = TEST_SHOP, secret: str | None = None, **overrides) -> str:
    """Session token shaped like the one the admin's app bridge issues."""
    now = int(time.time())
    payload = {
        "iss": f"https://{shop}/admin",
        "dest": f"https://{shop}",
        "aud": settings.shopify_api_key,
        "sub": "42",
        "exp": now + 60,
        "nbf": now - 5,
        "iat": now - 5,
        "jti": str(uuid.uuid4()),
        "sid": "session-abc",
    }
    payload.update(overrides)
    token = jwt.encode(payload, secret or settings.shopify_api_secret, algorithm="HS256")
    return token if isinstance(token, str) else token.decode("utf-8")


@pytest_asyncio.fixture
async def http_client():
    """Shared Admin API client as the lifespan would create it (ASGITransport skips lifespan)."""
    client = init_http_client(timeout=5.0)
    yield client
    await close_http_client()


@pytest_asyncio.fixture
async def client(http_client):
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def session_token():
    return make_session_token()


@pytest.fixture
def auth_headers(session_token):
    """Authorization header carrying a valid session token for TEST_SHOP."""
    return {"Authorization": f"Bearer {session_token}"}


@pytest.fixture
def token_factory():
    """make_session_token, for tests that need expired/foreign/tampered tokens."""
    return make_session_token
