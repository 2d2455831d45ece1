"""Embedded-app session tokens: HS256 JWTs issued by the host admin and signed with the app secret."""

from dataclasses import dataclass
from typing import Any
from urllib.parse import urlparse

from jose import JWTError, jwt

from storefront_admin.config import settings

SESSION_TOKEN_ALGORITHM = "HS256"


class SessionTokenError(Exception):
    """Session token is malformed, expired, or was not issued for this app and shop."""


@dataclass(frozen=True)
class AdminSession:
    """Verified merchant session. Only lives for the request that presented the token."""

    shop: str
    user_id: str | None = None
    session_id: str | None = None


def _host(url: str | None) -> str:
    if not url or not isinstance(url, str):
        return ""
    return (urlparse(url).hostname or "").lower()


def decode_session_token(token: str) -> dict[str, Any]:
    """Verify signature, expiry and audience. Raises SessionTokenError on any failure."""
    if not settings.shopify_api_secret:
        raise SessionTokenError("App secret is not configured")
    audience = settings.session_token_audience
    try:
        return jwt.decode(
            token,
            settings.shopify_api_secret,
            algorithms=[SESSION_TOKEN_ALGORITHM],
            audience=audience,
            options={
                "verify_aud": audience is not None,
                "leeway": settings.session_token_leeway_seconds,
            },
        )
    except JWTError as e:
        raise SessionTokenError(str(e)) from e


def session_from_payload(payload: dict[str, Any]) -> AdminSession:
    """Build AdminSession from verified claims; `iss` must be the admin of the `dest` shop."""
    shop = _host(payload.get("dest"))
    if not shop:
        raise SessionTokenError("Missing dest claim")
    if _host(payload.get("iss")) != shop:
        raise SessionTokenError("Issuer does not match destination shop")
    sub = payload.get("sub")
    return AdminSession(
        shop=shop,
        user_id=str(sub) if sub is not None else None,
        session_id=payload.get("sid"),
    )


def verify_session_token(token: str) -> AdminSession:
    return session_from_payload(decode_session_token(token))
