"""FastAPI dependencies: verified admin session from the embedded-app session token, list query state."""

import logging
from typing import Annotated

from fastapi import Depends, HTTPException, Request

from storefront_admin.core.auth import AdminSession, SessionTokenError, verify_session_token
from storefront_admin.schemas.pagination import ListQuery

logger = logging.getLogger(__name__)


def _session_token(request: Request) -> str | None:
    """Bearer token from the app bridge fetch, or `id_token` on the initial document load."""
    auth_header = request.headers.get("Authorization")
    if auth_header and auth_header.startswith("Bearer "):
        return auth_header[7:].strip() or None
    token = request.query_params.get("id_token")
    return token.strip() if token and token.strip() else None


async def get_current_session(request: Request) -> AdminSession:
    token = _session_token(request)
    if not token:
        raise HTTPException(status_code=401, detail="Not authenticated")
    try:
        return verify_session_token(token)
    except SessionTokenError as e:
        logger.debug("Session token rejected: %s", e)
        raise HTTPException(status_code=401, detail="Invalid or expired session token")


def get_list_query(request: Request) -> ListQuery:
    """List state from q/cursor/direction/page; garbage is coerced, never rejected."""
    return ListQuery.from_query_params(request.query_params)


CurrentSession = Annotated[AdminSession, Depends(get_current_session)]
CurrentListQuery = Annotated[ListQuery, Depends(get_list_query)]
