"""
Admin GraphQL pass-through to the host platform.
Auth: X-Shopify-Access-Token header with the configured Admin API token. One attempt per call, no retries.
"""
import logging
from typing import Any

import httpx

from storefront_admin.config import settings
from storefront_admin.services.http_client import get_http_client

logger = logging.getLogger(__name__)


class AdminApiNotConfigured(RuntimeError):
    """No Admin API access token is configured, so the data source cannot be reached."""


def _log_response_error(shop: str, response: httpx.Response) -> None:
    """Log HTTP error without the access token."""
    body = (response.text or "")[:500]
    logger.warning(
        "Admin GraphQL %s -> %s body=%s",
        shop,
        response.status_code,
        body,
    )


async def execute(shop: str, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
    """
    POST a GraphQL document for `shop` and return the decoded JSON envelope ({data, errors, extensions}).

    Raises httpx.HTTPError on transport failures and non-2xx statuses, ValueError when the
    body is not JSON. GraphQL-level `errors` are logged and returned as-is; callers decide
    whether a null `data` is fatal.
    """
    token = settings.shopify_admin_access_token.strip()
    if not token:
        raise AdminApiNotConfigured("SHOPIFY_ADMIN_ACCESS_TOKEN is not set")
    client = get_http_client()
    url = settings.admin_graphql_url(shop)
    body = {"query": query, "variables": dict(variables or {})}
    r = await client.post(
        url,
        json=body,
        headers={"X-Shopify-Access-Token": token, "Content-Type": "application/json"},
    )
    if r.status_code >= 400:
        _log_response_error(shop, r)
    r.raise_for_status()
    data = r.json() if r.content else {}
    if not isinstance(data, dict):
        raise ValueError("Admin GraphQL returned a non-object body")
    errors = data.get("errors")
    if errors:
        logger.warning("Admin GraphQL %s returned errors: %s", shop, str(errors)[:500])
    return data
