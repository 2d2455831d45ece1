"""
List and detail lookups for products, blog articles and online store pages.

Each list page runs exactly one Admin GraphQL query per request. List failures are fail-soft
(empty page, `degraded=True`); detail failures propagate to the router.
"""
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Any

import httpx
from pydantic import ValidationError

from storefront_admin.config import settings
from storefront_admin.schemas.catalog import ArticleRow, PageDetail, PageRow, ProductRow
from storefront_admin.schemas.pagination import EmptyState, ListPageResponse, ListQuery
from storefront_admin.services import admin_graphql
from storefront_admin.services.pagination import (
    build_navigation_links,
    build_search_filter,
    build_window_request,
    normalize_result_page,
)

logger = logging.getLogger(__name__)

PLACEHOLDER_PRODUCT_IMAGE = (
    "https://cdn.shopify.com/s/files/1/0533/2089/files/placeholder-images-product-1_large.png"
)
PAGE_SUMMARY_MAX_LENGTH = 100

PRODUCTS_QUERY = """#graphql
query getProducts($query: String!, $first: Int, $last: Int, $after: String, $before: String) {
  products(first: $first, last: $last, after: $after, before: $before, query: $query, sortKey: TITLE) {
    pageInfo { hasNextPage hasPreviousPage startCursor endCursor }
    nodes {
      id
      title
      status
      totalInventory
      createdAt
      updatedAt
      featuredImage { url }
      priceRangeV2 { minVariantPrice { amount currencyCode } }
    }
  }
}"""

ARTICLES_QUERY = """#graphql
query getArticles($query: String!, $first: Int, $last: Int, $after: String, $before: String) {
  articles(first: $first, last: $last, after: $after, before: $before, query: $query, sortKey: UPDATED_AT, reverse: true) {
    pageInfo { hasNextPage hasPreviousPage startCursor endCursor }
    nodes {
      id
      title
      handle
      publishedAt
      image { url }
      blog { title }
    }
  }
}"""

PAGES_QUERY = """#graphql
query getPages($query: String!, $first: Int, $last: Int, $after: String, $before: String) {
  pages(first: $first, last: $last, after: $after, before: $before, query: $query) {
    pageInfo { hasNextPage hasPreviousPage startCursor endCursor }
    nodes {
      id
      title
      handle
      bodySummary
      createdAt
      updatedAt
    }
  }
}"""

PAGE_QUERY = """#graphql
query getPage($id: ID!) {
  page(id: $id) {
    id
    title
    handle
    bodySummary
    body
    createdAt
    updatedAt
  }
}"""


def _parse_datetime(s: Any) -> datetime | None:
    """Parse ISO 8601 timestamp from API (trailing Z allowed)."""
    if not s or not isinstance(s, str):
        return None
    try:
        return datetime.fromisoformat(s.strip().replace("Z", "+00:00"))
    except ValueError:
        return None


def _nested(item: dict[str, Any], *keys: str) -> Any:
    """item[k1][k2]... or None when any level is missing or null."""
    value: Any = item
    for key in keys:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value


def truncate_text(text: str | None, max_length: int) -> str:
    if not text:
        return ""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


def product_row(item: dict[str, Any]) -> ProductRow:
    status = str(item.get("status") or "")
    inventory = item.get("totalInventory")
    amount = _nested(item, "priceRangeV2", "minVariantPrice", "amount")
    return ProductRow(
        id=str(item.get("id", "")),
        title=item.get("title") or "",
        status=status.lower(),
        status_tone="success" if status.upper() == "ACTIVE" else "critical",
        total_inventory=inventory if isinstance(inventory, int) else None,
        price_amount=str(amount) if amount is not None else None,
        currency_code=_nested(item, "priceRangeV2", "minVariantPrice", "currencyCode"),
        thumbnail_url=_nested(item, "featuredImage", "url") or PLACEHOLDER_PRODUCT_IMAGE,
        created_at=_parse_datetime(item.get("createdAt")),
        updated_at=_parse_datetime(item.get("updatedAt")),
    )


def article_row(item: dict[str, Any]) -> ArticleRow:
    return ArticleRow(
        id=str(item.get("id", "")),
        title=item.get("title") or "",
        handle=item.get("handle"),
        blog_title=_nested(item, "blog", "title"),
        image_url=_nested(item, "image", "url"),
        published_at=_parse_datetime(item.get("publishedAt")),
    )


def page_row(item: dict[str, Any]) -> PageRow:
    return PageRow(
        id=str(item.get("id", "")),
        title=item.get("title") or "",
        handle=item.get("handle"),
        summary=truncate_text(item.get("bodySummary"), PAGE_SUMMARY_MAX_LENGTH),
        created_at=_parse_datetime(item.get("createdAt")),
        updated_at=_parse_datetime(item.get("updatedAt")),
    )


@dataclass(frozen=True)
class ListResource:
    """One cursor-paginated connection exposed as a list page."""

    connection: str
    document: str
    row: Callable[[dict[str, Any]], Any]
    empty_title: str


PRODUCTS = ListResource("products", PRODUCTS_QUERY, product_row, "No products found")
ARTICLES = ListResource("articles", ARTICLES_QUERY, article_row, "No articles found")
PAGES = ListResource("pages", PAGES_QUERY, page_row, "No pages found")


def build_list_variables(query: ListQuery, limit: int) -> dict[str, Any]:
    """GraphQL variables: search filter plus exactly one cursor window pair."""
    window = build_window_request(query, limit)
    return {"query": build_search_filter(query.search_term), **window.as_variables()}


async def _fetch_connection(shop: str, resource: ListResource, variables: dict[str, Any]) -> dict[str, Any] | None:
    try:
        return await admin_graphql.execute(shop, resource.document, variables)
    except (httpx.HTTPError, ValueError, admin_graphql.AdminApiNotConfigured) as e:
        logger.warning("List %s for shop=%s degraded to empty: %s", resource.connection, shop, e)
        return None


def _has_connection(envelope: dict[str, Any] | None, connection: str) -> bool:
    data = envelope.get("data") if isinstance(envelope, dict) else None
    return isinstance(data, dict) and isinstance(data.get(connection), dict)


def _shape_rows(shop: str, resource: ListResource, nodes: list[Any]) -> list[Any]:
    """Table rows for `nodes`; a node that is not an object or fails validation is skipped."""
    rows = []
    for node in nodes:
        if not isinstance(node, dict):
            logger.warning("List %s for shop=%s: skipping non-object node %r", resource.connection, shop, node)
            continue
        try:
            rows.append(resource.row(node))
        except ValidationError as e:
            logger.warning(
                "List %s for shop=%s: skipping malformed node id=%s: %s",
                resource.connection,
                shop,
                node.get("id"),
                e,
            )
    return rows


async def list_resource(
    shop: str,
    resource: ListResource,
    query: ListQuery,
    limit: int | None = None,
) -> ListPageResponse:
    """Fetch one window of `resource` and shape it for the index table and pagination controls."""
    limit = limit or settings.list_page_size
    envelope = await _fetch_connection(shop, resource, build_list_variables(query, limit))
    degraded = not _has_connection(envelope, resource.connection)
    if degraded and envelope is not None:
        logger.warning("List %s for shop=%s returned no connection; showing empty list", resource.connection, shop)
    result = normalize_result_page(envelope, resource.connection)
    items = _shape_rows(shop, resource, result.nodes)
    info = result.page_info
    return ListPageResponse(
        items=items,
        page_info=info,
        search_term=query.search_term,
        current_page=query.page,
        start_cursor=info.start_cursor,
        end_cursor=info.end_cursor,
        degraded=degraded,
        navigation=build_navigation_links(query, info),
        empty_state=None if items else EmptyState(title=resource.empty_title),
    )


def page_gid(page_id: str) -> str:
    """Admin API global id for a numeric page id; full gids pass through."""
    page_id = (page_id or "").strip()
    if page_id.startswith("gid://"):
        return page_id
    return f"gid://shopify/Page/{page_id}"


async def get_page(shop: str, page_id: str) -> PageDetail | None:
    """Single page by id. None when the API has no such page; transport errors propagate."""
    envelope = await admin_graphql.execute(shop, PAGE_QUERY, {"id": page_gid(page_id)})
    item = _nested(envelope, "data", "page")
    if not isinstance(item, dict):
        return None
    handle = item.get("handle")
    return PageDetail(
        id=str(item.get("id", "")),
        title=item.get("title") or "",
        handle=handle,
        body=item.get("body") or "",
        body_summary=item.get("bodySummary") or "",
        preview_url=f"/pages/{handle}" if handle else None,
        created_at=_parse_datetime(item.get("createdAt")),
        updated_at=_parse_datetime(item.get("updatedAt")),
    )
