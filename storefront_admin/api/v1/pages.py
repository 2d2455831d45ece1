"""Online store pages: list with search/pagination and single page detail."""

import logging

import httpx
from fastapi import APIRouter, HTTPException

from storefront_admin.api.deps import CurrentListQuery, CurrentSession
from storefront_admin.schemas.catalog import PageDetail, PageRow
from storefront_admin.schemas.pagination import ListPageResponse
from storefront_admin.services.admin_graphql import AdminApiNotConfigured
from storefront_admin.services.catalog import PAGES, get_page, list_resource

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pages", tags=["pages"])


@router.get(
    "",
    response_model=ListPageResponse[PageRow],
    summary="List pages",
    responses={401: {"description": "Not authenticated"}},
)
async def list_pages(session: CurrentSession, query: CurrentListQuery) -> ListPageResponse:
    return await list_resource(session.shop, PAGES, query)


@router.get(
    "/{page_id}",
    response_model=PageDetail,
    summary="Get page",
    responses={
        401: {"description": "Not authenticated"},
        404: {"description": "Page not found"},
        503: {"description": "Admin API unavailable"},
    },
)
async def get_page_detail(page_id: str, session: CurrentSession) -> PageDetail:
    """Single page by numeric id (or full gid). Missing page is a 404; no retry."""
    try:
        page = await get_page(session.shop, page_id)
    except AdminApiNotConfigured as e:
        logger.error("Page %s lookup for shop=%s: %s", page_id, session.shop, e)
        raise HTTPException(status_code=503, detail="Admin API is not configured.")
    except httpx.TimeoutException as e:
        logger.exception("Page %s lookup timed out for shop=%s: %s", page_id, session.shop, e)
        raise HTTPException(status_code=503, detail="Admin API timed out. Try again later.")
    except (httpx.HTTPError, ValueError) as e:
        logger.exception("Page %s lookup failed for shop=%s: %s", page_id, session.shop, e)
        raise HTTPException(status_code=503, detail="Admin API request failed. Try again later.")
    if page is None:
        raise HTTPException(status_code=404, detail="Page not found")
    return page
