"""Products list: search by title, cursor pagination (sorted by title)."""

from fastapi import APIRouter

from storefront_admin.api.deps import CurrentListQuery, CurrentSession
from storefront_admin.schemas.catalog import ProductRow
from storefront_admin.schemas.pagination import ListPageResponse
from storefront_admin.services.catalog import PRODUCTS, list_resource

router = APIRouter(prefix="/products", tags=["products"])


@router.get(
    "",
    response_model=ListPageResponse[ProductRow],
    summary="List products",
    responses={401: {"description": "Not authenticated"}},
)
async def list_products(session: CurrentSession, query: CurrentListQuery) -> ListPageResponse:
    """One page of products; an unreachable Admin API yields an empty, degraded page."""
    return await list_resource(session.shop, PRODUCTS, query)
