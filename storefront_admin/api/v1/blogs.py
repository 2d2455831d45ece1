"""Blog articles list, most recently updated first."""

from fastapi import APIRouter

from storefront_admin.api.deps import CurrentListQuery, CurrentSession
from storefront_admin.schemas.catalog import ArticleRow
from storefront_admin.schemas.pagination import ListPageResponse
from storefront_admin.services.catalog import ARTICLES, list_resource

router = APIRouter(prefix="/blogs", tags=["blogs"])


@router.get(
    "",
    response_model=ListPageResponse[ArticleRow],
    summary="List blog articles",
    responses={401: {"description": "Not authenticated"}},
)
async def list_articles(session: CurrentSession, query: CurrentListQuery) -> ListPageResponse:
    return await list_resource(session.shop, ARTICLES, query)
