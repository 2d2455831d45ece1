"""Shared pagination schemas for cursor-paginated list pages."""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

T = TypeVar("T")

QUERY_PARAM_SEARCH = "q"
QUERY_PARAM_CURSOR = "cursor"
QUERY_PARAM_DIRECTION = "direction"
QUERY_PARAM_PAGE = "page"


class Direction(str, Enum):
    NEXT = "next"
    PREVIOUS = "previous"

    @classmethod
    def coerce(cls, value: Any) -> "Direction":
        """Unknown or missing values fall back to NEXT."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value.strip().lower() == cls.PREVIOUS.value:
            return cls.PREVIOUS
        return cls.NEXT


def _coerce_page(value: Any) -> int:
    try:
        page = int(str(value).strip())
    except (TypeError, ValueError):
        return 1
    return page if page >= 1 else 1


def _coerce_cursor(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


class ListQuery(BaseModel):
    """List-view state carried in the URL query string (q, cursor, direction, page)."""

    model_config = ConfigDict(frozen=True)

    search_term: str = ""
    cursor: str | None = None  # absent = first page; direction is then ignored
    direction: Direction = Direction.NEXT
    page: int = Field(default=1, ge=1)  # display counter only

    @classmethod
    def from_query_params(cls, params: Mapping[str, Any]) -> "ListQuery":
        """Parse query params, coercing garbage to safe defaults instead of rejecting."""
        search = params.get(QUERY_PARAM_SEARCH)
        return cls(
            search_term=search.strip() if isinstance(search, str) else "",
            cursor=_coerce_cursor(params.get(QUERY_PARAM_CURSOR)),
            direction=Direction.coerce(params.get(QUERY_PARAM_DIRECTION)),
            page=_coerce_page(params.get(QUERY_PARAM_PAGE, 1)),
        )

    def to_query_params(self) -> dict[str, str]:
        """Inverse of from_query_params; default values are omitted except page."""
        params: dict[str, str] = {}
        if self.search_term:
            params[QUERY_PARAM_SEARCH] = self.search_term
        if self.cursor:
            params[QUERY_PARAM_CURSOR] = self.cursor
            params[QUERY_PARAM_DIRECTION] = self.direction.value
        params[QUERY_PARAM_PAGE] = str(self.page)
        return params


class PageWindowRequest(BaseModel):
    """
    Cursor window variables for a forward/backward paginated connection.

    Only fields passed to the constructor count as set; `as_variables()` drops the rest,
    so an unused pair never reaches the API (even as null).
    """

    first: int | None = None
    after: str | None = None
    before: str | None = None
    last: int | None = None

    def as_variables(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)

    @property
    def is_forward(self) -> bool:
        return self.first is not None


class PageInfo(BaseModel):
    """Connection pageInfo envelope; accepts the API's camelCase keys."""

    has_next_page: bool = Field(default=False, validation_alias=AliasChoices("hasNextPage", "has_next_page"))
    has_previous_page: bool = Field(default=False, validation_alias=AliasChoices("hasPreviousPage", "has_previous_page"))
    start_cursor: str | None = Field(default=None, validation_alias=AliasChoices("startCursor", "start_cursor"))
    end_cursor: str | None = Field(default=None, validation_alias=AliasChoices("endCursor", "end_cursor"))


class ResultPage(BaseModel, Generic[T]):
    """One window of nodes plus its pageInfo. Built per request, never merged across requests."""

    nodes: list[T] = Field(default_factory=list)
    page_info: PageInfo = Field(default_factory=PageInfo, validation_alias=AliasChoices("pageInfo", "page_info"))


class NavigationLinks(BaseModel):
    """Ready-made query strings for pagination controls; null means the control is disabled."""

    next: str | None = None
    previous: str | None = None
    clear: str


class EmptyState(BaseModel):
    title: str
    description: str = "Try changing the filters or search term"


class ListPageResponse(BaseModel, Generic[T]):
    """Standard list page body: items + cursor page info + navigation."""

    items: list[T]
    page_info: PageInfo
    search_term: str
    current_page: int
    start_cursor: str | None = None
    end_cursor: str | None = None
    degraded: bool = False  # True when the data source failed and the list fell back to empty
    navigation: NavigationLinks
    empty_state: EmptyState | None = None
