"""
Paginated search controller shared by the list pages.

Translates URL query state into cursor window variables, normalizes the data source's
connection envelope (fail-soft), and computes the query-string mutations that move a
list forward, backward or re-run a search. Nothing here holds state between requests.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from urllib.parse import urlencode

from storefront_admin.schemas.pagination import (
    QUERY_PARAM_CURSOR,
    QUERY_PARAM_DIRECTION,
    QUERY_PARAM_PAGE,
    QUERY_PARAM_SEARCH,
    Direction,
    ListQuery,
    NavigationLinks,
    PageInfo,
    PageWindowRequest,
    ResultPage,
)


class NavigationAction(str, Enum):
    SEARCH = "search"
    PAGINATE_NEXT = "paginate-next"
    PAGINATE_PREVIOUS = "paginate-previous"
    CLEAR = "clear"


@dataclass(frozen=True)
class NavigationState:
    """What the list view knows when the user acts: search box value, display page, last pageInfo."""

    search_value: str = ""
    current_page: int = 1
    page_info: PageInfo = field(default_factory=PageInfo)


@dataclass(frozen=True)
class QueryDelta:
    """Query-string mutation: keys to set, then keys to delete."""

    set_params: dict[str, str] = field(default_factory=dict)
    delete_params: tuple[str, ...] = ()

    @property
    def is_noop(self) -> bool:
        return not self.set_params and not self.delete_params

    def apply(self, params: Mapping[str, str]) -> dict[str, str]:
        out = dict(params)
        out.update(self.set_params)
        for key in self.delete_params:
            out.pop(key, None)
        return out


def build_search_filter(search_term: str) -> str:
    """Title wildcard filter for the Admin API search syntax; empty term matches everything."""
    term = (search_term or "").strip()
    return f"title:*{term}*" if term else ""


def build_window_request(query: ListQuery, limit: int) -> PageWindowRequest:
    """
    Map list query to cursor window variables.

    First page (no cursor) is always a forward window and ignores direction. With a cursor,
    PREVIOUS reads backwards (last/before); anything else reads forwards (first/after).
    """
    if not isinstance(limit, int) or isinstance(limit, bool) or limit < 1:
        raise ValueError(f"limit must be a positive integer, got {limit!r}")
    if not query.cursor:
        return PageWindowRequest(first=limit, after=None, before=None)
    if query.direction == Direction.PREVIOUS:
        return PageWindowRequest(before=query.cursor, last=limit)
    return PageWindowRequest(first=limit, after=query.cursor)


def _empty_result_page() -> ResultPage[Any]:
    return ResultPage[Any](nodes=[], page_info=PageInfo())


def _normalize_page_info(raw: Any) -> PageInfo:
    if isinstance(raw, PageInfo):
        return raw.model_copy()
    if not isinstance(raw, Mapping):
        return PageInfo()

    def _flag(*keys: str) -> bool:
        for key in keys:
            if isinstance(raw.get(key), bool):
                return raw[key]
        return False

    def _cursor(*keys: str) -> str | None:
        for key in keys:
            value = raw.get(key)
            if isinstance(value, str) and value:
                return value
        return None

    return PageInfo(
        has_next_page=_flag("hasNextPage", "has_next_page"),
        has_previous_page=_flag("hasPreviousPage", "has_previous_page"),
        start_cursor=_cursor("startCursor", "start_cursor"),
        end_cursor=_cursor("endCursor", "end_cursor"),
    )


def normalize_result_page(raw_response: Any, connection: str | None = None) -> ResultPage[Any]:
    """
    Normalize a connection payload into ResultPage; never raises.

    With `connection`, `raw_response` is the GraphQL envelope and the connection is read from
    `data[connection]`; otherwise `raw_response` is the connection itself ({nodes, pageInfo})
    or an already-normalized ResultPage, which keeps its own node type. Anything missing or
    malformed degrades to an empty page with all-false/None page info. Nodes pass through
    as given; shaping individual nodes is up to the caller.
    """
    if isinstance(raw_response, ResultPage):
        return raw_response.model_copy(
            update={
                "nodes": list(raw_response.nodes),
                "page_info": _normalize_page_info(raw_response.page_info),
            }
        )
    payload = raw_response
    if connection is not None:
        data = raw_response.get("data") if isinstance(raw_response, Mapping) else None
        payload = data.get(connection) if isinstance(data, Mapping) else None
    if not isinstance(payload, Mapping):
        return _empty_result_page()
    nodes = payload.get("nodes")
    if not isinstance(nodes, list):
        return _empty_result_page()
    page_info = payload.get("pageInfo", payload.get("page_info"))
    return ResultPage[Any](
        nodes=list(nodes),
        page_info=_normalize_page_info(page_info),
    )


def compute_navigation_delta(action: NavigationAction | str, state: NavigationState) -> QueryDelta:
    """
    Query-string mutations for a user action.

    Pagination actions are no-ops when the matching cursor is missing or the page info says
    there is nothing in that direction; the UI disables those controls. Pass the full pageInfo
    from the last response: a start cursor alone, with has_previous_page left at its False
    default, does not enable paginate-previous. `page` is a display counter kept by the
    client and is never reconciled with the data source.
    """
    action = NavigationAction(action)
    if action == NavigationAction.CLEAR:
        return QueryDelta(
            set_params={QUERY_PARAM_PAGE: "1"},
            delete_params=(QUERY_PARAM_SEARCH, QUERY_PARAM_CURSOR, QUERY_PARAM_DIRECTION),
        )
    if action == NavigationAction.SEARCH:
        term = (state.search_value or "").strip()
        if not term:
            return compute_navigation_delta(NavigationAction.CLEAR, state)
        return QueryDelta(
            set_params={QUERY_PARAM_SEARCH: term, QUERY_PARAM_PAGE: "1"},
            delete_params=(QUERY_PARAM_CURSOR, QUERY_PARAM_DIRECTION),
        )
    info = state.page_info
    if action == NavigationAction.PAGINATE_NEXT:
        if not info.has_next_page or not info.end_cursor:
            return QueryDelta()
        return QueryDelta(
            set_params={
                QUERY_PARAM_CURSOR: info.end_cursor,
                QUERY_PARAM_DIRECTION: Direction.NEXT.value,
                QUERY_PARAM_PAGE: str(state.current_page + 1),
            }
        )
    if not info.has_previous_page or not info.start_cursor:
        return QueryDelta()
    return QueryDelta(
        set_params={
            QUERY_PARAM_CURSOR: info.start_cursor,
            QUERY_PARAM_DIRECTION: Direction.PREVIOUS.value,
            # page stays a positive integer even when the URL was edited by hand
            QUERY_PARAM_PAGE: str(max(1, state.current_page - 1)),
        }
    )


def navigation_href(query: ListQuery, delta: QueryDelta) -> str | None:
    """Relative href ("?q=...&page=2") for the mutated query; None when the action is a no-op."""
    if delta.is_noop:
        return None
    return "?" + urlencode(delta.apply(query.to_query_params()))


def build_navigation_links(query: ListQuery, page_info: PageInfo) -> NavigationLinks:
    state = NavigationState(
        search_value=query.search_term,
        current_page=query.page,
        page_info=page_info,
    )
    return NavigationLinks(
        next=navigation_href(query, compute_navigation_delta(NavigationAction.PAGINATE_NEXT, state)),
        previous=navigation_href(query, compute_navigation_delta(NavigationAction.PAGINATE_PREVIOUS, state)),
        clear=navigation_href(query, compute_navigation_delta(NavigationAction.CLEAR, state)) or "?page=1",
    )
