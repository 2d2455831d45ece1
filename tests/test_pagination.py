"""Unit tests for the paginated search controller: window requests, normalization, navigation deltas."""

import pytest

from storefront_admin.schemas.pagination import Direction, ListQuery, PageInfo, PageWindowRequest, ResultPage
from storefront_admin.services.pagination import (
    NavigationAction,
    NavigationState,
    QueryDelta,
    build_navigation_links,
    build_search_filter,
    build_window_request,
    compute_navigation_delta,
    navigation_href,
    normalize_result_page,
)

EMPTY_PAGE_INFO = {
    "has_next_page": False,
    "has_previous_page": False,
    "start_cursor": None,
    "end_cursor": None,
}


def _connection(nodes=None, **page_info):
    info = {"hasNextPage": False, "hasPreviousPage": False, "startCursor": None, "endCursor": None}
    info.update(page_info)
    return {"nodes": nodes if nodes is not None else [], "pageInfo": info}


# --- build_window_request ---


def test_first_page_window_is_forward_with_explicit_nulls():
    window = build_window_request(ListQuery(search_term="", cursor=None), 10)
    assert window.as_variables() == {"first": 10, "after": None, "before": None}
    assert "last" not in window.as_variables()
    assert window.is_forward


@pytest.mark.parametrize("direction", [Direction.NEXT, Direction.PREVIOUS])
def test_first_page_ignores_direction(direction):
    window = build_window_request(ListQuery(cursor=None, direction=direction), 10)
    assert window.as_variables() == {"first": 10, "after": None, "before": None}


def test_cursor_next_window_sets_only_forward_pair():
    window = build_window_request(ListQuery(search_term="shirt", cursor="abc123", direction=Direction.NEXT), 10)
    assert window.as_variables() == {"first": 10, "after": "abc123"}


def test_cursor_previous_window_sets_only_backward_pair():
    window = build_window_request(ListQuery(cursor="xyz", direction=Direction.PREVIOUS), 10)
    assert window.as_variables() == {"before": "xyz", "last": 10}
    assert not window.is_forward


def test_unknown_direction_param_reads_forward():
    query = ListQuery.from_query_params({"cursor": "c1", "direction": "sideways"})
    assert query.direction == Direction.NEXT
    assert build_window_request(query, 10).as_variables() == {"first": 10, "after": "c1"}


@pytest.mark.parametrize("limit", [0, -1, 2.5, True])
def test_non_positive_limit_rejected(limit):
    with pytest.raises(ValueError):
        build_window_request(ListQuery(), limit)


def test_search_filter_wildcards_title():
    assert build_search_filter("shirt") == "title:*shirt*"
    assert build_search_filter("  shirt ") == "title:*shirt*"
    assert build_search_filter("") == ""


# --- ListQuery <-> query string ---


def test_list_query_defaults_from_empty_params():
    assert ListQuery.from_query_params({}) == ListQuery(search_term="", cursor=None, direction=Direction.NEXT, page=1)


@pytest.mark.parametrize("raw_page", ["-3", "0", "abc", "", None])
def test_garbage_page_coerced_to_one(raw_page):
    assert ListQuery.from_query_params({"page": raw_page}).page == 1


def test_empty_cursor_means_first_page():
    query = ListQuery.from_query_params({"cursor": "", "direction": "previous", "page": "4"})
    assert query.cursor is None
    assert build_window_request(query, 10).as_variables() == {"first": 10, "after": None, "before": None}


def test_query_params_roundtrip():
    query = ListQuery(search_term="mug", cursor="c9", direction=Direction.PREVIOUS, page=3)
    params = query.to_query_params()
    assert params == {"q": "mug", "cursor": "c9", "direction": "previous", "page": "3"}
    assert ListQuery.from_query_params(params) == query


def test_to_query_params_omits_direction_without_cursor():
    assert ListQuery(direction=Direction.PREVIOUS).to_query_params() == {"page": "1"}


# --- normalize_result_page ---


@pytest.mark.parametrize(
    "raw",
    [None, {}, {"data": None}, {"data": {}}, {"data": {"products": None}}, {"errors": [{"message": "boom"}]}, "oops"],
)
def test_missing_connection_degrades_to_empty(raw):
    page = normalize_result_page(raw, "products")
    assert page.nodes == []
    assert page.page_info.model_dump() == EMPTY_PAGE_INFO


def test_non_list_nodes_degrade_to_empty():
    page = normalize_result_page({"nodes": "nope", "pageInfo": {"hasNextPage": True}})
    assert page.nodes == []
    assert page.page_info.model_dump() == EMPTY_PAGE_INFO


def test_passes_nodes_and_page_info_through():
    raw = {"data": {"products": _connection([{"id": "1"}, {"id": "2"}], hasNextPage=True, endCursor="e2")}}
    page = normalize_result_page(raw, "products")
    assert [n["id"] for n in page.nodes] == ["1", "2"]
    assert page.page_info.has_next_page is True
    assert page.page_info.end_cursor == "e2"
    assert page.page_info.start_cursor is None


def test_missing_page_info_fields_get_safe_defaults():
    page = normalize_result_page({"nodes": [{"id": "1"}], "pageInfo": {"hasNextPage": "yes"}})
    assert page.nodes == [{"id": "1"}]
    assert page.page_info.model_dump() == EMPTY_PAGE_INFO


def test_normalize_is_idempotent():
    raw = _connection([{"id": "a"}], hasPreviousPage=True, startCursor="s", endCursor="e")
    once = normalize_result_page(raw)
    assert normalize_result_page(once) == once
    assert normalize_result_page(once.model_dump()) == once


def test_normalized_page_is_result_page():
    assert isinstance(normalize_result_page(None), ResultPage)


def test_nodes_pass_through_as_given():
    page = normalize_result_page(_connection([{"id": "1"}, "junk", 7]))
    assert page.nodes == [{"id": "1"}, "junk", 7]


def test_result_page_keeps_its_node_type():
    typed = ResultPage[ListQuery](nodes=[ListQuery(search_term="hat")], page_info=PageInfo(has_next_page=True))
    page = normalize_result_page(typed)
    assert page.nodes == [ListQuery(search_term="hat")]
    assert page.page_info.has_next_page is True


# --- compute_navigation_delta ---


def test_search_resets_cursor_and_page():
    delta = compute_navigation_delta(NavigationAction.SEARCH, NavigationState(search_value="hat", current_page=5))
    params = delta.apply({"q": "old", "cursor": "c", "direction": "next", "page": "5"})
    assert params == {"q": "hat", "page": "1"}


def test_clear_drops_search_term():
    delta = compute_navigation_delta("clear", NavigationState(search_value="hat", current_page=2))
    assert delta.apply({"q": "hat", "cursor": "c", "direction": "previous", "page": "2"}) == {"page": "1"}


def test_search_with_blank_value_behaves_as_clear():
    state = NavigationState(search_value="   ")
    assert compute_navigation_delta(NavigationAction.SEARCH, state) == compute_navigation_delta(
        NavigationAction.CLEAR, state
    )


def test_paginate_next_uses_end_cursor():
    state = NavigationState(current_page=1, page_info=PageInfo(has_next_page=True, end_cursor="end1"))
    delta = compute_navigation_delta(NavigationAction.PAGINATE_NEXT, state)
    assert delta.set_params == {"cursor": "end1", "direction": "next", "page": "2"}


def test_paginate_previous_from_page_three():
    state = NavigationState(
        current_page=3,
        page_info=PageInfo(has_previous_page=True, has_next_page=True, start_cursor="xyz", end_cursor="e"),
    )
    params = compute_navigation_delta(NavigationAction.PAGINATE_PREVIOUS, state).apply({"page": "3"})
    assert params == {"cursor": "xyz", "direction": "previous", "page": "2"}


@pytest.mark.parametrize(
    "action,page_info",
    [
        (NavigationAction.PAGINATE_NEXT, PageInfo(has_next_page=True, end_cursor=None)),
        (NavigationAction.PAGINATE_NEXT, PageInfo(has_next_page=False, end_cursor="e")),
        (NavigationAction.PAGINATE_PREVIOUS, PageInfo(has_previous_page=True, start_cursor=None)),
        (NavigationAction.PAGINATE_PREVIOUS, PageInfo(has_previous_page=False, start_cursor="s")),
    ],
)
def test_pagination_without_cursor_is_noop(action, page_info):
    delta = compute_navigation_delta(action, NavigationState(current_page=2, page_info=page_info))
    assert delta.is_noop
    assert delta.apply({"page": "2"}) == {"page": "2"}


def test_previous_never_goes_below_page_one():
    state = NavigationState(current_page=1, page_info=PageInfo(has_previous_page=True, start_cursor="s"))
    assert compute_navigation_delta(NavigationAction.PAGINATE_PREVIOUS, state).set_params["page"] == "1"


def test_next_then_window_request_reads_after_end_cursor():
    query = ListQuery(search_term="shirt", page=1)
    info = normalize_result_page(_connection([{"id": "1"}], hasNextPage=True, endCursor="end-cursor-1")).page_info
    delta = compute_navigation_delta(
        NavigationAction.PAGINATE_NEXT,
        NavigationState(search_value=query.search_term, current_page=query.page, page_info=info),
    )
    next_query = ListQuery.from_query_params(delta.apply(query.to_query_params()))
    window = build_window_request(next_query, 10)
    assert window.after == "end-cursor-1"
    assert window.as_variables() == {"first": 10, "after": "end-cursor-1"}
    assert next_query.search_term == "shirt"
    assert next_query.page == 2


# --- navigation links ---


def test_navigation_href_none_for_noop():
    assert navigation_href(ListQuery(), QueryDelta()) is None


def test_navigation_links_disable_unavailable_directions():
    links = build_navigation_links(ListQuery(search_term="a b"), PageInfo(has_next_page=True, end_cursor="e/1"))
    assert links.next == "?q=a+b&page=2&cursor=e%2F1&direction=next"
    assert links.previous is None
    assert links.clear == "?page=1"


def test_page_window_request_unset_fields_not_serialized():
    assert PageWindowRequest(last=5, before="b").as_variables() == {"last": 5, "before": "b"}


def test_start_cursor_alone_does_not_enable_previous():
    state = NavigationState(current_page=3, page_info=PageInfo(start_cursor="xyz"))
    assert compute_navigation_delta(NavigationAction.PAGINATE_PREVIOUS, state).is_noop
