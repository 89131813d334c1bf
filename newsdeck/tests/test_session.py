"""Tests for the browse session orchestration."""

from __future__ import annotations

import threading

import pytest

from newsdeck.config import NewsDeckConfig
from newsdeck.query.facets import compute_facets
from newsdeck.query.normalize import normalize_articles
from newsdeck.query.state import FacetGroup, SortKey
from newsdeck.session import BrowseSession


@pytest.fixture()
def session(articles, facet_index) -> BrowseSession:
    return BrowseSession(articles, facet_index, config=NewsDeckConfig())


@pytest.fixture()
def large_session() -> BrowseSession:
    records = [
        {"title": f"Story {n:02d}", "publishedAt": f"2024-01-{n:02d}", "tags": ["daily"]}
        for n in range(1, 26)
    ]
    articles = normalize_articles(records)
    return BrowseSession(articles, compute_facets(articles), config=NewsDeckConfig())


def test_default_refresh_shows_everything(session) -> None:
    view = session.refresh()

    assert view.result.total == 6
    assert view.result.page == 1
    assert view.result.total_pages == 1
    assert view.result.page_items[0].title == "Election results announced"
    assert view.params == {"page": "1", "pageSize": "20"}
    assert view.pages == []


def test_out_of_range_page_is_written_back(large_session) -> None:
    large_session.set_page_size(10)
    large_session.go_to_page(99)
    view = large_session.refresh()

    assert view.result.page == 3
    assert large_session.state.page == 3
    assert view.params["page"] == "3"
    assert view.result.display_start == 21
    assert view.result.display_end == 25
    assert view.pages == [1, 2, 3]


def test_filter_changes_reset_page(large_session) -> None:
    large_session.set_page_size(10)
    large_session.go_to_page(2)
    large_session.toggle(FacetGroup.TAG, "daily")

    assert large_session.state.page == 1
    assert large_session.state.tags == {"daily"}

    large_session.toggle("tags", "daily")
    assert large_session.state.tags == set()


def test_toggle_filters_result_and_updates_counts(session) -> None:
    session.toggle(FacetGroup.TAG, "ai")
    view = session.refresh()

    assert view.result.total == 3
    assert view.counts[FacetGroup.TAG]["elections"] == 1
    assert view.counts[FacetGroup.CATEGORY] == {"technology": 1, "business": 1, "politics": 1}
    assert view.params["tags"] == "ai"


def test_invalid_sort_and_page_size_are_ignored(session) -> None:
    session.go_to_page(2)
    session.set_sort("bogus")
    session.set_page_size(7)

    assert session.state.sort is SortKey.NEWEST
    assert session.state.page_size == 20
    assert session.state.page == 2

    session.set_sort("title_az")
    assert session.state.sort is SortKey.TITLE_AZ
    assert session.state.page == 1


def test_clear_group_and_clear_all(session) -> None:
    session.toggle(FacetGroup.CATEGORY, "politics")
    session.toggle(FacetGroup.LANGUAGE, "en")
    session.set_search("debate")
    session.clear_group(FacetGroup.CATEGORY)

    assert session.state.categories == set()
    assert session.state.languages == {"en"}

    session.toggle_tags_expanded()
    session.clear_all()

    assert session.state.search_text == ""
    assert session.state.languages == set()
    assert session.state.tags_expanded is False
    assert session.refresh().result.total == 6


def test_empty_result_reports_zero_bounds(session) -> None:
    session.set_search("no such story")
    view = session.refresh()

    assert view.result.is_empty
    assert view.result.total_pages == 1
    assert view.result.display_start == 0
    assert view.result.display_end == 0
    payload = view.to_dict()
    assert payload["empty"] is True
    assert payload["filtered"] is True
    assert payload["items"] == []


def test_apply_params_keeps_ui_only_flag(session) -> None:
    session.toggle_tags_expanded()
    session.apply_params({"tags": "ai,policy", "sort": "oldest"})

    assert session.state.tags == {"ai", "policy"}
    assert session.state.sort is SortKey.OLDEST
    assert session.state.tags_expanded is True
    assert session.to_params() == {
        "sort": "oldest",
        "page": "1",
        "pageSize": "20",
        "tags": "ai,policy",
    }


def test_view_to_dict_shape(session) -> None:
    payload = session.refresh().to_dict()

    assert set(payload) == {
        "query",
        "total",
        "page",
        "pageSize",
        "totalPages",
        "start",
        "end",
        "empty",
        "filtered",
        "items",
        "facets",
        "pagination",
    }
    assert set(payload["facets"]) == {"category", "publishers", "languages", "tags"}
    assert payload["items"][0]["title"] == "Election results announced"
    assert payload["start"] == 1 and payload["end"] == 6
    assert payload["filtered"] is False


def test_configured_default_page_size(articles, facet_index) -> None:
    config = NewsDeckConfig(default_page_size=50, tags_top_n=1)
    session = BrowseSession(articles, facet_index, config=config)
    view = session.refresh()

    assert session.state.page_size == 50
    assert [option.label for option in view.facets[FacetGroup.TAG].options] == ["ai"]
    assert view.facets[FacetGroup.TAG].has_more is True


def test_debounced_search_applies_last_value(session) -> None:
    debouncer = session.debounced_search(delay=60)
    debouncer.call("ai")
    debouncer.call("wire")

    assert session.state.search_text == ""
    assert debouncer.flush() is True
    assert session.state.search_text == "wire"
    assert session.refresh().result.total == 1


def test_debounced_search_waits_for_session_lock(session) -> None:
    debouncer = session.debounced_search(delay=60)

    with session._lock:
        debouncer.call("wire")
        worker = threading.Thread(target=debouncer.flush)
        worker.start()
        worker.join(timeout=0.2)
        assert session.state.search_text == ""
    worker.join(timeout=5)

    assert not worker.is_alive()
    assert session.state.search_text == "wire"
