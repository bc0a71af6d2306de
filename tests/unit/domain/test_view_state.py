"""Tests for ViewState transitions."""

from __future__ import annotations

from reelscout.domain.entities import CatalogError, CatalogResult, MediaItem, ViewState


class TestViewState:
    def test_begin_search_clears_error(self) -> None:
        state = ViewState(error=CatalogError.EMPTY_RESULT)
        state.begin_search()
        assert state.is_loading is True
        assert state.error is None

    def test_apply_success_replaces_items(self, matrix: MediaItem) -> None:
        state = ViewState()
        state.begin_search()
        state.apply(CatalogResult(items=[matrix]))
        assert state.is_loading is False
        assert state.error is None
        assert state.items == [matrix]

    def test_apply_empty_result_clears_items(self, matrix: MediaItem) -> None:
        state = ViewState(items=[matrix])
        state.apply(CatalogResult(error=CatalogError.EMPTY_RESULT))
        assert state.items == []
        assert state.error is CatalogError.EMPTY_RESULT

    def test_apply_fetch_failure_keeps_items(self, matrix: MediaItem) -> None:
        state = ViewState(items=[matrix])
        state.apply(CatalogResult(error=CatalogError.FETCH_FAILURE))
        assert state.items == [matrix]
        assert state.error is CatalogError.FETCH_FAILURE

    def test_fetch_failure_on_fresh_state_leaves_empty_list(self) -> None:
        state = ViewState()
        state.apply(CatalogResult(error=CatalogError.FETCH_FAILURE))
        assert state.items == []
        assert state.error is CatalogError.FETCH_FAILURE

    def test_loading_and_error_never_both_set(self) -> None:
        state = ViewState()
        state.apply(CatalogResult(error=CatalogError.TRANSPORT_ERROR))
        assert not (state.is_loading and state.error)
        state.begin_search()
        assert not (state.is_loading and state.error)
