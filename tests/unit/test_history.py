"""Unit tests for the undo/redo history."""

import pytest

from organizers.domain.services.history import LayoutHistory
from organizers.domain.value_objects import Block, LayoutSnapshot


def make_snapshot(n: int) -> LayoutSnapshot:
    return LayoutSnapshot(blocks=(Block(f"block-{n}", 0, 0, 10, 10),))


class TestLayoutHistory:
    """Tests for cursor movement."""

    def test_empty_history(self) -> None:
        history = LayoutHistory()
        assert len(history) == 0
        assert history.index == -1
        assert history.current is None
        assert not history.can_undo
        assert not history.can_redo

    def test_reset_holds_single_entry(self) -> None:
        history = LayoutHistory()
        history.reset(make_snapshot(0))
        assert len(history) == 1
        assert history.index == 0
        assert history.current == make_snapshot(0)
        assert not history.can_undo

    def test_undo_and_redo(self) -> None:
        history = LayoutHistory()
        history.reset(make_snapshot(0))
        history.push(make_snapshot(1))
        history.push(make_snapshot(2))

        assert history.undo() == make_snapshot(1)
        assert history.undo() == make_snapshot(0)
        assert history.undo() is None
        assert history.redo() == make_snapshot(1)
        assert history.redo() == make_snapshot(2)
        assert history.redo() is None

    def test_push_discards_redo_tail(self) -> None:
        history = LayoutHistory()
        history.reset(make_snapshot(0))
        history.push(make_snapshot(1))
        history.push(make_snapshot(2))
        history.undo()
        history.undo()

        history.push(make_snapshot(3))

        assert history.entries == (make_snapshot(0), make_snapshot(3))
        assert history.index == 1
        assert not history.can_redo

    def test_reset_clears_entries(self) -> None:
        history = LayoutHistory()
        history.reset(make_snapshot(0))
        history.push(make_snapshot(1))
        history.reset(make_snapshot(5))
        assert history.entries == (make_snapshot(5),)


class TestHistoryCap:
    """Tests for the bounded history depth."""

    def test_oldest_entries_dropped(self) -> None:
        history = LayoutHistory()
        history.reset(make_snapshot(0))
        for n in range(1, 61):
            history.push(make_snapshot(n))

        assert len(history) == 50
        assert history.index == 49
        assert history.entries[0] == make_snapshot(11)
        assert history.current == make_snapshot(60)

    def test_undo_stops_at_oldest_kept_entry(self) -> None:
        history = LayoutHistory(max_depth=3)
        history.reset(make_snapshot(0))
        for n in range(1, 5):
            history.push(make_snapshot(n))

        assert history.undo() == make_snapshot(3)
        assert history.undo() == make_snapshot(2)
        assert history.undo() is None

    def test_invalid_depth(self) -> None:
        with pytest.raises(ValueError, match="at least 1"):
            LayoutHistory(max_depth=0)
