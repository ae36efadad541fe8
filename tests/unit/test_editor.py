"""Unit tests for LayoutEditor."""

from pathlib import Path
from typing import get_type_hints

import pytest

from organizers.application.config import load_design
from organizers.application.dtos import LayoutDocument
from organizers.application.editor import LayoutEditor
from organizers.domain.services.geometry import check_layout
from organizers.domain.value_objects import Block, DrawerDimensions, SplitLine, WoodType


class TestEditorSetup:
    """Tests for a fresh editor."""

    def test_starts_with_single_block(self, editor: LayoutEditor) -> None:
        assert editor.blocks == (Block("initial", 0, 0, 300, 200),)
        assert editor.split_lines == ()
        assert editor.selected_id is None
        assert editor.material is WoodType.MAPLE

    def test_history_starts_with_initial_layout(self, editor: LayoutEditor) -> None:
        assert len(editor.history) == 1
        assert not editor.can_undo
        assert not editor.can_redo

    def test_split_lines_typed_as_tuple(self) -> None:
        hints = get_type_hints(LayoutEditor.split_lines.fget)
        assert hints["return"] == tuple[SplitLine, ...]


class TestSelectionAndSplitting:
    """Tests for selection and add_row/add_column."""

    def test_select_existing_block(self, editor: LayoutEditor) -> None:
        assert editor.select("initial")
        assert editor.selected_id == "initial"

    def test_select_missing_block(self, editor: LayoutEditor) -> None:
        assert not editor.select("nope")
        assert editor.selected_id is None

    def test_split_requires_selection(self, editor: LayoutEditor) -> None:
        assert not editor.add_row()
        assert not editor.add_column()
        assert len(editor.history) == 1

    def test_add_row_splits_and_clears_selection(self, editor: LayoutEditor) -> None:
        editor.select("initial")
        assert editor.add_row()

        assert [b.id for b in editor.blocks] == ["initial-top-1", "initial-bottom-1"]
        assert editor.selected_id is None
        assert len(editor.history) == 2

    def test_add_column(self, editor: LayoutEditor) -> None:
        editor.select("initial")
        assert editor.add_column()
        assert [b.id for b in editor.blocks] == ["initial-left-1", "initial-right-1"]

    def test_clear_selection(self, editor: LayoutEditor) -> None:
        editor.select("initial")
        editor.clear_selection()
        assert editor.selected_id is None


class TestDragging:
    """Tests for the drag lifecycle."""

    def test_drag_row_line(self, split_editor: LayoutEditor) -> None:
        drag = split_editor.begin_drag("split-1")
        assert drag is not None
        assert (drag.bounds.lower, drag.bounds.upper) == (5, 195)

        assert split_editor.drag_to(51.2) == 50
        # The layout is not touched until the drag ends
        assert split_editor.snapshot.split_line("split-1").position == 100

        assert split_editor.end_drag()
        top = split_editor.snapshot.block("initial-top-1")
        bottom = split_editor.snapshot.block("initial-bottom-1")
        assert top.height == 50
        assert (bottom.y, bottom.height) == (50, 150)
        assert split_editor.drag is None

    def test_drag_clamped_at_bound(self, split_editor: LayoutEditor) -> None:
        split_editor.begin_drag("split-1")
        assert split_editor.drag_to(-100) == 5
        split_editor.end_drag()
        assert split_editor.snapshot.block("initial-top-1").height == 5

    def test_release_without_movement_is_noop(self, split_editor: LayoutEditor) -> None:
        history_length = len(split_editor.history)
        split_editor.begin_drag("split-1")
        assert not split_editor.end_drag()
        assert len(split_editor.history) == history_length

    def test_begin_drag_unknown_line(self, split_editor: LayoutEditor) -> None:
        assert split_editor.begin_drag("split-9") is None
        assert split_editor.drag_to(50) is None
        assert not split_editor.end_drag()

    def test_cancel_drag(self, split_editor: LayoutEditor) -> None:
        split_editor.begin_drag("split-1")
        split_editor.drag_to(50)
        split_editor.cancel_drag()
        assert not split_editor.end_drag()
        assert split_editor.snapshot.split_line("split-1").position == 100

    def test_commit_drag_snaps_coordinate(self, split_editor: LayoutEditor) -> None:
        assert split_editor.commit_drag("split-1", 61)
        assert split_editor.snapshot.split_line("split-1").position == 60

    def test_commit_drag_rejects_undersized_neighbour(
        self, split_editor: LayoutEditor
    ) -> None:
        history_length = len(split_editor.history)
        assert not split_editor.commit_drag("split-1", 2.5)
        assert split_editor.snapshot.block("initial-top-1").height == 100
        assert len(split_editor.history) == history_length


class TestUndoRedo:
    """Tests for history navigation."""

    def test_undo_restores_previous_layout(self, split_editor: LayoutEditor) -> None:
        before = split_editor.snapshot
        split_editor.commit_drag("split-1", 50)

        assert split_editor.undo()
        assert split_editor.snapshot == before

    def test_redo_after_undo(self, split_editor: LayoutEditor) -> None:
        split_editor.commit_drag("split-1", 50)
        after = split_editor.snapshot
        split_editor.undo()

        assert split_editor.redo()
        assert split_editor.snapshot == after

    def test_undo_to_start_then_stop(self, split_editor: LayoutEditor) -> None:
        assert split_editor.undo()
        assert split_editor.blocks == (Block("initial", 0, 0, 300, 200),)
        assert not split_editor.undo()

    def test_redo_without_undo(self, split_editor: LayoutEditor) -> None:
        assert not split_editor.redo()

    def test_new_action_discards_redo(self, split_editor: LayoutEditor) -> None:
        split_editor.undo()
        split_editor.select("initial")
        split_editor.add_column()
        assert not split_editor.can_redo
        assert [b.id for b in split_editor.blocks] == ["initial-left-2", "initial-right-2"]

    def test_undo_clears_selection(self, split_editor: LayoutEditor) -> None:
        split_editor.select("initial-top-1")
        split_editor.undo()
        assert split_editor.selected_id is None


class TestObservers:
    """Tests for compartments-changed notifications."""

    def test_split_notifies(self, editor: LayoutEditor) -> None:
        received = []
        editor.subscribe(received.append)
        editor.select("initial")
        editor.add_row()

        assert len(received) == 1
        assert [b.id for b in received[0]] == ["initial-top-1", "initial-bottom-1"]

    def test_noop_does_not_notify(self, split_editor: LayoutEditor) -> None:
        received = []
        split_editor.subscribe(received.append)
        split_editor.commit_drag("split-1", 100)
        split_editor.redo()
        split_editor.select("initial-top-1")
        assert received == []

    def test_undo_redo_and_drag_notify(self, split_editor: LayoutEditor) -> None:
        received = []
        split_editor.subscribe(received.append)
        split_editor.commit_drag("split-1", 50)
        split_editor.undo()
        split_editor.redo()
        assert len(received) == 3

    def test_unsubscribe(self, editor: LayoutEditor) -> None:
        received = []
        unsubscribe = editor.subscribe(received.append)
        unsubscribe()
        unsubscribe()
        editor.clear()
        assert received == []


class TestClearAndLoad:
    """Tests for resetting and loading layouts."""

    def test_clear_resets_layout_and_history(self, split_editor: LayoutEditor) -> None:
        received = []
        split_editor.subscribe(received.append)

        assert split_editor.clear()

        assert split_editor.blocks == (Block("initial", 0, 0, 300, 200),)
        assert split_editor.split_lines == ()
        assert len(split_editor.history) == 1
        assert not split_editor.can_undo
        assert received == [split_editor.blocks]

    def test_clear_restarts_ids(self, split_editor: LayoutEditor) -> None:
        split_editor.clear()
        split_editor.select("initial")
        split_editor.add_row()
        assert split_editor.snapshot.split_line("split-1") is not None

    def test_initialize_with_new_dimensions(self, editor: LayoutEditor) -> None:
        editor.initialize(DrawerDimensions(12, 10, 2))
        assert editor.blocks == (Block("initial", 0, 0, 120, 100),)

    def test_load_continues_id_sequence(
        self, split_editor: LayoutEditor, dimensions: DrawerDimensions
    ) -> None:
        document = split_editor.export()
        editor = LayoutEditor(dimensions)
        editor.load(document)

        assert editor.snapshot == document.snapshot
        assert not editor.can_undo
        editor.select("initial-top-1")
        editor.add_column()
        assert editor.snapshot.split_line("split-2") is not None

    def test_load_rejects_layout_with_gap(
        self, split_editor: LayoutEditor, designs_path: Path
    ) -> None:
        document = LayoutDocument.from_config(load_design(designs_path / "gap_layout.json"))
        before = split_editor.snapshot

        with pytest.raises(ValueError, match="Blocks cover 300.00 sq in of 600.00 sq in"):
            split_editor.load(document)

        assert split_editor.snapshot == before
        assert split_editor.can_undo


class TestMaterialAndQuote:
    """Tests for material selection, pricing and export."""

    def test_set_material(self, editor: LayoutEditor) -> None:
        assert editor.set_material(WoodType.WALNUT)
        assert editor.material is WoodType.WALNUT

    def test_same_material_is_noop(self, editor: LayoutEditor) -> None:
        assert not editor.set_material(WoodType.MAPLE)

    def test_material_not_recorded_in_history(self, editor: LayoutEditor) -> None:
        editor.set_material(WoodType.OAK)
        assert len(editor.history) == 1

    def test_quote(self, split_editor: LayoutEditor) -> None:
        assert split_editor.quote().price == 690

    def test_export(self, split_editor: LayoutEditor) -> None:
        split_editor.set_material(WoodType.CHERRY)
        document = split_editor.export()
        assert isinstance(document, LayoutDocument)
        assert document.material is WoodType.CHERRY
        assert len(document.dividers) == 1


class TestLayoutInvariants:
    """Layouts stay valid through a sequence of edits."""

    def test_nested_edits_keep_a_valid_tiling(self, editor: LayoutEditor) -> None:
        editor.select("initial")
        editor.add_row()
        editor.select("initial-top-1")
        editor.add_column()
        editor.select("initial-bottom-1")
        editor.add_column()
        editor.commit_drag("split-1", 60)
        editor.commit_drag("split-2", 200)
        editor.commit_drag("split-3", 75)
        editor.commit_drag("split-1", 180)

        assert len(editor.blocks) == 4
        assert check_layout(editor.snapshot, editor.dimensions) == []

        while editor.undo():
            assert check_layout(editor.snapshot, editor.dimensions) == []

    def test_column_line_carries_row_line_end(self, editor: LayoutEditor) -> None:
        editor.select("initial")
        editor.add_column()
        editor.select("initial-left-1")
        editor.add_row()

        assert editor.commit_drag("split-1", 100)

        row_line = editor.snapshot.split_line("split-2")
        assert (row_line.x1, row_line.x2) == (0, 100)
        assert check_layout(editor.snapshot, editor.dimensions) == []

    def test_row_line_carries_minimum_width_column(self, editor: LayoutEditor) -> None:
        editor.select("initial")
        editor.add_row()
        editor.select("initial-bottom-1")
        editor.add_column()
        assert editor.commit_drag("split-2", 5)

        assert editor.commit_drag("split-1", 50)

        narrow = editor.layout.block("initial-bottom-1-left-2")
        assert (narrow.y, narrow.height) == (50, 150)
        assert check_layout(editor.snapshot, editor.dimensions) == []


@pytest.mark.parametrize("max_history", [1, 3])
def test_history_limit_respected(dimensions: DrawerDimensions, max_history: int) -> None:
    editor = LayoutEditor(dimensions, max_history=max_history)
    editor.select("initial")
    editor.add_row()
    for position in (50, 60, 70, 80):
        editor.commit_drag("split-1", position)
    assert len(editor.history) == max_history
