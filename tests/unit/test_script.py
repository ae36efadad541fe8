"""Unit tests for scripted editing."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from organizers.application.config import ConfigError
from organizers.application.editor import LayoutEditor
from organizers.application.script import (
    EditOperation,
    apply_operation,
    load_script,
    run_script,
)
from organizers.domain.value_objects import WoodType


class TestEditOperation:
    """Tests for operation validation."""

    def test_select_requires_block(self) -> None:
        with pytest.raises(ValidationError, match="requires 'block'"):
            EditOperation(op="select")

    def test_drag_requires_line_and_target(self) -> None:
        with pytest.raises(ValidationError, match="requires 'line' and 'to'"):
            EditOperation(op="drag", line="split-1")

    def test_material_requires_wood(self) -> None:
        with pytest.raises(ValidationError, match="requires 'wood'"):
            EditOperation(op="material")

    def test_unknown_operation(self) -> None:
        with pytest.raises(ValidationError):
            EditOperation(op="rotate")

    def test_unknown_wood(self) -> None:
        with pytest.raises(ValidationError):
            EditOperation(op="material", wood="plywood")


class TestRunScript:
    """Tests for replaying operations."""

    def test_split_and_drag(self, editor: LayoutEditor) -> None:
        operations = [
            EditOperation(op="select", block="initial"),
            EditOperation(op="add_row"),
            EditOperation(op="drag", line="split-1", to=50),
            EditOperation(op="material", wood="oak"),
        ]
        results = run_script(editor, operations)

        assert [r.applied for r in results] == [True, True, True, True]
        assert editor.snapshot.block("initial-top-1").height == 50
        assert editor.material is WoodType.OAK

    def test_noops_reported_and_skipped(self, editor: LayoutEditor) -> None:
        operations = [
            EditOperation(op="undo"),
            EditOperation(op="add_row"),
            EditOperation(op="select", block="initial"),
            EditOperation(op="add_row"),
            EditOperation(op="drag", line="split-9", to=50),
            EditOperation(op="drag", line="split-1", to=1),
        ]
        results = run_script(editor, operations)
        assert [r.applied for r in results] == [False, False, True, True, False, True]
        assert [r.index for r in results] == [0, 1, 2, 3, 4, 5]
        # The last drag was clamped to the minimum compartment size
        assert editor.snapshot.block("initial-top-1").height == 5

    def test_undo_redo_clear(self, split_editor: LayoutEditor) -> None:
        assert apply_operation(split_editor, EditOperation(op="undo"))
        assert apply_operation(split_editor, EditOperation(op="redo"))
        assert apply_operation(split_editor, EditOperation(op="clear"))
        assert len(split_editor.blocks) == 1

    def test_clear_selection(self, editor: LayoutEditor) -> None:
        editor.select("initial")
        apply_operation(editor, EditOperation(op="clear_selection"))
        assert editor.selected_id is None


class TestLoadScript:
    """Tests for reading scripts from disk."""

    def test_load_fixture(self, scripts_path: Path) -> None:
        operations = load_script(scripts_path / "split_and_drag.json")
        assert [op.op for op in operations] == ["select", "add_row", "drag", "material"]

    def test_invalid_operation(self, scripts_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_script(scripts_path / "invalid_op.json")
        assert exc_info.value.error_type == "validation"
        assert "Script validation failed" in exc_info.value.message

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_script(tmp_path / "missing.json")
        assert exc_info.value.error_type == "file_not_found"

    def test_not_a_list(self, tmp_path: Path) -> None:
        path = tmp_path / "script.json"
        path.write_text('{"op": "undo"}')
        with pytest.raises(ConfigError) as exc_info:
            load_script(path)
        assert exc_info.value.error_type == "validation"
