"""Unit tests for layout validation and advisories."""

from pathlib import Path

from organizers.application.config import (
    ValidationResult,
    check_layout_advisories,
    load_design,
    load_design_from_dict,
    validate_design,
)
from organizers.domain.value_objects import Block, LayoutSnapshot, SplitLine


class TestValidationResult:
    """Tests for ValidationResult bookkeeping."""

    def test_clean_result(self) -> None:
        result = ValidationResult()
        assert result.is_valid
        assert not result.has_warnings
        assert result.exit_code == 0

    def test_warning_exit_code(self) -> None:
        result = ValidationResult().add_warning("layout", "hmm")
        assert result.is_valid
        assert result.exit_code == 2

    def test_error_exit_code_wins(self) -> None:
        result = ValidationResult().add_warning("layout", "hmm").add_error("layout", "bad")
        assert not result.is_valid
        assert result.exit_code == 1

    def test_merge(self) -> None:
        result = ValidationResult().add_error("a", "one")
        result.merge(ValidationResult().add_warning("b", "two"))
        assert len(result.errors) == 1
        assert len(result.warnings) == 1


class TestValidateDesign:
    """Tests for validate_design against fixture designs."""

    def test_minimal_design_is_valid(self, designs_path: Path) -> None:
        result = validate_design(load_design(designs_path / "valid_minimal.json"))
        assert result.exit_code == 0

    def test_split_design_is_valid(self, designs_path: Path) -> None:
        result = validate_design(load_design(designs_path / "valid_split.json"))
        assert result.errors == []
        assert result.warnings == []

    def test_gap_is_an_error(self, designs_path: Path) -> None:
        result = validate_design(load_design(designs_path / "gap_layout.json"))
        assert result.exit_code == 1
        assert result.errors[0].value == "gap"
        assert result.errors[0].path == "layout.blocks"

    def test_narrow_compartment_is_a_warning(self, designs_path: Path) -> None:
        result = validate_design(load_design(designs_path / "narrow_compartment.json"))
        assert result.exit_code == 2
        assert len(result.warnings) == 1
        assert result.warnings[0].path == "layout.blocks[0]"

    def test_error_paths_point_at_elements(self) -> None:
        config = load_design_from_dict(
            {
                "schema_version": "1.0",
                "dimensions": {"width": 30, "depth": 20, "height": 3},
                "layout": {
                    "blocks": [
                        {"id": "a", "x": 0, "y": 0, "width": 300, "height": 100},
                        {"id": "b", "x": 0, "y": 100, "width": 300, "height": 100},
                    ],
                    "splitLines": [
                        {"id": "split-1", "isHorizontal": True,
                         "x1": 0, "y1": 101, "x2": 300, "y2": 101}
                    ],
                },
            }
        )
        result = validate_design(config)
        assert [(e.path, e.value) for e in result.errors] == [
            ("layout.splitLines[0]", "off_grid")
        ]

    def test_advisories_skipped_when_geometry_is_broken(self) -> None:
        config = load_design_from_dict(
            {
                "schema_version": "1.0",
                "dimensions": {"width": 30, "depth": 20, "height": 3},
                "layout": {"blocks": [{"id": "a", "x": 0, "y": 0, "width": 5, "height": 200}]},
            }
        )
        result = validate_design(config)
        assert result.errors
        assert result.warnings == []


class TestLayoutAdvisories:
    """Tests for check_layout_advisories."""

    def test_tall_short_divider(self) -> None:
        snapshot = LayoutSnapshot(
            blocks=(
                Block("a", 0, 0, 50, 7.5),
                Block("b", 0, 7.5, 50, 7.5),
            ),
            split_lines=(SplitLine("split-1", True, 0, 7.5, 50, 7.5),),
        )
        result = check_layout_advisories(snapshot, height=30)
        messages = [w.message for w in result.warnings]
        assert any("tall but only" in m for m in messages)

    def test_orphan_line(self) -> None:
        snapshot = LayoutSnapshot(
            blocks=(Block("a", 0, 0, 300, 200),),
            split_lines=(SplitLine("split-1", True, 0, 100, 300, 100),),
        )
        result = check_layout_advisories(snapshot, height=3)
        assert [w.path for w in result.warnings] == ["layout.splitLines[0]"]
        assert "does not separate" in result.warnings[0].message

    def test_clean_layout(self) -> None:
        snapshot = LayoutSnapshot(
            blocks=(Block("a", 0, 0, 300, 100), Block("b", 0, 100, 300, 100)),
            split_lines=(SplitLine("split-1", True, 0, 100, 300, 100),),
        )
        assert check_layout_advisories(snapshot, height=3).warnings == []
