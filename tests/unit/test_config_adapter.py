"""Unit tests for converting between design documents and the domain."""

from pathlib import Path

import pytest

from organizers.application.config import load_design, load_design_from_dict
from organizers.application.config.adapter import config_to_layout, snapshot_to_layout_config
from organizers.application.dtos import LayoutDocument
from organizers.domain.value_objects import Block, WoodType


class TestConfigToLayout:
    """Tests for config_to_layout."""

    def test_design_without_layout_gets_initial_block(self, designs_path: Path) -> None:
        layout = config_to_layout(load_design(designs_path / "valid_minimal.json"))
        assert layout.blocks == (Block("initial", 0, 0, 300, 200),)
        assert layout.material is WoodType.MAPLE

    def test_layout_preserved(self, designs_path: Path) -> None:
        layout = config_to_layout(load_design(designs_path / "valid_split.json"))
        assert [b.id for b in layout.blocks] == ["initial-top-1", "initial-bottom-1"]
        assert layout.split_line("split-1").position == 100
        assert layout.material is WoodType.WALNUT


class TestLayoutDocument:
    """Tests for LayoutDocument conversions."""

    def test_to_dict_reloads_to_same_document(self, designs_path: Path) -> None:
        document = LayoutDocument.from_config(load_design(designs_path / "valid_split.json"))

        data = document.to_dict(notes="Again")
        reloaded = LayoutDocument.from_config(load_design_from_dict(data))

        assert reloaded == document
        assert data["schema_version"] == "1.1"
        assert data["notes"] == "Again"

    def test_to_dict_omits_missing_notes(self, designs_path: Path) -> None:
        document = LayoutDocument.from_config(load_design(designs_path / "valid_split.json"))
        assert "notes" not in document.to_dict()

    def test_layout_dict_uses_wire_names(self, designs_path: Path) -> None:
        document = LayoutDocument.from_config(load_design(designs_path / "valid_split.json"))
        blob = document.layout_dict()
        assert blob["selectedMaterial"] == "walnut"
        assert blob["splitLines"][0] == {
            "id": "split-1",
            "isHorizontal": True,
            "x1": 0,
            "y1": 100,
            "x2": 300,
            "y2": 100,
        }

    def test_dividers(self, designs_path: Path) -> None:
        document = LayoutDocument.from_config(load_design(designs_path / "valid_split.json"))
        assert document.dividers_dict() == [{"length_in": 30, "height_in": 3}]

    def test_snapshot_to_layout_config_keeps_order(self, split_editor) -> None:
        config = snapshot_to_layout_config(split_editor.snapshot, WoodType.ASH)
        assert [b.id for b in config.blocks] == ["initial-top-1", "initial-bottom-1"]
        assert config.selected_material is WoodType.ASH

    def test_invalid_dimensions_raise_value_error(self) -> None:
        config = load_design_from_dict(
            {"schema_version": "1.0", "dimensions": {"width": 30, "depth": 20, "height": 3}}
        )
        broken = config.model_copy(
            update={"dimensions": config.dimensions.model_copy(update={"width": 0})}
        )
        with pytest.raises(ValueError):
            LayoutDocument.from_config(broken)
