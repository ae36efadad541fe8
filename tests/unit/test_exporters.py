"""Tests for the exporter framework and the registered exporters."""

import json
from io import StringIO
from pathlib import Path
from typing import ClassVar

import ezdxf
import pytest

from organizers.application.config import load_design, load_design_from_dict
from organizers.application.dtos import LayoutDocument
from organizers.application.editor import LayoutEditor
from organizers.domain.value_objects import WoodType
from organizers.infrastructure.exporters import (
    DxfExporter,
    Exporter,
    ExporterRegistry,
    ExportManager,
    JsonDocumentExporter,
    ManufacturingSheetExporter,
    SvgExporter,
)
from organizers.infrastructure.palette import MaterialPalette


@pytest.fixture
def document(split_editor: LayoutEditor) -> LayoutDocument:
    split_editor.set_material(WoodType.WALNUT)
    return split_editor.export()


class TestExporterRegistry:
    """Tests for ExporterRegistry."""

    def setup_method(self) -> None:
        self._saved = dict(ExporterRegistry._exporters)

    def teardown_method(self) -> None:
        ExporterRegistry._exporters.clear()
        ExporterRegistry._exporters.update(self._saved)

    def test_builtin_formats(self) -> None:
        assert ExporterRegistry.available_formats() == ["dxf", "json", "sheet", "svg"]

    def test_get_registered(self) -> None:
        assert ExporterRegistry.get("svg") is SvgExporter

    def test_get_unknown(self) -> None:
        with pytest.raises(KeyError, match="No exporter registered for format 'stl'"):
            ExporterRegistry.get("stl")

    def test_register_and_unregister(self) -> None:
        @ExporterRegistry.register("txt")
        class TextExporter:
            format_name: ClassVar[str] = "txt"
            file_extension: ClassVar[str] = "txt"

            def export(self, document: LayoutDocument, path: Path) -> None:
                path.write_text(self.export_string(document))

            def export_string(self, document: LayoutDocument) -> str:
                return f"{len(document.blocks)} compartments"

        assert ExporterRegistry.is_registered("txt")
        assert isinstance(TextExporter(), Exporter)

        ExporterRegistry.unregister("txt")
        assert not ExporterRegistry.is_registered("txt")

    def test_clear(self) -> None:
        ExporterRegistry.clear()
        assert ExporterRegistry.available_formats() == []
        with pytest.raises(KeyError, match="Available formats: none"):
            ExporterRegistry.get("json")


class TestJsonDocumentExporter:
    """Tests for JSON design export."""

    def test_output_loads_as_design(self, document: LayoutDocument) -> None:
        data = json.loads(JsonDocumentExporter().export_string(document))
        config = load_design_from_dict(data)
        assert LayoutDocument.from_config(config) == document

    def test_include_dividers(self, document: LayoutDocument) -> None:
        data = json.loads(JsonDocumentExporter(include_dividers=True).export_string(document))
        assert data["dividers"] == [{"length_in": 30, "height_in": 3}]

    def test_export_to_file(self, document: LayoutDocument, tmp_path: Path) -> None:
        path = tmp_path / "design.json"
        JsonDocumentExporter().export(document, path)
        assert LayoutDocument.from_config(load_design(path)) == document


class TestSvgExporter:
    """Tests for the SVG plan."""

    def test_one_rect_per_block_and_line_per_divider(self, document: LayoutDocument) -> None:
        svg = SvgExporter().export_string(document)

        assert svg.startswith("<svg")
        assert svg.endswith("</svg>")
        assert '<rect id="initial-top-1" x="0" y="30" width="600" height="200"' in svg
        assert '<rect id="initial-bottom-1" x="0" y="230" width="600" height="200"' in svg
        assert '<line id="split-1" x1="0" y1="230" x2="600" y2="230"' in svg

    def test_wood_colour_and_labels(self, document: LayoutDocument) -> None:
        palette = MaterialPalette()
        svg = SvgExporter(palette=palette).export_string(document)

        assert f'fill="{palette.colors(WoodType.WALNUT).base}"' in svg
        assert "Walnut" in svg
        assert '30" x 10"' in svg

    def test_labels_can_be_hidden(self, document: LayoutDocument) -> None:
        svg = SvgExporter(show_labels=False).export_string(document)
        assert '30" x 10"' not in svg

    def test_scale(self, document: LayoutDocument) -> None:
        svg = SvgExporter(scale=1.0, header_height=0).export_string(document)
        assert '<svg width="300" height="200"' in svg


class TestDxfExporter:
    """Tests for the DXF cut drawing."""

    def test_entities_and_layers(self, document: LayoutDocument) -> None:
        content = DxfExporter().export_string(document)
        doc = ezdxf.read(StringIO(content))
        msp = doc.modelspace()

        assert {"OUTLINE", "DIVIDERS", "LABELS"} <= {layer.dxf.name for layer in doc.layers}
        assert len(msp.query("LWPOLYLINE")) == 1
        assert len(msp.query("LINE")) == 1
        assert len(msp.query("MTEXT")) == 2

    def test_outline_at_cut_size(self, document: LayoutDocument) -> None:
        doc = ezdxf.read(StringIO(DxfExporter().export_string(document)))
        outline = doc.modelspace().query("LWPOLYLINE").first
        xs = [point[0] for point in outline.get_points()]
        ys = [point[1] for point in outline.get_points()]
        assert max(xs) == pytest.approx(29.9375)
        assert max(ys) == pytest.approx(19.9375)

    def test_divider_clipped_and_flipped(self, document: LayoutDocument) -> None:
        doc = ezdxf.read(StringIO(DxfExporter().export_string(document)))
        line = doc.modelspace().query("LINE").first
        assert line.dxf.start.x == pytest.approx(0)
        assert line.dxf.end.x == pytest.approx(29.9375)
        assert line.dxf.start.y == pytest.approx(9.9375)

    def test_millimetres(self, document: LayoutDocument) -> None:
        doc = ezdxf.read(StringIO(DxfExporter(units="mm").export_string(document)))
        line = doc.modelspace().query("LINE").first
        assert line.dxf.end.x == pytest.approx(29.9375 * 25.4)

    def test_without_labels(self, document: LayoutDocument) -> None:
        doc = ezdxf.read(StringIO(DxfExporter(show_labels=False).export_string(document)))
        assert len(doc.modelspace().query("MTEXT")) == 0

    def test_invalid_units(self) -> None:
        with pytest.raises(ValueError, match="Invalid units"):
            DxfExporter(units="feet")

    def test_export_to_file(self, document: LayoutDocument, tmp_path: Path) -> None:
        path = tmp_path / "organizer.dxf"
        DxfExporter().export(document, path)
        assert ezdxf.readfile(path).modelspace().query("LINE")


class TestManufacturingSheetExporter:
    """Tests for the Markdown manufacturing sheet."""

    def test_sheet_contents(self, document: LayoutDocument) -> None:
        sheet = ManufacturingSheetExporter().export_string(document)

        assert "1/16\"" in sheet
        assert 'Customer-ordered dimensions:** 30" x 20" x 3"' in sheet
        assert '**Width:** 29.9375"' in sheet
        assert '**Depth:** 19.9375"' in sheet
        assert "**Material:** Walnut" in sheet
        assert "## Compartments (2 total)" in sheet
        assert '| 2 | 0.00", 10.00" | 30.00" x 10.00" |' in sheet
        assert '| 1 | 30.00" | 3" |' in sheet
        assert 'Total divider length: 30.00"' in sheet

    def test_no_dividers(self, editor: LayoutEditor) -> None:
        sheet = ManufacturingSheetExporter().export_string(editor.export())
        assert "No dividers." in sheet


class TestExportManager:
    """Tests for multi-format export."""

    def test_export_all(self, document: LayoutDocument, tmp_path: Path) -> None:
        manager = ExportManager(tmp_path / "out")
        results = manager.export_all(["json", "sheet", "svg"], document, "kitchen")

        assert results == {
            "json": tmp_path / "out" / "kitchen_json.json",
            "sheet": tmp_path / "out" / "kitchen_sheet.md",
            "svg": tmp_path / "out" / "kitchen_svg.svg",
        }
        assert all(path.exists() for path in results.values())

    def test_export_single(self, document: LayoutDocument, tmp_path: Path) -> None:
        path = ExportManager(tmp_path).export_single("dxf", document)
        assert path == tmp_path / "organizer_dxf.dxf"
        assert path.exists()

    def test_unknown_format(self, document: LayoutDocument, tmp_path: Path) -> None:
        with pytest.raises(KeyError):
            ExportManager(tmp_path).export_all(["stl"], document)
