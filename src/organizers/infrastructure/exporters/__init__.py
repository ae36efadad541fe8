"""Exporter framework for drawer organizer designs.

This package provides:
- Exporter Protocol: Defines the interface for all exporters
- ExporterRegistry: Central registry for format discovery
- ExportManager: Coordinates multi-format export operations

Registered exporters:
- dxf: DXF cut drawing at manufacturing size
- json: Design document, loadable with load_design
- sheet: Markdown manufacturing sheet
- svg: 2D plan coloured by wood species

Usage:
    from organizers.infrastructure.exporters import ExporterRegistry, ExportManager

    formats = ExporterRegistry.available_formats()
    svg = ExporterRegistry.get("svg")()
    content = svg.export_string(editor.export())

    manager = ExportManager(output_dir=Path("./output"))
    manager.export_all(["json", "sheet"], editor.export(), project_name="kitchen")
"""

from organizers.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
)

# Import exporters to trigger registration
from organizers.infrastructure.exporters.dxf import DxfExporter
from organizers.infrastructure.exporters.json_document import JsonDocumentExporter
from organizers.infrastructure.exporters.sheet import ManufacturingSheetExporter
from organizers.infrastructure.exporters.svg import SvgExporter

__all__ = [
    "DxfExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "JsonDocumentExporter",
    "ManufacturingSheetExporter",
    "SvgExporter",
]
