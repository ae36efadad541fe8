"""Infrastructure layer - exporters, formatters and rendering helpers."""

from .exporters import (
    DxfExporter,
    ExporterRegistry,
    ExportManager,
    JsonDocumentExporter,
    ManufacturingSheetExporter,
    SvgExporter,
)
from .formatters import CompartmentTableFormatter, LayoutDiagramFormatter, QuoteFormatter
from .palette import MaterialPalette, WoodColors

__all__ = [
    "CompartmentTableFormatter",
    "DxfExporter",
    "ExportManager",
    "ExporterRegistry",
    "JsonDocumentExporter",
    "LayoutDiagramFormatter",
    "ManufacturingSheetExporter",
    "MaterialPalette",
    "QuoteFormatter",
    "SvgExporter",
    "WoodColors",
]
