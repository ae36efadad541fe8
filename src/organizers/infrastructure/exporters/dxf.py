"""DXF exporter for organizer cut drawings.

Generates a 2D DXF file (R2010 format) of the organizer at cut size: the
outline reduced by the fit tolerance, one line per divider wall and a
label per compartment. Units are inches, origin at the bottom-left corner.
"""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, cast

import ezdxf

from organizers.domain.services.geometry import units_to_inches
from organizers.domain.services.manufacturing import build_cut_sheet
from organizers.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from ezdxf.document import Drawing
    from ezdxf.layouts import Modelspace

    from organizers.application.dtos import LayoutDocument


logger = logging.getLogger(__name__)


LAYERS = {
    "OUTLINE": {"color": 7},  # White - base plate outline
    "DIVIDERS": {"color": 1},  # Red - divider walls
    "LABELS": {"color": 5},  # Blue - compartment labels
}


@ExporterRegistry.register("dxf")
class DxfExporter:
    """Exports an organizer design to DXF for CNC cutting.

    Attributes:
        format_name: "dxf"
        file_extension: "dxf"
    """

    format_name: ClassVar[str] = "dxf"
    file_extension: ClassVar[str] = "dxf"

    def __init__(self, units: str = "inches", show_labels: bool = True) -> None:
        """Initialize the DXF exporter.

        Args:
            units: Output units - "inches" or "mm".
            show_labels: Whether to add compartment labels.
        """
        if units not in ("inches", "mm"):
            raise ValueError(f"Invalid units: {units}. Must be 'inches' or 'mm'")
        self.units = units
        self.scale = 25.4 if units == "mm" else 1.0
        self.show_labels = show_labels

    def export(self, document: LayoutDocument, path: Path) -> None:
        doc = self._build(document)
        doc.saveas(path)
        logger.info(f"Exported DXF to {path}")

    def export_string(self, document: LayoutDocument) -> str:
        doc = self._build(document)
        stream = StringIO()
        doc.write(stream)
        return stream.getvalue()

    def _create_document(self) -> Drawing:
        doc = ezdxf.new("R2010")
        for name, props in LAYERS.items():
            doc.layers.add(name, color=cast(int, props["color"]))
        return doc

    def _build(self, document: LayoutDocument) -> Drawing:
        doc = self._create_document()
        msp = doc.modelspace()
        sheet = build_cut_sheet(document.dimensions, document.snapshot)
        cut_width = sheet.cut.width
        cut_depth = sheet.cut.depth

        self._draw_outline(msp, cut_width, cut_depth)
        self._draw_dividers(msp, document, cut_width, cut_depth)
        if self.show_labels:
            for compartment in sheet.compartments:
                # Flip y: layout measures from the top, DXF from the bottom
                center_x = compartment.x + compartment.width / 2
                center_y = cut_depth - (compartment.y + compartment.depth / 2)
                text_height = max(0.15, min(1.0, min(compartment.width, compartment.depth) * 0.1))
                msp.add_mtext(
                    f'{compartment.number}\n{compartment.width:.2f}" x {compartment.depth:.2f}"',
                    dxfattribs={
                        "layer": "LABELS",
                        "char_height": text_height * self.scale,
                        "insert": (center_x * self.scale, center_y * self.scale),
                        "attachment_point": 5,  # MIDDLE_CENTER
                    },
                )
        return doc

    def _draw_outline(self, msp: Modelspace, width: float, depth: float) -> None:
        w = width * self.scale
        d = depth * self.scale
        points = [(0, 0), (w, 0), (w, d), (0, d), (0, 0)]
        msp.add_lwpolyline(points, dxfattribs={"layer": "OUTLINE"})

    def _draw_dividers(
        self, msp: Modelspace, document: LayoutDocument, width: float, depth: float
    ) -> None:
        """Draw split lines, clipped to the cut outline."""
        for line in document.split_lines:
            x1 = min(units_to_inches(line.x1), width)
            x2 = min(units_to_inches(line.x2), width)
            y1 = depth - min(units_to_inches(line.y1), depth)
            y2 = depth - min(units_to_inches(line.y2), depth)
            msp.add_line(
                (x1 * self.scale, y1 * self.scale),
                (x2 * self.scale, y2 * self.scale),
                dxfattribs={"layer": "DIVIDERS"},
            )


__all__ = ["DxfExporter", "LAYERS"]
