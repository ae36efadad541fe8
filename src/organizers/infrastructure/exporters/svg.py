"""SVG exporter for 2D layout plans.

Draws the drawer footprint as seen from above: one filled rectangle per
compartment in the chosen wood colour, divider walls on top, and each
compartment labelled with its size in inches.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from organizers.domain.services.geometry import units_to_inches
from organizers.domain.value_objects import WOOD_CATALOG
from organizers.infrastructure.exporters.base import ExporterRegistry
from organizers.infrastructure.palette import MaterialPalette

if TYPE_CHECKING:
    from organizers.application.dtos import LayoutDocument

logger = logging.getLogger(__name__)


@ExporterRegistry.register("svg")
class SvgExporter:
    """Exports a layout plan as SVG.

    Attributes:
        format_name: "svg"
        file_extension: "svg"
    """

    format_name: ClassVar[str] = "svg"
    file_extension: ClassVar[str] = "svg"

    def __init__(
        self,
        scale: float = 2.0,
        palette: MaterialPalette | None = None,
        show_labels: bool = True,
        header_height: float = 30.0,
    ) -> None:
        """Initialize the SVG exporter.

        Args:
            scale: SVG pixels per layout unit (layout units are 10 per inch).
            palette: Colour cache to draw with; a new one is created if omitted.
            show_labels: Whether to label compartments with their size.
            header_height: Height of the title band in pixels.
        """
        self.scale = scale
        self.palette = palette or MaterialPalette()
        self.show_labels = show_labels
        self.header_height = header_height

    def export(self, document: LayoutDocument, path: Path) -> None:
        path.write_text(self.export_string(document))
        logger.info(f"Exported SVG plan to {path}")

    def export_string(self, document: LayoutDocument) -> str:
        colors = self.palette.colors(document.material)
        width_units, depth_units = document.dimensions.to_units()
        svg_width = width_units * self.scale
        plan_height = depth_units * self.scale
        svg_height = plan_height + self.header_height
        top = self.header_height
        dims = document.dimensions

        parts = [
            f'<svg width="{svg_width:g}" height="{svg_height:g}" '
            f'xmlns="http://www.w3.org/2000/svg">',
            f'  <rect x="0" y="0" width="{svg_width:g}" height="{svg_height:g}" fill="white"/>',
            f'  <text x="4" y="{self.header_height * 0.65:g}" font-family="Arial" '
            f'font-size="12">{dims.width:g}" x {dims.depth:g}" x {dims.height:g}" '
            f"{WOOD_CATALOG[document.material].name}</text>",
        ]

        for block in document.blocks:
            x = block.x * self.scale
            y = top + block.y * self.scale
            w = block.width * self.scale
            h = block.height * self.scale
            parts.append(
                f'  <rect id="{block.id}" x="{x:g}" y="{y:g}" width="{w:g}" height="{h:g}" '
                f'fill="{colors.base}" stroke="{colors.grain}" stroke-width="0.5"/>'
            )
            if self.show_labels:
                label = (
                    f'{units_to_inches(block.width):g}" x {units_to_inches(block.height):g}"'
                )
                font_size = max(6.0, min(12.0, min(w, h) / 5))
                parts.append(
                    f'  <text x="{x + w / 2:g}" y="{y + h / 2:g}" font-family="Arial" '
                    f'font-size="{font_size:g}" text-anchor="middle" '
                    f'dominant-baseline="middle">{label}</text>'
                )

        for line in document.split_lines:
            parts.append(
                f'  <line id="{line.id}" x1="{line.x1 * self.scale:g}" '
                f'y1="{top + line.y1 * self.scale:g}" x2="{line.x2 * self.scale:g}" '
                f'y2="{top + line.y2 * self.scale:g}" stroke="{colors.divider}" '
                f'stroke-width="3"/>'
            )

        parts.append(
            f'  <rect x="0" y="{top:g}" width="{svg_width:g}" height="{plan_height:g}" '
            f'fill="none" stroke="{colors.outline}" stroke-width="4"/>'
        )
        parts.append("</svg>")
        return "\n".join(parts)
