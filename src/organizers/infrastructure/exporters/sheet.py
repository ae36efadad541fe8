"""Markdown manufacturing sheet exporter.

The sheet is what the workshop builds from: cut dimensions after the fit
tolerance, the customer's ordered size, every compartment in inches and
the divider walls to cut.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from organizers.domain.services.manufacturing import build_cut_sheet
from organizers.domain.value_objects import MANUFACTURING_TOLERANCE, WOOD_CATALOG
from organizers.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from organizers.application.dtos import LayoutDocument

logger = logging.getLogger(__name__)


@ExporterRegistry.register("sheet")
class ManufacturingSheetExporter:
    """Exports a manufacturing sheet as Markdown.

    Attributes:
        format_name: "sheet"
        file_extension: "md"
    """

    format_name: ClassVar[str] = "sheet"
    file_extension: ClassVar[str] = "md"

    def export(self, document: LayoutDocument, path: Path) -> None:
        path.write_text(self.export_string(document))
        logger.info(f"Exported manufacturing sheet to {path}")

    def export_string(self, document: LayoutDocument) -> str:
        sheet = build_cut_sheet(document.dimensions, document.snapshot)
        ordered = sheet.ordered
        cut = sheet.cut

        lines = [
            "# Drawer Organizer Design",
            "",
            f"> **Manufacturing Note:** Dimensions include a 1/16\" "
            f"({MANUFACTURING_TOLERANCE}\") tolerance reduction on width and depth "
            "to ensure proper fit inside the drawer box.",
            f"> **Customer-ordered dimensions:** {ordered.width:g}\" x "
            f"{ordered.depth:g}\" x {ordered.height:g}\"",
            "",
            "## Manufacturing Dimensions (Cut Size)",
            "",
            f"- **Width:** {cut.width:.4f}\"",
            f"- **Depth:** {cut.depth:.4f}\"",
            f"- **Height:** {cut.height:g}\"",
            f"- **Material:** {WOOD_CATALOG[document.material].name}",
            "",
            f"## Compartments ({len(sheet.compartments)} total)",
            "",
            "| # | Position (from top-left) | Size |",
            "|---|---|---|",
        ]
        for compartment in sheet.compartments:
            lines.append(
                f"| {compartment.number} "
                f"| {compartment.x:.2f}\", {compartment.y:.2f}\" "
                f"| {compartment.width:.2f}\" x {compartment.depth:.2f}\" |"
            )

        lines.extend(["", f"## Dividers ({len(sheet.dividers)} total)", ""])
        if sheet.dividers:
            lines.extend(["| # | Length | Height |", "|---|---|---|"])
            for i, divider in enumerate(sheet.dividers, start=1):
                lines.append(
                    f"| {i} | {divider.length_in:.2f}\" | {divider.height_in:g}\" |"
                )
            lines.extend(["", f"Total divider length: {sheet.total_divider_length:.2f}\""])
        else:
            lines.append("No dividers.")

        return "\n".join(lines) + "\n"
