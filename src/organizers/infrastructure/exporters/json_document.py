"""JSON exporter for design documents.

The output is the stored design format and loads back with ``load_design``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from organizers.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from organizers.application.dtos import LayoutDocument

logger = logging.getLogger(__name__)


@ExporterRegistry.register("json")
class JsonDocumentExporter:
    """Exports a design as a JSON design document.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int = 2, include_dividers: bool = False) -> None:
        """Initialize the JSON exporter.

        Args:
            indent: Indentation level for the output.
            include_dividers: Add the derived divider list under "dividers".
                Such output is for consumers only; ``load_design`` rejects it.
        """
        self.indent = indent
        self.include_dividers = include_dividers

    def export(self, document: LayoutDocument, path: Path) -> None:
        path.write_text(self.export_string(document))
        logger.info(f"Exported design JSON to {path}")

    def export_string(self, document: LayoutDocument) -> str:
        data = document.to_dict()
        if self.include_dividers:
            data["dividers"] = document.dividers_dict()
        return json.dumps(data, indent=self.indent)
