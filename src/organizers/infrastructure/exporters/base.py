"""Exporter protocol, format registry and multi-format export."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from organizers.application.dtos import LayoutDocument


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Renders a ``LayoutDocument`` in one output format.

    Attributes:
        format_name: Name the format is registered and requested under.
        file_extension: Extension for written files, without the dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export(self, document: LayoutDocument, path: Path) -> None:
        """Write the rendered design to ``path``."""
        ...

    def export_string(self, document: LayoutDocument) -> str:
        """Render the design in memory.

        Raises:
            NotImplementedError: For formats that can only be written to disk.
        """
        raise NotImplementedError(
            f"Format '{self.format_name}' can only be exported to a file"
        )


class ExporterRegistry:
    """Exporter classes by format name.

    Exporter modules register their class on import::

        @ExporterRegistry.register("svg")
        class SvgExporter:
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> type:
        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            previous = cls._exporters.get(format_name)
            if previous is not None and previous is not exporter_class:
                logger.warning(
                    f"Exporter {exporter_class.__name__} replaces "
                    f"{previous.__name__} for format '{format_name}'"
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered {exporter_class.__name__} as '{format_name}'")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Look up the exporter class for ``format_name``.

        Raises:
            KeyError: If nothing is registered under that name.
        """
        try:
            return cls._exporters[format_name]
        except KeyError:
            known = ", ".join(cls.available_formats()) or "none"
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {known}"
            ) from None

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters)

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters

    @classmethod
    def unregister(cls, format_name: str) -> None:
        cls._exporters.pop(format_name, None)

    @classmethod
    def clear(cls) -> None:
        cls._exporters.clear()


class ExportManager:
    """Writes one design in several formats into a single directory."""

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def path_for(self, project_name: str, exporter: Exporter) -> Path:
        """``{project_name}_{format}.{ext}`` inside the output directory."""
        return self.output_dir / (
            f"{project_name}_{exporter.format_name}.{exporter.file_extension}"
        )

    def export_all(
        self,
        formats: list[str],
        document: LayoutDocument,
        project_name: str = "organizer",
    ) -> dict[str, Path]:
        """Export ``document`` once per format.

        Every format is resolved before anything is written, so an unknown
        name leaves the output directory untouched.

        Returns:
            Written file path per format name.

        Raises:
            KeyError: If a format is not registered.
        """
        exporters = [ExporterRegistry.get(name)() for name in formats]
        self.output_dir.mkdir(parents=True, exist_ok=True)

        written: dict[str, Path] = {}
        for name, exporter in zip(formats, exporters):
            path = self.path_for(project_name, exporter)
            exporter.export(document, path)
            logger.info(f"Exported {name} to {path}")
            written[name] = path
        return written

    def export_single(
        self,
        format_name: str,
        document: LayoutDocument,
        project_name: str = "organizer",
    ) -> Path:
        return self.export_all([format_name], document, project_name)[format_name]
