"""Reading design documents and editor settings from JSON.

Missing files, unreadable files, malformed JSON and schema violations all
surface as ``ConfigError``, carrying an ``error_type`` the CLI and the API
map to their own output.
"""

import json
import logging
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from organizers.application.config.schema import DesignConfiguration, EditorSettings

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ConfigError(Exception):
    """A design, settings or script file could not be loaded.

    Attributes:
        message: Human readable summary, also the ``str()`` of the error.
        error_type: One of file_not_found, permission_denied, file_read_error,
            json_parse or validation.
        path: The offending file, when the data came from disk.
        details: Per-problem dicts: line and column for JSON syntax errors,
            path, message and value for schema violations.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Join a Pydantic error location into a dotted path with list indices.

    Examples:
        >>> _format_json_path(("layout", "blocks", 0, "width"))
        'layout.blocks[0].width'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def extract_validation_errors(error: PydanticValidationError) -> list[dict[str, Any]]:
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": _format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def format_validation_error_message(details: list[dict[str, Any]], what: str) -> str:
    lines = [f"{what} validation failed:"]
    for detail in details:
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {detail['path']}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {detail['path']}: {detail['message']}")
    return "\n".join(lines)


def read_json_file(path: Path) -> Any:
    """Read and parse a JSON file, raising ConfigError on any failure."""
    if not path.exists():
        raise ConfigError(
            message=f"File not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )


def _validate(model: type[ModelT], data: Any, what: str, path: Path | None = None) -> ModelT:
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        details = extract_validation_errors(e)
        raise ConfigError(
            message=format_validation_error_message(details, what),
            error_type="validation",
            path=path,
            details=details,
        )


def load_design(path: Path) -> DesignConfiguration:
    """Load and validate a design document from a JSON file.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
            ``error_type`` is one of "file_not_found", "permission_denied",
            "file_read_error", "json_parse" or "validation".
    """
    logger.debug(f"Loading design from {path}")
    return _validate(DesignConfiguration, read_json_file(path), "Design", path)


def load_design_from_dict(data: dict[str, Any]) -> DesignConfiguration:
    """Load and validate a design document from a dictionary.

    Used for designs arriving over the API or built in code.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(DesignConfiguration, data, "Design")


def load_settings(path: Path | None = None) -> EditorSettings:
    """Load editor settings, falling back to defaults when no path is given.

    Raises:
        ConfigError: If a given file cannot be read, parsed or validated.
    """
    if path is None:
        return EditorSettings()
    logger.debug(f"Loading editor settings from {path}")
    return _validate(EditorSettings, read_json_file(path), "Settings", path)
