"""Scripted editing: replay a list of editor operations.

A script is a JSON list such as::

    [
        {"op": "select", "block": "initial"},
        {"op": "add_row"},
        {"op": "drag", "line": "split-1", "to": 50},
        {"op": "undo"}
    ]

Operations that are no-ops in the editor are reported as not applied;
they never stop the script.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator
from pydantic import ValidationError as PydanticValidationError

from organizers.application.config.loader import (
    ConfigError,
    extract_validation_errors,
    format_validation_error_message,
    read_json_file,
)
from organizers.application.editor import LayoutEditor
from organizers.domain.value_objects import WoodType

logger = logging.getLogger(__name__)

OperationName = Literal[
    "select",
    "clear_selection",
    "add_row",
    "add_column",
    "drag",
    "undo",
    "redo",
    "clear",
    "material",
]


class EditOperation(BaseModel):
    """One step of an edit script."""

    model_config = ConfigDict(extra="forbid")

    op: OperationName
    block: str | None = Field(default=None, min_length=1)
    line: str | None = Field(default=None, min_length=1)
    to: float | None = None
    wood: WoodType | None = None

    @model_validator(mode="after")
    def validate_arguments(self) -> "EditOperation":
        """Each operation must carry the arguments it needs."""
        if self.op == "select" and self.block is None:
            raise ValueError("'select' requires 'block'")
        if self.op == "drag" and (self.line is None or self.to is None):
            raise ValueError("'drag' requires 'line' and 'to'")
        if self.op == "material" and self.wood is None:
            raise ValueError("'material' requires 'wood'")
        return self


EditScript = TypeAdapter(list[EditOperation])


@dataclass(frozen=True)
class StepResult:
    """Outcome of one script step."""

    index: int
    operation: EditOperation
    applied: bool


def apply_operation(editor: LayoutEditor, operation: EditOperation) -> bool:
    """Run one operation against ``editor``; True when it changed something."""
    if operation.op == "select":
        return editor.select(operation.block)
    if operation.op == "clear_selection":
        editor.clear_selection()
        return True
    if operation.op == "add_row":
        return editor.add_row()
    if operation.op == "add_column":
        return editor.add_column()
    if operation.op == "drag":
        if editor.begin_drag(operation.line) is None:
            return False
        editor.drag_to(operation.to)
        return editor.end_drag()
    if operation.op == "undo":
        return editor.undo()
    if operation.op == "redo":
        return editor.redo()
    if operation.op == "clear":
        return editor.clear()
    return editor.set_material(operation.wood)


def run_script(editor: LayoutEditor, operations: list[EditOperation]) -> list[StepResult]:
    results: list[StepResult] = []
    for index, operation in enumerate(operations):
        applied = apply_operation(editor, operation)
        if not applied:
            logger.debug(f"Step {index} ({operation.op}) had no effect")
        results.append(StepResult(index=index, operation=operation, applied=applied))
    return results


def load_script(path: Path) -> list[EditOperation]:
    """Load and validate an edit script from a JSON file.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """
    data = read_json_file(path)
    try:
        return EditScript.validate_python(data)
    except PydanticValidationError as e:
        details = extract_validation_errors(e)
        raise ConfigError(
            message=format_validation_error_message(details, "Script"),
            error_type="validation",
            path=path,
            details=details,
        )
