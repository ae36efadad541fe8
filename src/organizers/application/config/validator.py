"""Validation structures and layout advisory checks.

Pydantic handles the shape of a design document. This module checks what
the schema cannot: that the layout blob actually tiles the drawer, and a
few build-quality advisories that do not block an order.
"""

from dataclasses import dataclass, field
from typing import Any

from organizers.application.config.adapter import config_to_dimensions, config_to_snapshot
from organizers.application.config.schema import DesignConfiguration
from organizers.domain.services.geometry import (
    check_layout,
    find_affected_blocks,
    partition_affected,
    units_to_inches,
)
from organizers.domain.value_objects import LayoutSnapshot

# Compartments narrower than this (inches) are hard to reach into
MIN_USABLE_COMPARTMENT = 1.0

# Tall walls on short runs are fragile
MAX_DIVIDER_HEIGHT_RATIO = 4.0


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid element (e.g., "layout.blocks[2]")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning element
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 clean, 1 errors, 2 warnings only."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(self, path: str, message: str, value: Any = None) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def _element_path(snapshot: LayoutSnapshot, element_id: str | None) -> str:
    if element_id is None:
        return "layout.blocks"
    for i, block in enumerate(snapshot.blocks):
        if block.id == element_id:
            return f"layout.blocks[{i}]"
    for i, line in enumerate(snapshot.split_lines):
        if line.id == element_id:
            return f"layout.splitLines[{i}]"
    return "layout"


def check_layout_advisories(snapshot: LayoutSnapshot, height: float) -> ValidationResult:
    """Check a geometrically valid layout for build-quality concerns.

    Warns about compartments too narrow to use, dividers far taller than
    they are long, and split lines that no longer separate two compartments.
    """
    result = ValidationResult()

    for i, block in enumerate(snapshot.blocks):
        narrowest = units_to_inches(min(block.width, block.height))
        if narrowest < MIN_USABLE_COMPARTMENT:
            result.add_warning(
                path=f"layout.blocks[{i}]",
                message=(
                    f"Compartment {block.id!r} is only {narrowest:.2f}\" across"
                ),
                suggestion=f"Keep compartments at least {MIN_USABLE_COMPARTMENT:.0f}\" wide",
            )

    for i, line in enumerate(snapshot.split_lines):
        length = units_to_inches(line.length)
        if length > 0 and height / length > MAX_DIVIDER_HEIGHT_RATIO:
            result.add_warning(
                path=f"layout.splitLines[{i}]",
                message=(
                    f"Divider {line.id!r} is {height:.2f}\" tall but only "
                    f"{length:.2f}\" long"
                ),
                suggestion="Merge short compartments or lower the drawer height",
            )

        before, after = partition_affected(line, find_affected_blocks(snapshot.blocks, line))
        if not before or not after:
            result.add_warning(
                path=f"layout.splitLines[{i}]",
                message=f"Divider {line.id!r} does not separate two compartments",
                suggestion="Remove the line or clear and redraw the layout",
            )

    return result


def validate_design(config: DesignConfiguration) -> ValidationResult:
    """Perform full validation of a design document.

    Args:
        config: A DesignConfiguration instance (already validated by Pydantic)

    Returns:
        ValidationResult containing any errors or warnings
    """
    result = ValidationResult()

    try:
        dimensions = config_to_dimensions(config.dimensions)
    except ValueError as e:
        return result.add_error(path="dimensions", message=str(e))

    if config.layout is None:
        return result

    snapshot = config_to_snapshot(config.layout)
    issues = check_layout(snapshot, dimensions)
    for issue in issues:
        result.add_error(
            path=_element_path(snapshot, issue.element_id),
            message=issue.message,
            value=issue.code,
        )

    if not issues:
        result.merge(check_layout_advisories(snapshot, dimensions.height))

    return result
