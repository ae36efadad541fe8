"""Manufacturing view of a design: cut dimensions and compartment list."""

from __future__ import annotations

from dataclasses import dataclass, field

from organizers.domain.services.geometry import units_to_inches
from organizers.domain.services.pricing import dividers_from_split_lines
from organizers.domain.value_objects import (
    MANUFACTURING_TOLERANCE,
    Divider,
    DrawerDimensions,
    LayoutSnapshot,
)


@dataclass(frozen=True)
class CutDimensions:
    """Organizer outer size after the fit tolerance, in inches.

    Not a ``DrawerDimensions``: after the 1/16" reduction the width and
    depth are no longer quarter-inch multiples.
    """

    width: float
    depth: float
    height: float


def manufacturing_dimensions(dimensions: DrawerDimensions) -> CutDimensions:
    """Reduce width and depth by 1/16" so the organizer fits the drawer.

    Height is left as ordered.
    """
    return CutDimensions(
        width=dimensions.width - MANUFACTURING_TOLERANCE,
        depth=dimensions.depth - MANUFACTURING_TOLERANCE,
        height=dimensions.height,
    )


@dataclass(frozen=True)
class Compartment:
    """A compartment in inches, measured from the top-left corner."""

    number: int
    x: float
    y: float
    width: float
    depth: float


@dataclass
class CutSheet:
    """Everything the workshop needs to build one organizer.

    Attributes:
        ordered: Dimensions the customer entered.
        cut: Dimensions after the fit tolerance.
        compartments: Compartments in reading order (top to bottom, left to right).
        dividers: Divider walls derived from split lines.
    """

    ordered: DrawerDimensions
    cut: CutDimensions
    compartments: list[Compartment] = field(default_factory=list)
    dividers: list[Divider] = field(default_factory=list)

    @property
    def total_divider_length(self) -> float:
        return sum(d.length_in for d in self.dividers)


def build_cut_sheet(dimensions: DrawerDimensions, snapshot: LayoutSnapshot) -> CutSheet:
    """Convert a layout to inches for manufacturing."""
    ordered_blocks = sorted(snapshot.blocks, key=lambda b: (b.y, b.x))
    compartments = [
        Compartment(
            number=i,
            x=units_to_inches(block.x),
            y=units_to_inches(block.y),
            width=units_to_inches(block.width),
            depth=units_to_inches(block.height),
        )
        for i, block in enumerate(ordered_blocks, start=1)
    ]
    return CutSheet(
        ordered=dimensions,
        cut=manufacturing_dimensions(dimensions),
        compartments=compartments,
        dividers=dividers_from_split_lines(snapshot.split_lines, dimensions),
    )
