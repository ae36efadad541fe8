"""Value objects for the drawer organizer domain."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

# Internal layout units. Every inch of drawer is ten units on the canvas.
PIXELS_PER_INCH = 10
GRID_SIZE = 0.25 * PIXELS_PER_INCH
MIN_SIZE = 0.5 * PIXELS_PER_INCH

# Tolerance for deciding that a block edge touches a split line.
ADJACENCY_EPSILON = 1.0

MAX_HISTORY = 50

MAX_DIMENSION = 100.0
DIMENSION_INCREMENT = 0.25

# Removed from width and depth (never height) before cutting.
MANUFACTURING_TOLERANCE = 0.0625


class WoodCategory(str, Enum):
    """Tonal grouping used by the wood selector."""

    LIGHT = "light"
    MEDIUM = "medium"
    DARK = "dark"


class WoodType(str, Enum):
    """Wood species offered for the organizer body and dividers."""

    BIRCH = "birch"
    MAPLE = "maple"
    PINE = "pine"
    ASH = "ash"
    OAK = "oak"
    CHERRY = "cherry"
    BEECH = "beech"
    WALNUT = "walnut"
    MAHOGANY = "mahogany"
    EBONY = "ebony"


DEFAULT_WOOD = WoodType.MAPLE


@dataclass(frozen=True)
class WoodSpec:
    """Appearance of a wood species.

    Attributes:
        name: Display name.
        category: Light, medium or dark.
        base_color: RGB triple (0..1) for the base plate.
        divider_color: RGB triple (0..1) for divider walls.
        grain_intensity: Strength of the grain pattern (0..1).
        description: Short marketing description.
    """

    name: str
    category: WoodCategory
    base_color: tuple[float, float, float]
    divider_color: tuple[float, float, float]
    grain_intensity: float
    description: str


WOOD_CATALOG: dict[WoodType, WoodSpec] = {
    WoodType.BIRCH: WoodSpec(
        "Birch", WoodCategory.LIGHT, (0.98, 0.94, 0.85), (0.95, 0.90, 0.80), 0.25,
        "Light, creamy white with subtle grain",
    ),
    WoodType.MAPLE: WoodSpec(
        "Maple", WoodCategory.LIGHT, (0.96, 0.91, 0.75), (0.94, 0.88, 0.72), 0.3,
        "Light golden with fine, straight grain",
    ),
    WoodType.PINE: WoodSpec(
        "Pine", WoodCategory.LIGHT, (0.95, 0.89, 0.70), (0.92, 0.85, 0.65), 0.35,
        "Warm yellow with prominent grain lines",
    ),
    WoodType.ASH: WoodSpec(
        "Ash", WoodCategory.LIGHT, (0.93, 0.89, 0.80), (0.90, 0.85, 0.75), 0.4,
        "Creamy white with bold grain patterns",
    ),
    WoodType.OAK: WoodSpec(
        "Oak", WoodCategory.MEDIUM, (0.85, 0.75, 0.55), (0.80, 0.68, 0.48), 0.45,
        "Classic golden brown with distinctive grain",
    ),
    WoodType.CHERRY: WoodSpec(
        "Cherry", WoodCategory.MEDIUM, (0.82, 0.60, 0.45), (0.78, 0.55, 0.40), 0.35,
        "Rich reddish-brown with smooth grain",
    ),
    WoodType.BEECH: WoodSpec(
        "Beech", WoodCategory.MEDIUM, (0.88, 0.78, 0.62), (0.84, 0.72, 0.55), 0.4,
        "Pale brown with fine, even grain",
    ),
    WoodType.WALNUT: WoodSpec(
        "Walnut", WoodCategory.DARK, (0.65, 0.50, 0.35), (0.60, 0.45, 0.30), 0.5,
        "Rich chocolate brown with flowing grain",
    ),
    WoodType.MAHOGANY: WoodSpec(
        "Mahogany", WoodCategory.DARK, (0.70, 0.45, 0.30), (0.65, 0.40, 0.25), 0.4,
        "Deep reddish-brown with interlocked grain",
    ),
    WoodType.EBONY: WoodSpec(
        "Ebony", WoodCategory.DARK, (0.25, 0.20, 0.15), (0.20, 0.15, 0.10), 0.3,
        "Very dark with subtle grain patterns",
    ),
}


@dataclass(frozen=True)
class DrawerDimensions:
    """Inside dimensions of the drawer in inches.

    Width and depth form the footprint that gets partitioned; height is the
    height of every divider.
    """

    width: float
    depth: float
    height: float

    def __post_init__(self) -> None:
        for name in ("width", "depth", "height"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be greater than 0")
            if value > MAX_DIMENSION:
                raise ValueError(f"{name} cannot exceed {MAX_DIMENSION:g} inches")
            if round(value / DIMENSION_INCREMENT) * DIMENSION_INCREMENT != value:
                raise ValueError(
                    f"{name} must be in increments of {DIMENSION_INCREMENT} inches"
                )

    @property
    def footprint_area(self) -> float:
        """Width x depth in square inches."""
        return self.width * self.depth

    def to_units(self) -> tuple[float, float]:
        """Footprint (width, depth) in layout units."""
        return self.width * PIXELS_PER_INCH, self.depth * PIXELS_PER_INCH


@dataclass(frozen=True)
class Block:
    """One rectangular compartment, in layout units from the top-left corner."""

    id: str
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        return self.width * self.height

    def with_geometry(self, **changes: float) -> Block:
        """Copy of this block with some of x, y, width, height replaced."""
        return replace(self, **changes)


@dataclass(frozen=True)
class SplitLine:
    """A divider segment between blocks.

    Horizontal lines share ``y1 == y2``; vertical lines share ``x1 == x2``.
    """

    id: str
    is_horizontal: bool
    x1: float
    y1: float
    x2: float
    y2: float

    @property
    def position(self) -> float:
        """The coordinate the line sits on (y if horizontal, x if vertical)."""
        return self.y1 if self.is_horizontal else self.x1

    @property
    def start(self) -> float:
        """Lower end of the span along the line."""
        return self.x1 if self.is_horizontal else self.y1

    @property
    def end(self) -> float:
        """Upper end of the span along the line."""
        return self.x2 if self.is_horizontal else self.y2

    @property
    def length(self) -> float:
        return abs(self.end - self.start)

    def moved_to(self, coordinate: float) -> SplitLine:
        """Copy of this line translated to a new coordinate."""
        if self.is_horizontal:
            return replace(self, y1=coordinate, y2=coordinate)
        return replace(self, x1=coordinate, x2=coordinate)

    def with_span(self, start: float, end: float) -> SplitLine:
        """Copy of this line with a new span along its own axis."""
        if self.is_horizontal:
            return replace(self, x1=start, x2=end)
        return replace(self, y1=start, y2=end)


@dataclass(frozen=True)
class LayoutSnapshot:
    """An immutable (blocks, split lines) pair, the unit kept in history."""

    blocks: tuple[Block, ...] = ()
    split_lines: tuple[SplitLine, ...] = ()

    def block(self, block_id: str) -> Block | None:
        for block in self.blocks:
            if block.id == block_id:
                return block
        return None

    def split_line(self, line_id: str) -> SplitLine | None:
        for line in self.split_lines:
            if line.id == line_id:
                return line
        return None


@dataclass(frozen=True)
class DragRange:
    """Legal positions for a split line during a drag, in layout units."""

    lower: float
    upper: float

    def clamp(self, value: float) -> float:
        return max(self.lower, min(self.upper, value))

    def contains(self, value: float) -> bool:
        return self.lower <= value <= self.upper


@dataclass(frozen=True)
class Divider:
    """A physical divider wall derived from a split line, in inches."""

    length_in: float
    height_in: float

    @property
    def area(self) -> float:
        return self.length_in * self.height_in


@dataclass(frozen=True)
class LayoutIssue:
    """A geometric problem found in a layout.

    Attributes:
        code: Machine-readable category (gap, overlap, min_size, off_grid,
            out_of_bounds, malformed_line, duplicate_id).
        message: Human-readable description.
        element_id: Block or split line id the issue refers to, if any.
    """

    code: str
    message: str
    element_id: str | None = None
