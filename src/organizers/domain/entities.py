"""Domain entities for drawer organizer design."""

from dataclasses import dataclass, field

from .value_objects import (
    DEFAULT_WOOD,
    Block,
    DrawerDimensions,
    LayoutSnapshot,
    SplitLine,
    WoodType,
)

INITIAL_BLOCK_ID = "initial"


def initial_snapshot(dimensions: DrawerDimensions) -> LayoutSnapshot:
    """Single block covering the whole drawer footprint, no split lines."""
    width, depth = dimensions.to_units()
    return LayoutSnapshot(
        blocks=(Block(id=INITIAL_BLOCK_ID, x=0, y=0, width=width, height=depth),),
        split_lines=(),
    )


@dataclass
class DrawerLayout:
    """The live layout of one editing session.

    The geometry is held as a single immutable snapshot and is only ever
    swapped whole, so readers never observe a partially applied change.

    Attributes:
        dimensions: Drawer size in inches.
        snapshot: Current blocks and split lines.
        selected_id: Id of the selected block, or None.
        material: Wood chosen for the organizer.
    """

    dimensions: DrawerDimensions
    snapshot: LayoutSnapshot = field(default_factory=LayoutSnapshot)
    selected_id: str | None = None
    material: WoodType = DEFAULT_WOOD

    def __post_init__(self) -> None:
        if not self.snapshot.blocks:
            self.snapshot = initial_snapshot(self.dimensions)

    @property
    def blocks(self) -> tuple[Block, ...]:
        return self.snapshot.blocks

    @property
    def split_lines(self) -> tuple[SplitLine, ...]:
        return self.snapshot.split_lines

    def block(self, block_id: str) -> Block | None:
        return self.snapshot.block(block_id)

    def split_line(self, line_id: str) -> SplitLine | None:
        return self.snapshot.split_line(line_id)

    def apply(self, snapshot: LayoutSnapshot) -> None:
        """Replace the current geometry with ``snapshot``."""
        self.snapshot = snapshot

    def reset(self, dimensions: DrawerDimensions | None = None) -> None:
        """Return to a single full-size block, optionally with new dimensions."""
        if dimensions is not None:
            self.dimensions = dimensions
        self.snapshot = initial_snapshot(self.dimensions)
        self.selected_id = None
