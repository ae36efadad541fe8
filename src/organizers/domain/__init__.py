"""Domain layer - drawer layout geometry and pricing."""

from .entities import INITIAL_BLOCK_ID, DrawerLayout, initial_snapshot
from .services import (
    DragSession,
    LayoutHistory,
    PriceQuote,
    PricingCalculator,
    ResizeEngine,
    SplitEngine,
)
from .value_objects import (
    GRID_SIZE,
    MAX_HISTORY,
    MIN_SIZE,
    PIXELS_PER_INCH,
    WOOD_CATALOG,
    Block,
    Divider,
    DragRange,
    DrawerDimensions,
    LayoutIssue,
    LayoutSnapshot,
    SplitLine,
    WoodType,
)

__all__ = [
    "GRID_SIZE",
    "INITIAL_BLOCK_ID",
    "MAX_HISTORY",
    "MIN_SIZE",
    "PIXELS_PER_INCH",
    "WOOD_CATALOG",
    "Block",
    "Divider",
    "DragRange",
    "DragSession",
    "DrawerDimensions",
    "DrawerLayout",
    "LayoutHistory",
    "LayoutIssue",
    "LayoutSnapshot",
    "PriceQuote",
    "PricingCalculator",
    "ResizeEngine",
    "SplitEngine",
    "SplitLine",
    "WoodType",
    "initial_snapshot",
]
