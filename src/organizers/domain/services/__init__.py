"""Domain services for drawer layout editing."""

from .drag import DragSession, ResizeEngine
from .geometry import (
    check_layout,
    compute_drag_range,
    find_affected_blocks,
    find_touching_blocks,
    inches_to_units,
    is_valid_layout,
    partition_affected,
    round_half_up,
    snap_to_grid,
    tiles_same_region,
    units_to_inches,
)
from .history import LayoutHistory
from .manufacturing import (
    Compartment,
    CutDimensions,
    CutSheet,
    build_cut_sheet,
    manufacturing_dimensions,
)
from .pricing import PriceQuote, PricingCalculator, dividers_from_split_lines
from .split import IdSequence, SplitEngine

__all__ = [
    "Compartment",
    "CutDimensions",
    "CutSheet",
    "DragSession",
    "IdSequence",
    "LayoutHistory",
    "PriceQuote",
    "PricingCalculator",
    "ResizeEngine",
    "SplitEngine",
    "build_cut_sheet",
    "check_layout",
    "compute_drag_range",
    "dividers_from_split_lines",
    "find_affected_blocks",
    "find_touching_blocks",
    "inches_to_units",
    "is_valid_layout",
    "manufacturing_dimensions",
    "partition_affected",
    "round_half_up",
    "snap_to_grid",
    "tiles_same_region",
    "units_to_inches",
]
