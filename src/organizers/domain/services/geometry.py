"""Geometry helpers shared by the split and resize engines.

All coordinates are layout units (``PIXELS_PER_INCH`` per inch) measured
from the top-left corner of the drawer. Horizontal split lines sit on a y
coordinate and span x; vertical lines sit on x and span y.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from organizers.domain.value_objects import (
    ADJACENCY_EPSILON,
    GRID_SIZE,
    MIN_SIZE,
    PIXELS_PER_INCH,
    Block,
    DragRange,
    DrawerDimensions,
    LayoutIssue,
    LayoutSnapshot,
    SplitLine,
)

_TOLERANCE = 1e-6


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up."""
    return math.floor(value + 0.5)


def snap_to_grid(value: float, grid_size: float = GRID_SIZE) -> float:
    """Snap a coordinate to the nearest multiple of ``grid_size``."""
    return round_half_up(value / grid_size) * grid_size


def inches_to_units(inches: float) -> float:
    return inches * PIXELS_PER_INCH


def units_to_inches(units: float) -> float:
    return units / PIXELS_PER_INCH


def _leading_edge(block: Block, horizontal: bool) -> float:
    return block.y if horizontal else block.x


def _trailing_edge(block: Block, horizontal: bool) -> float:
    return block.bottom if horizontal else block.right


def _span(block: Block, horizontal: bool) -> tuple[float, float]:
    """Extent of a block along the axis a line of this orientation spans."""
    if horizontal:
        return block.x, block.right
    return block.y, block.bottom


def find_affected_blocks(blocks: Iterable[Block], line: SplitLine) -> list[Block]:
    """Blocks directly on either side of this particular line segment.

    A block qualifies when one of its edges lies on the line (within
    ``ADJACENCY_EPSILON``), it lies within the line's span, and it overlaps
    that span by more than ``MIN_SIZE``. Blocks elsewhere in the drawer that
    merely share the coordinate are not included.
    """
    horizontal = line.is_horizontal
    position = line.position
    affected: list[Block] = []
    for block in blocks:
        touches = (
            abs(_trailing_edge(block, horizontal) - position) < ADJACENCY_EPSILON
            or abs(_leading_edge(block, horizontal) - position) < ADJACENCY_EPSILON
        )
        low, high = _span(block, horizontal)
        in_span = low < line.end and high > line.start
        overlap = min(high, line.end) - max(low, line.start)
        if touches and in_span and overlap > MIN_SIZE:
            affected.append(block)
    return affected


def find_touching_blocks(blocks: Iterable[Block], line: SplitLine) -> list[Block]:
    """Every block with an edge on the line that shares any length with it.

    Unlike ``find_affected_blocks`` there is no minimum overlap, so narrow
    neighbours at the end of a segment are included. Resizing moves all of
    them, otherwise the tiling would open a gap.
    """
    horizontal = line.is_horizontal
    position = line.position
    touching: list[Block] = []
    for block in blocks:
        on_line = (
            abs(_trailing_edge(block, horizontal) - position) < ADJACENCY_EPSILON
            or abs(_leading_edge(block, horizontal) - position) < ADJACENCY_EPSILON
        )
        low, high = _span(block, horizontal)
        if on_line and min(high, line.end) - max(low, line.start) > _TOLERANCE:
            touching.append(block)
    return touching


def tiles_same_region(original: Sequence[Block], resized: Sequence[Block]) -> bool:
    """True when ``resized`` covers exactly the region ``original`` covers.

    Both must share a bounding box and total area, and ``resized`` must be
    interior-disjoint. For a layout that tiled its box, that is a tiling.
    """

    def bounds(blocks: Sequence[Block]) -> tuple[float, float, float, float]:
        return (
            min(b.x for b in blocks),
            min(b.y for b in blocks),
            max(b.right for b in blocks),
            max(b.bottom for b in blocks),
        )

    if len(original) != len(resized):
        return False
    if any(abs(a - b) > _TOLERANCE for a, b in zip(bounds(original), bounds(resized))):
        return False
    if abs(sum(b.area for b in original) - sum(b.area for b in resized)) > _TOLERANCE:
        return False
    return not _overlapping_pairs(resized)


def _overlapping_pairs(blocks: Sequence[Block]) -> list[tuple[Block, Block]]:
    pairs: list[tuple[Block, Block]] = []
    for i, first in enumerate(blocks):
        for second in blocks[i + 1 :]:
            overlap_w = min(first.right, second.right) - max(first.x, second.x)
            overlap_h = min(first.bottom, second.bottom) - max(first.y, second.y)
            if overlap_w > _TOLERANCE and overlap_h > _TOLERANCE:
                pairs.append((first, second))
    return pairs


def partition_affected(
    line: SplitLine, blocks: Sequence[Block], position: float | None = None
) -> tuple[list[Block], list[Block]]:
    """Split affected blocks into those before and after the line.

    "Before" blocks end at ``position`` (above a horizontal line, left of a
    vertical one); "after" blocks start there.

    Args:
        line: The split line.
        blocks: Blocks already filtered to those on the line.
        position: Line coordinate to test against; defaults to the line's own.
    """
    horizontal = line.is_horizontal
    at = line.position if position is None else position
    before = [
        b for b in blocks if abs(_trailing_edge(b, horizontal) - at) < ADJACENCY_EPSILON
    ]
    after = [
        b for b in blocks if abs(_leading_edge(b, horizontal) - at) < ADJACENCY_EPSILON
    ]
    return before, after


def compute_drag_range(line: SplitLine, blocks: Iterable[Block]) -> DragRange:
    """Range a line may be dragged over without shrinking a neighbour below MIN_SIZE.

    Every block touching the segment counts, however narrow its overlap.
    When either side has no adjacent block the line is pinned in place.
    """
    horizontal = line.is_horizontal
    before, after = partition_affected(line, find_touching_blocks(blocks, line))
    if not before or not after:
        return DragRange(line.position, line.position)
    lower = max(_leading_edge(b, horizontal) + MIN_SIZE for b in before)
    upper = min(_trailing_edge(b, horizontal) - MIN_SIZE for b in after)
    return DragRange(lower, upper)


def _is_on_grid(value: float) -> bool:
    return abs(snap_to_grid(value) - value) < _TOLERANCE


def check_layout(
    snapshot: LayoutSnapshot, dimensions: DrawerDimensions
) -> list[LayoutIssue]:
    """Check a snapshot against the layout invariants.

    Verifies that blocks tile the drawer exactly (no gaps, no overlaps, no
    block outside the footprint), that every block meets the minimum size,
    that coordinates sit on the grid and that split lines are well formed.

    Returns:
        List of issues; empty when the layout is valid.
    """
    issues: list[LayoutIssue] = []
    width = inches_to_units(dimensions.width)
    depth = inches_to_units(dimensions.depth)
    blocks = snapshot.blocks

    seen: set[str] = set()
    for block in blocks:
        if block.id in seen:
            issues.append(
                LayoutIssue("duplicate_id", f"Duplicate block id {block.id!r}", block.id)
            )
        seen.add(block.id)

        if block.width < MIN_SIZE or block.height < MIN_SIZE:
            issues.append(
                LayoutIssue(
                    "min_size",
                    f"Block {block.id!r} is {units_to_inches(block.width):.2f}\" x "
                    f"{units_to_inches(block.height):.2f}\", below the "
                    f"{units_to_inches(MIN_SIZE):.2f}\" minimum",
                    block.id,
                )
            )
        if block.x < 0 or block.y < 0 or block.right > width or block.bottom > depth:
            issues.append(
                LayoutIssue(
                    "out_of_bounds", f"Block {block.id!r} extends outside the drawer", block.id
                )
            )
        if not all(_is_on_grid(v) for v in (block.x, block.y, block.width, block.height)):
            issues.append(
                LayoutIssue("off_grid", f"Block {block.id!r} is not grid aligned", block.id)
            )

    for first, second in _overlapping_pairs(blocks):
        issues.append(
            LayoutIssue(
                "overlap", f"Blocks {first.id!r} and {second.id!r} overlap", second.id
            )
        )

    covered = sum(block.area for block in blocks)
    if not any(issue.code in ("overlap", "out_of_bounds") for issue in issues):
        if abs(covered - width * depth) > _TOLERANCE:
            issues.append(
                LayoutIssue(
                    "gap",
                    f"Blocks cover {covered / PIXELS_PER_INCH**2:.2f} sq in "
                    f"of {dimensions.footprint_area:.2f} sq in",
                )
            )

    for line in snapshot.split_lines:
        if line.is_horizontal and line.y1 != line.y2:
            issues.append(
                LayoutIssue("malformed_line", f"Horizontal line {line.id!r} is not level", line.id)
            )
        elif not line.is_horizontal and line.x1 != line.x2:
            issues.append(
                LayoutIssue("malformed_line", f"Vertical line {line.id!r} is not plumb", line.id)
            )
        limit = depth if line.is_horizontal else width
        if not 0 < line.position < limit:
            issues.append(
                LayoutIssue(
                    "malformed_line",
                    f"Line {line.id!r} lies on or outside the drawer boundary",
                    line.id,
                )
            )
        if not _is_on_grid(line.position):
            issues.append(
                LayoutIssue("off_grid", f"Line {line.id!r} is not grid aligned", line.id)
            )

    return issues


def is_valid_layout(snapshot: LayoutSnapshot, dimensions: DrawerDimensions) -> bool:
    return not check_layout(snapshot, dimensions)
