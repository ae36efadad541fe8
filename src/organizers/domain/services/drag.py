"""Drag-resizing of split lines.

A drag has two phases. While the pointer is down a ``DragSession`` turns
raw pointer coordinates into snapped, clamped candidate positions without
touching the layout. On release ``ResizeEngine.commit`` validates the
candidate and, if legal, produces a new snapshot with the line and its
neighbouring blocks moved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from organizers.domain.services.geometry import (
    compute_drag_range,
    find_touching_blocks,
    partition_affected,
    snap_to_grid,
    tiles_same_region,
)
from organizers.domain.value_objects import (
    ADJACENCY_EPSILON,
    MIN_SIZE,
    Block,
    DragRange,
    LayoutSnapshot,
    SplitLine,
)

logger = logging.getLogger(__name__)


@dataclass
class DragSession:
    """Live phase of a split line drag.

    Attributes:
        line: The line as it was when the drag started.
        affected: Blocks adjacent to the line at drag start.
        bounds: Legal range for the line's coordinate.
        candidate: Last snapped and clamped position, initially the line's own.
    """

    line: SplitLine
    bounds: DragRange
    affected: list[Block] = field(default_factory=list)
    candidate: float | None = None

    def __post_init__(self) -> None:
        if self.candidate is None:
            self.candidate = self.line.position

    @classmethod
    def start(cls, snapshot: LayoutSnapshot, line: SplitLine) -> DragSession:
        return cls(
            line=line,
            affected=find_touching_blocks(snapshot.blocks, line),
            bounds=compute_drag_range(line, snapshot.blocks),
            candidate=line.position,
        )

    @property
    def original_position(self) -> float:
        return self.line.position

    @property
    def affected_ids(self) -> set[str]:
        return {block.id for block in self.affected}

    def move(self, raw: float) -> float:
        """Propose a pointer coordinate and return where the line is drawn.

        The value is snapped to the grid first and then clamped into the
        drag range, so the line can never be shown past a legal bound.
        """
        snapped = snap_to_grid(raw)
        self.candidate = self.bounds.clamp(snapped)
        return self.candidate

    def preview(self) -> SplitLine:
        """The dragged line at its current candidate position."""
        return self.line.moved_to(self.position)

    @property
    def position(self) -> float:
        """Current candidate coordinate."""
        return self.line.position if self.candidate is None else self.candidate


class ResizeEngine:
    """Commits a split line move to the line and its adjacent blocks."""

    def commit(
        self, snapshot: LayoutSnapshot, line_id: str, new_position: float
    ) -> LayoutSnapshot | None:
        """Move ``line_id`` to ``new_position``.

        Blocks before the line grow by the delta; blocks after it shift by
        the delta and shrink by the same amount. Perpendicular lines that end
        on the moved segment follow it so dividers stay joined.

        Returns:
            The new snapshot, or None if the move is rejected: unknown line,
            a side without neighbours, no movement, any neighbour that
            would end up smaller than ``MIN_SIZE``, or a result that no longer
            tiles the drawer. Nothing is partially applied.
        """
        line = snapshot.split_line(line_id)
        if line is None:
            logger.debug(f"Resize ignored: no split line {line_id!r}")
            return None

        original = line.position
        affected = find_touching_blocks(snapshot.blocks, line)
        before, after = partition_affected(line, affected, original)
        if not before or not after:
            logger.debug(f"Resize ignored: line {line_id!r} has an empty side")
            return None

        delta = new_position - original
        if delta == 0:
            return None

        horizontal = line.is_horizontal

        def size(block: Block) -> float:
            return block.height if horizontal else block.width

        if any(size(b) + delta < MIN_SIZE for b in before) or any(
            size(b) - delta < MIN_SIZE for b in after
        ):
            logger.debug(
                f"Resize rejected: moving {line_id!r} to {new_position} would "
                f"shrink a compartment below {MIN_SIZE}"
            )
            return None

        before_ids = {b.id for b in before}
        after_ids = {b.id for b in after}
        blocks: list[Block] = []
        for block in snapshot.blocks:
            if block.id in before_ids:
                if horizontal:
                    block = block.with_geometry(height=block.height + delta)
                else:
                    block = block.with_geometry(width=block.width + delta)
            elif block.id in after_ids:
                if horizontal:
                    block = block.with_geometry(y=block.y + delta, height=block.height - delta)
                else:
                    block = block.with_geometry(x=block.x + delta, width=block.width - delta)
            blocks.append(block)

        if not tiles_same_region(snapshot.blocks, blocks):
            logger.debug(f"Resize rejected: moving {line_id!r} would break the tiling")
            return None

        lines: list[SplitLine] = []
        for other in snapshot.split_lines:
            if other.id == line.id:
                other = other.moved_to(new_position)
            elif other.is_horizontal != horizontal:
                other = self._follow(other, line, new_position)
            lines.append(other)

        logger.debug(f"Moved split line {line_id!r} from {original} to {new_position}")
        return LayoutSnapshot(blocks=tuple(blocks), split_lines=tuple(lines))

    @staticmethod
    def _follow(other: SplitLine, moved: SplitLine, new_position: float) -> SplitLine:
        """Re-anchor a perpendicular line whose end sits on the moved line."""
        inside = (
            moved.start + ADJACENCY_EPSILON < other.position < moved.end - ADJACENCY_EPSILON
        )
        if not inside:
            return other
        start, end = other.start, other.end
        if abs(start - moved.position) < ADJACENCY_EPSILON:
            start = new_position
        if abs(end - moved.position) < ADJACENCY_EPSILON:
            end = new_position
        if (start, end) == (other.start, other.end):
            return other
        return other.with_span(start, end)
