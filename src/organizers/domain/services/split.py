"""Splitting a block into two with a new split line."""

from __future__ import annotations

import itertools
import logging

from organizers.domain.services.geometry import snap_to_grid
from organizers.domain.value_objects import MIN_SIZE, Block, LayoutSnapshot, SplitLine

logger = logging.getLogger(__name__)


class IdSequence:
    """Source of unique block and split line ids for one editing session."""

    def __init__(self, start: int = 1) -> None:
        self._counter = itertools.count(start)

    def next(self) -> int:
        return next(self._counter)

    def skip_past(self, ids: list[str]) -> None:
        """Advance beyond any numeric suffix already used in ``ids``."""
        highest = 0
        for identifier in ids:
            tail = identifier.rsplit("-", 1)[-1]
            if tail.isdigit():
                highest = max(highest, int(tail))
        self._counter = itertools.count(highest + 1)


class SplitEngine:
    """Replaces a block with two children separated by a split line.

    Rows cut the block at its snapped vertical midpoint into top and bottom
    halves joined by a horizontal line; columns cut it at the snapped
    horizontal midpoint into left and right halves joined by a vertical line.
    A split that would leave either child smaller than ``MIN_SIZE`` is
    refused.
    """

    def __init__(self, ids: IdSequence | None = None) -> None:
        self.ids = ids or IdSequence()

    def add_row(self, snapshot: LayoutSnapshot, block_id: str) -> LayoutSnapshot | None:
        return self.split(snapshot, block_id, horizontal=True)

    def add_column(self, snapshot: LayoutSnapshot, block_id: str) -> LayoutSnapshot | None:
        return self.split(snapshot, block_id, horizontal=False)

    def split(
        self, snapshot: LayoutSnapshot, block_id: str, horizontal: bool
    ) -> LayoutSnapshot | None:
        """Split ``block_id`` and return the resulting snapshot.

        Args:
            snapshot: Layout to split in.
            block_id: Block to replace.
            horizontal: True for a row (horizontal line), False for a column.

        Returns:
            The new snapshot, or None when the block does not exist or is too
            small to split.
        """
        block = snapshot.block(block_id)
        if block is None:
            logger.debug(f"Split ignored: no block {block_id!r}")
            return None

        size = block.height if horizontal else block.width
        first_size = snap_to_grid(size / 2)
        second_size = size - first_size
        if first_size < MIN_SIZE or second_size < MIN_SIZE:
            logger.debug(
                f"Split ignored: block {block_id!r} of size {size} cannot hold two "
                f"compartments of at least {MIN_SIZE}"
            )
            return None

        n = self.ids.next()
        if horizontal:
            split_y = block.y + first_size
            children = (
                Block(f"{block.id}-top-{n}", block.x, block.y, block.width, first_size),
                Block(f"{block.id}-bottom-{n}", block.x, split_y, block.width, second_size),
            )
            line = SplitLine(
                id=f"split-{n}",
                is_horizontal=True,
                x1=block.x,
                y1=split_y,
                x2=block.right,
                y2=split_y,
            )
        else:
            split_x = block.x + first_size
            children = (
                Block(f"{block.id}-left-{n}", block.x, block.y, first_size, block.height),
                Block(f"{block.id}-right-{n}", split_x, block.y, second_size, block.height),
            )
            line = SplitLine(
                id=f"split-{n}",
                is_horizontal=False,
                x1=split_x,
                y1=block.y,
                x2=split_x,
                y2=block.bottom,
            )

        logger.debug(
            f"Split {block_id!r} {'horizontally' if horizontal else 'vertically'} "
            f"at {line.position}"
        )
        remaining = tuple(b for b in snapshot.blocks if b.id != block_id)
        return LayoutSnapshot(
            blocks=remaining + children,
            split_lines=snapshot.split_lines + (line,),
        )
