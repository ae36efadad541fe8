"""Editing session for one drawer layout.

``LayoutEditor`` binds the layout model, the split and resize engines and
the history into the operations a user performs. Invalid actions are
silent no-ops: they return False, leave the layout untouched and record
nothing in history.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from organizers.application.dtos import LayoutDocument
from organizers.domain.entities import DrawerLayout
from organizers.domain.services.drag import DragSession, ResizeEngine
from organizers.domain.services.geometry import check_layout, snap_to_grid
from organizers.domain.services.history import LayoutHistory
from organizers.domain.services.pricing import PriceQuote, PricingCalculator
from organizers.domain.services.split import IdSequence, SplitEngine
from organizers.domain.value_objects import (
    DEFAULT_WOOD,
    MAX_HISTORY,
    Block,
    DrawerDimensions,
    LayoutSnapshot,
    SplitLine,
    WoodType,
)

logger = logging.getLogger(__name__)

CompartmentsObserver = Callable[[tuple[Block, ...]], None]


class LayoutEditor:
    """A single user's editing session.

    Every committed change (split, resize, undo, redo, clear) replaces the
    layout snapshot whole, records it in history where applicable and then
    notifies subscribers with the current blocks.

    Example:
        editor = LayoutEditor(DrawerDimensions(30, 20, 3))
        editor.select("initial")
        editor.add_row()
        editor.begin_drag("split-1")
        editor.drag_to(50)
        editor.end_drag()
    """

    def __init__(
        self,
        dimensions: DrawerDimensions,
        material: WoodType = DEFAULT_WOOD,
        max_history: int = MAX_HISTORY,
        pricing: PricingCalculator | None = None,
    ) -> None:
        self.layout = DrawerLayout(dimensions=dimensions, material=material)
        self.history = LayoutHistory(max_history)
        self.pricing = pricing or PricingCalculator()
        self.resizer = ResizeEngine()
        self.ids = IdSequence()
        self.splitter = SplitEngine(self.ids)
        self.drag: DragSession | None = None
        self._observers: list[CompartmentsObserver] = []
        self.history.reset(self.layout.snapshot)

    # Read access

    @property
    def dimensions(self) -> DrawerDimensions:
        return self.layout.dimensions

    @property
    def snapshot(self) -> LayoutSnapshot:
        return self.layout.snapshot

    @property
    def blocks(self) -> tuple[Block, ...]:
        return self.layout.blocks

    @property
    def split_lines(self) -> tuple[SplitLine, ...]:
        return self.layout.split_lines

    @property
    def selected_id(self) -> str | None:
        return self.layout.selected_id

    @property
    def material(self) -> WoodType:
        return self.layout.material

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    # Observers

    def subscribe(self, callback: CompartmentsObserver) -> Callable[[], None]:
        """Register a compartments-changed callback.

        Returns:
            A callable that removes the subscription.
        """
        self._observers.append(callback)

        def unsubscribe() -> None:
            if callback in self._observers:
                self._observers.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        blocks = self.layout.blocks
        for callback in list(self._observers):
            callback(blocks)

    def _commit(self, snapshot: LayoutSnapshot) -> None:
        self.layout.apply(snapshot)
        self.history.push(snapshot)
        self._notify()

    # Lifecycle

    def initialize(self, dimensions: DrawerDimensions | None = None) -> None:
        """Start over with one block covering the drawer and a fresh history."""
        self.layout.reset(dimensions)
        self.history.reset(self.layout.snapshot)
        self.ids = IdSequence()
        self.splitter = SplitEngine(self.ids)
        self.drag = None
        logger.debug(
            f"Initialized {self.dimensions.width}x{self.dimensions.depth} layout"
        )

    def clear(self) -> bool:
        """Discard all splits and history, then notify with the initial block."""
        self.initialize()
        self._notify()
        return True

    def load(self, document: LayoutDocument) -> None:
        """Replace the session with a stored design, as a fresh history.

        Raises:
            ValueError: If the stored layout breaks the tiling, minimum size
                or grid rules. The session is left unchanged.
        """
        issues = check_layout(document.snapshot, document.dimensions)
        if issues:
            raise ValueError(
                "Invalid layout: " + "; ".join(issue.message for issue in issues)
            )
        self.layout = DrawerLayout(
            dimensions=document.dimensions,
            snapshot=document.snapshot,
            material=document.material,
        )
        self.history.reset(self.layout.snapshot)
        self.ids = IdSequence()
        self.ids.skip_past(
            [b.id for b in document.blocks] + [line.id for line in document.split_lines]
        )
        self.splitter = SplitEngine(self.ids)
        self.drag = None
        self._notify()

    # Selection

    def select(self, block_id: str) -> bool:
        if self.layout.block(block_id) is None:
            logger.debug(f"Select ignored: no block {block_id!r}")
            return False
        self.layout.selected_id = block_id
        return True

    def clear_selection(self) -> None:
        self.layout.selected_id = None

    # Splitting

    def add_row(self) -> bool:
        """Split the selected block into top and bottom compartments."""
        return self._split(horizontal=True)

    def add_column(self) -> bool:
        """Split the selected block into left and right compartments."""
        return self._split(horizontal=False)

    def _split(self, horizontal: bool) -> bool:
        if self.layout.selected_id is None:
            logger.debug("Split ignored: no block selected")
            return False
        snapshot = self.splitter.split(self.layout.snapshot, self.layout.selected_id, horizontal)
        if snapshot is None:
            return False
        self.layout.selected_id = None
        self._commit(snapshot)
        return True

    # Dragging

    def begin_drag(self, line_id: str) -> DragSession | None:
        """Start dragging a split line; None if the line does not exist."""
        line = self.layout.split_line(line_id)
        if line is None:
            logger.debug(f"Drag ignored: no split line {line_id!r}")
            return None
        self.drag = DragSession.start(self.layout.snapshot, line)
        logger.debug(
            f"Drag {line_id!r} within [{self.drag.bounds.lower}, {self.drag.bounds.upper}]"
        )
        return self.drag

    def drag_to(self, raw: float) -> float | None:
        """Move the live drag to a pointer coordinate.

        Returns:
            The snapped and clamped candidate position, or None when no drag
            is in progress. The layout itself is not changed.
        """
        if self.drag is None:
            return None
        return self.drag.move(raw)

    def end_drag(self) -> bool:
        """Release the pointer and commit the live candidate position."""
        if self.drag is None:
            return False
        drag, self.drag = self.drag, None
        return self.commit_drag(drag.line.id, drag.position)

    def cancel_drag(self) -> None:
        self.drag = None

    def commit_drag(self, line_id: str, coordinate: float) -> bool:
        """Move a split line and its adjacent blocks to ``coordinate``.

        The coordinate is snapped to the grid. The move is validated again
        here, independent of any drag range, and rejected whole if any
        neighbour would end below the minimum size.
        """
        snapshot = self.resizer.commit(
            self.layout.snapshot, line_id, snap_to_grid(coordinate)
        )
        if snapshot is None:
            return False
        self._commit(snapshot)
        return True

    # History

    def undo(self) -> bool:
        snapshot = self.history.undo()
        if snapshot is None:
            return False
        return self._restore(snapshot)

    def redo(self) -> bool:
        snapshot = self.history.redo()
        if snapshot is None:
            return False
        return self._restore(snapshot)

    def _restore(self, snapshot: LayoutSnapshot) -> bool:
        self.layout.apply(snapshot)
        self.layout.selected_id = None
        self.drag = None
        logger.debug(f"History moved to entry {self.history.index} of {len(self.history)}")
        self._notify()
        return True

    # Material, pricing and export

    def set_material(self, material: WoodType) -> bool:
        if material == self.layout.material:
            return False
        self.layout.material = material
        logger.debug(f"Material set to {material.value}")
        return True

    def quote(self) -> PriceQuote:
        return self.pricing.quote(self.layout.dimensions, self.layout.split_lines)

    def export(self) -> LayoutDocument:
        return LayoutDocument.from_layout(self.layout)
