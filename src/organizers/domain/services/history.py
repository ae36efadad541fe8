"""Linear undo/redo history over layout snapshots."""

from __future__ import annotations

import logging

from organizers.domain.value_objects import MAX_HISTORY, LayoutSnapshot

logger = logging.getLogger(__name__)


class LayoutHistory:
    """Bounded linear history with a cursor.

    The snapshot under the cursor is always the one on screen. Pushing a new
    snapshot discards everything after the cursor; once ``max_depth`` is
    exceeded the oldest snapshot is dropped and cannot be recovered.

    Snapshots are immutable, so storing them directly keeps every entry
    independent of later edits.

    Example:
        history = LayoutHistory()
        history.reset(first)
        history.push(second)
        assert history.undo() == first
    """

    def __init__(self, max_depth: int = MAX_HISTORY) -> None:
        if max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        self.max_depth = max_depth
        self._entries: list[LayoutSnapshot] = []
        self._index = -1

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def index(self) -> int:
        """Cursor position; -1 only before the first reset."""
        return self._index

    @property
    def entries(self) -> tuple[LayoutSnapshot, ...]:
        return tuple(self._entries)

    @property
    def current(self) -> LayoutSnapshot | None:
        if self._index < 0:
            return None
        return self._entries[self._index]

    @property
    def can_undo(self) -> bool:
        return self._index > 0

    @property
    def can_redo(self) -> bool:
        return self._index < len(self._entries) - 1

    def reset(self, snapshot: LayoutSnapshot) -> None:
        """Start over with ``snapshot`` as the only entry."""
        self._entries = [snapshot]
        self._index = 0

    def push(self, snapshot: LayoutSnapshot) -> None:
        """Record a new snapshot after the cursor, dropping any redo tail."""
        entries = self._entries[: self._index + 1]
        entries.append(snapshot)
        if len(entries) > self.max_depth:
            entries.pop(0)
        else:
            self._index += 1
        self._entries = entries
        logger.debug(f"History push: {len(self._entries)} entries, cursor at {self._index}")

    def undo(self) -> LayoutSnapshot | None:
        """Step back one snapshot; None at the oldest entry."""
        if not self.can_undo:
            return None
        self._index -= 1
        return self._entries[self._index]

    def redo(self) -> LayoutSnapshot | None:
        """Step forward one snapshot; None at the newest entry."""
        if not self.can_redo:
            return None
        self._index += 1
        return self._entries[self._index]
