"""Keyboard shortcuts for the layout editor.

Shortcuts are bound to a window-level ``KeyDispatcher`` while an editor is
mounted and removed again on unmount. Ctrl and Cmd (meta) are treated the
same so the bindings work on every platform.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from organizers.application.editor import LayoutEditor

logger = logging.getLogger(__name__)

KeyListener = Callable[["KeyEvent"], bool]


@dataclass(frozen=True)
class KeyEvent:
    """A key press with its modifier state."""

    key: str
    ctrl: bool = False
    meta: bool = False
    shift: bool = False

    @property
    def command(self) -> bool:
        """True when Ctrl or Cmd is held."""
        return self.ctrl or self.meta


class KeyDispatcher:
    """Delivers key events to listeners in registration order.

    A listener returns True when it handled the event; dispatch stops there
    and reports True so the caller can suppress the default action.
    """

    def __init__(self) -> None:
        self._listeners: list[KeyListener] = []

    def __len__(self) -> int:
        return len(self._listeners)

    def add_listener(self, listener: KeyListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: KeyListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def dispatch(self, event: KeyEvent) -> bool:
        for listener in list(self._listeners):
            if listener(event):
                return True
        return False


class EditorShortcuts:
    """Undo and redo bindings for one editor.

    Bindings:
        Ctrl/Cmd+Z: undo
        Ctrl/Cmd+Shift+Z: redo
        Ctrl/Cmd+Y: redo
    """

    def __init__(self, editor: LayoutEditor) -> None:
        self.editor = editor
        self._dispatcher: KeyDispatcher | None = None

    @property
    def mounted(self) -> bool:
        return self._dispatcher is not None

    def mount(self, dispatcher: KeyDispatcher) -> None:
        if self._dispatcher is dispatcher:
            return
        self.unmount()
        dispatcher.add_listener(self.handle)
        self._dispatcher = dispatcher

    def unmount(self) -> None:
        if self._dispatcher is not None:
            self._dispatcher.remove_listener(self.handle)
            self._dispatcher = None

    def handle(self, event: KeyEvent) -> bool:
        if not event.command:
            return False
        key = event.key.lower()
        if key == "z" and not event.shift:
            logger.debug("Undo shortcut")
            self.editor.undo()
            return True
        if key == "y" or (key == "z" and event.shift):
            logger.debug("Redo shortcut")
            self.editor.redo()
            return True
        return False
