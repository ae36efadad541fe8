"""FastAPI dependency injection for editing sessions, pricing and the cart."""

import logging
import os
import uuid
from collections import OrderedDict
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from fastapi import Depends

from organizers.application.cart import Cart
from organizers.application.config import EditorSettings, load_settings
from organizers.application.dtos import LayoutDocument
from organizers.application.editor import LayoutEditor
from organizers.domain.services.pricing import PricingCalculator
from organizers.domain.value_objects import DrawerDimensions, WoodType
from organizers.web.exceptions import SessionNotFoundError

logger = logging.getLogger(__name__)

SETTINGS_ENV_VAR = "ORGANIZERS_SETTINGS"


class SessionStore:
    """In-memory editing sessions keyed by id.

    Each session is owned by one client; nothing is shared between
    sessions. At most ``settings.max_sessions`` are kept; creating one more
    evicts the session used least recently.
    """

    def __init__(self, settings: EditorSettings) -> None:
        self.settings = settings
        self._sessions: OrderedDict[str, LayoutEditor] = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def _new_editor(
        self, dimensions: DrawerDimensions, material: WoodType | None
    ) -> LayoutEditor:
        return LayoutEditor(
            dimensions,
            material=material or self.settings.default_material,
            max_history=self.settings.max_history,
            pricing=create_pricing(self.settings),
        )

    def _register(self, editor: LayoutEditor) -> str:
        while len(self._sessions) >= self.settings.max_sessions:
            evicted, _ = self._sessions.popitem(last=False)
            logger.info(f"Evicted idle session {evicted}")
        session_id = uuid.uuid4().hex
        self._sessions[session_id] = editor
        logger.debug(f"Created session {session_id}")
        return session_id

    def create(
        self, dimensions: DrawerDimensions, material: WoodType | None = None
    ) -> tuple[str, LayoutEditor]:
        editor = self._new_editor(dimensions, material)
        return self._register(editor), editor

    def load(self, document: LayoutDocument) -> tuple[str, LayoutEditor]:
        """Start a session from a stored design.

        Raises:
            ValueError: If the design's layout is invalid. No session is created.
        """
        editor = self._new_editor(document.dimensions, document.material)
        editor.load(document)
        return self._register(editor), editor

    def get(self, session_id: str) -> LayoutEditor:
        """Look up a session and mark it as recently used.

        Raises:
            SessionNotFoundError: If the id is unknown or was evicted.
        """
        editor = self._sessions.get(session_id)
        if editor is None:
            raise SessionNotFoundError(session_id)
        self._sessions.move_to_end(session_id)
        return editor

    def delete(self, session_id: str) -> None:
        if self._sessions.pop(session_id, None) is None:
            raise SessionNotFoundError(session_id)


def create_pricing(settings: EditorSettings) -> PricingCalculator:
    return PricingCalculator(
        price_per_square_inch=settings.pricing.price_per_square_inch,
        material_multiplier=settings.pricing.material_multiplier,
    )


@lru_cache(maxsize=1)
def get_settings() -> EditorSettings:
    """Load settings from the file named by ORGANIZERS_SETTINGS, if set."""
    path = os.environ.get(SETTINGS_ENV_VAR)
    return load_settings(Path(path) if path else None)


@lru_cache(maxsize=1)
def get_session_store() -> SessionStore:
    return SessionStore(get_settings())


@lru_cache(maxsize=1)
def get_cart() -> Cart:
    return Cart()


def get_pricing(
    settings: Annotated[EditorSettings, Depends(get_settings)],
) -> PricingCalculator:
    return create_pricing(settings)


# Type aliases for cleaner endpoint signatures
SettingsDep = Annotated[EditorSettings, Depends(get_settings)]
SessionStoreDep = Annotated[SessionStore, Depends(get_session_store)]
CartDep = Annotated[Cart, Depends(get_cart)]
PricingDep = Annotated[PricingCalculator, Depends(get_pricing)]
