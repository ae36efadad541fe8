"""Cart items built from finished designs.

A cart item freezes a design at the moment the customer commits it: the
document, the derived dividers and the quoted price. Checkout and
persistence belong to other services.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from organizers.application.dtos import LayoutDocument
from organizers.domain.services.pricing import PricingCalculator
from organizers.domain.value_objects import Divider

logger = logging.getLogger(__name__)

MAX_NOTES_LENGTH = 500


@dataclass(frozen=True)
class CartItem:
    """One designed organizer waiting in the cart.

    Attributes:
        id: Unique item id.
        document: The design as committed.
        dividers: Divider walls derived from the split lines.
        price: Quoted price.
        image_2d: Reference to a stored plan image, if captured.
        image_3d: Reference to a stored preview image, if captured.
        notes: Customer notes for the workshop.
        created_at: Creation time (UTC).
    """

    id: str
    document: LayoutDocument
    dividers: tuple[Divider, ...]
    price: float
    image_2d: str | None = None
    image_3d: str | None = None
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "dimensions": {
                "width": self.document.dimensions.width,
                "depth": self.document.dimensions.depth,
                "height": self.document.dimensions.height,
            },
            "layout": self.document.layout_dict(),
            "dividers": self.document.dividers_dict(),
            "price": self.price,
            "image2D": self.image_2d,
            "image3D": self.image_3d,
            "notes": self.notes,
            "createdAt": self.created_at.isoformat(),
        }


def create_cart_item(
    document: LayoutDocument,
    pricing: PricingCalculator | None = None,
    image_2d: str | None = None,
    image_3d: str | None = None,
    notes: str | None = None,
) -> CartItem:
    """Freeze a design into a priced cart item.

    Raises:
        ValueError: If the notes are longer than 500 characters.
    """
    if notes is not None and len(notes) > MAX_NOTES_LENGTH:
        raise ValueError(f"notes cannot exceed {MAX_NOTES_LENGTH} characters")
    pricing = pricing or PricingCalculator()
    dividers = tuple(document.dividers)
    quote = pricing.quote_dividers(document.dimensions, dividers)
    return CartItem(
        id=uuid.uuid4().hex,
        document=document,
        dividers=dividers,
        price=quote.price,
        image_2d=image_2d,
        image_3d=image_3d,
        notes=notes or None,
    )


class Cart:
    """An ordered collection of cart items."""

    def __init__(self, items: list[CartItem] | None = None) -> None:
        self._items: list[CartItem] = list(items or [])

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[CartItem]:
        return iter(self._items)

    @property
    def items(self) -> tuple[CartItem, ...]:
        return tuple(self._items)

    def add(self, item: CartItem) -> None:
        self._items.append(item)
        logger.debug(f"Added cart item {item.id} at {item.price:.2f}")

    def remove(self, item_id: str) -> bool:
        """Remove an item by id; False if it was not in the cart."""
        remaining = [item for item in self._items if item.id != item_id]
        removed = len(remaining) != len(self._items)
        self._items = remaining
        return removed

    def get(self, item_id: str) -> CartItem | None:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def clear(self) -> None:
        self._items = []

    def replace(self, items: list[CartItem]) -> None:
        self._items = list(items)

    def total(self) -> float:
        return round(sum(item.price for item in self._items), 2)
