"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from organizers.domain.value_objects import DEFAULT_WOOD, WoodType
from organizers.web.schemas.common import DimensionsSchema


class CreateSessionRequest(BaseModel):
    """Request for starting an editing session."""

    dimensions: DimensionsSchema = Field(..., description="Drawer dimensions")
    material: WoodType = Field(default=DEFAULT_WOOD, description="Wood species")


class LoadSessionRequest(BaseModel):
    """Request for starting a session from a stored design."""

    design: dict[str, Any] = Field(..., description="Design document JSON")


class SelectRequest(BaseModel):
    block_id: str = Field(..., min_length=1, description="Block to select")


class DragRequest(BaseModel):
    """Drag a split line to a pointer coordinate and release it there."""

    line_id: str = Field(..., min_length=1, description="Split line to drag")
    position: float = Field(..., description="Pointer coordinate in layout units")


class MaterialRequest(BaseModel):
    material: WoodType = Field(..., description="Wood species")


class DesignRequest(BaseModel):
    """Request carrying a full design document."""

    design: dict[str, Any] = Field(..., description="Design document JSON")


class PriceRequest(DesignRequest):
    """Request for pricing a design."""

    price_per_square_inch: float | None = Field(
        default=None, ge=0, description="Override the configured rate"
    )
    material_multiplier: float | None = Field(
        default=None, gt=0, description="Override the configured multiplier"
    )


class CartItemRequest(DesignRequest):
    """Request for adding a design to the cart."""

    image_2d: str | None = Field(default=None, description="Stored plan image reference")
    image_3d: str | None = Field(default=None, description="Stored preview image reference")
    notes: str | None = Field(default=None, max_length=500, description="Customer notes")
