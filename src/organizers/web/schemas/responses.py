"""Pydantic response schemas for the REST API."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from organizers.application.cart import CartItem
from organizers.application.config import ValidationResult
from organizers.application.editor import LayoutEditor
from organizers.domain.services.pricing import PriceQuote
from organizers.domain.value_objects import WoodType
from organizers.web.schemas.common import BlockSchema, DimensionsSchema, SplitLineSchema


class SessionSchema(BaseModel):
    """State of an editing session."""

    session_id: str = Field(..., description="Session identifier")
    dimensions: DimensionsSchema
    blocks: list[BlockSchema]
    split_lines: list[SplitLineSchema]
    selected_id: str | None = Field(default=None, description="Selected block id")
    material: WoodType
    can_undo: bool
    can_redo: bool
    history_index: int = Field(..., description="Cursor into the history")
    history_length: int = Field(..., description="Number of stored snapshots")

    @classmethod
    def from_editor(cls, session_id: str, editor: LayoutEditor) -> "SessionSchema":
        return cls(
            session_id=session_id,
            dimensions=DimensionsSchema.from_domain(editor.dimensions),
            blocks=[BlockSchema.from_domain(b) for b in editor.blocks],
            split_lines=[SplitLineSchema.from_domain(line) for line in editor.split_lines],
            selected_id=editor.selected_id,
            material=editor.material,
            can_undo=editor.can_undo,
            can_redo=editor.can_redo,
            history_index=editor.history.index,
            history_length=len(editor.history),
        )


class ActionResultSchema(BaseModel):
    """Response for an editing action."""

    applied: bool = Field(..., description="False when the action was a no-op")
    session: SessionSchema


class DragRangeSchema(BaseModel):
    """Legal range for a split line drag."""

    line_id: str
    position: float = Field(..., description="Current line coordinate")
    lower: float
    upper: float
    affected_ids: list[str] = Field(default_factory=list)


class QuoteSchema(BaseModel):
    """Price quote for a design."""

    footprint_area: int = Field(..., description="Base plate area in square inches")
    divider_area: int = Field(..., description="Divider wall area in square inches")
    divider_count: int
    total_area: int
    price: float
    currency: str = "usd"

    @classmethod
    def from_quote(cls, quote: PriceQuote, currency: str = "usd") -> "QuoteSchema":
        return cls(
            footprint_area=quote.footprint_area,
            divider_area=quote.divider_area,
            divider_count=quote.divider_count,
            total_area=quote.total_area,
            price=quote.price,
            currency=currency,
        )


class ValidationResultSchema(BaseModel):
    """Response for design validation."""

    is_valid: bool = Field(..., description="Whether the design is valid")
    errors: list[dict[str, Any]] = Field(default_factory=list)
    warnings: list[dict[str, Any]] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: ValidationResult) -> "ValidationResultSchema":
        return cls(
            is_valid=result.is_valid,
            errors=[{"message": e.message, "path": e.path} for e in result.errors],
            warnings=[
                {"message": w.message, "path": w.path, "suggestion": w.suggestion}
                for w in result.warnings
            ],
        )


class ExportFormatsSchema(BaseModel):
    formats: list[str] = Field(..., description="Available export format names")


class CartItemSchema(BaseModel):
    """A cart item as returned by the API."""

    id: str
    dimensions: DimensionsSchema
    layout: dict[str, Any] = Field(..., description="Layout blob")
    dividers: list[dict[str, float]]
    price: float
    image_2d: str | None = None
    image_3d: str | None = None
    notes: str | None = None
    created_at: datetime

    @classmethod
    def from_item(cls, item: CartItem) -> "CartItemSchema":
        return cls(
            id=item.id,
            dimensions=DimensionsSchema.from_domain(item.document.dimensions),
            layout=item.document.layout_dict(),
            dividers=item.document.dividers_dict(),
            price=item.price,
            image_2d=item.image_2d,
            image_3d=item.image_3d,
            notes=item.notes,
            created_at=item.created_at,
        )


class CartSchema(BaseModel):
    items: list[CartItemSchema]
    total: float


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str
    error_type: str
    details: Any = None
