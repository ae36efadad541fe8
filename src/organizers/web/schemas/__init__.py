"""Pydantic schemas for the REST API."""

from organizers.web.schemas.common import BlockSchema, DimensionsSchema, SplitLineSchema
from organizers.web.schemas.requests import (
    CartItemRequest,
    CreateSessionRequest,
    DesignRequest,
    DragRequest,
    LoadSessionRequest,
    MaterialRequest,
    PriceRequest,
    SelectRequest,
)
from organizers.web.schemas.responses import (
    ActionResultSchema,
    CartItemSchema,
    CartSchema,
    DragRangeSchema,
    ErrorResponseSchema,
    ExportFormatsSchema,
    QuoteSchema,
    SessionSchema,
    ValidationResultSchema,
)

__all__ = [
    # Common
    "BlockSchema",
    "DimensionsSchema",
    "SplitLineSchema",
    # Requests
    "CartItemRequest",
    "CreateSessionRequest",
    "DesignRequest",
    "DragRequest",
    "LoadSessionRequest",
    "MaterialRequest",
    "PriceRequest",
    "SelectRequest",
    # Responses
    "ActionResultSchema",
    "CartItemSchema",
    "CartSchema",
    "DragRangeSchema",
    "ErrorResponseSchema",
    "ExportFormatsSchema",
    "QuoteSchema",
    "SessionSchema",
    "ValidationResultSchema",
]
