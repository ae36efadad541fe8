"""Stateless design endpoints: price, validate and export a design document."""

import logging

from fastapi import APIRouter
from fastapi.responses import Response

from organizers.application.config import load_design_from_dict, validate_design
from organizers.application.dtos import LayoutDocument
from organizers.domain.services.pricing import PricingCalculator
from organizers.infrastructure.exporters import ExporterRegistry
from organizers.web.dependencies import PricingDep, SettingsDep
from organizers.web.exceptions import UnsupportedFormatError
from organizers.web.schemas.requests import DesignRequest, PriceRequest
from organizers.web.schemas.responses import (
    ErrorResponseSchema,
    ExportFormatsSchema,
    QuoteSchema,
    ValidationResultSchema,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/designs",
    tags=["designs"],
    responses={422: {"model": ErrorResponseSchema}},
)

MEDIA_TYPES = {
    "dxf": "application/dxf",
    "json": "application/json",
    "sheet": "text/markdown",
    "svg": "image/svg+xml",
}


def render_export(document: LayoutDocument, format_name: str) -> Response:
    """Render ``document`` with a registered exporter as a download.

    Raises:
        UnsupportedFormatError: If no exporter is registered for the format.
    """
    if not ExporterRegistry.is_registered(format_name):
        raise UnsupportedFormatError(format_name, ExporterRegistry.available_formats())
    exporter = ExporterRegistry.get(format_name)()
    content = exporter.export_string(document)
    logger.info(f"Rendered {format_name} export ({len(content)} chars)")
    return Response(
        content=content,
        media_type=MEDIA_TYPES.get(format_name, "text/plain"),
        headers={
            "Content-Disposition": (
                f"attachment; filename=drawer-organizer.{exporter.file_extension}"
            )
        },
    )


def _document(request: DesignRequest) -> LayoutDocument:
    return LayoutDocument.from_config(load_design_from_dict(request.design))


@router.get("/formats", response_model=ExportFormatsSchema)
async def list_export_formats() -> ExportFormatsSchema:
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.post("/price", response_model=QuoteSchema)
async def price_design(
    request: PriceRequest, settings: SettingsDep, pricing: PricingDep
) -> QuoteSchema:
    """Quote a design, optionally overriding the configured rates."""
    document = _document(request)
    if request.price_per_square_inch is not None or request.material_multiplier is not None:
        pricing = PricingCalculator(
            price_per_square_inch=(
                request.price_per_square_inch
                if request.price_per_square_inch is not None
                else pricing.price_per_square_inch
            ),
            material_multiplier=(
                request.material_multiplier
                if request.material_multiplier is not None
                else pricing.material_multiplier
            ),
        )
    quote = pricing.quote(document.dimensions, document.split_lines)
    return QuoteSchema.from_quote(quote, settings.pricing.currency)


@router.post("/validate", response_model=ValidationResultSchema)
async def validate_design_document(request: DesignRequest) -> ValidationResultSchema:
    """Validate a design without storing it.

    Schema errors are reported as a 422 error response; layout errors and
    advisories come back in the result body.
    """
    config = load_design_from_dict(request.design)
    return ValidationResultSchema.from_result(validate_design(config))


@router.post("/export/{format_name}")
async def export_design(format_name: str, request: DesignRequest) -> Response:
    return render_export(_document(request), format_name)
