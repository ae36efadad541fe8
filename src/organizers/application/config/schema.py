"""Pydantic models for design documents and editor settings.

Design documents are the JSON handed to external storage and to the cart:
drawer dimensions plus the opaque layout blob ``{blocks, splitLines,
selectedMaterial}``. Layout keys keep the camelCase spelling used on the
wire; Python attributes use snake_case.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from organizers.domain.value_objects import (
    DEFAULT_WOOD,
    DIMENSION_INCREMENT,
    MAX_DIMENSION,
    MAX_HISTORY,
    WoodType,
)

# Version 1.0: dimensions and layout
# Version 1.1: customer notes
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})


class DimensionsConfig(BaseModel):
    """Drawer inside dimensions in inches."""

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0, le=MAX_DIMENSION, multiple_of=DIMENSION_INCREMENT)
    depth: float = Field(..., gt=0, le=MAX_DIMENSION, multiple_of=DIMENSION_INCREMENT)
    height: float = Field(..., gt=0, le=MAX_DIMENSION, multiple_of=DIMENSION_INCREMENT)


class BlockConfig(BaseModel):
    """A compartment rectangle in layout units."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    x: float = Field(..., ge=0)
    y: float = Field(..., ge=0)
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)


class SplitLineConfig(BaseModel):
    """A divider line segment in layout units."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    id: str = Field(..., min_length=1)
    is_horizontal: bool = Field(..., alias="isHorizontal")
    x1: float
    y1: float
    x2: float
    y2: float


class LayoutConfig(BaseModel):
    """The layout blob stored with a design."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    blocks: list[BlockConfig] = Field(..., min_length=1)
    split_lines: list[SplitLineConfig] = Field(default_factory=list, alias="splitLines")
    selected_material: WoodType = Field(default=DEFAULT_WOOD, alias="selectedMaterial")

    @field_validator("blocks")
    @classmethod
    def validate_unique_ids(cls, v: list[BlockConfig]) -> list[BlockConfig]:
        """Block ids must be unique within a layout."""
        ids = [block.id for block in v]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"duplicate block ids: {', '.join(duplicates)}")
        return v


class DesignConfiguration(BaseModel):
    """Root model of a stored design.

    Attributes:
        schema_version: Version string in format "major.minor".
        dimensions: Drawer dimensions in inches.
        layout: Layout blob; omitted for a fresh, unsplit drawer.
        notes: Optional customer notes (v1.1+).

    Example:
        >>> config = DesignConfiguration(
        ...     schema_version="1.0",
        ...     dimensions=DimensionsConfig(width=30, depth=20, height=3),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    dimensions: DimensionsConfig
    layout: LayoutConfig | None = Field(default=None, description="Layout blob")
    notes: str | None = Field(default=None, max_length=500)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept known versions and newer minors of a known major version."""
        if v in SUPPORTED_VERSIONS:
            return v
        major = v.split(".")[0]
        if any(s.split(".")[0] == major for s in SUPPORTED_VERSIONS):
            return v
        raise ValueError(
            f"Unsupported schema version: {v}. "
            f"Supported versions: {', '.join(sorted(SUPPORTED_VERSIONS))}"
        )


class PricingConfig(BaseModel):
    """Storefront pricing rates applied to the area-based quote."""

    model_config = ConfigDict(extra="forbid")

    price_per_square_inch: float = Field(default=1.0, ge=0)
    material_multiplier: float = Field(default=1.0, gt=0)
    currency: Literal["usd"] = "usd"


class EditorSettings(BaseModel):
    """Settings for editor sessions, loaded from an optional JSON file."""

    model_config = ConfigDict(extra="forbid")

    max_history: int = Field(default=MAX_HISTORY, ge=1, le=500)
    max_sessions: int = Field(default=100, ge=1)
    default_material: WoodType = DEFAULT_WOOD
    pricing: PricingConfig = Field(default_factory=PricingConfig)
