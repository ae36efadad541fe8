"""Common Pydantic schemas shared across requests and responses."""

from pydantic import BaseModel, ConfigDict, Field

from organizers.domain.value_objects import (
    DIMENSION_INCREMENT,
    MAX_DIMENSION,
    Block,
    DrawerDimensions,
    SplitLine,
)


class DimensionsSchema(BaseModel):
    """Drawer inside dimensions in inches."""

    width: float = Field(
        ..., gt=0, le=MAX_DIMENSION, multiple_of=DIMENSION_INCREMENT, description="Width in inches"
    )
    depth: float = Field(
        ..., gt=0, le=MAX_DIMENSION, multiple_of=DIMENSION_INCREMENT, description="Depth in inches"
    )
    height: float = Field(
        ..., gt=0, le=MAX_DIMENSION, multiple_of=DIMENSION_INCREMENT, description="Height in inches"
    )

    def to_domain(self) -> DrawerDimensions:
        return DrawerDimensions(width=self.width, depth=self.depth, height=self.height)

    @classmethod
    def from_domain(cls, dimensions: DrawerDimensions) -> "DimensionsSchema":
        return cls(width=dimensions.width, depth=dimensions.depth, height=dimensions.height)


class BlockSchema(BaseModel):
    """A compartment in layout units (10 per inch)."""

    id: str
    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_domain(cls, block: Block) -> "BlockSchema":
        return cls(id=block.id, x=block.x, y=block.y, width=block.width, height=block.height)


class SplitLineSchema(BaseModel):
    """A divider line in layout units."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    is_horizontal: bool = Field(..., alias="isHorizontal")
    x1: float
    y1: float
    x2: float
    y2: float

    @classmethod
    def from_domain(cls, line: SplitLine) -> "SplitLineSchema":
        return cls(
            id=line.id,
            is_horizontal=line.is_horizontal,
            x1=line.x1,
            y1=line.y1,
            x2=line.x2,
            y2=line.y2,
        )
