"""Adapters between design documents and domain objects.

Design documents hold inches for the drawer and layout units for the
layout blob; the domain uses the same split, so conversion is a matter of
reshaping rather than rescaling.
"""

from organizers.application.config.schema import (
    BlockConfig,
    DesignConfiguration,
    DimensionsConfig,
    LayoutConfig,
    SplitLineConfig,
)
from organizers.domain.entities import DrawerLayout
from organizers.domain.value_objects import (
    Block,
    DrawerDimensions,
    LayoutSnapshot,
    SplitLine,
    WoodType,
)

CURRENT_SCHEMA_VERSION = "1.1"


def config_to_dimensions(config: DimensionsConfig) -> DrawerDimensions:
    """Convert the dimensions section into a domain value object.

    Raises:
        ValueError: If the values violate the drawer dimension rules.
    """
    return DrawerDimensions(width=config.width, depth=config.depth, height=config.height)


def config_to_snapshot(config: LayoutConfig) -> LayoutSnapshot:
    """Convert a layout blob into an immutable snapshot, preserving order."""
    return LayoutSnapshot(
        blocks=tuple(
            Block(id=b.id, x=b.x, y=b.y, width=b.width, height=b.height)
            for b in config.blocks
        ),
        split_lines=tuple(
            SplitLine(
                id=line.id,
                is_horizontal=line.is_horizontal,
                x1=line.x1,
                y1=line.y1,
                x2=line.x2,
                y2=line.y2,
            )
            for line in config.split_lines
        ),
    )


def snapshot_to_layout_config(snapshot: LayoutSnapshot, material: WoodType) -> LayoutConfig:
    return LayoutConfig(
        blocks=[
            BlockConfig(id=b.id, x=b.x, y=b.y, width=b.width, height=b.height)
            for b in snapshot.blocks
        ],
        split_lines=[
            SplitLineConfig(
                id=line.id,
                is_horizontal=line.is_horizontal,
                x1=line.x1,
                y1=line.y1,
                x2=line.x2,
                y2=line.y2,
            )
            for line in snapshot.split_lines
        ],
        selected_material=material,
    )


def config_to_layout(config: DesignConfiguration) -> DrawerLayout:
    """Build a live layout from a design document.

    A document without a layout blob yields the single initial block.
    """
    dimensions = config_to_dimensions(config.dimensions)
    if config.layout is None:
        return DrawerLayout(dimensions=dimensions)
    return DrawerLayout(
        dimensions=dimensions,
        snapshot=config_to_snapshot(config.layout),
        material=config.layout.selected_material,
    )

