"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from organizers.application.config.adapter import (
    CURRENT_SCHEMA_VERSION,
    config_to_layout,
    snapshot_to_layout_config,
)
from organizers.application.config.schema import (
    DesignConfiguration,
    DimensionsConfig,
    LayoutConfig,
)
from organizers.domain.entities import DrawerLayout
from organizers.domain.services.pricing import dividers_from_split_lines
from organizers.domain.value_objects import (
    Block,
    Divider,
    DrawerDimensions,
    LayoutSnapshot,
    SplitLine,
    WoodType,
)


@dataclass(frozen=True)
class LayoutDocument:
    """Serializable view of a design, as handed to storage and the cart.

    The layout blob is ``{blocks, splitLines, selectedMaterial}``; dividers
    are derived from the split lines for pricing and manufacturing.
    """

    dimensions: DrawerDimensions
    snapshot: LayoutSnapshot
    material: WoodType

    @property
    def blocks(self) -> tuple[Block, ...]:
        return self.snapshot.blocks

    @property
    def split_lines(self) -> tuple[SplitLine, ...]:
        return self.snapshot.split_lines

    @property
    def dividers(self) -> list[Divider]:
        return dividers_from_split_lines(self.snapshot.split_lines, self.dimensions)

    @classmethod
    def from_layout(cls, layout: DrawerLayout) -> LayoutDocument:
        return cls(
            dimensions=layout.dimensions,
            snapshot=layout.snapshot,
            material=layout.material,
        )

    @classmethod
    def from_config(cls, config: DesignConfiguration) -> LayoutDocument:
        """Build a document from a validated design.

        Raises:
            ValueError: If the dimensions violate the drawer rules.
        """
        return cls.from_layout(config_to_layout(config))

    def to_config(self, notes: str | None = None) -> DesignConfiguration:
        return DesignConfiguration(
            schema_version=CURRENT_SCHEMA_VERSION,
            dimensions=DimensionsConfig(
                width=self.dimensions.width,
                depth=self.dimensions.depth,
                height=self.dimensions.height,
            ),
            layout=self.layout_config(),
            notes=notes,
        )

    def layout_config(self) -> LayoutConfig:
        return snapshot_to_layout_config(self.snapshot, self.material)

    def layout_dict(self) -> dict[str, Any]:
        """The opaque layout blob with its wire key names."""
        return self.layout_config().model_dump(by_alias=True, mode="json")

    def to_dict(self, notes: str | None = None) -> dict[str, Any]:
        """Design document as JSON-ready data, loadable by ``load_design``."""
        return self.to_config(notes).model_dump(by_alias=True, mode="json", exclude_none=True)

    def dividers_dict(self) -> list[dict[str, float]]:
        return [{"length_in": d.length_in, "height_in": d.height_in} for d in self.dividers]
