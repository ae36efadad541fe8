"""Area-based pricing of a drawer organizer design."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from organizers.domain.services.geometry import round_half_up, units_to_inches
from organizers.domain.value_objects import Divider, DrawerDimensions, SplitLine


def dividers_from_split_lines(
    split_lines: Iterable[SplitLine], dimensions: DrawerDimensions
) -> list[Divider]:
    """One divider per split line, as long as the line and as tall as the drawer."""
    return [
        Divider(length_in=units_to_inches(line.length), height_in=dimensions.height)
        for line in split_lines
    ]


@dataclass(frozen=True)
class PriceQuote:
    """Result of pricing a design.

    Attributes:
        footprint_area: Base plate area in square inches, rounded.
        divider_area: Combined divider wall area in square inches, rounded.
        divider_count: Number of dividers priced.
        price: Total area times the configured rate.
    """

    footprint_area: int
    divider_area: int
    divider_count: int
    price: float

    @property
    def total_area(self) -> int:
        return self.footprint_area + self.divider_area


class PricingCalculator:
    """Prices a design by the wood area it takes to build.

    The footprint (width x depth) and the divider walls (length x drawer
    height each) are rounded to whole square inches separately and summed.
    With the default rate of one unit per square inch the price equals the
    total area; the storefront supplies its own rate and multiplier.
    """

    def __init__(
        self, price_per_square_inch: float = 1.0, material_multiplier: float = 1.0
    ) -> None:
        if price_per_square_inch < 0:
            raise ValueError("price_per_square_inch cannot be negative")
        if material_multiplier <= 0:
            raise ValueError("material_multiplier must be positive")
        self.price_per_square_inch = price_per_square_inch
        self.material_multiplier = material_multiplier

    def quote_dividers(
        self, dimensions: DrawerDimensions, dividers: Iterable[Divider]
    ) -> PriceQuote:
        dividers = list(dividers)
        footprint = round_half_up(dimensions.footprint_area)
        divider_area = round_half_up(sum(d.area for d in dividers))
        price = (
            (footprint + divider_area)
            * self.price_per_square_inch
            * self.material_multiplier
        )
        return PriceQuote(
            footprint_area=footprint,
            divider_area=divider_area,
            divider_count=len(dividers),
            price=round(price, 2),
        )

    def quote(
        self, dimensions: DrawerDimensions, split_lines: Iterable[SplitLine]
    ) -> PriceQuote:
        """Price a layout from its split lines."""
        return self.quote_dividers(
            dimensions, dividers_from_split_lines(split_lines, dimensions)
        )
