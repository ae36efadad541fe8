"""Unit tests for area-based pricing."""

import pytest

from organizers.domain.entities import initial_snapshot
from organizers.domain.services.pricing import PricingCalculator, dividers_from_split_lines
from organizers.domain.services.split import SplitEngine
from organizers.domain.value_objects import Divider, DrawerDimensions, SplitLine

DIMS = DrawerDimensions(30, 20, 3)


class TestDividersFromSplitLines:
    """Tests for converting split lines to dividers."""

    def test_length_in_inches_and_drawer_height(self) -> None:
        lines = [
            SplitLine("split-1", True, 0, 100, 300, 100),
            SplitLine("split-2", False, 150, 0, 150, 100),
        ]
        dividers = dividers_from_split_lines(lines, DIMS)
        assert dividers == [Divider(30, 3), Divider(10, 3)]

    def test_no_lines(self) -> None:
        assert dividers_from_split_lines([], DIMS) == []


class TestPricingCalculator:
    """Tests for PricingCalculator."""

    def test_empty_drawer_priced_by_footprint(self) -> None:
        quote = PricingCalculator().quote(DIMS, [])
        assert quote.footprint_area == 600
        assert quote.divider_area == 0
        assert quote.divider_count == 0
        assert quote.price == 600

    def test_single_row_divider(self) -> None:
        snapshot = SplitEngine().add_row(initial_snapshot(DIMS), "initial")
        quote = PricingCalculator().quote(DIMS, snapshot.split_lines)
        assert quote.divider_area == 90
        assert quote.total_area == 690
        assert quote.price == 690

    def test_areas_rounded_separately(self) -> None:
        dims = DrawerDimensions(10.25, 10.25, 0.25)
        quote = PricingCalculator().quote_dividers(dims, [Divider(10.25, 0.25)])
        # 105.0625 and 2.5625 square inches
        assert quote.footprint_area == 105
        assert quote.divider_area == 3
        assert quote.price == 108

    def test_half_rounds_up(self) -> None:
        quote = PricingCalculator().quote_dividers(DrawerDimensions(0.5, 1, 1), [])
        assert quote.footprint_area == 1

    def test_rate_and_multiplier(self) -> None:
        calculator = PricingCalculator(price_per_square_inch=2.5, material_multiplier=1.5)
        assert calculator.quote(DIMS, []).price == 2250.0

    def test_price_rounded_to_cents(self) -> None:
        calculator = PricingCalculator(price_per_square_inch=0.333)
        assert calculator.quote(DIMS, []).price == 199.8

    def test_negative_rate_rejected(self) -> None:
        with pytest.raises(ValueError, match="cannot be negative"):
            PricingCalculator(price_per_square_inch=-1)

    def test_zero_multiplier_rejected(self) -> None:
        with pytest.raises(ValueError, match="must be positive"):
            PricingCalculator(material_multiplier=0)
