"""Console formatters for drawer organizer layouts."""

from __future__ import annotations

from organizers.application.dtos import LayoutDocument
from organizers.domain.services.manufacturing import build_cut_sheet
from organizers.domain.services.pricing import PriceQuote
from organizers.domain.value_objects import WOOD_CATALOG


class LayoutDiagramFormatter:
    """Formats ASCII diagrams of a layout as seen from above."""

    def format(self, document: LayoutDocument, width: int = 60, height: int = 20) -> str:
        """Draw the blocks of ``document`` on a ``width`` x ``height`` character grid."""
        width_units, depth_units = document.dimensions.to_units()
        sx = (width - 1) / width_units
        sy = (height - 1) / depth_units

        grid = [[" " for _ in range(width)] for _ in range(height)]

        ordered = sorted(document.blocks, key=lambda b: (b.y, b.x))
        for number, block in enumerate(ordered, start=1):
            x1 = round(block.x * sx)
            y1 = round(block.y * sy)
            x2 = round(block.right * sx)
            y2 = round(block.bottom * sy)
            self._draw_box(grid, x1, y1, x2, y2)
            label = str(number)
            cx = (x1 + x2) // 2 - len(label) // 2
            cy = (y1 + y2) // 2
            if y1 < cy < y2 and x1 < cx and cx + len(label) <= x2:
                for i, char in enumerate(label):
                    grid[cy][cx + i] = char

        dims = document.dimensions
        lines = [
            "DRAWER LAYOUT DIAGRAM",
            "=" * width,
            "",
        ]
        lines.extend("".join(row) for row in grid)
        lines.append("")
        lines.append(f'Dimensions: {dims.width:g}" W x {dims.depth:g}" D x {dims.height:g}" H')
        lines.append(f"Compartments: {len(document.blocks)}")
        lines.append(f"Dividers: {len(document.split_lines)}")
        lines.append(f"Material: {WOOD_CATALOG[document.material].name}")
        return "\n".join(lines)

    def _draw_box(
        self, grid: list[list[str]], x1: int, y1: int, x2: int, y2: int
    ) -> None:
        for x in range(x1, x2 + 1):
            for y in (y1, y2):
                if grid[y][x] in (" ", "-"):
                    grid[y][x] = "-"
                elif grid[y][x] == "|":
                    grid[y][x] = "+"
        for y in range(y1, y2 + 1):
            for x in (x1, x2):
                if grid[y][x] in (" ", "|"):
                    grid[y][x] = "|"
                elif grid[y][x] == "-":
                    grid[y][x] = "+"
        for x, y in ((x1, y1), (x2, y1), (x1, y2), (x2, y2)):
            grid[y][x] = "+"


class CompartmentTableFormatter:
    """Formats the compartment list in inches."""

    def format(self, document: LayoutDocument) -> str:
        sheet = build_cut_sheet(document.dimensions, document.snapshot)
        lines = [
            "COMPARTMENTS",
            "=" * 60,
            f"{'#':>3}  {'X':>8}  {'Y':>8}  {'Width':>8}  {'Depth':>8}  {'Area':>8}",
            "-" * 60,
        ]
        for c in sheet.compartments:
            lines.append(
                f"{c.number:>3}  {c.x:>7.2f}\"  {c.y:>7.2f}\"  "
                f"{c.width:>7.2f}\"  {c.depth:>7.2f}\"  {c.width * c.depth:>8.2f}"
            )
        lines.append("-" * 60)
        lines.append(
            f'Cut size: {sheet.cut.width:.4f}" x {sheet.cut.depth:.4f}" x {sheet.cut.height:g}"'
        )
        lines.append(f'Total divider length: {sheet.total_divider_length:.2f}"')
        return "\n".join(lines)


class QuoteFormatter:
    """Formats a price quote."""

    def format(self, quote: PriceQuote, currency: str = "usd") -> str:
        symbol = "$" if currency == "usd" else ""
        lines = [
            "PRICE QUOTE",
            "=" * 40,
            f"Footprint area:  {quote.footprint_area:>8d} sq in",
            f"Divider area:    {quote.divider_area:>8d} sq in ({quote.divider_count} dividers)",
            f"Total area:      {quote.total_area:>8d} sq in",
            "-" * 40,
        ]
        lines.append(f"Price:           {symbol}{quote.price:,.2f}")
        return "\n".join(lines)
