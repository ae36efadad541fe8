"""Colour palette for rendering wood species.

The palette caches resolved colours per wood type. One palette belongs to
one rendering session and is passed to whatever draws that session, so
colours never leak between sessions through module state.
"""

from __future__ import annotations

from dataclasses import dataclass

from organizers.domain.value_objects import WOOD_CATALOG, WoodSpec, WoodType


def rgb_to_hex(rgb: tuple[float, float, float]) -> str:
    """Convert an RGB triple in 0..1 to a ``#rrggbb`` string."""
    return "#" + "".join(f"{round(max(0.0, min(1.0, c)) * 255):02x}" for c in rgb)


def _shade(rgb: tuple[float, float, float], factor: float) -> tuple[float, float, float]:
    r, g, b = rgb
    return (r * factor, g * factor, b * factor)


@dataclass(frozen=True)
class WoodColors:
    """Resolved colours for one wood species."""

    base: str
    divider: str
    outline: str
    grain: str


class MaterialPalette:
    """Per-session cache of wood colours.

    Example:
        palette = MaterialPalette()
        palette.colors(WoodType.WALNUT).base
    """

    def __init__(self, catalog: dict[WoodType, WoodSpec] | None = None) -> None:
        self._catalog = catalog or WOOD_CATALOG
        self._cache: dict[WoodType, WoodColors] = {}

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, wood: WoodType) -> bool:
        return wood in self._cache

    def colors(self, wood: WoodType) -> WoodColors:
        cached = self._cache.get(wood)
        if cached is not None:
            return cached
        spec = self._catalog[wood]
        colors = WoodColors(
            base=rgb_to_hex(spec.base_color),
            divider=rgb_to_hex(spec.divider_color),
            outline=rgb_to_hex(_shade(spec.divider_color, 0.6)),
            grain=rgb_to_hex(_shade(spec.base_color, 1.0 - spec.grain_intensity / 2)),
        )
        self._cache[wood] = colors
        return colors

    def clear(self) -> None:
        self._cache.clear()
