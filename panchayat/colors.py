"""Pure functions for mixing colors and managing palettes.

None of these functions modify their arguments; each returns a new Color or
a new list.
"""

from numbers import Real

from panchayat.models import Color
from panchayat.numeric import round_half_up


def _channel(value: float) -> int:
    return int(min(255, max(0, round_half_up(value))))


def mix_colors(color1: Color | None, color2: Color | None) -> Color | None:
    """Average two colors channel by channel.

    Example:
        >>> mix_colors(Color("red", 255, 0, 0), Color("blue", 0, 0, 255))
        Color(name='red-blue', r=128, g=0, b=128)
    """
    if color1 is None or color2 is None:
        return None
    return Color(
        name=f"{color1.name}-{color2.name}",
        r=_channel((color1.r + color2.r) / 2),
        g=_channel((color1.g + color2.g) / 2),
        b=_channel((color1.b + color2.b) / 2),
    )


def adjust_brightness(color: Color | None, factor: float) -> Color | None:
    """Scale every channel by ``factor``, clamped to 0-255."""
    if color is None or not isinstance(factor, Real) or isinstance(factor, bool):
        return None
    return Color(
        name=color.name,
        r=_channel(color.r * factor),
        g=_channel(color.g * factor),
        b=_channel(color.b * factor),
    )


def add_to_palette(palette: list[Color], color: Color | None) -> list[Color]:
    if not isinstance(palette, list):
        return [] if color is None else [color]
    if color is None:
        return list(palette)
    return [*palette, color]


def remove_from_palette(palette: list[Color], color_name: str) -> list[Color]:
    if not isinstance(palette, list):
        return []
    return [c for c in palette if c.name != color_name]


def merge_palettes(palette1: list[Color], palette2: list[Color]) -> list[Color]:
    """Combine two palettes, keeping the first color seen for each name.

    Anything that isn't a list is treated as an empty palette.
    """
    merged: list[Color] = []
    seen: set[str] = set()
    for palette in (palette1, palette2):
        if not isinstance(palette, list):
            continue
        for color in palette:
            if color.name not in seen:
                seen.add(color.name)
                merged.append(color)
    return merged
