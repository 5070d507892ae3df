"""Hex, RGB and HSL conversions plus WCAG luminance helpers."""
from __future__ import annotations

import colorsys
import re
from typing import Tuple

from models.errors import InvalidColorFormat

_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{6})$")


def parse_hex(value: str) -> str:
    """Validate a ``#RRGGBB`` string and return it lowercased with the ``#``."""

    if not isinstance(value, str):
        raise InvalidColorFormat(value)
    match = _HEX_PATTERN.match(value.strip())
    if not match:
        raise InvalidColorFormat(value)
    return f"#{match.group(1).lower()}"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    digits = parse_hex(hex_color)[1:]
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    channels = [max(0, min(255, int(channel))) for channel in (r, g, b)]
    return "#" + "".join(f"{channel:02x}" for channel in channels)


def hex_to_hsl(hex_color: str) -> Tuple[float, float, float]:
    """Convert a hex color to ``(h, s, l)`` with h in [0, 360) and s, l in [0, 100]."""

    r, g, b = (channel / 255 for channel in hex_to_rgb(hex_color))
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    lightness = (max_c + min_c) / 2
    hue = 0.0
    saturation = 0.0

    if max_c != min_c:
        delta = max_c - min_c
        saturation = delta / (2 - max_c - min_c) if lightness > 0.5 else delta / (max_c + min_c)
        if max_c == r:
            hue = ((g - b) / delta + (6 if g < b else 0)) / 6
        elif max_c == g:
            hue = ((b - r) / delta + 2) / 6
        else:
            hue = ((r - g) / delta + 4) / 6

    return (hue * 360) % 360, saturation * 100, lightness * 100


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> Tuple[int, int, int]:
    """Inverse of :func:`hex_to_hsl`, returning integer channels in [0, 255]."""

    h = (hue % 360) / 360
    s = max(0.0, min(100.0, saturation)) / 100
    l = max(0.0, min(100.0, lightness)) / 100
    r, g, b = colorsys.hls_to_rgb(h, l, s)
    return round(r * 255), round(g * 255), round(b * 255)


def relative_luminance(r: int, g: int, b: int) -> float:
    """WCAG relative luminance of an sRGB color."""

    def _decode(channel: int) -> float:
        c = channel / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    return 0.2126 * _decode(r) + 0.7152 * _decode(g) + 0.0722 * _decode(b)


def contrast_ratio(hex_a: str, hex_b: str) -> float:
    """WCAG contrast ratio between two colors; symmetric and always >= 1."""

    lum_a = relative_luminance(*hex_to_rgb(hex_a))
    lum_b = relative_luminance(*hex_to_rgb(hex_b))
    lighter = max(lum_a, lum_b)
    darker = min(lum_a, lum_b)
    return (lighter + 0.05) / (darker + 0.05)


__all__ = [
    "parse_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "hex_to_hsl",
    "hsl_to_rgb",
    "relative_luminance",
    "contrast_ratio",
]
