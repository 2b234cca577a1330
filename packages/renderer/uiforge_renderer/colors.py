"""Hex/CSS colour decoding helpers."""

from __future__ import annotations

import re

from PIL import ImageColor

RGB = tuple[int, int, int]
RGBA = tuple[int, int, int, int]

BLACK: RGBA = (0, 0, 0, 255)
WHITE: RGBA = (255, 255, 255, 255)
TRANSPARENT: RGBA = (0, 0, 0, 0)

_HEX6_RE = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE)


def hex_to_rgb(value: str) -> RGB:
    """Decode ``#rrggbb`` / ``rrggbb``; anything else decodes to black."""
    match = _HEX6_RE.match(value) if isinstance(value, str) else None
    if match is None:
        return (0, 0, 0)
    return tuple(int(part, 16) for part in match.groups())  # type: ignore[return-value]


def _clamp_unit(value: float) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError):
        return 1.0
    if value != value:
        return 0.0
    return max(0.0, min(1.0, value))


def parse_color(value: str | RGBA, alpha: float | None = None) -> RGBA:
    """Decode any colour string the renderers use into an RGBA tuple.

    Accepts hex (``#rgb``, ``#rrggbb``, ``#rrggbbaa``), CSS names and
    ``rgb()``/``rgba()``. Malformed input becomes opaque black. ``alpha``
    multiplies the decoded alpha.
    """
    if isinstance(value, tuple):
        color = tuple(value) + (255,) * (4 - len(value))
    else:
        try:
            color = ImageColor.getcolor(str(value).strip(), "RGBA")
        except ValueError:
            color = BLACK
    r, g, b, a = color[:4]
    if alpha is not None:
        a = int(round(a * _clamp_unit(alpha)))
    return (int(r), int(g), int(b), int(a))


def rgba(value: str, alpha: float) -> RGBA:
    """Hex colour at a float opacity, the ``rgba(r, g, b, a)`` of the panel background."""
    r, g, b = hex_to_rgb(value)
    return (r, g, b, int(round(255 * _clamp_unit(alpha))))


def white(alpha: float) -> RGBA:
    return (255, 255, 255, int(round(255 * _clamp_unit(alpha))))


def black(alpha: float) -> RGBA:
    return (0, 0, 0, int(round(255 * _clamp_unit(alpha))))
