"""Linear and radial gradient paints rasterized with numpy."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from PIL import Image

from .colors import RGBA, parse_color


@dataclass(frozen=True)
class ColorStop:
    offset: float
    color: RGBA


def color_stops(*pairs: tuple[float, str | RGBA]) -> tuple[ColorStop, ...]:
    stops = [ColorStop(max(0.0, min(1.0, float(offset))), parse_color(color)) for offset, color in pairs]
    return tuple(sorted(stops, key=lambda stop: stop.offset))


def _pixel_grid(size: tuple[int, int], origin: tuple[float, float]) -> tuple[np.ndarray, np.ndarray]:
    width, height = size
    xs = np.arange(width, dtype=np.float64) + 0.5 - origin[0]
    ys = np.arange(height, dtype=np.float64) + 0.5 - origin[1]
    return np.meshgrid(xs, ys)


def _shade(t: np.ndarray, stops: tuple[ColorStop, ...]) -> Image.Image:
    offsets = [stop.offset for stop in stops]
    channels = [np.interp(t, offsets, [stop.color[i] for stop in stops]) for i in range(4)]
    rgba = np.clip(np.rint(np.stack(channels, axis=-1)), 0, 255).astype(np.uint8)
    return Image.fromarray(rgba, "RGBA")


@dataclass(frozen=True)
class LinearGradient:
    x0: float
    y0: float
    x1: float
    y1: float
    stops: tuple[ColorStop, ...]

    def render(self, size: tuple[int, int], origin: tuple[float, float] = (0.0, 0.0)) -> Image.Image:
        dx = self.x1 - self.x0
        dy = self.y1 - self.y0
        length_sq = dx * dx + dy * dy
        if not self.stops or length_sq == 0:
            return Image.new("RGBA", size, (0, 0, 0, 0))
        gx, gy = _pixel_grid(size, origin)
        t = ((gx - self.x0) * dx + (gy - self.y0) * dy) / length_sq
        return _shade(t, self.stops)


@dataclass(frozen=True)
class RadialGradient:
    cx: float
    cy: float
    r0: float
    r1: float
    stops: tuple[ColorStop, ...]

    def render(self, size: tuple[int, int], origin: tuple[float, float] = (0.0, 0.0)) -> Image.Image:
        span = self.r1 - self.r0
        if not self.stops or span <= 0:
            return Image.new("RGBA", size, (0, 0, 0, 0))
        gx, gy = _pixel_grid(size, origin)
        t = (np.hypot(gx - self.cx, gy - self.cy) - self.r0) / span
        return _shade(t, self.stops)


Gradient = LinearGradient | RadialGradient


def linear_gradient(x0: float, y0: float, x1: float, y1: float, *pairs: tuple[float, str | RGBA]) -> LinearGradient:
    return LinearGradient(x0, y0, x1, y1, color_stops(*pairs))


def radial_gradient(cx: float, cy: float, r0: float, r1: float, *pairs: tuple[float, str | RGBA]) -> RadialGradient:
    return RadialGradient(cx, cy, r0, r1, color_stops(*pairs))
