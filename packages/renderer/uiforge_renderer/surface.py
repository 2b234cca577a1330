"""RGBA drawing surface on top of Pillow.

Shapes are rasterized into supersampled coverage masks and composited with
``Image.alpha_composite``; paints are flat colours or gradient images. Clip
and shadow are explicit: ``clipped()`` scopes a clip region, and each draw
call takes its own optional ``Shadow``.
"""

from __future__ import annotations

import math
from contextlib import contextmanager
from dataclasses import dataclass
from io import BytesIO
from typing import Iterator

import numpy as np
from PIL import Image, ImageChops, ImageDraw, ImageFilter

from .colors import RGBA, parse_color
from .fonts import FontResolver
from .geometry import Path
from .gradients import LinearGradient, RadialGradient
from .noise import add_noise

SUPERSAMPLE = 4
MITER_LIMIT = 10.0

Point = tuple[float, float]


def _unit(a: Point, b: Point) -> Point | None:
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    length = math.hypot(dx, dy)
    if length == 0:
        return None
    return (dx / length, dy / length)


def stroke_polygons(points: list[Point], closed: bool, half: float) -> list[list[Point]]:
    """Polygons whose union is a ``2 * half`` wide stroke along ``points``.

    Segments get butt ends; joints are mitred, falling back to a bevel past
    ``MITER_LIMIT``. Closed outlines are joined at every vertex, the start
    vertex included.
    """
    pts: list[Point] = []
    for p in points:
        if not pts or p != pts[-1]:
            pts.append(p)
    if closed and len(pts) > 1 and pts[0] == pts[-1]:
        pts.pop()
    if len(pts) < 2 or half <= 0:
        return []

    ring = pts + [pts[0]] if closed else pts
    polygons = []
    for a, b in zip(ring, ring[1:]):
        d = _unit(a, b)
        if d is None:
            continue
        nx, ny = -d[1] * half, d[0] * half
        polygons.append([(a[0] + nx, a[1] + ny), (b[0] + nx, b[1] + ny), (b[0] - nx, b[1] - ny), (a[0] - nx, a[1] - ny)])

    joints = range(len(pts)) if closed else range(1, len(pts) - 1)
    for i in joints:
        v = pts[i]
        d1 = _unit(pts[i - 1], v)
        d2 = _unit(v, pts[(i + 1) % len(pts)])
        if d1 is None or d2 is None:
            continue
        cross = d1[0] * d2[1] - d1[1] * d2[0]
        if abs(cross) < 1e-9:
            continue
        # the outer side of the turn is opposite the direction the path bends
        side = -1.0 if cross > 0 else 1.0
        n1 = (-d1[1] * side, d1[0] * side)
        n2 = (-d2[1] * side, d2[0] * side)
        p1 = (v[0] + n1[0] * half, v[1] + n1[1] * half)
        p2 = (v[0] + n2[0] * half, v[1] + n2[1] * half)
        mx, my = n1[0] + n2[0], n1[1] + n2[1]
        m_len = math.hypot(mx, my)
        cos_half = (mx * n1[0] + my * n1[1]) / m_len if m_len else 0.0
        if cos_half <= 0 or 1.0 / cos_half > MITER_LIMIT:
            polygons.append([v, p1, p2])
        else:
            reach = half / cos_half
            polygons.append([v, p1, (v[0] + mx / m_len * reach, v[1] + my / m_len * reach), p2])
    return polygons


Paint = str | tuple | LinearGradient | RadialGradient


@dataclass(frozen=True)
class Shadow:
    color: str | RGBA = "#000000"
    blur: float = 0.0
    offset_x: float = 0.0
    offset_y: float = 0.0


class Surface:
    def __init__(
        self,
        width: int = 1,
        height: int = 1,
        fonts: FontResolver | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.fonts = fonts or FontResolver()
        self.rng = rng
        self.image = Image.new("RGBA", (1, 1), (0, 0, 0, 0))
        self.origin = (0.0, 0.0)
        self._clip: Image.Image | None = None
        self.reset(width, height)

    @property
    def size(self) -> tuple[int, int]:
        return self.image.size

    def reset(self, width: int, height: int) -> None:
        """Resize to ``width x height``, clear to transparent and drop origin/clip state."""
        width = max(1, int(round(width)))
        height = max(1, int(round(height)))
        self.image = Image.new("RGBA", (width, height), (0, 0, 0, 0))
        self.origin = (0.0, 0.0)
        self._clip = None

    def translate(self, dx: float, dy: float) -> None:
        self.origin = (self.origin[0] + dx, self.origin[1] + dy)

    def pixel(self, x: int, y: int) -> RGBA:
        """Pixel at absolute canvas coordinates."""
        return self.image.getpixel((int(x), int(y)))  # type: ignore[return-value]

    def to_png_bytes(self) -> bytes:
        buf = BytesIO()
        self.image.save(buf, format="PNG")
        return buf.getvalue()

    # rasterization

    def _device(self, points: list[tuple[float, float]]) -> list[tuple[float, float]]:
        ox, oy = self.origin
        return [((x + ox) * SUPERSAMPLE, (y + oy) * SUPERSAMPLE) for x, y in points]

    def _mask_canvas(self) -> tuple[Image.Image, ImageDraw.ImageDraw]:
        width, height = self.image.size
        mask = Image.new("L", (width * SUPERSAMPLE, height * SUPERSAMPLE), 0)
        return mask, ImageDraw.Draw(mask)

    def _downsample(self, mask: Image.Image) -> Image.Image:
        return mask.resize(self.image.size, Image.Resampling.BOX)

    def fill_coverage(self, path: Path) -> Image.Image:
        mask, draw = self._mask_canvas()
        for sub in path.subpaths:
            points = self._device(sub.points)
            if len(points) >= 3:
                draw.polygon(points, fill=255)
        return self._downsample(mask)

    def stroke_coverage(self, path: Path, width: float) -> Image.Image:
        mask, draw = self._mask_canvas()
        half = max(1.0, width * SUPERSAMPLE) / 2
        for sub in path.subpaths:
            for polygon in stroke_polygons(self._device(sub.points), sub.closed, half):
                draw.polygon(polygon, fill=255)
        return self._downsample(mask)

    # compositing

    def _paint_image(self, paint: Paint) -> Image.Image:
        if isinstance(paint, (LinearGradient, RadialGradient)):
            return paint.render(self.image.size, self.origin)
        return Image.new("RGBA", self.image.size, parse_color(paint))

    def _shadow_layer(self, coverage: Image.Image, shadow: Shadow) -> Image.Image | None:
        color = parse_color(shadow.color)
        blur = max(0.0, float(shadow.blur))
        if color[3] == 0 or (blur == 0 and shadow.offset_x == 0 and shadow.offset_y == 0):
            return None
        alpha = coverage
        if blur > 0:
            alpha = alpha.filter(ImageFilter.GaussianBlur(blur / 2))
        if shadow.offset_x or shadow.offset_y:
            shifted = Image.new("L", alpha.size, 0)
            shifted.paste(alpha, (int(round(shadow.offset_x)), int(round(shadow.offset_y))))
            alpha = shifted
        if color[3] < 255:
            alpha = alpha.point(lambda v: v * color[3] // 255)
        if self._clip is not None:
            alpha = ImageChops.multiply(alpha, self._clip)
        layer = Image.new("RGBA", self.image.size, color[:3] + (0,))
        layer.putalpha(alpha)
        return layer

    def composite(self, coverage: Image.Image, paint: Paint, shadow: Shadow | None = None) -> None:
        """Blend ``paint`` through a coverage mask, under the current clip."""
        if self._clip is not None:
            coverage = ImageChops.multiply(coverage, self._clip)
        if coverage.getbbox() is None:
            return
        layer = self._paint_image(paint)
        layer.putalpha(ImageChops.multiply(layer.getchannel("A"), coverage))
        if shadow is not None:
            shadow_layer = self._shadow_layer(layer.getchannel("A"), shadow)
            if shadow_layer is not None:
                self.image.alpha_composite(shadow_layer)
        self.image.alpha_composite(layer)

    @contextmanager
    def clipped(self, path: Path) -> Iterator["Surface"]:
        previous = self._clip
        region = self.fill_coverage(path)
        self._clip = region if previous is None else ImageChops.multiply(previous, region)
        try:
            yield self
        finally:
            self._clip = previous

    # drawing operations

    def fill(self, path: Path, paint: Paint, shadow: Shadow | None = None) -> None:
        if path.is_empty():
            return
        self.composite(self.fill_coverage(path), paint, shadow)

    def stroke(self, path: Path, paint: Paint, width: float, shadow: Shadow | None = None) -> None:
        if path.is_empty() or not width > 0:
            return
        self.composite(self.stroke_coverage(path, width), paint, shadow)

    def fill_rect(self, x: float, y: float, w: float, h: float, paint: Paint, shadow: Shadow | None = None) -> None:
        self.fill(Path().rect(x, y, w, h), paint, shadow)

    def fill_text(self, text: str, x: float, y: float, font, paint: Paint, shadow: Shadow | None = None) -> None:
        """Draw ``text`` centred on ``(x, y)``."""
        if not text:
            return
        mask = Image.new("L", self.image.size, 0)
        draw = ImageDraw.Draw(mask)
        left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
        ox, oy = self.origin
        anchor_x = x + ox - (left + right) / 2
        anchor_y = y + oy - (top + bottom) / 2
        draw.text((anchor_x, anchor_y), text, font=font, fill=255)
        self.composite(mask, paint, shadow)

    def apply_noise(self, amount: float) -> None:
        self.image = add_noise(self.image, amount, self.rng)
