"""Outline construction shared by every element renderer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

Point = tuple[float, float]

SHAPE_KINDS = ("rect", "round", "chamfer", "slash")
SLASH_SKEW = 0.4

_CURVE_STEPS = 8


@dataclass
class SubPath:
    points: list[Point] = field(default_factory=list)
    closed: bool = False


class Path:
    """Polyline outline; curves are flattened to points as they are added."""

    def __init__(self) -> None:
        self.subpaths: list[SubPath] = []

    def _current(self) -> SubPath:
        if not self.subpaths or self.subpaths[-1].closed:
            start = self.subpaths[-1].points[0] if self.subpaths and self.subpaths[-1].points else None
            self.subpaths.append(SubPath(points=[start] if start is not None else []))
        return self.subpaths[-1]

    def move_to(self, x: float, y: float) -> "Path":
        self.subpaths.append(SubPath(points=[(float(x), float(y))]))
        return self

    def line_to(self, x: float, y: float) -> "Path":
        self._current().points.append((float(x), float(y)))
        return self

    def quadratic_to(self, cx: float, cy: float, x: float, y: float) -> "Path":
        sub = self._current()
        if not sub.points:
            sub.points.append((float(cx), float(cy)))
        x0, y0 = sub.points[-1]
        for step in range(1, _CURVE_STEPS + 1):
            t = step / _CURVE_STEPS
            u = 1.0 - t
            sub.points.append(
                (
                    u * u * x0 + 2 * u * t * cx + t * t * x,
                    u * u * y0 + 2 * u * t * cy + t * t * y,
                )
            )
        return self

    def arc(self, cx: float, cy: float, r: float, start: float = 0.0, end: float = math.tau) -> "Path":
        sweep = end - start
        steps = max(8, int(abs(r) * abs(sweep) / 2) + 1)
        steps = min(steps, 256)
        sub = self._current()
        for step in range(steps + 1):
            angle = start + sweep * step / steps
            sub.points.append((cx + r * math.cos(angle), cy + r * math.sin(angle)))
        return self

    def circle(self, cx: float, cy: float, r: float) -> "Path":
        self.subpaths.append(SubPath())
        self.arc(cx, cy, r)
        return self.close()

    def rect(self, x: float, y: float, w: float, h: float) -> "Path":
        if w < 0:
            x, w = x + w, -w
        if h < 0:
            y, h = y + h, -h
        self.subpaths.append(SubPath(points=[(x, y), (x + w, y), (x + w, y + h), (x, y + h)], closed=True))
        return self

    def polygon(self, points: list[Point]) -> "Path":
        self.subpaths.append(SubPath(points=[(float(x), float(y)) for x, y in points], closed=True))
        return self

    def close(self) -> "Path":
        if self.subpaths:
            self.subpaths[-1].closed = True
        return self

    def is_empty(self) -> bool:
        return not any(sub.points for sub in self.subpaths)

    def vertices(self) -> list[Point]:
        """Distinct outline vertices of the first sub-path."""
        if not self.subpaths:
            return []
        out: list[Point] = []
        for x, y in self.subpaths[0].points:
            point = (round(x, 6), round(y, 6))
            if not out or out[-1] != point:
                out.append(point)
        while len(out) > 1 and out[-1] == out[0]:
            out.pop()
        return out

    def bounds(self) -> tuple[float, float, float, float] | None:
        points = [p for sub in self.subpaths for p in sub.points]
        if not points:
            return None
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        return (min(xs), min(ys), max(xs), max(ys))


def shape_path(x: float, y: float, w: float, h: float, corner: float, shape: str) -> Path:
    """Outline of a ``rect``/``round``/``chamfer``/``slash`` box.

    ``corner`` is the radius or chamfer length and is deliberately not clamped;
    oversized values give self-intersecting outlines. Unknown shapes trace the
    plain rectangle.
    """
    path = Path()
    if shape == "round":
        r = corner
        path.move_to(x + r, y)
        path.line_to(x + w - r, y)
        path.quadratic_to(x + w, y, x + w, y + r)
        path.line_to(x + w, y + h - r)
        path.quadratic_to(x + w, y + h, x + w - r, y + h)
        path.line_to(x + r, y + h)
        path.quadratic_to(x, y + h, x, y + h - r)
        path.line_to(x, y + r)
        path.quadratic_to(x, y, x + r, y)
        return path.close()
    if shape == "chamfer":
        c = corner
        path.move_to(x + c, y)
        path.line_to(x + w - c, y)
        path.line_to(x + w, y + c)
        path.line_to(x + w, y + h - c)
        path.line_to(x + w - c, y + h)
        path.line_to(x + c, y + h)
        path.line_to(x, y + h - c)
        path.line_to(x, y + c)
        return path.close()
    if shape == "slash":
        skew = h * SLASH_SKEW
        path.move_to(x + skew, y)
        path.line_to(x + w, y)
        path.line_to(x + w - skew, y + h)
        path.line_to(x, y + h)
        return path.close()
    return path.rect(x, y, w, h)


def round_rect(x: float, y: float, w: float, h: float, r: float) -> Path:
    """Rounded rectangle with circular corners; the radius is clamped to fit."""
    path = Path()
    if w <= 0 or h <= 0:
        return path
    r = max(0.0, min(float(r), w / 2, h / 2))
    if r == 0:
        return path.rect(x, y, w, h)
    path.move_to(x + r, y)
    path.line_to(x + w - r, y)
    path.arc(x + w - r, y + r, r, -math.pi / 2, 0)
    path.line_to(x + w, y + h - r)
    path.arc(x + w - r, y + h - r, r, 0, math.pi / 2)
    path.line_to(x + r, y + h)
    path.arc(x + r, y + h - r, r, math.pi / 2, math.pi)
    path.line_to(x, y + r)
    path.arc(x + r, y + r, r, math.pi, 3 * math.pi / 2)
    return path.close()


def segment(x1: float, y1: float, x2: float, y2: float) -> Path:
    return Path().move_to(x1, y1).line_to(x2, y2)


def polyline(points: list[Point]) -> Path:
    path = Path()
    if not points:
        return path
    path.move_to(*points[0])
    for point in points[1:]:
        path.line_to(*point)
    return path
