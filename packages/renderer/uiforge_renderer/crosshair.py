"""Crosshair / reticle renderer."""

from __future__ import annotations

from .base import ElementRenderer
from .geometry import Path, segment
from .models import CrosshairConfig, ElementKind
from .surface import Shadow, Surface

SNIPER_RADIUS = 0.4
SNIPER_TICKS = 5


class CrosshairRenderer(ElementRenderer):
    kind = ElementKind.CROSSHAIR
    pad = 0

    def draw(self, surface: Surface, config: CrosshairConfig) -> None:
        shadow = Shadow("#000000", blur=4) if config.shadow else None
        cx = config.width / 2
        cy = config.height / 2

        if config.type == "dot" or config.dot_size > 0:
            self._draw_dot(surface, config, cx, cy, shadow)

        if config.type in ("cross", "t-shape"):
            self._draw_arms(surface, config, cx, cy, shadow)
        elif config.type == "circle":
            ring = Path().circle(cx, cy, config.gap + config.length)
            self._outlined(surface, config, ring, shadow)
        elif config.type == "chevron":
            self._draw_chevron(surface, config, cx, cy, shadow)
        elif config.type == "sniper":
            self._draw_sniper(surface, config, cx, cy, shadow)
        elif config.type != "dot":
            self._unsupported("type", config.type)

    def _outlined(self, surface: Surface, config: CrosshairConfig, path: Path, shadow: Shadow | None) -> None:
        """Two concentric strokes: a wider outline pass (unshadowed) then the main colour."""
        if config.outline_width > 0:
            surface.stroke(path, config.outline_color, config.thickness + config.outline_width * 2)
        surface.stroke(path, config.color, config.thickness, shadow=shadow)

    def _draw_dot(self, surface: Surface, config: CrosshairConfig, cx: float, cy: float, shadow: Shadow | None) -> None:
        if config.outline_width > 0:
            surface.fill(Path().circle(cx, cy, config.dot_size + config.outline_width), config.outline_color, shadow=shadow)
        surface.fill(Path().circle(cx, cy, config.dot_size), config.color, shadow=shadow)

    def _draw_arms(self, surface: Surface, config: CrosshairConfig, cx: float, cy: float, shadow: Shadow | None) -> None:
        gap = config.gap
        reach = config.gap + config.length
        if config.type != "t-shape":
            self._outlined(surface, config, segment(cx, cy - gap, cx, cy - reach), shadow)
        self._outlined(surface, config, segment(cx, cy + gap, cx, cy + reach), shadow)
        self._outlined(surface, config, segment(cx - gap, cy, cx - reach, cy), shadow)
        self._outlined(surface, config, segment(cx + gap, cy, cx + reach, cy), shadow)

    def _draw_chevron(self, surface: Surface, config: CrosshairConfig, cx: float, cy: float, shadow: Shadow | None) -> None:
        s = config.gap + 5
        length = config.length
        arms = Path()
        arms.move_to(cx - s - length, cy).line_to(cx - s, cy)
        arms.move_to(cx + s, cy).line_to(cx + s + length, cy)
        arms.move_to(cx, cy - s - length).line_to(cx, cy - s)
        surface.stroke(arms, config.color, config.thickness, shadow=shadow)

        pointer = Path().polygon([(cx - 4, cy + s), (cx + 4, cy + s), (cx, cy + s + 6)])
        surface.fill(pointer, config.color, shadow=shadow)

    def _draw_sniper(self, surface: Surface, config: CrosshairConfig, cx: float, cy: float, shadow: Shadow | None) -> None:
        w, h = config.width, config.height
        guides = Path()
        guides.move_to(0, cy).line_to(w, cy)
        guides.move_to(cx, 0).line_to(cx, h)
        surface.stroke(guides, config.outline_color, 1, shadow=shadow)

        radius = w * SNIPER_RADIUS
        surface.stroke(Path().circle(cx, cy, radius), config.color, config.thickness, shadow=shadow)

        ticks = Path()
        for i in range(1, SNIPER_TICKS):
            d = radius / SNIPER_TICKS * i
            ticks.circle(cx + d, cy, 2)
            ticks.circle(cx - d, cy, 2)
        surface.fill(ticks, config.color, shadow=shadow)
