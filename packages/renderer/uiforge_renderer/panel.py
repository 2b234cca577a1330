"""Panel / window frame renderer."""

from __future__ import annotations

from .base import ElementRenderer
from .colors import black, rgba, white
from .geometry import Path, polyline, round_rect, segment
from .models import ElementKind, PanelConfig
from .surface import Shadow, Surface

TECH_CUT = 20
GRID_STEP = 20
SCANLINE_STEP = 4
DOT_STEP = 15
CLOSE_BUTTON_COLOR = "#ef4444"


def panel_path(config: PanelConfig) -> Path:
    w, h = config.width, config.height
    if config.style == "tech":
        c = TECH_CUT
        return Path().polygon([(0, c), (c, 0), (w - c, 0), (w, c), (w, h - c), (w - c, h), (c, h), (0, h - c)])
    return round_rect(0, 0, w, h, config.border_radius)


def pattern_path(config: PanelConfig) -> Path:
    w, h = config.width, config.height
    path = Path()
    if config.pattern == "grid":
        for x in range(0, int(w), GRID_STEP):
            path.rect(x, 0, 1, h)
        for y in range(0, int(h), GRID_STEP):
            path.rect(0, y, w, 1)
    elif config.pattern == "scanlines":
        for y in range(0, int(h), SCANLINE_STEP):
            path.rect(0, y, w, 1)
    elif config.pattern == "dots":
        for x in range(0, int(w), DOT_STEP):
            for y in range(0, int(h), DOT_STEP):
                path.circle(x, y, 1)
    return path


class PanelRenderer(ElementRenderer):
    kind = ElementKind.PANEL

    def padding(self, config: PanelConfig) -> int:
        return 20 if config.glow else 5

    def draw(self, surface: Surface, config: PanelConfig) -> None:
        body = panel_path(config)
        glow = Shadow(config.glow_color, blur=20) if config.glow else None
        surface.fill(body, rgba(config.bg_color, config.bg_opacity), shadow=glow)

        if config.pattern != "none":
            self._draw_pattern(surface, config, body)

        if config.style == "window" and config.header_height > 0:
            self._draw_header(surface, config, body)

        if config.border_width > 0:
            self._draw_border(surface, config, body)

    def _draw_pattern(self, surface: Surface, config: PanelConfig, body: Path) -> None:
        pattern = pattern_path(config)
        if pattern.is_empty():
            self._unsupported("pattern", config.pattern)
            return
        with surface.clipped(body):
            surface.fill(pattern, white(config.pattern_opacity))

    def _draw_header(self, surface: Surface, config: PanelConfig, body: Path) -> None:
        header = config.header_height
        with surface.clipped(body):
            surface.fill_rect(0, 0, config.width, header, black(0.3))
            surface.fill(Path().circle(config.width - 20, header / 2, 6), CLOSE_BUTTON_COLOR)
        surface.stroke(segment(0, header, config.width, header), config.border_color, 1)

    def _draw_border(self, surface: Surface, config: PanelConfig, body: Path) -> None:
        surface.stroke(body, config.border_color, config.border_width)
        if config.style == "double":
            surface.stroke(body, white(0.2), 1)
        elif config.style == "tech":
            w, h = config.width, config.height
            surface.stroke(polyline([(0, 40), (0, 20), (20, 0), (40, 0)]), config.glow_color, 2)
            surface.stroke(polyline([(w, h - 40), (w, h - 20), (w - 20, h), (w - 40, h)]), config.glow_color, 2)
