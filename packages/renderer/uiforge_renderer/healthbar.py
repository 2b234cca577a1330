"""Health bar renderer with partitioned (frame/fill) export."""

from __future__ import annotations

from .base import ElementRenderer
from .colors import white
from .geometry import SHAPE_KINDS, Path, shape_path
from .gradients import linear_gradient
from .models import ElementKind, HealthBarConfig
from .surface import Shadow, Surface

HIGHLIGHT_BAND = 0.4
SEGMENT_OVERSHOOT = 10


def fill_width(config: HealthBarConfig) -> float:
    return config.width * config.value / 100


def healthbar_segments(config: HealthBarConfig) -> list[tuple[float, float, float, float]]:
    """Fill rectangles ``(x, y, w, h)`` before clipping to the bar outline.

    Continuous bars give one rectangle. Segmented bars give every segment whose
    start lies left of the fill width, narrowed by half the gap on each side.
    """
    if not config.value > 0:
        return []
    filled = fill_width(config)
    if config.segments <= 0:
        return [(0.0, 0.0, filled, float(config.height))]

    seg_width = config.width / int(config.segments)
    out = []
    for i in range(int(config.segments)):
        seg_x = i * seg_width
        if seg_x < filled:
            out.append(
                (
                    seg_x + config.segment_gap / 2,
                    -SEGMENT_OVERSHOOT,
                    seg_width - config.segment_gap,
                    config.height + 2 * SEGMENT_OVERSHOOT,
                )
            )
    return out


def _format_value(value: float) -> str:
    return f"{value:g}%"


class HealthBarRenderer(ElementRenderer):
    kind = ElementKind.HEALTHBAR
    pad = 10

    def draw(self, surface: Surface, config: HealthBarConfig) -> None:
        if config.shape not in SHAPE_KINDS:
            self._unsupported("shape", config.shape)
        path = shape_path(0, 0, config.width, config.height, config.border_radius, config.shape)
        mode = config.draw_mode
        if mode not in ("full", "frame", "fill"):
            self._unsupported("draw_mode", mode)

        if mode != "fill":
            surface.fill(path, config.bg_color)

        if mode != "frame":
            self._draw_fill(surface, config, path)

        if mode != "fill" and config.border_width > 0:
            surface.stroke(path, config.border_color, config.border_width)

        if config.show_text and mode != "fill":
            font = surface.fonts.get(14, bold=True)
            surface.fill_text(
                _format_value(config.value),
                config.width / 2,
                config.height / 2,
                font,
                "#ffffff",
                shadow=Shadow("#000000", blur=3),
            )

        if config.noise > 0:
            surface.apply_noise(config.noise)

    def _draw_fill(self, surface: Surface, config: HealthBarConfig, path: Path) -> None:
        rects = healthbar_segments(config)
        if not rects:
            return
        gradient = linear_gradient(
            0, 0, config.width, 0,
            (0.0, config.fill_color_start),
            (1.0, config.fill_color_end),
        )
        fill = Path()
        for x, y, w, h in rects:
            fill.rect(x, y, w, h)

        with surface.clipped(path):
            surface.fill(fill, gradient)
            with surface.clipped(fill):
                surface.fill_rect(0, 0, config.width, config.height * HIGHLIGHT_BAND, white(0.15))
