"""Badge / emblem renderer."""

from __future__ import annotations

import math

from .base import ElementRenderer
from .colors import black
from .geometry import Path
from .gradients import linear_gradient
from .models import BadgeConfig, ElementKind
from .surface import Shadow, Surface

RIBBON_COLOR = "#b91c1c"
STAR_SPIKES = 5


def badge_size(config: BadgeConfig) -> float:
    return min(config.width, config.height) / 2 - 10


def badge_path(config: BadgeConfig) -> Path:
    """Outline of the badge body centred on the logical canvas."""
    cx = config.width / 2
    cy = config.height / 2
    size = badge_size(config)
    path = Path()
    if config.shape == "circle":
        return path.circle(cx, cy, size)
    if config.shape == "diamond":
        return path.polygon([(cx, cy - size), (cx + size, cy), (cx, cy + size), (cx - size, cy)])
    if config.shape == "hexagon":
        return path.polygon(
            [(cx + size * math.cos(math.pi / 3 * i), cy + size * math.sin(math.pi / 3 * i)) for i in range(6)]
        )
    if config.shape == "shield":
        half = size * 0.8
        path.move_to(cx - half, cy - half)
        path.line_to(cx + half, cy - half)
        path.line_to(cx + half, cy)
        path.quadratic_to(cx + half, cy + size, cx, cy + size)
        path.quadratic_to(cx - half, cy + size, cx - half, cy)
        return path.close()
    if config.shape == "star":
        outer = size
        inner = size / 2
        step = math.pi / STAR_SPIKES
        rot = math.pi / 2 * 3
        path.move_to(cx, cy - outer)
        for _ in range(STAR_SPIKES):
            path.line_to(cx + math.cos(rot) * outer, cy + math.sin(rot) * outer)
            rot += step
            path.line_to(cx + math.cos(rot) * inner, cy + math.sin(rot) * inner)
            rot += step
        path.line_to(cx, cy - outer)
        return path.close()
    return path


def ribbon_path(config: BadgeConfig) -> Path:
    cx = config.width / 2
    cy = config.height / 2
    size = badge_size(config)
    return Path().polygon(
        [
            (cx - size, cy + size * 0.5),
            (cx + size, cy + size * 0.5),
            (cx + size + 10, cy + size * 0.8),
            (cx, cy + size + 5),
            (cx - size - 10, cy + size * 0.8),
        ]
    )


class BadgeRenderer(ElementRenderer):
    kind = ElementKind.BADGE
    pad = 10

    def draw(self, surface: Surface, config: BadgeConfig) -> None:
        cx = config.width / 2
        cy = config.height / 2
        size = badge_size(config)

        body = badge_path(config)
        if body.is_empty():
            self._unsupported("shape", config.shape)
        gradient = linear_gradient(
            cx, cy - size, cx, cy + size,
            (0.0, config.primary_color),
            (1.0, config.secondary_color),
        )
        surface.fill(body, gradient)
        if config.border_width > 0:
            surface.stroke(body, config.border_color, config.border_width)

        if config.ribbon:
            surface.fill(ribbon_path(config), RIBBON_COLOR)

        font = surface.fonts.get(24, family="pixel", bold=True)
        surface.fill_text(config.icon_text, cx, cy, font, "#ffffff", shadow=Shadow(black(0.8), blur=4))
