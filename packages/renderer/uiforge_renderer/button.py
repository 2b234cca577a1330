"""Button renderer."""

from __future__ import annotations

from .base import ElementRenderer
from .colors import black, white
from .geometry import Path, segment, shape_path
from .gradients import linear_gradient
from .models import ButtonConfig, ElementKind
from .surface import Shadow, Surface


def button_path(config: ButtonConfig) -> Path:
    shape = "chamfer" if config.style == "cyber" else "round"
    return shape_path(0, 0, config.width, config.height, config.border_radius, shape)


class ButtonRenderer(ElementRenderer):
    kind = ElementKind.BUTTON
    pad = 20

    def draw(self, surface: Surface, config: ButtonConfig) -> None:
        path = button_path(config)

        self._draw_body(surface, config, path)
        if config.style == "glossy":
            self._draw_shine(surface, config, path)
        elif config.style == "neomorphism":
            self._draw_neomorphic_edges(surface, config, path)
        elif config.style == "cyber":
            surface.stroke(segment(10, config.height - 5, config.width - 10, config.height - 5), white(0.5), 1)
        elif config.style not in ("flat", "pixel"):
            self._unsupported("style", config.style)

        if config.border_width > 0 and config.style != "neomorphism":
            surface.stroke(path, config.border_color, config.border_width)

        if config.show_text:
            self._draw_label(surface, config)

    def _draw_body(self, surface: Surface, config: ButtonConfig, path: Path) -> None:
        shadow = None
        if config.shadow_blur > 0 and config.style not in ("flat", "pixel"):
            shadow = Shadow(color=config.shadow_color, blur=config.shadow_blur)

        paint = config.bg_color
        if config.style == "glossy":
            paint = linear_gradient(
                0, 0, 0, config.height,
                (0.0, config.bg_color),
                (0.5, config.bg_color),
                (1.0, "#000000"),
            )
        surface.fill(path, paint, shadow=shadow)

    def _draw_shine(self, surface: Surface, config: ButtonConfig, path: Path) -> None:
        shine = linear_gradient(0, 0, 0, config.height / 2, (0.0, white(0.6)), (1.0, white(0.05)))
        with surface.clipped(path):
            surface.fill_rect(0, 0, config.width, config.height / 2, shine)

    def _draw_neomorphic_edges(self, surface: Surface, config: ButtonConfig, path: Path) -> None:
        # light from the top-left, dark towards the bottom-right; edges take the
        # border colour rather than a hard-coded black
        surface.stroke(path, config.border_color, 1, Shadow(white(0.5), blur=10, offset_x=-4, offset_y=-4))
        surface.stroke(path, config.border_color, 1, Shadow(black(0.3), blur=10, offset_x=4, offset_y=4))

    def _draw_label(self, surface: Surface, config: ButtonConfig) -> None:
        pixel = config.font_family == "pixel"
        font = surface.fonts.get(config.font_size, family=config.font_family, bold=config.font_weight == "bold")
        cx = config.width / 2
        cy = config.height / 2
        if config.style in ("pixel", "cyber"):
            surface.fill_text(config.text, cx + 2, cy + 2, font, "#000000")
        nudge = config.font_size * 0.1 if pixel else 0
        surface.fill_text(config.text, cx, cy + nudge, font, config.text_color)
