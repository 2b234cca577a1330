"""Inventory slot renderer."""

from __future__ import annotations

from .base import ElementRenderer
from .colors import black, parse_color
from .geometry import Path, shape_path
from .gradients import linear_gradient, radial_gradient
from .models import ElementKind, SlotConfig
from .surface import Shadow, Surface

MMO_BEVEL_TOP = "#334155"
MMO_BEVEL_BOTTOM = "#0f172a"
MMO_INSET = 4
RARITY_REACH = 0.7
RARITY_ALPHA = 0x88
HOTKEY_SIZE = 20
HOTKEY_MARGIN = 2


def slot_path(config: SlotConfig) -> Path:
    shape = "chamfer" if config.style == "scifi" else "round"
    return shape_path(0, 0, config.width, config.height, config.border_radius, shape)


class SlotRenderer(ElementRenderer):
    kind = ElementKind.SLOT
    pad = 5

    def draw(self, surface: Surface, config: SlotConfig) -> None:
        path = slot_path(config)
        self._draw_background(surface, config, path)

        if config.rarity_color != "none":
            self._draw_rarity_glow(surface, config, path)

        if config.border_width > 0:
            surface.stroke(path, config.border_color, config.border_width)

        if config.inner_shadow:
            surface.stroke(path, black(0.5), 4, shadow=Shadow("#000000", blur=10))

        if config.show_hotkey:
            self._draw_hotkey(surface, config)

    def _draw_background(self, surface: Surface, config: SlotConfig, path: Path) -> None:
        w, h = config.width, config.height
        if config.style == "mmo":
            bevel = linear_gradient(0, 0, 0, h, (0.0, MMO_BEVEL_TOP), (1.0, MMO_BEVEL_BOTTOM))
            surface.fill(shape_path(0, 0, w, h, config.border_radius, "rect"), bevel)
            surface.fill_rect(MMO_INSET, MMO_INSET, w - 2 * MMO_INSET, h - 2 * MMO_INSET, config.bg_color)
            return
        if config.style not in ("simple", "scifi"):
            self._unsupported("style", config.style)
        surface.fill(path, config.bg_color)

    def _draw_rarity_glow(self, surface: Surface, config: SlotConfig, path: Path) -> None:
        r, g, b, _ = parse_color(config.rarity_color)
        cx = config.width / 2
        cy = config.height / 2
        glow = radial_gradient(
            cx, cy, 0, config.width / 2 * RARITY_REACH,
            (0.0, (r, g, b, 0)),
            (1.0, (r, g, b, RARITY_ALPHA)),
        )
        with surface.clipped(path):
            surface.fill(path, glow)

    def _draw_hotkey(self, surface: Surface, config: SlotConfig) -> None:
        x = config.width - HOTKEY_SIZE - HOTKEY_MARGIN
        y = config.height - HOTKEY_SIZE - HOTKEY_MARGIN
        surface.fill_rect(x, y, HOTKEY_SIZE, HOTKEY_SIZE, "#000000")
        font = surface.fonts.get(10)
        surface.fill_text(config.hotkey_text, x + HOTKEY_SIZE / 2, y + HOTKEY_SIZE / 2 + 1, font, "#ffffff")
