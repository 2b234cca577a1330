"""Render dispatch: one renderer per element kind."""

from __future__ import annotations

import logging
import time

from .badge import BadgeRenderer
from .base import ElementRenderer
from .button import ButtonRenderer
from .crosshair import CrosshairRenderer
from .fonts import FontResolver
from .healthbar import HealthBarRenderer
from .models import ElementConfig, ElementKind
from .panel import PanelRenderer
from .slider import SliderRenderer
from .slot import SlotRenderer
from .surface import Surface

logger = logging.getLogger("uiforge.renderer")

RENDERERS: dict[ElementKind, ElementRenderer] = {
    ElementKind.BUTTON: ButtonRenderer(),
    ElementKind.HEALTHBAR: HealthBarRenderer(),
    ElementKind.PANEL: PanelRenderer(),
    ElementKind.CROSSHAIR: CrosshairRenderer(),
    ElementKind.SLOT: SlotRenderer(),
    ElementKind.BADGE: BadgeRenderer(),
    ElementKind.SLIDER: SliderRenderer(),
}


def get_renderer(kind: ElementKind | str) -> ElementRenderer:
    return RENDERERS[ElementKind(kind)]


def canvas_size(config: ElementConfig) -> tuple[int, int]:
    return get_renderer(config.kind).canvas_size(config)


class RenderDispatcher:
    """Sizes, clears and repaints a surface for the active configuration."""

    def __init__(self, fonts: FontResolver | None = None) -> None:
        self.fonts = fonts or FontResolver()

    def render_into(self, surface: Surface | None, config: ElementConfig) -> bool:
        if surface is None:
            logger.debug("no surface available, render skipped", extra={"event": "render_skipped"})
            return False

        renderer = get_renderer(config.kind)
        pad = renderer.padding(config)
        width, height = renderer.canvas_size(config)

        start = time.perf_counter()
        surface.reset(width, height)
        surface.translate(pad, pad)
        renderer.draw(surface, config)
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        logger.debug(
            f"rendered {config.kind.value} {width}x{height} in {elapsed_ms:.1f}ms",
            extra={"event": "render_complete"},
        )
        return True

    def render(self, config: ElementConfig, surface: Surface | None = None) -> Surface:
        surface = surface or Surface(fonts=self.fonts)
        self.render_into(surface, config)
        return surface
