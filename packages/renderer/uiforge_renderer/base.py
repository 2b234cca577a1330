"""Common renderer interface."""

from __future__ import annotations

import logging

from .models import ElementConfig, ElementKind
from .surface import Surface

logger = logging.getLogger("uiforge.renderer")


class ElementRenderer:
    """Draws one element kind onto a cleared, translated surface.

    Implementations repaint from scratch on every call and never mutate the
    config they are given.
    """

    kind: ElementKind
    pad: int = 0

    def padding(self, config: ElementConfig) -> int:
        return self.pad

    def canvas_size(self, config: ElementConfig) -> tuple[int, int]:
        pad = self.padding(config)
        return (int(config.width) + 2 * pad, int(config.height) + 2 * pad)

    def draw(self, surface: Surface, config: ElementConfig) -> None:
        raise NotImplementedError

    def _unsupported(self, feature: str, value: object) -> None:
        logger.debug(f"{self.kind.value}: unsupported {feature}={value!r}, skipped")
