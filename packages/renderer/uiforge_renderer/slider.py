"""Slider renderer with separable track/thumb export."""

from __future__ import annotations

from dataclasses import dataclass

from .base import ElementRenderer
from .colors import white
from .geometry import Path, round_rect
from .models import ElementKind, SliderConfig
from .surface import Surface

TRACK_THICKNESS = 12


@dataclass(frozen=True)
class SliderLayout:
    track_x: float
    track_y: float
    track_w: float
    track_h: float
    thumb_x: float
    thumb_y: float
    vertical: bool


def slider_layout(config: SliderConfig) -> SliderLayout:
    """Track rectangle and thumb centre in logical coordinates."""
    vertical = config.type == "vertical"
    pad = config.thumb_size / 2 + 5
    track_w = TRACK_THICKNESS if vertical else config.width - pad * 2
    track_h = config.height - pad * 2 if vertical else TRACK_THICKNESS
    track_x = (config.width - track_w) / 2
    track_y = (config.height - track_h) / 2

    proportion = config.value / 100
    if config.draw_mode == "thumb":
        thumb_x = config.width / 2
        thumb_y = config.height / 2
    elif vertical:
        thumb_x = config.width / 2
        thumb_y = track_y + track_h - track_h * proportion
    else:
        thumb_x = track_x + track_w * proportion
        thumb_y = config.height / 2
    return SliderLayout(track_x, track_y, track_w, track_h, thumb_x, thumb_y, vertical)


def thumb_path(config: SliderConfig, x: float, y: float, vertical: bool) -> Path:
    size = config.thumb_size
    path = Path()
    if config.thumb_shape == "circle":
        return path.circle(x, y, size / 2)
    if config.thumb_shape == "rect":
        return path.rect(x - size / 2, y - size / 2, size, size)
    if config.thumb_shape == "pill":
        w = size if vertical else size / 2
        h = size / 2 if vertical else size
        return path.rect(x - w / 2, y - h / 2, w, h)
    if config.thumb_shape == "diamond":
        return path.polygon([(x, y - size / 2), (x + size / 2, y), (x, y + size / 2), (x - size / 2, y)])
    return path


class SliderRenderer(ElementRenderer):
    kind = ElementKind.SLIDER
    pad = 0

    def draw(self, surface: Surface, config: SliderConfig) -> None:
        layout = slider_layout(config)
        if config.draw_mode not in ("combined", "track", "thumb"):
            self._unsupported("draw_mode", config.draw_mode)
        if config.draw_mode != "thumb":
            self._draw_track(surface, config, layout)
        if config.draw_mode != "track":
            self._draw_thumb(surface, config, layout)

    def _draw_track(self, surface: Surface, config: SliderConfig, layout: SliderLayout) -> None:
        track = round_rect(layout.track_x, layout.track_y, layout.track_w, layout.track_h, config.track_radius)
        surface.fill(track, config.track_color)
        if config.track_border_width > 0:
            surface.stroke(track, config.track_border_color, config.track_border_width)

        proportion = config.value / 100
        if layout.vertical:
            fill_h = layout.track_h * proportion
            fill = round_rect(layout.track_x, layout.track_y + layout.track_h - fill_h, layout.track_w, fill_h, config.track_radius)
        else:
            fill = round_rect(layout.track_x, layout.track_y, layout.track_w * proportion, layout.track_h, config.track_radius)
        surface.fill(fill, config.fill_color)

    def _draw_thumb(self, surface: Surface, config: SliderConfig, layout: SliderLayout) -> None:
        x, y = layout.thumb_x, layout.thumb_y
        thumb = thumb_path(config, x, y, layout.vertical)
        if thumb.is_empty():
            self._unsupported("thumb_shape", config.thumb_shape)
        surface.fill(thumb, config.thumb_color)

        bevel = config.thumb_size / 6
        surface.fill(Path().circle(x - bevel, y - bevel, bevel), white(0.4))

        # the border outlines the thumb itself, not the highlight dot
        if config.thumb_border_width > 0:
            surface.stroke(thumb, config.thumb_border_color, config.thumb_border_width)
