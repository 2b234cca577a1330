"""Typed element configuration models."""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import Any, ClassVar, Union


class ElementKind(str, Enum):
    BUTTON = "button"
    HEALTHBAR = "healthbar"
    PANEL = "panel"
    CROSSHAIR = "crosshair"
    SLOT = "slot"
    BADGE = "badge"
    SLIDER = "slider"


BUTTON_STYLES = ("flat", "glossy", "cyber", "pixel", "neomorphism")
FONT_FAMILIES = ("sans", "pixel")
FONT_WEIGHTS = ("normal", "bold")
BAR_SHAPES = ("rect", "round", "chamfer", "slash")
HEALTHBAR_DRAW_MODES = ("full", "frame", "fill")
PANEL_STYLES = ("solid", "double", "ridge", "tech", "window")
PANEL_PATTERNS = ("none", "grid", "dots", "scanlines")
CROSSHAIR_TYPES = ("cross", "dot", "circle", "t-shape", "chevron", "sniper")
SLOT_STYLES = ("simple", "mmo", "scifi")
RARITY_COLORS = ("none", "#ffffff", "#22c55e", "#3b82f6", "#a855f7", "#eab308")
BADGE_SHAPES = ("shield", "circle", "hexagon", "diamond", "star")
SLIDER_ORIENTATIONS = ("horizontal", "vertical")
THUMB_SHAPES = ("circle", "rect", "pill", "diamond")
SLIDER_DRAW_MODES = ("combined", "track", "thumb")


@dataclass(frozen=True)
class BaseConfig:
    kind: ClassVar[ElementKind]

    width: int = 100
    height: int = 100
    scale: float = 1.0


@dataclass(frozen=True)
class ButtonConfig(BaseConfig):
    kind: ClassVar[ElementKind] = ElementKind.BUTTON

    width: int = 200
    height: int = 60
    text: str = "START"
    show_text: bool = True
    font_family: str = "pixel"
    font_size: int = 24
    font_weight: str = "bold"
    bg_color: str = "#3b82f6"
    text_color: str = "#ffffff"
    border_color: str = "#1e3a8a"
    border_width: int = 4
    border_radius: int = 4
    style: str = "glossy"
    shadow_color: str = "#000000"
    shadow_blur: int = 0


@dataclass(frozen=True)
class HealthBarConfig(BaseConfig):
    kind: ClassVar[ElementKind] = ElementKind.HEALTHBAR

    width: int = 300
    height: int = 32
    value: float = 100
    bg_color: str = "#1e293b"
    fill_color_start: str = "#22c55e"
    fill_color_end: str = "#15803d"
    border_color: str = "#0f172a"
    border_width: int = 4
    border_radius: int = 2
    segments: int = 10
    segment_gap: float = 4
    show_text: bool = False
    shape: str = "slash"
    draw_mode: str = "full"
    noise: float = 0.0


@dataclass(frozen=True)
class PanelConfig(BaseConfig):
    kind: ClassVar[ElementKind] = ElementKind.PANEL

    width: int = 400
    height: int = 300
    bg_color: str = "#0f172a"
    bg_opacity: float = 0.95
    border_color: str = "#3b82f6"
    border_width: int = 2
    border_radius: int = 8
    style: str = "window"
    header_height: int = 40
    pattern: str = "grid"
    pattern_opacity: float = 0.1
    glow: bool = True
    glow_color: str = "#3b82f6"


@dataclass(frozen=True)
class CrosshairConfig(BaseConfig):
    kind: ClassVar[ElementKind] = ElementKind.CROSSHAIR

    width: int = 64
    height: int = 64
    type: str = "cross"
    color: str = "#00ff00"
    thickness: float = 2
    gap: float = 4
    length: float = 8
    dot_size: float = 2
    outline_color: str = "#000000"
    outline_width: float = 1
    shadow: bool = True


@dataclass(frozen=True)
class SlotConfig(BaseConfig):
    kind: ClassVar[ElementKind] = ElementKind.SLOT

    width: int = 64
    height: int = 64
    rarity_color: str = "#eab308"
    bg_color: str = "#0f172a"
    border_color: str = "#475569"
    border_width: int = 2
    border_radius: int = 4
    inner_shadow: bool = True
    show_hotkey: bool = True
    hotkey_text: str = "Q"
    style: str = "mmo"


@dataclass(frozen=True)
class BadgeConfig(BaseConfig):
    kind: ClassVar[ElementKind] = ElementKind.BADGE

    width: int = 100
    height: int = 100
    shape: str = "shield"
    primary_color: str = "#ef4444"
    secondary_color: str = "#991b1b"
    icon_text: str = "10"
    border_color: str = "#fbbf24"
    border_width: int = 4
    ribbon: bool = True


@dataclass(frozen=True)
class SliderConfig(BaseConfig):
    kind: ClassVar[ElementKind] = ElementKind.SLIDER

    width: int = 300
    height: int = 40
    value: float = 50
    type: str = "horizontal"
    track_color: str = "#1e293b"
    track_border_color: str = "#475569"
    track_border_width: int = 2
    track_radius: int = 10
    fill_color: str = "#3b82f6"
    thumb_color: str = "#ffffff"
    thumb_border_color: str = "#94a3b8"
    thumb_border_width: int = 1
    thumb_size: int = 24
    thumb_shape: str = "circle"
    draw_mode: str = "combined"


ElementConfig = Union[
    ButtonConfig,
    HealthBarConfig,
    PanelConfig,
    CrosshairConfig,
    SlotConfig,
    BadgeConfig,
    SliderConfig,
]

CONFIG_TYPES: dict[ElementKind, type] = {
    ElementKind.BUTTON: ButtonConfig,
    ElementKind.HEALTHBAR: HealthBarConfig,
    ElementKind.PANEL: PanelConfig,
    ElementKind.CROSSHAIR: CrosshairConfig,
    ElementKind.SLOT: SlotConfig,
    ElementKind.BADGE: BadgeConfig,
    ElementKind.SLIDER: SliderConfig,
}

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


def field_name(key: str) -> str:
    """Map a camelCase preset key (``drawMode``) to its snake_case field name."""
    return _CAMEL_RE.sub("_", key).lower()


def element_kind(value: ElementKind | str) -> ElementKind:
    try:
        return ElementKind(value)
    except ValueError:
        raise ValueError(f"Unknown element kind: {value}") from None


def config_fields(kind: ElementKind | str) -> dict[str, str]:
    """Field name -> annotated type name for one variant."""
    return {f.name: str(f.type) for f in fields(CONFIG_TYPES[element_kind(kind)])}


def default_config(kind: ElementKind | str) -> ElementConfig:
    return CONFIG_TYPES[element_kind(kind)]()


def config_from_mapping(kind: ElementKind | str, raw: dict[str, Any]) -> ElementConfig:
    config_type = CONFIG_TYPES[element_kind(kind)]
    known = config_fields(kind)
    values = {}
    for key, value in raw.items():
        name = field_name(key)
        if name in known:
            values[name] = value
    return config_type(**values)


def config_to_mapping(config: ElementConfig) -> dict[str, Any]:
    return asdict(config)
