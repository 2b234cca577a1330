"""Rendering engine for parametric game-UI elements."""

from .colors import hex_to_rgb, parse_color, rgba
from .dispatcher import RENDERERS, RenderDispatcher, canvas_size, get_renderer
from .fonts import FontResolver
from .geometry import Path, round_rect, shape_path
from .gradients import LinearGradient, RadialGradient, linear_gradient, radial_gradient
from .models import (
    BadgeConfig,
    ButtonConfig,
    CrosshairConfig,
    ElementConfig,
    ElementKind,
    HealthBarConfig,
    PanelConfig,
    SliderConfig,
    SlotConfig,
    config_fields,
    config_from_mapping,
    config_to_mapping,
    default_config,
)
from .noise import add_noise
from .surface import Shadow, Surface

__all__ = [
    "BadgeConfig",
    "ButtonConfig",
    "CrosshairConfig",
    "ElementConfig",
    "ElementKind",
    "FontResolver",
    "HealthBarConfig",
    "LinearGradient",
    "PanelConfig",
    "Path",
    "RENDERERS",
    "RadialGradient",
    "RenderDispatcher",
    "Shadow",
    "SliderConfig",
    "SlotConfig",
    "Surface",
    "add_noise",
    "canvas_size",
    "config_fields",
    "config_from_mapping",
    "config_to_mapping",
    "default_config",
    "get_renderer",
    "hex_to_rgb",
    "linear_gradient",
    "parse_color",
    "radial_gradient",
    "rgba",
    "round_rect",
    "shape_path",
]
