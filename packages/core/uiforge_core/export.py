"""Surface-to-PNG export and file naming."""

from __future__ import annotations

import base64
import time
from dataclasses import replace
from io import BytesIO
from pathlib import Path

from PIL import Image

from uiforge_renderer import ElementConfig, ElementKind, RenderDispatcher, Surface

from .logging_setup import get_logger

DRAW_MODES: dict[ElementKind, tuple[str, ...]] = {
    ElementKind.HEALTHBAR: ("full", "frame", "fill"),
    ElementKind.SLIDER: ("combined", "track", "thumb"),
}

logger = get_logger("export")


def draw_mode_of(config: ElementConfig) -> str:
    return str(getattr(config, "draw_mode", None) or "full")


def export_filename(kind: ElementKind | str, draw_mode: str = "full", epoch_ms: int | None = None) -> str:
    kind_name = ElementKind(kind).value
    if epoch_ms is None:
        epoch_ms = int(time.time() * 1000)
    return f"{kind_name}_{draw_mode or 'full'}_{int(epoch_ms)}.png"


def _scaled(image: Image.Image, scale: float) -> Image.Image:
    if not scale > 0 or scale == 1:
        return image
    width = max(1, int(round(image.width * scale)))
    height = max(1, int(round(image.height * scale)))
    return image.resize((width, height), Image.Resampling.LANCZOS)


def surface_to_png(surface: Surface, scale: float = 1.0) -> bytes:
    buf = BytesIO()
    _scaled(surface.image, scale).save(buf, format="PNG")
    return buf.getvalue()


def preview_data_url(surface: Surface, scale: float = 1.0) -> str:
    b64 = base64.b64encode(surface_to_png(surface, scale)).decode("ascii")
    return f"data:image/png;base64,{b64}"


def write_png(
    surface: Surface,
    config: ElementConfig,
    out_dir: Path,
    scale: float | None = None,
    epoch_ms: int | None = None,
) -> Path:
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / export_filename(config.kind, draw_mode_of(config), epoch_ms)
    path.write_bytes(surface_to_png(surface, config.scale if scale is None else scale))
    logger.info(f"exported {path.name}", extra={"event": "export_written"})
    return path


def export_parts(
    config: ElementConfig,
    out_dir: Path,
    dispatcher: RenderDispatcher | None = None,
    scale: float | None = None,
) -> list[Path]:
    """Render and write one PNG per draw mode of a partitioned element."""
    dispatcher = dispatcher or RenderDispatcher()
    modes = DRAW_MODES.get(config.kind)
    if not modes:
        return [write_png(dispatcher.render(config), config, out_dir, scale=scale)]

    epoch_ms = int(time.time() * 1000)
    paths = []
    for mode in modes:
        part = replace(config, draw_mode=mode)
        paths.append(write_png(dispatcher.render(part), part, out_dir, scale=scale, epoch_ms=epoch_ms))
    return paths
