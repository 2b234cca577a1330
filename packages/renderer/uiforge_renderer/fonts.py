"""Font lookup with graceful fallbacks."""

from __future__ import annotations

from pathlib import Path

from PIL import ImageFont

PIXEL_FONTS = ("PressStart2P-Regular.ttf", "PressStart2P.ttf", "DejaVuSansMono-Bold.ttf", "Courier New Bold.ttf")
SANS_FONTS = ("Inter-Regular.ttf", "DejaVuSans.ttf", "Arial.ttf")
SANS_BOLD_FONTS = ("Inter-Bold.ttf", "DejaVuSans-Bold.ttf", "Arial Bold.ttf", "Arial.ttf")


class FontResolver:
    """Resolves the sans/pixel families; missing fonts fall back to Pillow's default."""

    def __init__(self, search_dirs: list[Path] | tuple[Path, ...] = ()) -> None:
        self.search_dirs = [Path(p).expanduser() for p in search_dirs]
        self._cache: dict[tuple[str, int, bool], ImageFont.ImageFont | ImageFont.FreeTypeFont] = {}

    def _candidates(self, family: str, bold: bool) -> tuple[str, ...]:
        if family == "pixel":
            return PIXEL_FONTS
        return SANS_BOLD_FONTS if bold else SANS_FONTS

    def _truetype(self, name: str, size: int):
        for base in self.search_dirs:
            path = base / name
            if path.exists():
                return ImageFont.truetype(str(path), size)
        return ImageFont.truetype(name, size)

    def get(self, size: int, family: str = "sans", bold: bool = False):
        size = max(1, int(round(size)))
        key = (family, size, bold)
        font = self._cache.get(key)
        if font is not None:
            return font
        for name in self._candidates(family, bold):
            try:
                font = self._truetype(name, size)
                break
            except OSError:
                continue
        else:
            font = ImageFont.load_default(size)
        self._cache[key] = font
        return font
