"""Pixel grain post-processing."""

from __future__ import annotations

import numpy as np
from PIL import Image


def add_noise(image: Image.Image, amount: float, rng: np.random.Generator | None = None) -> Image.Image:
    """Return ``image`` with monochrome grain on every non-transparent pixel.

    Each visible pixel gets one offset in ``[-amount*255/2, amount*255/2]``
    added to R, G and B. Alpha is untouched. ``amount <= 0`` returns the input
    image itself.
    """
    try:
        amount = float(amount)
    except (TypeError, ValueError):
        return image
    if not amount > 0:
        return image
    amount = min(amount, 1.0)
    rng = rng if rng is not None else np.random.default_rng()

    arr = np.asarray(image.convert("RGBA"), dtype=np.float64).copy()
    visible = arr[..., 3] > 0
    offsets = (rng.random(arr.shape[:2]) - 0.5) * amount * 255
    offsets = np.where(visible, offsets, 0.0)
    arr[..., :3] = np.clip(np.rint(arr[..., :3] + offsets[..., None]), 0, 255)
    return Image.fromarray(arr.astype(np.uint8), "RGBA")
