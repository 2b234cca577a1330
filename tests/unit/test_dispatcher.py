import sys
import unittest
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from uiforge_renderer import (
    RENDERERS,
    ElementKind,
    HealthBarConfig,
    RenderDispatcher,
    SliderConfig,
    Surface,
    canvas_size,
    default_config,
)

EXPECTED_SIZES = {
    ElementKind.BUTTON: (240, 100),
    ElementKind.HEALTHBAR: (320, 52),
    ElementKind.PANEL: (440, 340),
    ElementKind.CROSSHAIR: (64, 64),
    ElementKind.SLOT: (74, 74),
    ElementKind.BADGE: (120, 120),
    ElementKind.SLIDER: (300, 40),
}


class DispatcherTests(unittest.TestCase):
    def test_every_kind_registered(self):
        self.assertEqual(set(RENDERERS), set(ElementKind))

    def test_canvas_sizes(self):
        for kind, size in EXPECTED_SIZES.items():
            with self.subTest(kind=kind.value):
                self.assertEqual(canvas_size(default_config(kind)), size)

    def test_render_defaults(self):
        dispatcher = RenderDispatcher()
        for kind, size in EXPECTED_SIZES.items():
            with self.subTest(kind=kind.value):
                surface = dispatcher.render(default_config(kind))
                self.assertEqual(surface.size, size)
                self.assertIsNotNone(surface.image.getbbox())

    def test_missing_surface_is_skipped(self):
        with self.assertLogs("uiforge.renderer", level="DEBUG"):
            self.assertFalse(RenderDispatcher().render_into(None, HealthBarConfig()))

    def test_surface_is_reused_and_cleared(self):
        dispatcher = RenderDispatcher()
        surface = Surface()
        dispatcher.render(HealthBarConfig(value=100), surface)
        dispatcher.render(SliderConfig(draw_mode="thumb"), surface)
        self.assertEqual(surface.size, (300, 40))
        # the health bar fill would otherwise still cover the left edge
        self.assertEqual(surface.pixel(5, 20)[3], 0)

    def test_render_is_deterministic_without_noise(self):
        a = RenderDispatcher().render(default_config("panel"))
        b = RenderDispatcher().render(default_config("panel"))
        self.assertTrue(np.array_equal(np.asarray(a.image), np.asarray(b.image)))

    def test_seeded_noise_is_reproducible(self):
        config = HealthBarConfig(noise=0.3)
        a = RenderDispatcher().render(config, Surface(rng=np.random.default_rng(11)))
        b = RenderDispatcher().render(config, Surface(rng=np.random.default_rng(11)))
        self.assertEqual(a.to_png_bytes(), b.to_png_bytes())


if __name__ == "__main__":
    unittest.main()
