import sys
import unittest
from dataclasses import replace
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from uiforge_renderer import HealthBarConfig, RenderDispatcher
from uiforge_renderer.healthbar import healthbar_segments

BG = (30, 41, 59, 255)

PLAIN = HealthBarConfig(shape="rect", segments=0, border_width=0, show_text=False)


def _render(config):
    return RenderDispatcher().render(config)


class HealthBarSegmentTests(unittest.TestCase):
    def test_empty_bar_has_no_segments(self):
        self.assertEqual(healthbar_segments(replace(PLAIN, value=0)), [])

    def test_continuous_bar_is_one_rect(self):
        self.assertEqual(healthbar_segments(replace(PLAIN, value=50)), [(0.0, 0.0, 150.0, 32.0)])

    def test_partially_covered_segment_is_drawn_whole(self):
        rects = healthbar_segments(replace(PLAIN, value=35, segments=10, segment_gap=4))
        self.assertEqual(len(rects), 4)
        self.assertEqual(rects[0], (2.0, -10, 26.0, 52))
        self.assertEqual(rects[-1][0], 92.0)

    def test_segment_on_fill_boundary_is_skipped(self):
        rects = healthbar_segments(replace(PLAIN, value=30, segments=10, segment_gap=4))
        self.assertEqual(len(rects), 3)


class HealthBarRenderTests(unittest.TestCase):
    def test_canvas_is_padded(self):
        self.assertEqual(_render(PLAIN).size, (320, 52))

    def test_zero_value_shows_background_only(self):
        surface = _render(replace(PLAIN, value=0))
        self.assertEqual(surface.pixel(160, 26), BG)
        self.assertEqual(surface.pixel(11, 26), BG)

    def test_full_value_spans_the_bar(self):
        surface = _render(replace(PLAIN, value=100))
        left = surface.pixel(11, 30)
        right = surface.pixel(308, 30)
        self.assertGreater(left[1], 185)
        self.assertTrue(all(abs(a - b) <= 3 for a, b in zip(right[:3], (21, 128, 61))))

    def test_highlight_band_lightens_top(self):
        surface = _render(replace(PLAIN, value=100))
        self.assertGreater(surface.pixel(160, 12)[0], surface.pixel(160, 30)[0])

    def test_segments_leave_gaps(self):
        surface = _render(replace(PLAIN, value=35, segments=10, segment_gap=4))
        self.assertGreater(surface.pixel(25, 30)[1], 150)
        self.assertEqual(surface.pixel(40, 30), BG)
        self.assertGreater(surface.pixel(115, 30)[1], 150)
        self.assertEqual(surface.pixel(145, 30), BG)

    def test_frame_mode_has_no_fill(self):
        surface = _render(replace(HealthBarConfig(), value=100, draw_mode="frame"))
        arr = np.asarray(surface.image)
        self.assertLess(int(arr[..., 1].max()), 100)
        self.assertGreater(int(arr[..., 3].max()), 0)

    def test_fill_mode_has_no_frame(self):
        config = replace(
            PLAIN,
            value=100,
            draw_mode="fill",
            bg_color="#ff0000",
            border_color="#0000ff",
            border_width=4,
            show_text=True,
        )
        arr = np.asarray(_render(config).image).astype(int)
        red = (arr[..., 0] > 200) & (arr[..., 1] < 50)
        self.assertFalse(red.any())
        self.assertLess(int(arr[..., 2].max()), 200)
        self.assertEqual(_render(config).pixel(2, 2)[3], 0)

    def test_rect_border_covers_every_outer_corner(self):
        config = replace(PLAIN, value=0, border_width=4, border_color="#0000ff")
        surface = _render(config)
        # border spans logical -2..2 around the 300x32 outline, canvas offset 10
        corners = {"tl": (9, 9), "tr": (310, 9), "br": (310, 42), "bl": (9, 42)}
        for name, (x, y) in corners.items():
            with self.subTest(corner=name):
                self.assertEqual(surface.pixel(x, y), (0, 0, 255, 255))

    def test_unknown_shape_renders_as_rect(self):
        a = _render(replace(PLAIN, value=60, shape="blob"))
        b = _render(replace(PLAIN, value=60, shape="rect"))
        self.assertEqual(a.to_png_bytes(), b.to_png_bytes())

    def test_noise_keeps_transparent_margin(self):
        surface = RenderDispatcher().render(replace(HealthBarConfig(), noise=0.5))
        self.assertEqual(surface.pixel(0, 0), (0, 0, 0, 0))


if __name__ == "__main__":
    unittest.main()
