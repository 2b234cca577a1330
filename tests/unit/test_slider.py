import sys
import unittest
from dataclasses import replace
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from uiforge_renderer import RenderDispatcher, SliderConfig
from uiforge_renderer.slider import slider_layout, thumb_path


class SliderLayoutTests(unittest.TestCase):
    def test_track_is_inset_by_half_thumb(self):
        layout = slider_layout(SliderConfig())
        self.assertEqual(layout.track_x, 17)
        self.assertEqual(layout.track_w, 266)
        self.assertEqual(layout.track_h, 12)
        self.assertEqual(layout.track_y, 14)

    def test_thumb_follows_value(self):
        self.assertEqual(slider_layout(SliderConfig(value=0)).thumb_x, 17)
        self.assertEqual(slider_layout(SliderConfig(value=100)).thumb_x, 283)
        self.assertEqual(slider_layout(SliderConfig(value=50)).thumb_x, 150)

    def test_vertical_fills_from_bottom(self):
        config = SliderConfig(type="vertical", width=40, height=300)
        low = slider_layout(replace(config, value=0))
        high = slider_layout(replace(config, value=100))
        self.assertTrue(low.vertical)
        self.assertEqual(low.thumb_y, low.track_y + low.track_h)
        self.assertEqual(high.thumb_y, high.track_y)
        self.assertEqual(low.thumb_x, 20)

    def test_thumb_mode_centres_thumb(self):
        layout = slider_layout(SliderConfig(value=90, draw_mode="thumb"))
        self.assertEqual((layout.thumb_x, layout.thumb_y), (150, 20))

    def test_pill_rotates_with_orientation(self):
        config = SliderConfig(thumb_shape="pill", thumb_size=24)
        horizontal = thumb_path(config, 0, 0, False).bounds()
        vertical = thumb_path(config, 0, 0, True).bounds()
        self.assertEqual(horizontal, (-6.0, -12.0, 6.0, 12.0))
        self.assertEqual(vertical, (-12.0, -6.0, 12.0, 6.0))

    def test_unknown_thumb_shape_is_empty(self):
        self.assertTrue(thumb_path(SliderConfig(thumb_shape="hex"), 0, 0, False).is_empty())


class SliderRenderTests(unittest.TestCase):
    def test_canvas_is_unpadded(self):
        self.assertEqual(RenderDispatcher().render(SliderConfig()).size, (300, 40))

    def test_track_mode_omits_thumb(self):
        config = SliderConfig(value=50, thumb_border_width=0)
        combined = RenderDispatcher().render(config)
        track = RenderDispatcher().render(replace(config, draw_mode="track"))
        # thumb top edge sits above the track
        self.assertEqual(track.pixel(150, 10)[3], 0)
        self.assertEqual(combined.pixel(150, 10)[:3], (255, 255, 255))

    def test_thumb_mode_omits_track(self):
        surface = RenderDispatcher().render(SliderConfig(value=10, draw_mode="thumb"))
        self.assertEqual(surface.pixel(30, 20)[3], 0)
        self.assertGreater(surface.pixel(150, 30)[3], 0)


if __name__ == "__main__":
    unittest.main()
