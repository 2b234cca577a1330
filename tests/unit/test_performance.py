import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from uiforge_core.performance import PerformanceController, PerformanceTargets


class PerformanceTests(unittest.TestCase):
    def test_budget_sample_shape(self):
        ctl = PerformanceController(PerformanceTargets(render_ms_max=50.0, cpu_percent_max=100000.0, rss_mb_max=1e9))
        status = ctl.sample(render_ms=12.0)
        self.assertEqual(status.render_ms, 12.0)
        self.assertGreaterEqual(status.rss_mb, 0.0)
        self.assertFalse(status.overloaded)
        self.assertIsNone(status.warning)

    def test_slow_render_warning(self):
        ctl = PerformanceController(PerformanceTargets(render_ms_max=5.0, cpu_percent_max=100000.0, rss_mb_max=1e9))
        self.assertEqual(ctl.sample(render_ms=40.0).warning, "slow_render")

    def test_memory_overload_wins(self):
        ctl = PerformanceController(PerformanceTargets(render_ms_max=5.0, cpu_percent_max=100000.0, rss_mb_max=-1.0))
        status = ctl.sample(render_ms=40.0)
        if ctl._process is None:
            self.skipTest("psutil unavailable")
        self.assertTrue(status.overloaded)
        self.assertEqual(status.warning, "resource_overload")


if __name__ == "__main__":
    unittest.main()
