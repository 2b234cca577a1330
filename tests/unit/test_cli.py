import io
import json
import logging
import sys
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest import mock

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "apps" / "cli"))
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from uiforge_app.cli import build_parser, main


def _run(argv):
    args = build_parser().parse_args(argv)
    buf = io.StringIO()
    with redirect_stdout(buf):
        rc = args.func(args)
    return rc, json.loads(buf.getvalue())


class CliTests(unittest.TestCase):
    def test_render_command(self):
        args = build_parser().parse_args(["render", "slider", "--set", "value=30", "--set", "drawMode=track"])
        self.assertEqual(args.command, "render")
        self.assertEqual(args.kind, "slider")
        self.assertEqual(args.set, ["value=30", "drawMode=track"])

    def test_benchmark_command(self):
        args = build_parser().parse_args(["benchmark", "--seconds", "0.5", "--kind", "badge"])
        self.assertEqual(args.command, "benchmark")
        self.assertEqual(args.seconds, 0.5)
        self.assertEqual(args.kind, "badge")

    def test_unknown_kind_rejected(self):
        with self.assertRaises(SystemExit):
            with redirect_stderr(io.StringIO()):
                build_parser().parse_args(["render", "tooltip"])

    def test_kinds_lists_draw_modes(self):
        rc, payload = _run(["kinds"])
        self.assertEqual(rc, 0)
        modes = {item["kind"]: item["draw_modes"] for item in payload}
        self.assertEqual(modes["healthbar"], ["full", "frame", "fill"])
        self.assertEqual(modes["button"], ["full"])

    def test_defaults_prints_fields(self):
        rc, payload = _run(["defaults", "crosshair"])
        self.assertEqual(rc, 0)
        self.assertEqual(payload["kind"], "crosshair")
        self.assertEqual(payload["type"], "cross")

    def test_render_writes_png(self):
        with tempfile.TemporaryDirectory() as tmp:
            rc, payload = _run(["render", "healthbar", "--set", "draw_mode=frame", "--out", tmp, "--scale", "1"])
            self.assertEqual(rc, 0)
            self.assertEqual(payload["draw_mode"], "frame")
            self.assertEqual(payload["size"], [320, 52])
            path = Path(payload["path"])
            self.assertTrue(path.exists())
            self.assertTrue(path.name.startswith("healthbar_frame_"))

    def test_parts_writes_every_mode(self):
        with tempfile.TemporaryDirectory() as tmp:
            rc, payload = _run(["parts", "slider", "--out", tmp, "--scale", "1"])
            self.assertEqual(rc, 0)
            self.assertEqual(len(payload["paths"]), 3)

    def test_bad_assignment_raises(self):
        args = build_parser().parse_args(["render", "badge", "--set", "sparkle=1"])
        with self.assertRaises(ValueError):
            args.func(args)

class CliMainTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        root = Path(self._tmp.name)
        patches = [
            mock.patch("uiforge_core.config.config_root", return_value=root),
            mock.patch("uiforge_core.logging_setup.config_root", return_value=root),
        ]
        for patch in patches:
            patch.start()
            self.addCleanup(patch.stop)

        self._logger = logging.getLogger("uiforge")
        self._saved_handlers = list(self._logger.handlers)
        for handler in self._saved_handlers:
            self._logger.removeHandler(handler)

    def tearDown(self):
        for handler in list(self._logger.handlers):
            handler.close()
            self._logger.removeHandler(handler)
        for handler in self._saved_handlers:
            self._logger.addHandler(handler)
        self._tmp.cleanup()

    def _main(self, argv):
        buf = io.StringIO()
        with redirect_stdout(buf):
            rc = main(argv)
        return rc, json.loads(buf.getvalue())

    def test_invalid_field_reports_json_error(self):
        out = Path(self._tmp.name) / "out"
        rc, payload = self._main(["render", "badge", "--set", "sparkle=1", "--out", str(out)])
        self.assertEqual(rc, 2)
        self.assertFalse(payload["success"])
        self.assertIn("sparkle", payload["error"])
        self.assertFalse(out.exists())

    def test_uncoercible_value_reports_json_error(self):
        rc, payload = self._main(["render", "healthbar", "--set", "segments=many"])
        self.assertEqual(rc, 2)
        self.assertFalse(payload["success"])

    def test_logs_land_in_configured_directory(self):
        self._main(["render", "badge", "--set", "sparkle=1"])
        for handler in self._logger.handlers:
            handler.flush()
        log_file = Path(self._tmp.name) / "logs" / "uiforge.log"
        events = [json.loads(line).get("event") for line in log_file.read_text(encoding="utf-8").splitlines()]
        self.assertIn("invalid_input", events)

    def test_success_returns_zero(self):
        out = Path(self._tmp.name) / "out"
        rc, payload = self._main(["render", "crosshair", "--out", str(out)])
        self.assertEqual(rc, 0)
        self.assertTrue(payload["success"])
        self.assertTrue(Path(payload["path"]).exists())


if __name__ == "__main__":
    unittest.main()
