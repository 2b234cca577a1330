import json
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from uiforge_core.store import (
    coerce_value,
    default_state,
    load_state,
    parse_assignment,
    save_state,
    state_from_mapping,
)
from uiforge_renderer import ElementKind, HealthBarConfig, SliderConfig


class EditorStateTests(unittest.TestCase):
    def test_default_active_is_healthbar(self):
        state = default_state()
        self.assertEqual(state.active, ElementKind.HEALTHBAR)
        self.assertEqual(state.active_config(), HealthBarConfig())
        self.assertEqual(len(state.configs), 7)

    def test_update_field_is_immutable(self):
        state = default_state()
        updated = state.update_field("value", "35")
        self.assertEqual(updated.active_config().value, 35.0)
        self.assertEqual(state.active_config().value, 100)

    def test_camel_case_keys(self):
        state = default_state("slider").update_fields({"drawMode": "thumb", "thumbSize": "30"})
        config = state.active_config()
        self.assertEqual(config.draw_mode, "thumb")
        self.assertEqual(config.thumb_size, 30)

    def test_select_keeps_other_configs(self):
        state = default_state().update_field("segments", 5).select("slider").select("healthbar")
        self.assertEqual(state.active_config().segments, 5)

    def test_unknown_field_raises(self):
        with self.assertRaises(ValueError):
            default_state().update_field("sparkle", 1)

    def test_unknown_kind_raises(self):
        with self.assertRaises(ValueError):
            default_state("tooltip")


class CoerceTests(unittest.TestCase):
    def test_booleans(self):
        self.assertTrue(coerce_value("healthbar", "showText", "yes"))
        self.assertFalse(coerce_value("healthbar", "show_text", "0"))
        with self.assertRaises(ValueError):
            coerce_value("healthbar", "show_text", "maybe")

    def test_numbers(self):
        self.assertEqual(coerce_value("healthbar", "segments", "7"), 7)
        self.assertEqual(coerce_value("healthbar", "noise", "0.25"), 0.25)
        with self.assertRaises(ValueError):
            coerce_value("healthbar", "segments", "many")

    def test_parse_assignment(self):
        self.assertEqual(parse_assignment("text=GO=NOW"), ("text", "GO=NOW"))
        with self.assertRaises(ValueError):
            parse_assignment("novalue")


class PersistenceTests(unittest.TestCase):
    def test_save_and_reload(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "preset.json"
            state = default_state("slider").update_field("value", 80)
            save_state(state, path)
            reloaded = load_state(path)
            self.assertEqual(reloaded.active, ElementKind.SLIDER)
            self.assertEqual(reloaded.active_config(), SliderConfig(value=80.0))

    def test_missing_or_corrupt_preset_gives_defaults(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "preset.json"
            self.assertEqual(load_state(path), default_state())
            path.write_text("[1, 2", encoding="utf-8")
            self.assertEqual(load_state(path), default_state())

    def test_migrates_v1_layout(self):
        raw = {"tool": "slider", "slider": {"thumbSize": 30, "thumbShape": "diamond"}, "badge": {"ribbon": False}}
        state = state_from_mapping(raw)
        self.assertEqual(state.active, ElementKind.SLIDER)
        self.assertEqual(state.active_config().thumb_size, 30)
        self.assertEqual(state.active_config().thumb_shape, "diamond")
        self.assertFalse(state.configs[ElementKind.BADGE].ribbon)

    def test_invalid_preset_fields_are_skipped(self):
        raw = {"state_version": 2, "active": "nope", "configs": {"healthbar": {"value": "lots", "segments": 4}}}
        with self.assertLogs("uiforge.store", level="WARNING"):
            state = state_from_mapping(raw)
        self.assertEqual(state.active, ElementKind.HEALTHBAR)
        self.assertEqual(state.active_config().value, 100)
        self.assertEqual(state.active_config().segments, 4)

    def test_saved_preset_is_json(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = save_state(default_state(), Path(tmp) / "nested" / "preset.json")
            data = json.loads(path.read_text(encoding="utf-8"))
            self.assertEqual(data["state_version"], 2)
            self.assertEqual(data["active"], "healthbar")


if __name__ == "__main__":
    unittest.main()
