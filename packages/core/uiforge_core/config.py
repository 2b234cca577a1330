"""Persistent app settings schema and load/save helpers."""

from __future__ import annotations

import json
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any


CONFIG_VERSION = 2


@dataclass
class ExportConfig:
    output_dir: str = "~/Pictures/UIForge"
    scale_override: float | None = None


@dataclass
class FontConfig:
    search_dirs: list[str] = field(default_factory=list)


@dataclass
class UiConfig:
    default_element: str = "healthbar"


@dataclass
class DiagnosticsConfig:
    keep_log_files: int = 7
    log_level: str = "INFO"


@dataclass
class PerformanceConfig:
    render_ms_max: float = 250.0
    cpu_percent_max: float = 100.0
    rss_mb_max: float = 512.0


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    export: ExportConfig = field(default_factory=ExportConfig)
    fonts: FontConfig = field(default_factory=FontConfig)
    ui: UiConfig = field(default_factory=UiConfig)
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)
    performance: PerformanceConfig = field(default_factory=PerformanceConfig)


DEFAULT_CONFIG = AppConfig()

_ELEMENTS = ("button", "healthbar", "panel", "crosshair", "slot", "badge", "slider")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def config_root() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "UIForge"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "UIForge"
    return Path.home() / ".config" / "uiforge"


def config_path() -> Path:
    return config_root() / "config.json"


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _normalize_export(cfg: AppConfig) -> None:
    scale = cfg.export.scale_override
    if scale is not None:
        try:
            scale = float(scale)
        except (TypeError, ValueError):
            scale = None
        cfg.export.scale_override = scale if scale is not None and scale > 0 else None


def _normalize_ui(cfg: AppConfig) -> None:
    if cfg.ui.default_element not in _ELEMENTS:
        cfg.ui.default_element = "healthbar"


def _normalize_diagnostics(cfg: AppConfig) -> None:
    cfg.diagnostics.keep_log_files = max(2, int(cfg.diagnostics.keep_log_files))
    level = str(cfg.diagnostics.log_level).upper()
    cfg.diagnostics.log_level = level if level in _LOG_LEVELS else "INFO"


def _normalize_performance(cfg: AppConfig) -> None:
    cfg.performance.render_ms_max = float(max(1.0, cfg.performance.render_ms_max))
    cfg.performance.cpu_percent_max = float(max(1.0, cfg.performance.cpu_percent_max))
    cfg.performance.rss_mb_max = float(max(64.0, cfg.performance.rss_mb_max))


def _migrate(raw: dict[str, Any]) -> dict[str, Any]:
    version = int(raw.get("config_version", 1))
    data = dict(raw)

    if version < 2:
        # v1 kept the output folder at the top level and had no font/performance sections.
        export = dict(data.get("export", {}) or {})
        if "output_dir" in data:
            export.setdefault("output_dir", data.pop("output_dir"))
        data["export"] = export
        data.setdefault("fonts", {})
        data.setdefault("performance", {})
        data["config_version"] = 2

    return data


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return AppConfig()
    if not isinstance(raw, dict):
        return AppConfig()

    data = _migrate(raw)
    cfg = AppConfig(
        config_version=int(data.get("config_version", CONFIG_VERSION)),
        export=_merge(ExportConfig, data.get("export", {})),
        fonts=_merge(FontConfig, data.get("fonts", {})),
        ui=_merge(UiConfig, data.get("ui", {})),
        diagnostics=_merge(DiagnosticsConfig, data.get("diagnostics", {})),
        performance=_merge(PerformanceConfig, data.get("performance", {})),
    )

    _normalize_export(cfg)
    _normalize_ui(cfg)
    _normalize_diagnostics(cfg)
    _normalize_performance(cfg)
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path


def output_dir(cfg: AppConfig) -> Path:
    return Path(cfg.export.output_dir).expanduser()
