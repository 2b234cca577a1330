"""Core services for settings, editor state, export and performance budgets."""

from .config import AppConfig, load_config, output_dir, save_config
from .export import draw_mode_of, export_filename, export_parts, preview_data_url, surface_to_png, write_png
from .performance import BudgetStatus, PerformanceController, PerformanceTargets
from .store import EditorState, default_state, load_state, save_state

__all__ = [
    "AppConfig",
    "BudgetStatus",
    "EditorState",
    "PerformanceController",
    "PerformanceTargets",
    "default_state",
    "draw_mode_of",
    "export_filename",
    "export_parts",
    "load_config",
    "load_state",
    "output_dir",
    "preview_data_url",
    "save_config",
    "save_state",
    "surface_to_png",
    "write_png",
]
