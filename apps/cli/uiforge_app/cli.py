"""CLI entrypoints for UI Forge rendering, part export, settings and benchmarks."""

from __future__ import annotations

import argparse
import json
import time
from dataclasses import asdict
from pathlib import Path

from uiforge_core import (
    PerformanceController,
    PerformanceTargets,
    default_state,
    draw_mode_of,
    export_parts,
    load_config,
    load_state,
    output_dir,
    write_png,
)
from uiforge_core.config import config_path
from uiforge_core.export import DRAW_MODES
from uiforge_core.logging_setup import configure_logging, get_logger
from uiforge_core.store import parse_assignment
from uiforge_renderer import ElementConfig, ElementKind, FontResolver, RenderDispatcher, canvas_size, config_to_mapping

KINDS = [kind.value for kind in ElementKind]


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _dispatcher() -> RenderDispatcher:
    cfg = load_config()
    return RenderDispatcher(fonts=FontResolver([Path(p) for p in cfg.fonts.search_dirs]))


def _resolve_config(args: argparse.Namespace) -> ElementConfig:
    state = load_state(Path(args.preset)) if args.preset else default_state()
    state = state.select(args.kind)
    for item in args.set or []:
        key, value = parse_assignment(item)
        state = state.update_field(key, value)
    return state.active_config()


def _out_dir(args: argparse.Namespace) -> Path:
    if args.out:
        return Path(args.out).expanduser().resolve()
    return output_dir(load_config())


def _scale(args: argparse.Namespace) -> float | None:
    if args.scale is not None:
        return args.scale
    return load_config().export.scale_override


def cmd_kinds(_args: argparse.Namespace) -> int:
    _print_json(
        [
            {"kind": kind.value, "draw_modes": list(DRAW_MODES.get(kind, ("full",)))}
            for kind in ElementKind
        ]
    )
    return 0


def cmd_defaults(args: argparse.Namespace) -> int:
    kind = args.kind or load_config().ui.default_element
    config = default_state(kind).active_config()
    payload = config_to_mapping(config)
    payload["kind"] = config.kind.value
    _print_json(payload)
    return 0


def cmd_render(args: argparse.Namespace) -> int:
    config = _resolve_config(args)
    surface = _dispatcher().render(config)
    path = write_png(surface, config, _out_dir(args), scale=_scale(args))
    _print_json(
        {
            "success": True,
            "kind": config.kind.value,
            "draw_mode": draw_mode_of(config),
            "size": list(surface.size),
            "path": str(path),
        }
    )
    return 0


def cmd_parts(args: argparse.Namespace) -> int:
    config = _resolve_config(args)
    paths = export_parts(config, _out_dir(args), dispatcher=_dispatcher(), scale=_scale(args))
    _print_json({"success": True, "kind": config.kind.value, "paths": [str(p) for p in paths]})
    return 0


def cmd_benchmark(args: argparse.Namespace) -> int:
    cfg = load_config()
    perf = PerformanceController(
        PerformanceTargets(
            render_ms_max=cfg.performance.render_ms_max,
            cpu_percent_max=cfg.performance.cpu_percent_max,
            rss_mb_max=cfg.performance.rss_mb_max,
        )
    )
    dispatcher = _dispatcher()
    kinds = [ElementKind(args.kind)] if args.kind else list(ElementKind)
    state = default_state()

    results = {}
    for kind in kinds:
        config = state.select(kind).active_config()
        frames = 0
        total_ms = 0.0
        worst = None
        deadline = time.perf_counter() + args.seconds
        while frames == 0 or time.perf_counter() < deadline:
            start = time.perf_counter()
            dispatcher.render(config)
            elapsed_ms = (time.perf_counter() - start) * 1000.0
            frames += 1
            total_ms += elapsed_ms
            budget = perf.sample(elapsed_ms)
            if worst is None or budget.render_ms > worst.render_ms:
                worst = budget
        results[kind.value] = {
            "frames": frames,
            "avg_ms": total_ms / frames,
            "canvas": list(canvas_size(config)),
            "worst": asdict(worst) if worst else None,
            "pass": worst is not None and worst.warning is None,
        }

    _print_json(
        {
            "seconds_per_kind": args.seconds,
            "targets": asdict(perf.targets),
            "results": results,
            "pass": all(r["pass"] for r in results.values()),
        }
    )
    return 0


def cmd_settings(_args: argparse.Namespace) -> int:
    cfg = load_config()
    _print_json({"path": str(config_path()), "config": asdict(cfg)})
    return 0


def _add_config_args(cmd: argparse.ArgumentParser) -> None:
    cmd.add_argument("kind", choices=KINDS)
    cmd.add_argument("--set", action="append", metavar="KEY=VALUE", help="Override one config field (repeatable)")
    cmd.add_argument("--preset", default=None, help="JSON preset file saved from a previous session")
    cmd.add_argument("--out", default=None, help="Output directory (defaults to the configured export folder)")
    cmd.add_argument("--scale", type=float, default=None, help="Upscale factor applied to the exported PNG")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="uiforge", description="Parametric game UI asset generator")
    sub = parser.add_subparsers(dest="command", required=True)

    kinds_cmd = sub.add_parser("kinds", help="List element kinds and their draw modes")
    kinds_cmd.set_defaults(func=cmd_kinds)

    defaults_cmd = sub.add_parser("defaults", help="Print the default configuration of an element")
    defaults_cmd.add_argument("kind", nargs="?", choices=KINDS, default=None)
    defaults_cmd.set_defaults(func=cmd_defaults)

    render_cmd = sub.add_parser("render", help="Render one element to PNG")
    _add_config_args(render_cmd)
    render_cmd.set_defaults(func=cmd_render)

    parts_cmd = sub.add_parser("parts", help="Render every draw mode of an element as separate PNGs")
    _add_config_args(parts_cmd)
    parts_cmd.set_defaults(func=cmd_parts)

    bench_cmd = sub.add_parser("benchmark", help="Measure render time per element")
    bench_cmd.add_argument("--seconds", type=float, default=2.0)
    bench_cmd.add_argument("--kind", choices=KINDS, default=None)
    bench_cmd.set_defaults(func=cmd_benchmark)

    settings_cmd = sub.add_parser("settings", help="Print the active settings")
    settings_cmd.set_defaults(func=cmd_settings)

    return parser


def main(argv: list[str] | None = None) -> int:
    cfg = load_config()
    configure_logging(keep_files=cfg.diagnostics.keep_log_files, console=False, level=cfg.diagnostics.log_level)
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return int(args.func(args))
    except ValueError as exc:
        get_logger("cli").warning(f"invalid input: {exc}", extra={"event": "invalid_input"})
        _print_json({"success": False, "error": str(exc)})
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
