"""Render performance budgeting."""

from __future__ import annotations

from dataclasses import dataclass

try:
    import psutil
except Exception:  # pragma: no cover
    psutil = None


@dataclass(frozen=True)
class PerformanceTargets:
    render_ms_max: float = 250.0
    cpu_percent_max: float = 100.0
    rss_mb_max: float = 512.0


@dataclass(frozen=True)
class BudgetStatus:
    cpu_percent: float
    rss_mb: float
    render_ms: float
    overloaded: bool
    warning: str | None


class PerformanceController:
    def __init__(self, targets: PerformanceTargets | None = None) -> None:
        self.targets = targets or PerformanceTargets()
        self._process = psutil.Process() if psutil is not None else None
        if self._process is not None:
            # Prime non-blocking CPU measurement.
            self._process.cpu_percent(interval=None)

    def sample(self, render_ms: float) -> BudgetStatus:
        if self._process is None:
            cpu = 0.0
            rss_mb = 0.0
        else:
            cpu = float(self._process.cpu_percent(interval=None))
            rss_mb = float(self._process.memory_info().rss) / (1024 * 1024)
        overloaded = cpu > self.targets.cpu_percent_max or rss_mb > self.targets.rss_mb_max

        warning = None
        if overloaded:
            warning = "resource_overload"
        elif render_ms > self.targets.render_ms_max:
            warning = "slow_render"

        return BudgetStatus(
            cpu_percent=cpu,
            rss_mb=rss_mb,
            render_ms=float(render_ms),
            overloaded=overloaded,
            warning=warning,
        )
