"""Runtime helpers for jiraplot CLI orchestration."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any, Protocol

from jiraplot.config import PlotConfig, load_config
from jiraplot.errors import classify_error
from jiraplot.logging import get_logger


class _HandlerCallable(Protocol):
    def __call__(self) -> Any: ...


def prepare_config(
    args: Any, *, loader: Callable[[str], PlotConfig] = load_config
) -> PlotConfig:
    """Load PlotConfig (or defaults) and apply command line overrides."""
    config_path = getattr(args, "config", None)
    cfg = loader(config_path) if config_path else PlotConfig()
    if getattr(args, "no_render", False):
        cfg.render_enabled = False
    if getattr(args, "no_open", False):
        cfg.open_enabled = False
    if getattr(args, "json_logs", False):
        cfg.logging_json_enabled = True
    if getattr(args, "quiet", False):
        cfg.logging_level = "WARNING"
    return cfg


def execute_command(handler: _HandlerCallable, command: str) -> int:
    """Run ``handler``; failures are logged with their category and re-raised."""
    start = time.monotonic()
    try:
        result = handler()
    except Exception as exc:
        info = classify_error(exc)
        get_logger().log_error(
            f"{command} failed",
            error=info.message,
            category=info.category,
            original_type=info.original_type,
            duration_ms=round((time.monotonic() - start) * 1000, 2),
        )
        raise
    return int(result) if result is not None else 0


__all__ = ["prepare_config", "execute_command"]
