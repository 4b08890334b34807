from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, cast

import yaml

from .emitter import DEFAULT_ISOLATED_HEADING
from .labels import (
    DONE_COLOR,
    DONE_STATUSES,
    SCHEDULED_COLOR,
    SPRINT_LABEL_PREFIX,
    WRAP_LIMIT,
)


class ConfigError(RuntimeError):
    pass


@dataclass
class PlotConfig:
    version: int = 1
    source_file: Path | None = None
    # Graph layout
    ranksep: str = '2'
    title_fontsize: int = 30
    key_prefix_length: int | None = None
    isolated_heading: str = DEFAULT_ISOLATED_HEADING
    isolated_per_line: int = 3
    # Node labels
    wrap_limit: int = WRAP_LIMIT
    sprint_label_prefix: str = SPRINT_LABEL_PREFIX
    done_statuses: list[str] = field(default_factory=lambda: list(DONE_STATUSES))
    done_color: str = DONE_COLOR
    scheduled_color: str = SCHEDULED_COLOR
    # Rendering
    render_enabled: bool = True
    open_enabled: bool = True
    layout_engine: str = 'dot'
    output_format: str = 'pdf'
    # Logging configuration
    logging_json_enabled: bool = False
    logging_level: str = 'INFO'


def _section(raw: dict[str, Any], name: str) -> dict[str, Any]:
    value = raw.get(name, {}) or {}
    if not isinstance(value, dict):
        raise ConfigError(f'Config section {name!r} must be a mapping')
    return cast(dict[str, Any], value)


def _string_list(section: dict[str, Any], name: str, default: list[str]) -> list[str]:
    value = section.get(name, default)
    if isinstance(value, str):
        return [part.strip() for part in value.split(',') if part.strip()]
    if not isinstance(value, list):
        raise ConfigError(f'Config value {name!r} must be a list or a comma separated string')
    return [str(v) for v in value]


def load_config(path: str | Path) -> PlotConfig:
    p = Path(path)
    if not p.exists():
        raise ConfigError(f'Configuration file not found: {p}')
    try:
        loaded = yaml.safe_load(p.read_text(encoding='utf-8')) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f'Invalid YAML in {p}: {exc}') from exc
    if not isinstance(loaded, dict):
        raise ConfigError(f'Configuration in {p} must be a mapping')
    raw = cast(dict[str, Any], loaded)
    graph = _section(raw, 'graph')
    labels = _section(raw, 'labels')
    render = _section(raw, 'render')
    logging_config = _section(raw, 'logging')
    defaults = PlotConfig()

    prefix_length = graph.get('key_prefix_length')
    return PlotConfig(
        version=int(raw.get('version', 1)),
        source_file=p,
        ranksep=str(graph.get('ranksep', defaults.ranksep)),
        title_fontsize=int(graph.get('title_fontsize', defaults.title_fontsize)),
        key_prefix_length=int(prefix_length) if prefix_length is not None else None,
        isolated_heading=str(graph.get('isolated_heading', defaults.isolated_heading)),
        isolated_per_line=int(graph.get('isolated_per_line', defaults.isolated_per_line)),
        wrap_limit=int(labels.get('wrap_limit', defaults.wrap_limit)),
        sprint_label_prefix=str(labels.get('sprint_label_prefix', defaults.sprint_label_prefix)),
        done_statuses=_string_list(labels, 'done_statuses', defaults.done_statuses),
        done_color=str(labels.get('done_color', defaults.done_color)),
        scheduled_color=str(labels.get('scheduled_color', defaults.scheduled_color)),
        render_enabled=bool(render.get('enabled', True)),
        open_enabled=bool(render.get('open', True)),
        layout_engine=str(render.get('engine', defaults.layout_engine)),
        output_format=str(render.get('output_format', defaults.output_format)),
        # Logging configuration
        logging_json_enabled=bool(logging_config.get('json_enabled', False)),
        logging_level=str(logging_config.get('level', 'INFO')),
    )


__all__ = ["ConfigError", "PlotConfig", "load_config"]
