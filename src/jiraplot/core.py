from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .config import PlotConfig
from .emitter import emit_graph
from .graph import build_graph
from .logging import configure_logging
from .models import Issue
from .parser import read_issues
from .render import open_file, output_paths, render_pdf


@dataclass
class PlotResult:
    dot_path: Path
    output_path: Path
    issues: int
    connected: int
    rendered: bool
    opened: bool


class JiraPlot:
    """Run the export -> graph -> dot -> PDF pipeline for one CSV file."""

    def __init__(self, cfg: PlotConfig | None = None):
        self.cfg = cfg or PlotConfig()
        self._debug = os.environ.get("JIRAPLOT_DEBUG") == "1"
        self._logger = configure_logging(
            json_logging=self.cfg.logging_json_enabled, level=self.cfg.logging_level
        )

    def _log(self, *parts: Any) -> None:  # lightweight internal debug logger
        if self._debug:
            print("[jiraplot]", *parts)
        self._logger.debug(" ".join(str(p) for p in parts))

    @classmethod
    def from_config_path(cls, path: str | Path) -> JiraPlot:
        from .config import load_config  # noqa: PLC0415

        return cls(load_config(path))

    def load(self, csv_path: str | Path) -> dict[str, Issue]:
        path = Path(csv_path)
        if not path.exists():
            raise FileNotFoundError(2, f"CSV export not found: {path}", str(path))
        issues = read_issues(path)
        self._log(f"load:parsed {len(issues)} issues")
        table = build_graph(issues)
        self._log(f"load:linked {sum(1 for i in table.values() if i.is_connected)} connected")
        return table

    def emit(self, table: dict[str, Issue], epic_name: str = "") -> str:
        cfg = self.cfg
        return emit_graph(
            table.values(),
            epic_name,
            ranksep=cfg.ranksep,
            title_fontsize=cfg.title_fontsize,
            key_prefix_length=cfg.key_prefix_length,
            wrap_limit=cfg.wrap_limit,
            sprint_label_prefix=cfg.sprint_label_prefix,
            done_statuses=cfg.done_statuses,
            done_color=cfg.done_color,
            scheduled_color=cfg.scheduled_color,
            isolated_heading=cfg.isolated_heading,
            isolated_per_line=cfg.isolated_per_line,
        )

    def run(
        self,
        csv_path: str | Path,
        epic_name: str = "",
        *,
        render: bool | None = None,
        open_viewer: bool | None = None,
    ) -> PlotResult:
        cfg = self.cfg
        do_render = cfg.render_enabled if render is None else render
        do_open = cfg.open_enabled if open_viewer is None else open_viewer
        self._log("run:start")

        with self._logger.timed_operation("build_graph", source=str(csv_path)):
            table = self.load(csv_path)
            text = self.emit(table, epic_name)

        dot_path, output_path = output_paths(csv_path, cfg.output_format)
        dot_path.write_text(text, encoding="utf-8")
        self._logger.log_operation("dot_written", path=str(dot_path), issues=len(table))

        if do_render:
            with self._logger.timed_operation("render", path=str(output_path)):
                render_pdf(dot_path, output_path, cfg.layout_engine, cfg.output_format)
            if do_open:
                open_file(output_path)

        self._log("run:done")
        return PlotResult(
            dot_path=dot_path,
            output_path=output_path,
            issues=len(table),
            connected=sum(1 for i in table.values() if i.is_connected),
            rendered=do_render,
            opened=do_render and do_open,
        )


__all__ = ["JiraPlot", "PlotResult"]
