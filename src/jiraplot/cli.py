"""jiraplot CLI.

Usage:
  jiraplot <csv-path> [<epic-name>] [--config FILE] [--no-render] [--no-open]

Reads a Jira CSV export, writes ``<csv-stem>.dot`` next to it, renders
``<csv-stem>.pdf`` with Graphviz ``dot`` and opens it with the system viewer.
"""

from __future__ import annotations

import argparse
import os
from typing import Any

from jiraplot.config import PlotConfig
from jiraplot.core import JiraPlot
from jiraplot.runtime import execute_command, prepare_config

_MAX_HELP_WIDTH = 100


class _HelpFormatter(argparse.HelpFormatter):
    def __init__(self, prog: str) -> None:
        super().__init__(prog, max_help_position=30, width=_MAX_HELP_WIDTH)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="jiraplot",
        description="Plot the blocking graph of a Jira CSV export",
        formatter_class=_HelpFormatter,
    )
    p.add_argument("csv_path", help="Jira issue export (CSV)")
    p.add_argument("epic_name", nargs="?", default="", help="Title drawn at the top of the graph")
    p.add_argument("--config", help="YAML configuration file")
    p.add_argument("--no-render", action="store_true", help="Only write the .dot file")
    p.add_argument("--no-open", action="store_true", help="Render but do not open the viewer")
    p.add_argument("--json-logs", action="store_true", help="Emit logs as JSON lines")
    p.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress informational output (env: JIRAPLOT_QUIET=1)",
    )
    return p


def _cmd_plot(cfg: PlotConfig, args: argparse.Namespace) -> int:
    from .ux import print_success, print_summary_box  # noqa: PLC0415

    result = JiraPlot(cfg).run(args.csv_path, args.epic_name)
    if args.quiet:
        return 0
    print_summary_box(
        "Plot Summary",
        [
            ("Issues", result.issues),
            ("Connected", result.connected),
            ("Isolated", result.issues - result.connected),
        ],
    )
    print_success(f"Wrote {result.dot_path}")
    if result.rendered:
        print_success(f"Rendered {result.output_path}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args: Any = parser.parse_args(argv)
    if not args.quiet and os.environ.get("JIRAPLOT_QUIET") == "1":
        args.quiet = True
    cfg = prepare_config(args)
    return execute_command(lambda: _cmd_plot(cfg, args), "plot")


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
