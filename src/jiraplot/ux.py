"""Terminal output helpers for the CLI - no external dependencies."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from typing import TextIO


class Colors:
    """ANSI color codes for terminal output."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    GREEN = "\033[32m"
    CYAN = "\033[36m"


def _supports_color(stream: TextIO | None = None) -> bool:
    stream = stream or sys.stdout
    if os.environ.get("NO_COLOR"):
        return False
    if not hasattr(stream, "isatty") or not stream.isatty():
        return False
    return os.environ.get("TERM") != "dumb"


def colorize(text: str, color: str, bold: bool = False, stream: TextIO | None = None) -> str:
    """Apply color to text if terminal supports it."""
    if not _supports_color(stream):
        return text
    prefix = (Colors.BOLD if bold else "") + color
    return f"{prefix}{text}{Colors.RESET}"


def print_success(message: str, stream: TextIO | None = None) -> None:
    """Print success message in green."""
    stream = stream or sys.stdout
    print(
        colorize("✓", Colors.GREEN, bold=True, stream=stream) + " " + message,
        file=stream,
    )


def print_summary_box(
    title: str, items: Sequence[tuple[str, str | int]], stream: TextIO | None = None
) -> None:
    """Print a formatted summary box with key-value pairs."""
    stream = stream or sys.stdout
    max_key_len = max((len(k) for k, _ in items), default=0)

    print(colorize(f"\n{title}", Colors.CYAN, bold=True, stream=stream), file=stream)
    print(colorize("─" * 60, Colors.DIM, stream=stream), file=stream)
    for key, value in items:
        value_str = str(value)
        if isinstance(value, int) and value > 0:
            value_str = colorize(value_str, Colors.GREEN, bold=True, stream=stream)
        print(f"  {key.ljust(max_key_len)}  {value_str}", file=stream)
    print(colorize("─" * 60, Colors.DIM, stream=stream), file=stream)


__all__ = ["Colors", "colorize", "print_success", "print_summary_box"]
