"""Render the ``.dot`` file with Graphviz and open the result.

Both steps go through the ``graphviz`` package: ``graphviz.render`` runs the
layout engine to completion, ``graphviz.view`` hands the file to the platform
viewer. A non-zero exit of the engine is logged and otherwise ignored; a
missing executable raises :class:`ToolNotFoundError`.
"""

from __future__ import annotations

import subprocess  # nosec B404 - only for the CalledProcessError raised by graphviz
from pathlib import Path

import graphviz

from .logging import get_logger


class ToolNotFoundError(FileNotFoundError):
    def __init__(self, command: str) -> None:
        super().__init__(f'External tool not found: {command}')
        self.command = command


def output_paths(csv_path: str | Path, output_format: str = 'pdf') -> tuple[Path, Path]:
    """Return the ``.dot`` and rendered file paths next to ``csv_path``."""
    p = Path(csv_path)
    return p.with_suffix('.dot'), p.with_suffix(f'.{output_format}')


def render_pdf(
    dot_path: str | Path,
    pdf_path: str | Path,
    engine: str = 'dot',
    output_format: str = 'pdf',
) -> int:
    """Run ``<engine> -T<format> -o <pdf_path> <dot_path>`` and return its exit code."""
    logger = get_logger()
    logger.info(f"Running {engine} -T{output_format} {dot_path} -o {pdf_path}")
    try:
        graphviz.render(engine, output_format, str(dot_path), outfile=str(pdf_path))
    except graphviz.ExecutableNotFound as exc:
        raise ToolNotFoundError(engine) from exc
    except subprocess.CalledProcessError as exc:
        logger.warning(
            f"{engine} exited with status {exc.returncode}",
            command=engine,
            returncode=exc.returncode,
        )
        return exc.returncode
    return 0


def open_file(path: str | Path) -> None:
    logger = get_logger()
    logger.info(f"Opening {path}")
    try:
        graphviz.view(str(path))
    except FileNotFoundError as exc:
        raise ToolNotFoundError(str(exc.filename or 'viewer')) from exc


__all__ = ["ToolNotFoundError", "open_file", "output_paths", "render_pdf"]
