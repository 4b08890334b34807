"""Pytest configuration for jiraplot tests.

Ensures the in-repo `src` directory is on `sys.path` so the package can be
imported without an editable install (`pip install -e .`), and exposes
fixtures for writing CSV exports and faking the external tools.
"""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# Subprocesses started by tests (`python -m jiraplot`) need the same path.
py_path = os.environ.get("PYTHONPATH", "")
parts = [p for p in py_path.split(os.pathsep) if p]
if str(SRC) not in parts:
    parts.insert(0, str(SRC))
    os.environ["PYTHONPATH"] = os.pathsep.join(parts)


SAMPLE_CSV = (
    "Summary,Issue key,Issue Type,Status,Sprint,Labels,Labels,"
    "Outward issue link (Blocks),Outward issue link (Blocks)\n"
    "[API] Create endpoint | Add validation,PROJ-1,Story,In Progress,"
    "Sprint 60 | Evolução,backend,,PROJ-2,PROJ-9\n"
    "[WEB] Consume endpoint,PROJ-2,Story,To Do,,SP_61,,,\n"
    "[OPS] Deploy,PROJ-3,Task,Done,,,,PROJ-2,\n"
    "[DOC] Write docs,PROJ-4,Task,To Do,,,,,\n"
)


@pytest.fixture(autouse=True)
def _fresh_logger() -> Iterator[None]:
    # The global logger binds sys.stderr when created; capsys swaps it per test.
    import jiraplot.logging as plot_logging  # noqa: PLC0415

    plot_logging._GLOBAL = None
    yield
    plot_logging._GLOBAL = None


@pytest.fixture
def sample_csv(tmp_path: Path) -> Path:
    path = tmp_path / "epic.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return path


class FakeGraphviz:
    """Records graphviz.render / graphviz.view calls instead of spawning processes."""

    def __init__(self, returncode: int = 0) -> None:
        self.returncode = returncode
        self.calls: list[list[str]] = []

    def render(self, engine: str, format: str, filepath: str, **kwargs: Any) -> str:
        outfile = kwargs['outfile']
        self.calls.append([engine, f'-T{format}', filepath, '-o', outfile])
        if self.returncode:
            raise subprocess.CalledProcessError(self.returncode, [engine])
        return outfile

    def view(self, filepath: str, **kwargs: Any) -> None:
        self.calls.append(['view', filepath])


@pytest.fixture
def fake_graphviz(monkeypatch: pytest.MonkeyPatch) -> FakeGraphviz:
    fake = FakeGraphviz()
    monkeypatch.setattr("jiraplot.render.graphviz.render", fake.render)
    monkeypatch.setattr("jiraplot.render.graphviz.view", fake.view)
    return fake
