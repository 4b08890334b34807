from __future__ import annotations

from pathlib import Path

import graphviz
import pytest

from jiraplot.logging import configure_logging
from jiraplot.render import ToolNotFoundError, open_file, output_paths, render_pdf


def test_output_paths_are_siblings(tmp_path: Path) -> None:
    dot, pdf = output_paths(tmp_path / 'epic.csv')
    assert dot == tmp_path / 'epic.dot'
    assert pdf == tmp_path / 'epic.pdf'


def test_render_pdf_invokes_dot(fake_graphviz, tmp_path: Path) -> None:
    rc = render_pdf(tmp_path / 'a.dot', tmp_path / 'a.pdf')
    assert rc == 0
    assert fake_graphviz.calls == [['dot', '-Tpdf', str(tmp_path / 'a.dot'), '-o', str(tmp_path / 'a.pdf')]]


def test_render_pdf_with_other_engine_and_format(fake_graphviz, tmp_path: Path) -> None:
    render_pdf(tmp_path / 'a.dot', tmp_path / 'a.svg', engine='neato', output_format='svg')
    assert fake_graphviz.calls == [['neato', '-Tsvg', str(tmp_path / 'a.dot'), '-o', str(tmp_path / 'a.svg')]]


def test_open_file_hands_path_to_viewer(fake_graphviz, tmp_path: Path) -> None:
    open_file(tmp_path / 'a.pdf')
    assert fake_graphviz.calls == [['view', str(tmp_path / 'a.pdf')]]


def test_non_zero_exit_is_logged_not_raised(fake_graphviz, tmp_path: Path, capsys) -> None:
    fake_graphviz.returncode = 3
    configure_logging()
    assert render_pdf(tmp_path / 'a.dot', tmp_path / 'a.pdf') == 3
    assert 'dot exited with status 3' in capsys.readouterr().err


def test_missing_engine_raises(monkeypatch, tmp_path: Path) -> None:
    def _missing(engine, format, filepath, **kwargs):
        raise graphviz.ExecutableNotFound([engine, f'-T{format}'])

    monkeypatch.setattr('jiraplot.render.graphviz.render', _missing)
    with pytest.raises(ToolNotFoundError) as excinfo:
        render_pdf(tmp_path / 'a.dot', tmp_path / 'a.pdf')
    assert excinfo.value.command == 'dot'


def test_missing_viewer_raises(monkeypatch, tmp_path: Path) -> None:
    def _missing(filepath, **kwargs):
        raise FileNotFoundError(2, 'No such file or directory', 'xdg-open')

    monkeypatch.setattr('jiraplot.render.graphviz.view', _missing)
    with pytest.raises(ToolNotFoundError) as excinfo:
        open_file(tmp_path / 'a.pdf')
    assert excinfo.value.command == 'xdg-open'
