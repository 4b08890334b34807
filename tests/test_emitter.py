from pathlib import Path

from jiraplot.emitter import emit_graph, isolated_summary, node_id
from jiraplot.graph import build_graph
from jiraplot.models import Issue
from jiraplot.parser import load_issues, read_issues

TWO_ROWS = (
    'Issue key,Issue Type,Status,Summary,Outward issue link (Blocks)\n'
    'PROJ-1,Story,To Do,[A] First,PROJ-2\n'
    'PROJ-2,Story,To Do,[B] Second,\n'
)


def _edges(text: str) -> list[str]:
    return [line.strip() for line in text.splitlines() if '->' in line]


def test_two_rows_emit_single_edge() -> None:
    text = emit_graph(build_graph(load_issues(TWO_ROWS)).values())
    assert _edges(text) == ['1 -> 2']
    isolated_line = next(line for line in text.splitlines() if line.startswith('\t0 '))
    assert 'PROJ-1' not in isolated_line
    assert 'PROJ-2' not in isolated_line


def test_header_carries_title_and_layout() -> None:
    text = emit_graph([], 'My "Epic"')
    assert text.startswith('digraph D {\n    graph [ranksep="2"];\n')
    assert '    labelloc="t";' in text
    assert '    label="My \\"Epic\\"";' in text
    assert '    fontsize = 30' in text
    assert text.rstrip().endswith('}')


def test_nodes_sorted_and_styled(sample_csv: Path) -> None:
    text = emit_graph(build_graph(read_issues(sample_csv)).values(), 'Epic')
    node_lines = [line for line in text.splitlines() if line.startswith('\t') and '[' in line]
    assert [line.split(' ', 1)[0].strip() for line in node_lines] == ['1', '2', '3', '0']
    first, second, third, isolated = node_lines
    assert 'label="PROJ-1\\nSprint 60\\n[API]\\n\\nCreate endpoint\\nAdd validation"' in first
    assert 'style=filled' in first
    assert 'fillcolor="goldenrod3",fontcolor=white' in first
    assert 'Sprint 61' in second
    assert 'fillcolor="#008000",fontcolor=white' in third
    assert 'PROJ-4' in isolated
    assert _edges(text) == ['1 -> 2', '3 -> 2']


def test_unscheduled_node_is_not_filled() -> None:
    issues = build_graph(
        [
            Issue('PROJ-1', 'Story', 'In Progress', '[A] a', blocks=['PROJ-2']),
            Issue('PROJ-2', 'Story', 'In Progress', '[B] b'),
        ]
    )
    text = emit_graph(issues.values())
    first = next(line for line in text.splitlines() if line.startswith('\t1 '))
    assert first == '\t1 [shape=box,label="PROJ-1\\n[A]\\n\\na"]'


def test_fixed_prefix_length() -> None:
    issues = build_graph(
        [
            Issue('ABC-10', 'Story', 'To Do', '[A] a', blocks=['ABC-11']),
            Issue('ABC-11', 'Story', 'To Do', '[B] b'),
        ]
    )
    text = emit_graph(issues.values(), key_prefix_length=4)
    assert _edges(text) == ['10 -> 11']


def test_node_id_quotes_unusual_ids() -> None:
    assert node_id('PROJ-12') == '12'
    assert node_id('PROJ-12', 4) == '-12'
    assert node_id('SOLO') == 'SOLO'
    assert node_id('A B', 0) == '"A B"'


def test_isolated_summary_groups_three_per_line() -> None:
    text = isolated_summary(['P-1', 'P-2', 'P-3', 'P-4'], 'Alone:')
    assert text == 'Alone:\\nP-1, P-2, P-3\\nP-4'


def test_isolated_summary_default_heading() -> None:
    text = isolated_summary(['P-1'])
    assert text == 'Issues não bloqueadas e não bloqueantes:\\nP-1'
