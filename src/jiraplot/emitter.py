from __future__ import annotations

import re
from collections.abc import Collection, Iterable

from .graph import partition
from .labels import (
    DONE_COLOR,
    DONE_STATUSES,
    LINE_BREAK,
    SCHEDULED_COLOR,
    SPRINT_LABEL_PREFIX,
    WRAP_LIMIT,
    NodeStyle,
    escape,
    node_label,
    node_style,
    resolve_sprint,
)
from .models import Issue

ISOLATED_NODE_ID = '0'
DEFAULT_ISOLATED_HEADING = 'Issues não bloqueadas e não bloqueantes:'

_bare_id_re = re.compile(r'^(?:[A-Za-z_][A-Za-z0-9_]*|-?(?:\.[0-9]+|[0-9]+(?:\.[0-9]*)?))$')


def node_id(key: str, prefix_length: int | None = None) -> str:
    """Short graph id for an issue key.

    By default the project code and hyphen are stripped (``PROJ-12`` -> ``12``);
    with ``prefix_length`` a fixed number of leading characters is dropped.
    Ids that are not valid bare ``dot`` identifiers are quoted.
    """
    if prefix_length is None:
        short = key.rsplit('-', 1)[-1]
    else:
        short = key[prefix_length:]
    if _bare_id_re.match(short):
        return short
    return f'"{escape(short)}"'


def _node_statement(ident: str, label: str, style: NodeStyle) -> str:
    attrs = ['shape=box']
    if style.filled:
        attrs.append('style=filled')
    attrs.append(f'label="{label}"')
    if style.fillcolor is not None:
        attrs.append(f'fillcolor="{style.fillcolor}"')
    if style.fontcolor is not None:
        attrs.append(f'fontcolor={style.fontcolor}')
    return f'\t{ident} [{",".join(attrs)}]'


def isolated_summary(
    keys: Iterable[str], heading: str = DEFAULT_ISOLATED_HEADING, per_line: int = 3
) -> str:
    text = escape(heading)
    for i, key in enumerate(keys):
        text += LINE_BREAK if i % per_line == 0 else ', '
        text += escape(key)
    return text


def emit_graph(  # noqa: PLR0913 - layout knobs mirror PlotConfig
    issues: Iterable[Issue],
    epic_name: str = '',
    *,
    ranksep: str = '2',
    title_fontsize: int = 30,
    key_prefix_length: int | None = None,
    wrap_limit: int = WRAP_LIMIT,
    sprint_label_prefix: str = SPRINT_LABEL_PREFIX,
    done_statuses: Collection[str] = DONE_STATUSES,
    done_color: str = DONE_COLOR,
    scheduled_color: str = SCHEDULED_COLOR,
    isolated_heading: str = DEFAULT_ISOLATED_HEADING,
    isolated_per_line: int = 3,
) -> str:
    """Serialize a linked issue table as a Graphviz ``digraph``.

    ``issues`` must already have been through :func:`jiraplot.graph.build_graph`.
    """
    connected, isolated = partition({i.key: i for i in issues})

    lines = [
        'digraph D {',
        f'    graph [ranksep="{escape(ranksep)}"];',
        '',
        '    labelloc="t";',
        f'    label="{escape(epic_name)}";',
        f'    fontsize = {title_fontsize}',
        '',
        '',
    ]

    for issue in connected:
        sprint = resolve_sprint(issue, sprint_label_prefix)
        style = node_style(issue, sprint, done_statuses, done_color, scheduled_color)
        lines.append(
            _node_statement(
                node_id(issue.key, key_prefix_length),
                node_label(issue, sprint, wrap_limit),
                style,
            )
        )

    summary = isolated_summary((i.key for i in isolated), isolated_heading, isolated_per_line)
    lines.append(f'\t{ISOLATED_NODE_ID} [shape=box,label="{summary}"]')
    lines.append('')

    for issue in connected:
        source = node_id(issue.key, key_prefix_length)
        for blocked in issue.blocks:
            lines.append(f'\t{source} -> {node_id(blocked, key_prefix_length)}')

    lines.extend(['', '}', ''])
    return '\n'.join(lines)


__all__ = ["ISOLATED_NODE_ID", "emit_graph", "isolated_summary", "node_id"]
