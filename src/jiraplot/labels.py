"""Node label and colour derivation for the dependency graph.

Labels are produced already escaped for a double-quoted ``dot`` string: line
breaks are the two-character ``\\n`` token Graphviz understands, and quotes or
backslashes coming from Jira text are escaped.

Public API:
- extract_sprint(raw) -> str | None
- resolve_sprint(issue, label_prefix) -> str | None
- wrap_text(text, limit) -> str
- wrap_summary(summary, limit) -> str
- node_label(issue, sprint, limit) -> str
- node_style(issue, sprint, ...) -> NodeStyle
"""

from __future__ import annotations

import re
from collections.abc import Collection
from dataclasses import dataclass

from .models import Issue

LINE_BREAK = '\\n'
WRAP_LIMIT = 30
SPRINT_LABEL_PREFIX = 'SP_'
DONE_STATUSES = ('Done', 'Fechado')
DONE_COLOR = '#008000'
SCHEDULED_COLOR = 'goldenrod3'

_digits_re = re.compile(r'\d+')


@dataclass(frozen=True)
class NodeStyle:
    fillcolor: str | None = None
    fontcolor: str | None = None

    @property
    def filled(self) -> bool:
        return self.fillcolor is not None


def escape(text: str) -> str:
    return text.replace('\\', '\\\\').replace('"', '\\"')


def extract_sprint(raw: str | None) -> str | None:
    """Return the first run of digits in ``raw``.

    ``"Sprint 60 | Evolução"`` and ``"SP_60"`` both give ``"60"``; text with
    no digit at all (``"NOW | BL Técnico"``) gives ``None``.
    """
    if not raw:
        return None
    m = _digits_re.search(raw)
    return m.group(0) if m else None


def resolve_sprint(issue: Issue, label_prefix: str = SPRINT_LABEL_PREFIX) -> str | None:
    raw = issue.sprint or next((lbl for lbl in issue.labels if lbl.startswith(label_prefix)), None)
    return extract_sprint(raw)


def wrap_text(text: str, limit: int = WRAP_LIMIT) -> str:
    """Greedy word wrap that never splits a word.

    Each word adds its length plus one separator to the running count. The word
    that pushes the count past ``limit`` still closes the current line, so a
    line may overflow by one word. Widths are measured on the raw words;
    each word is escaped for ``dot`` only when the lines are joined.
    """
    lines: list[list[str]] = [[]]
    count = 0
    for word in text.split(' '):
        if not word:
            continue
        count += len(word) + 1
        lines[-1].append(word)
        if count > limit:
            count = 0
            lines.append([])
    if not lines[-1]:
        lines.pop()
    return LINE_BREAK.join(' '.join(escape(w) for w in words) for words in lines)


def wrap_summary(summary: str, limit: int = WRAP_LIMIT) -> str:
    """Render ``[TAG] part one | part two`` as tag, blank line, wrapped parts."""
    head, bracket, description = summary.partition(']')
    if not bracket:
        tag, description = '', head
    else:
        tag = head + bracket

    parts = []
    for segment in description.split('|'):
        if not segment:
            continue
        parts.append(wrap_text(segment.strip(' -'), limit))
    wrapped = LINE_BREAK.join(parts)

    if not tag:
        return wrapped
    return escape(tag) + LINE_BREAK * 2 + wrapped


def node_label(issue: Issue, sprint: str | None, limit: int = WRAP_LIMIT) -> str:
    label = escape(issue.key)
    if sprint is not None:
        label += f'{LINE_BREAK}Sprint {sprint}'
    return label + LINE_BREAK + wrap_summary(issue.summary, limit)


def node_style(
    issue: Issue,
    sprint: str | None,
    done_statuses: Collection[str] = DONE_STATUSES,
    done_color: str = DONE_COLOR,
    scheduled_color: str = SCHEDULED_COLOR,
) -> NodeStyle:
    if issue.status in done_statuses:
        return NodeStyle(fillcolor=done_color, fontcolor='white')
    if sprint is not None:
        return NodeStyle(fillcolor=scheduled_color, fontcolor='white')
    return NodeStyle()


__all__ = [
    "NodeStyle",
    "extract_sprint",
    "node_label",
    "node_style",
    "resolve_sprint",
    "wrap_summary",
    "wrap_text",
]
