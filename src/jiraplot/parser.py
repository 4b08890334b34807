from __future__ import annotations

import csv
import io
from collections.abc import Iterable, Sequence
from pathlib import Path

from .models import Issue

HEADER_MARKERS = ('Blocks', 'Labels', 'Sprint')

KEY_COLUMN = 'Issue key'
TYPE_COLUMN = 'Issue Type'
STATUS_COLUMN = 'Status'
SUMMARY_COLUMN = 'Summary'
REQUIRED_COLUMNS = (KEY_COLUMN, TYPE_COLUMN, STATUS_COLUMN, SUMMARY_COLUMN)


class ParseError(ValueError):
    pass


def normalize_headers(headers: Iterable[str]) -> list[str]:
    """Suffix every multi-valued header with a running index.

    Jira repeats ``Blocks``/``Labels``/``Sprint`` columns once per value. The
    counter is shared by all markers so ``Blocks,Blocks,Labels`` becomes
    ``Blocks 1,Blocks 2,Labels 3``.
    """
    index = 0
    out: list[str] = []
    for header in headers:
        if any(marker in header for marker in HEADER_MARKERS):
            index += 1
            out.append(f'{header} {index}')
        else:
            out.append(header)
    return out


def _format_row(cells: Sequence[str]) -> str:
    buf = io.StringIO()
    csv.writer(buf, lineterminator='').writerow(cells)
    return buf.getvalue()


def normalize_csv(text: str) -> str:
    """Rewrite only the header line of ``text``; row data passes through untouched."""
    header_line, sep, body = text.partition('\n')
    line_end = '\r' if header_line.endswith('\r') else ''
    header_line = header_line.rstrip('\r')
    headers = next(csv.reader([header_line]), [])
    return _format_row(normalize_headers(headers)) + line_end + sep + body


def _required(row: dict[str, str], column: str, line: int) -> str:
    value = row.get(column)
    if value is None:
        raise ParseError(f'Missing required column {column!r} on line {line}')
    return value


def _row_to_issue(headers: Sequence[str], cells: Sequence[str], line: int) -> Issue:
    blocks: list[str] = []
    labels: list[str] = []
    sprint: str | None = None
    row: dict[str, str] = {}
    for header, value in zip(headers, cells):
        row.setdefault(header, value)
        if not value:
            continue
        if 'Blocks' in header:
            blocks.append(value)
        elif 'Labels' in header:
            if value not in labels:
                labels.append(value)
        elif 'Sprint' in header and sprint is None:
            sprint = value
    return Issue(
        key=_required(row, KEY_COLUMN, line),
        issue_type=_required(row, TYPE_COLUMN, line),
        status=_required(row, STATUS_COLUMN, line),
        summary=_required(row, SUMMARY_COLUMN, line),
        blocks=blocks,
        labels=labels,
        sprint=sprint,
    )


def load_issues(text: str) -> list[Issue]:
    reader = csv.reader(io.StringIO(normalize_csv(text)))
    headers = next(reader, None)
    if not headers:
        raise ParseError('CSV export has no header row')
    missing = [c for c in REQUIRED_COLUMNS if c not in headers]
    if missing:
        raise ParseError(f'Missing required columns: {", ".join(missing)}')
    issues: list[Issue] = []
    for cells in reader:
        if not any(cells):
            continue
        issues.append(_row_to_issue(headers, cells, reader.line_num))
    return issues


def read_issues(path: str | Path) -> list[Issue]:
    p = Path(path)
    return load_issues(p.read_text(encoding='utf-8-sig'))


__all__ = [
    "HEADER_MARKERS",
    "REQUIRED_COLUMNS",
    "ParseError",
    "load_issues",
    "normalize_csv",
    "normalize_headers",
    "read_issues",
]
