from __future__ import annotations

from collections.abc import Iterable

from .models import Issue


def build_graph(issues: Iterable[Issue]) -> dict[str, Issue]:
    """Index ``issues`` by key and link them both ways.

    Every issue named in another issue's ``blocks`` gets that issue appended to
    its ``blocked_by``. References to keys outside the table are then dropped
    from ``blocks``. Cycles are kept as they are.
    """
    table: dict[str, Issue] = {}
    for issue in issues:
        table[issue.key] = issue

    for issue in table.values():
        for blocked in issue.blocks:
            target = table.get(blocked)
            if target is not None:
                target.blocked_by.append(issue.key)
        # Remove blocks for issues outside this export
        issue.blocks = [key for key in issue.blocks if key in table]
    return table


def partition(table: dict[str, Issue]) -> tuple[list[Issue], list[Issue]]:
    """Split into (connected, isolated), each sorted by key."""
    ordered = sorted(table.values(), key=lambda i: (i.key, len(i.blocks)))
    connected = [i for i in ordered if i.is_connected]
    isolated = [i for i in ordered if not i.is_connected]
    return connected, isolated


__all__ = ["build_graph", "partition"]
