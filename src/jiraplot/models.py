from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Issue:
    """In-memory representation of one row of a Jira CSV export.

    ``blocked_by`` is never read from the export; it is filled in by
    :func:`jiraplot.graph.build_graph` from the ``blocks`` lists of the other
    issues in the same table.
    """

    key: str
    issue_type: str
    status: str
    summary: str
    blocks: list[str] = field(default_factory=list)
    blocked_by: list[str] = field(default_factory=list)
    labels: list[str] = field(default_factory=list)
    sprint: str | None = None

    @property
    def is_connected(self) -> bool:
        return bool(self.blocks or self.blocked_by)


__all__ = ["Issue"]
