"""Error classification for log output.

jiraplot has no recovery path: every failure ends the run. This module only
labels the exception so the structured log line that precedes the crash says
what kind of problem it was.

Public API:
- classify_error(exc) -> ErrorInfo
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .config import ConfigError
from .parser import ParseError
from .render import ToolNotFoundError


@dataclass
class ErrorInfo:
    category: str
    message: str
    original_type: str
    details: dict[str, Any] | None = None


def classify_error(exc: BaseException) -> ErrorInfo:
    """Best-effort classification of an exception.

    - ParseError -> 'input.missing_field'
    - ConfigError -> 'config'
    - ToolNotFoundError -> 'render.tool_missing'
    - FileNotFoundError -> 'input.not_found'
    - Fallback -> 'generic'
    """
    msg = str(exc)
    name = exc.__class__.__name__
    if isinstance(exc, ParseError):
        return ErrorInfo("input.missing_field", msg, name)
    if isinstance(exc, ConfigError):
        return ErrorInfo("config", msg, name)
    if isinstance(exc, ToolNotFoundError):
        return ErrorInfo("render.tool_missing", msg, name, {"command": exc.command})
    if isinstance(exc, FileNotFoundError):
        return ErrorInfo("input.not_found", msg, name, {"path": exc.filename})
    return ErrorInfo("generic", msg, name)


__all__ = ["ErrorInfo", "classify_error"]
