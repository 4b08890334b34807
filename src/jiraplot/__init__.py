"""jiraplot - draw the blocking graph of a Jira CSV export with Graphviz.

from jiraplot import JiraPlot, load_config

plot = JiraPlot.from_config_path('jiraplot.config.yaml')
result = plot.run('epic.csv', 'My Epic', open_viewer=False)
print(result.dot_path, result.output_path)

Lower level pieces (``read_issues``, ``build_graph``, ``emit_graph``) are
exported for callers that want the ``dot`` text without rendering.
"""

from __future__ import annotations

from .config import PlotConfig, load_config
from .core import JiraPlot, PlotResult
from .emitter import emit_graph
from .graph import build_graph
from .models import Issue
from .parser import ParseError, load_issues, read_issues

# Version constant (sync manually with pyproject)
__version__ = "0.1.0"

__all__ = [
    "Issue",
    "JiraPlot",
    "ParseError",
    "PlotConfig",
    "PlotResult",
    "build_graph",
    "emit_graph",
    "load_config",
    "load_issues",
    "read_issues",
    "__version__",
]
