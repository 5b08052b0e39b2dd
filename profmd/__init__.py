"""
profmd - turn async-profiler collapsed stacks into Markdown reports

Example usage:
    >>> from profmd import ReportOptions, to_markdown
    >>> options = ReportOptions(action="stop", event="cpu", top_n=5)
    >>> print(to_markdown(options.setCollapsed("main;run;work 7\\nmain;idle 3\\n")))
"""

from .utils.report_config import ReportOptions
from .workflows import create_report_workflow, to_markdown

__version__ = "0.1.0"

__all__ = ["ReportOptions", "create_report_workflow", "to_markdown"]
