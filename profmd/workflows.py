"""
Pre-built report workflow.

Wires the reader, the aggregation and ranking steps and the Markdown
reporter into one FlowGraph.
"""

from typing import Optional

from .flow.flow import FlowGraph
from .task.reader.collapsed_reader import CollapsedReader
from .task.profile_analysis.profile_analyzer import ProfileAnalyzer
from .task.profile_analysis.hotspot_analyzer import HotspotAnalyzer
from .task.reporter.markdown_reporter import MarkdownReporter
from .utils.report_config import ReportOptions


def create_report_workflow(options: ReportOptions) -> FlowGraph:
    """
    Create the collapsed-stacks-to-Markdown workflow.

    This workflow:
    1. Reads the collapsed text into stack samples
    2. Aggregates totals, self samples, per-leaf stacks and the call tree
    3. Ranks hotspots and stacks
    4. Renders the Markdown report

    Args:
        options: Report options, including the collapsed text

    Returns:
        Configured flow graph; its last node outputs the report text
    """
    graph = FlowGraph()

    reader = CollapsedReader(options.getCollapsed(), threads=options.getThreads())
    aggregator = ProfileAnalyzer(threads=options.getThreads())
    ranker = HotspotAnalyzer(top_n=options.getTopN())
    reporter = MarkdownReporter(options)

    graph.add_edge(reader, aggregator)
    graph.add_edge(aggregator, ranker)
    graph.add_edge(ranker, reporter)
    return graph


def to_markdown(options: Optional[ReportOptions] = None) -> str:
    """
    Convert collapsed profiler output into a Markdown report.

    Never fails on the content of the collapsed text: malformed lines are
    skipped and an empty input yields a report with placeholder rows.

    Example:
        >>> from profmd import ReportOptions, to_markdown
        >>> report = to_markdown(ReportOptions(event="cpu", collapsed="main;work 3\\n"))

    Args:
        options: Report options; None uses the defaults with empty input

    Returns:
        The Markdown document
    """
    if options is None:
        options = ReportOptions()

    graph = create_report_workflow(options)
    graph.run()

    reporter = graph.get_nodes()[-1]
    return reporter.get_outputs().get_data()[0]
