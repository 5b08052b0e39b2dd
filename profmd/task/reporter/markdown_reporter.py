'''
module markdown reporter
'''

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional
from ...flow.flow import FlowNode
from ...perf_data_struct.dynamic.profile.calling_context_tree import CallTree
from ...perf_data_struct.base import Node
from ...utils.report_config import ReportOptions
from ..profile_analysis.hotspot_analyzer import HotspotResult

logger = logging.getLogger(__name__)

CALL_TREE_MAX_DEPTH = 8
CALL_TREE_MAX_CHILDREN = 5
CALL_TREE_MAX_ROOTS = 10

NOTES = (
    "- This report is generated from async-profiler `collapsed` output and can be pasted as-is into an LLM.\n"
    "- `hotspots (self)` counts the top frame of each stack (an approximation of self time) "
    "to locate hot functions quickly.\n"
    "- `stacks` lists the most frequent call paths; use `--format flamegraph` for a flame graph.\n"
)

_CENT = Decimal("0.01")


def format_percent(part: int, total: int) -> str:
    """
    Format part/total as a percentage with two decimals, e.g. "12.50%".

    Rounds half up. A non-positive total gives "0.00%".
    """
    if total <= 0:
        return "0.00%"
    p = part * 100.0 / total
    return f"{Decimal(repr(p)).quantize(_CENT, rounding=ROUND_HALF_UP)}%"


def escape_pipes(cell: Optional[str]) -> str:
    """Make a value safe for a Markdown table cell."""
    if cell is None:
        return "-"
    return cell.replace("|", "\\|")


def null_to_dash(value: Optional[str]) -> str:
    if value is None or not value.strip():
        return "-"
    return value.strip()


def render_call_tree(tree: CallTree, total_samples: int, top_n: int) -> str:
    """
    Render the heaviest part of a call tree as indented text.

    At most min(top_n, 10) outermost frames are shown, each subtree is cut
    after CALL_TREE_MAX_DEPTH levels and CALL_TREE_MAX_CHILDREN children per
    node. Lines look like `(12.50%) 5 frame`, indented two spaces per level.

    Returns:
        The rendered tree, or "-" when there is nothing to show
    """
    root = tree.getRoot()
    roots = tree.getSortedChildren(root.getId())
    if not roots or total_samples <= 0:
        return "-"

    lines: List[str] = []
    for node in roots[:min(top_n, CALL_TREE_MAX_ROOTS)]:
        _render_call_tree_node(lines, tree, node, total_samples, 0)
    return "\n".join(lines).strip()


def _render_call_tree_node(lines: List[str], tree: CallTree, node: Node, total_samples: int, depth: int) -> None:
    if depth >= CALL_TREE_MAX_DEPTH:
        return
    lines.append(
        f"{'  ' * depth}({format_percent(node.getSamples(), total_samples)}) {node.getSamples()} {node.getName()}"
    )
    for child in tree.getSortedChildren(node.getId())[:CALL_TREE_MAX_CHILDREN]:
        _render_call_tree_node(lines, tree, child, total_samples, depth + 1)


'''
@class MarkdownReporter
Render a ranked profile as a Markdown report
'''


class MarkdownReporter(FlowNode):
    """
    MarkdownReporter writes the report for a HotspotResult.

    The document always has the same sections, in order: title, summary,
    hotspots table, stacks table, call tree, function details and notes.
    Sections without data get a placeholder row so the layout never changes.

    Attributes:
        m_options: Options of the report (labels, threads flag, top N, title)
        m_report: The last rendered report
    """

    def __init__(self, options: Optional[ReportOptions] = None) -> None:
        """
        Initialize a MarkdownReporter.

        Args:
            options: Report options; None uses the defaults
        """
        super().__init__()
        self.m_options: ReportOptions = options if options is not None else ReportOptions()
        self.m_report: Optional[str] = None

    def getOptions(self) -> ReportOptions:
        return self.m_options

    def getReport(self) -> Optional[str]:
        return self.m_report

    def render(self, result: HotspotResult) -> str:
        """
        Render a ranked profile.

        Args:
            result: Profile together with its hotspot and stack rankings

        Returns:
            The Markdown document
        """
        options = self.m_options
        profile = result.getProfile()
        total = profile.getTotalSamples()
        top_n = options.getTopN()
        hotspots = result.getHotspots()
        stacks = result.getTopStacks()

        out: List[str] = []
        out.append(f"# {options.getTitle()}\n\n")
        out.append(f"- action: {null_to_dash(options.getAction())}\n")
        out.append(f"- event: {null_to_dash(options.getEvent())}\n")
        out.append(f"- threads: {'true' if options.getThreads() else 'false'}\n")
        out.append(f"- total samples: {total}\n\n")

        out.append(f"## Top {top_n} hotspots (self)\n\n")
        out.append("| rank | function | self_samples | self_percent |\n")
        out.append("| ---: | --- | ---: | ---: |\n")
        for rank, (name, samples) in enumerate(hotspots, start=1):
            out.append(f"| {rank} | {escape_pipes(name)} | {samples} | {format_percent(samples, total)} |\n")
        if not hotspots:
            out.append("| - | - | 0 | 0.00% |\n")
        out.append("\n")

        out.append(f"## Top {top_n} stacks\n\n")
        out.append("| rank | samples | percent | stack |\n")
        out.append("| ---: | ---: | ---: | --- |\n")
        for rank, sample in enumerate(stacks, start=1):
            out.append(
                f"| {rank} | {sample.getSamples()} | {format_percent(sample.getSamples(), total)} "
                f"| {escape_pipes(sample.getStack())} |\n"
            )
        if not stacks:
            out.append("| - | 0 | 0.00% | - |\n")
        out.append("\n")

        out.append("## Call tree (top)\n\n")
        out.append("```text\n")
        out.append(render_call_tree(profile.getCallTree(), total, top_n))
        out.append("\n```\n\n")

        out.append("## Function details\n\n")
        for name, samples in hotspots[:top_n]:
            out.append(f"### {name}\n\n")
            out.append(f"- self: {samples} ({format_percent(samples, total)})\n")
            leaf_stacks = profile.getTopStacks(name)
            if leaf_stacks:
                out.append("- top stacks:\n")
                for sample in leaf_stacks:
                    out.append(
                        f"  - {sample.getSamples()} ({format_percent(sample.getSamples(), total)}) "
                        f"{sample.getStack()}\n"
                    )
            out.append("\n")

        out.append("## Notes\n\n")
        out.append(NOTES)

        self.m_report = "".join(out)
        return self.m_report

    def run(self) -> None:
        """
        Execute the reporting task.

        Renders every HotspotResult of the input flow data and outputs
        the report text.
        """
        for result in self.m_inputs.get_data_of_type(HotspotResult):
            logger.debug("rendering report for %d samples", result.getProfile().getTotalSamples())
            self.m_outputs.add_data(self.render(result))
