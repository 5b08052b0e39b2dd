"""
Unit tests for MarkdownReporter and its formatting helpers
"""

import pytest
from profmd.perf_data_struct.dynamic.profile.calling_context_tree import CallTree
from profmd.perf_data_struct.dynamic.profile.sample_data import StackSample
from profmd.task.profile_analysis.profile_analyzer import ProfileAnalyzer
from profmd.task.profile_analysis.hotspot_analyzer import HotspotAnalyzer
from profmd.task.reporter.markdown_reporter import (
    MarkdownReporter,
    escape_pipes,
    format_percent,
    null_to_dash,
    render_call_tree,
)
from profmd.utils.report_config import ReportOptions


def _result(samples, top_n=10, threads=False):
    profile = ProfileAnalyzer(threads=threads).analyze(samples)
    return HotspotAnalyzer(profile, top_n=top_n).analyze()


class TestFormatPercent:
    """Test percentage formatting."""

    @pytest.mark.parametrize("part, total, expected", [
        (8, 10, "80.00%"),
        (10, 10, "100.00%"),
        (0, 10, "0.00%"),
        (1, 3, "33.33%"),
        (2, 3, "66.67%"),
        (1, 8, "12.50%"),
        (1, 800, "0.13%"),
        (1, 1000000, "0.00%"),
    ])
    def test_values(self, part, total, expected):
        """Test two-decimal formatting with half-up rounding."""
        assert format_percent(part, total) == expected

    @pytest.mark.parametrize("total", [0, -5])
    def test_non_positive_total(self, total):
        """Test that no samples never divide by zero."""
        assert format_percent(3, total) == "0.00%"


class TestCellHelpers:
    """Test table cell helpers."""

    def test_escape_pipes(self):
        """Test pipe escaping."""
        assert escape_pipes("a|b||c") == "a\\|b\\|\\|c"
        assert escape_pipes("plain") == "plain"

    def test_escape_none(self):
        """Test that a missing cell becomes a dash."""
        assert escape_pipes(None) == "-"

    @pytest.mark.parametrize("value, expected", [
        (None, "-"),
        ("", "-"),
        ("   ", "-"),
        (" cpu ", "cpu"),
    ])
    def test_null_to_dash(self, value, expected):
        """Test summary label normalization."""
        assert null_to_dash(value) == expected


class TestRenderCallTree:
    """Test call tree rendering."""

    def test_empty_tree(self):
        """Test that an empty tree renders a dash."""
        assert render_call_tree(CallTree(), 0, 10) == "-"

    def test_zero_total(self):
        """Test that a tree rendered against no samples is a dash."""
        tree = CallTree()
        tree.insertStack(["a"], 1)
        assert render_call_tree(tree, 0, 10) == "-"

    def test_indentation_and_order(self):
        """Test lines, indentation and sibling order."""
        tree = CallTree()
        tree.insertStack(["main", "a"], 1)
        tree.insertStack(["main", "b"], 3)
        tree.insertStack(["other"], 1)

        assert render_call_tree(tree, 5, 10) == (
            "(80.00%) 4 main\n"
            "  (60.00%) 3 b\n"
            "  (20.00%) 1 a\n"
            "(20.00%) 1 other"
        )

    def test_depth_limit(self):
        """Test that subtrees stop after eight levels."""
        tree = CallTree()
        tree.insertStack([f"f{i}" for i in range(12)], 1)

        lines = render_call_tree(tree, 1, 10).split("\n")
        assert len(lines) == 8
        assert lines[-1] == "  " * 7 + "(100.00%) 1 f7"

    def test_children_limit(self):
        """Test that at most five children are shown per node."""
        tree = CallTree()
        for i in range(7):
            tree.insertStack(["main", f"c{i}"], 1)

        lines = render_call_tree(tree, 7, 10).split("\n")
        assert lines[0] == "(100.00%) 7 main"
        assert [line.split()[-1] for line in lines[1:]] == ["c0", "c1", "c2", "c3", "c4"]

    def test_roots_limited_by_top_n(self):
        """Test the number of outermost frames shown."""
        tree = CallTree()
        for i in range(12):
            tree.insertStack([f"r{i}"], 1)

        assert len(render_call_tree(tree, 12, 3).split("\n")) == 3
        assert len(render_call_tree(tree, 12, 50).split("\n")) == 10


class TestMarkdownReporter:
    """Test MarkdownReporter class."""

    def test_default_options(self):
        """Test a reporter without options."""
        reporter = MarkdownReporter()
        assert reporter.getOptions().getTopN() == 10
        assert reporter.getReport() is None

    def test_header(self):
        """Test title and summary."""
        reporter = MarkdownReporter(ReportOptions(action=" stop ", event=None, threads=True))
        report = reporter.render(_result([StackSample("a", 4)]))

        assert report.startswith(
            "# Arthas profiler report (Markdown)\n\n"
            "- action: stop\n"
            "- event: -\n"
            "- threads: true\n"
            "- total samples: 4\n\n"
        )
        assert reporter.getReport() == report

    def test_custom_title(self):
        """Test a custom title."""
        report = MarkdownReporter(ReportOptions(title="CPU profile")).render(_result([]))
        assert report.startswith("# CPU profile\n\n")

    def test_tables(self):
        """Test hotspot and stack rows."""
        report = MarkdownReporter(ReportOptions()).render(_result([
            StackSample("main;work", 3),
            StackSample("main;idle", 1),
        ]))

        assert (
            "## Top 10 hotspots (self)\n\n"
            "| rank | function | self_samples | self_percent |\n"
            "| ---: | --- | ---: | ---: |\n"
            "| 1 | work | 3 | 75.00% |\n"
            "| 2 | idle | 1 | 25.00% |\n\n"
        ) in report
        assert (
            "## Top 10 stacks\n\n"
            "| rank | samples | percent | stack |\n"
            "| ---: | ---: | ---: | --- |\n"
            "| 1 | 3 | 75.00% | main;work |\n"
            "| 2 | 1 | 25.00% | main;idle |\n\n"
        ) in report

    def test_function_details(self):
        """Test per-function sections."""
        report = MarkdownReporter(ReportOptions()).render(_result([
            StackSample("x;work", 1),
            StackSample("y;work", 3),
        ]))

        assert (
            "### work\n\n"
            "- self: 4 (100.00%)\n"
            "- top stacks:\n"
            "  - 3 (75.00%) y;work\n"
            "  - 1 (25.00%) x;work\n\n"
            "## Notes\n\n"
        ) in report

    def test_notes_footer(self):
        """Test that the report ends with the notes."""
        report = MarkdownReporter().render(_result([]))
        assert report.endswith("use `--format flamegraph` for a flame graph.\n")

    def test_run(self):
        """Test MarkdownReporter as a flow node."""
        reporter = MarkdownReporter()
        reporter.get_inputs().add_data(_result([StackSample("a", 1)]))

        reporter.run()

        outputs = reporter.get_outputs().get_data()
        assert len(outputs) == 1
        assert "- total samples: 1" in outputs[0]
