from .markdown_reporter import MarkdownReporter, escape_pipes, format_percent, render_call_tree

__all__ = ["MarkdownReporter", "escape_pipes", "format_percent", "render_call_tree"]
