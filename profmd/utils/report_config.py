'''
module report_config

Options controlling how a collapsed profile is turned into a report.
'''

from typing import Optional

DEFAULT_TOP_N = 10
DEFAULT_TITLE = "Arthas profiler report (Markdown)"


class ReportOptions:
    """
    ReportOptions carries the input text and the knobs of one report.

    Setters return the options object so calls can be chained:

        ReportOptions().setAction("stop").setEvent("cpu").setTopN(5)

    Attributes:
        m_action: Free-text label of the profiler action (e.g., "stop")
        m_event: Free-text label of the sampled event (e.g., "cpu")
        m_threads: Whether the profile was collected per thread
        m_top_n: Number of hotspots and stacks to report
        m_collapsed: Raw collapsed-stack text
        m_title: Report title
    """

    def __init__(
        self,
        action: Optional[str] = None,
        event: Optional[str] = None,
        threads: bool = False,
        top_n: int = DEFAULT_TOP_N,
        collapsed: Optional[str] = None,
        title: str = DEFAULT_TITLE
    ) -> None:
        """
        Initialize ReportOptions.

        Args:
            action: Profiler action label
            event: Sampled event label
            threads: Whether stacks end in per-thread frames
            top_n: Number of hotspots and stacks to report; non-positive
                values keep the default
            collapsed: Raw collapsed-stack text
            title: Report title
        """
        self.m_action: Optional[str] = action
        self.m_event: Optional[str] = event
        self.m_threads: bool = bool(threads)
        self.m_top_n: int = DEFAULT_TOP_N
        self.m_collapsed: Optional[str] = collapsed
        self.m_title: str = title
        self.setTopN(top_n)

    def getAction(self) -> Optional[str]:
        return self.m_action

    def setAction(self, action: Optional[str]) -> 'ReportOptions':
        self.m_action = action
        return self

    def getEvent(self) -> Optional[str]:
        return self.m_event

    def setEvent(self, event: Optional[str]) -> 'ReportOptions':
        self.m_event = event
        return self

    def getThreads(self) -> bool:
        return self.m_threads

    def setThreads(self, threads: bool) -> 'ReportOptions':
        self.m_threads = bool(threads)
        return self

    def getTopN(self) -> int:
        return self.m_top_n

    def setTopN(self, top_n: int) -> 'ReportOptions':
        """
        Set the number of hotspots and stacks to report.

        Non-positive values are ignored and the current value is kept.

        Args:
            top_n: Requested count
        """
        if top_n is not None and top_n > 0:
            self.m_top_n = top_n
        return self

    def getCollapsed(self) -> str:
        """Get the collapsed text, with None read as an empty string."""
        return self.m_collapsed if self.m_collapsed is not None else ""

    def setCollapsed(self, collapsed: Optional[str]) -> 'ReportOptions':
        self.m_collapsed = collapsed
        return self

    def getTitle(self) -> str:
        return self.m_title

    def setTitle(self, title: str) -> 'ReportOptions':
        self.m_title = title
        return self
