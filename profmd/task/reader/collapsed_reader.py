'''
module collapsed reader
'''

import logging
import re
from typing import List, Optional, Tuple
from ...flow.flow import FlowNode
from ...perf_data_struct.dynamic.profile.sample_data import StackSample, FRAME_SEPARATOR

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r?\n")
_COUNT = re.compile(r"[+-]?[0-9]+")

# Entry frames of JVM threads; a stack ending here has no useful self frame.
THREAD_RUN_FRAMES = ("java.lang.Thread.run", "java.base/java.lang.Thread.run")


def is_thread_id_frame(frame: Optional[str]) -> bool:
    """
    Check whether a frame is the thread frame async-profiler appends in
    threads mode, e.g. `[tid=1234] "http-nio-8080-exec-1"`.
    """
    if frame is None:
        return False
    f = frame.strip()
    return f.startswith("[") and "tid=" in f


def looks_like_thread_frame(frame: Optional[str]) -> bool:
    """
    Check whether a frame identifies a thread rather than a call.

    Matches the `[tid=...]` shape as well as the JVM Thread.run entry frames.
    """
    if frame is None:
        return False
    f = frame.strip()
    if not f:
        return False
    if is_thread_id_frame(f):
        return True
    return f.startswith(THREAD_RUN_FRAMES)


def strip_thread_frame(stack: str, threads: bool) -> str:
    """
    Remove a trailing `[tid=...]` frame from a stack in threads mode.

    Single-frame stacks are returned unchanged.

    Args:
        stack: Semicolon-joined frames
        threads: Whether the profile was collected per thread

    Returns:
        The stack without its thread frame
    """
    if not threads or not stack:
        return stack
    last_sep = stack.rfind(FRAME_SEPARATOR)
    if last_sep < 0:
        return stack
    if is_thread_id_frame(stack[last_sep + 1:]):
        return stack[:last_sep]
    return stack


# Counts are signed 64-bit values in the profiler output.
MAX_COUNT = 2 ** 63 - 1
_MAX_COUNT_DIGITS = len(str(MAX_COUNT))


def _parse_count(text: str) -> Optional[int]:
    if not _COUNT.fullmatch(text):
        return None
    if len(text.lstrip("+-").lstrip("0")) > _MAX_COUNT_DIGITS:
        return None
    count = int(text)
    if count > MAX_COUNT:
        return None
    return count


'''
@class CollapsedReader
Read collapsed stack text (`frame1;frame2;...;frameN <count>` per line)
'''


class CollapsedReader(FlowNode):
    """
    CollapsedReader turns collapsed profiler output into StackSamples.

    The last space of a line separates the stack from its sample count, so
    frames (typically thread names) may contain spaces. Lines that cannot be
    parsed, or whose count is not a positive integer, are skipped: a partly
    corrupted profile still yields a report.

    Attributes:
        m_text: Raw collapsed text
        m_threads: Whether stacks end in per-thread frames
        m_samples: Samples read by the last call to load()
        m_dropped_lines: Number of non-empty lines skipped by the last load()
    """

    def __init__(self, text: Optional[str] = None, threads: bool = False) -> None:
        """
        Initialize a CollapsedReader.

        Args:
            text: Raw collapsed text; None is read as empty
            threads: Whether stacks end in per-thread frames
        """
        super().__init__()
        self.m_text: str = text if text is not None else ""
        self.m_threads: bool = threads
        self.m_samples: List[StackSample] = []
        self.m_dropped_lines: int = 0

    def setText(self, text: Optional[str]) -> None:
        self.m_text = text if text is not None else ""

    def getText(self) -> str:
        return self.m_text

    def getThreads(self) -> bool:
        return self.m_threads

    def getSamples(self) -> List[StackSample]:
        return self.m_samples

    def getDroppedLineCount(self) -> int:
        return self.m_dropped_lines

    def parseLine(self, line: str) -> Optional[StackSample]:
        """
        Parse one line of collapsed output.

        Args:
            line: One line, with or without surrounding whitespace

        Returns:
            The parsed sample, or None for empty or malformed lines
        """
        return self._parseLine(line)[0]

    def _parseLine(self, line: str) -> Tuple[Optional[StackSample], Optional[str]]:
        line = line.strip()
        if not line:
            return None, "empty line"

        space_idx = line.rfind(" ")
        if space_idx < 0:
            return None, "no space before the count"
        stack = line[:space_idx].strip()
        count_text = line[space_idx + 1:].strip()
        if not stack or not count_text:
            return None, "empty stack or count"

        if not _COUNT.fullmatch(count_text):
            return None, "count is not an integer"
        samples = _parse_count(count_text)
        if samples is None:
            return None, "count out of range"
        if samples <= 0:
            return None, "count is not positive"

        return StackSample(strip_thread_frame(stack, self.m_threads), samples), None

    def load(self) -> List[StackSample]:
        """
        Parse the whole text.

        Returns:
            Accepted samples in input order
        """
        self.m_samples = []
        self.m_dropped_lines = 0

        for lineno, line in enumerate(_LINE_BREAK.split(self.m_text), start=1):
            if not line.strip():
                continue
            sample, reason = self._parseLine(line)
            if sample is None:
                self.m_dropped_lines += 1
                logger.debug("skipping malformed collapsed line %d (%s): %r", lineno, reason, line)
                continue
            self.m_samples.append(sample)

        logger.debug("read %d stacks, skipped %d lines", len(self.m_samples), self.m_dropped_lines)
        return self.m_samples

    def run(self) -> None:
        """
        Execute the reading task.

        Parses the text and adds every sample to the output flow data.
        """
        for sample in self.load():
            self.m_outputs.add_data(sample)
