'''
module profile analyzer
'''

import logging
from typing import Callable, Dict, Iterable
from ...flow.flow import FlowNode
from ...perf_data_struct.dynamic.profile.perf_data import CollapsedProfile
from ...perf_data_struct.dynamic.profile.sample_data import StackSample, FRAME_SEPARATOR
from ..reader.collapsed_reader import looks_like_thread_frame

logger = logging.getLogger(__name__)


def resolve_leaf(stack: str, threads: bool) -> str:
    """
    Find the frame a stack's samples are attributed to as self time.

    This is the last frame of the stack. In threads mode a last frame that
    still identifies a thread (a `[tid=...]` frame or Thread.run) is skipped
    in favour of the frame before it. The fallback assumes the thread frame
    is the end of the stack.

    Args:
        stack: Semicolon-joined frames
        threads: Whether the profile was collected per thread

    Returns:
        The leaf frame name, or "" when the stack has no usable leaf
    """
    if not stack:
        return ""
    last_sep = stack.rfind(FRAME_SEPARATOR)
    top = stack[last_sep + 1:].strip()

    if threads and looks_like_thread_frame(top):
        if last_sep < 0:
            return ""
        prev_sep = stack.rfind(FRAME_SEPARATOR, 0, last_sep)
        return stack[prev_sep + 1:last_sep].strip()
    return top


'''
@class ProfileAnalyzer
Fold stack samples into a CollapsedProfile in a single pass
'''


class ProfileAnalyzer(FlowNode):
    """
    ProfileAnalyzer aggregates StackSamples into a CollapsedProfile.

    Each sample is handed to the registered callbacks in registration order.
    The analyzer registers its own aggregation steps on construction:

    - "stack_recorder": total samples and the list of all stacks
    - "call_tree_builder": inclusive weights along the stack's path
    - "self_time_tracker": self samples and heaviest stacks per leaf frame

    Additional callbacks can be registered to observe every sample.

    Attributes:
        m_profile: The profile being built
        m_threads: Whether stacks come from a per-thread profile
        m_callbacks: Dictionary of callback functions
    """

    def __init__(self, threads: bool = False) -> None:
        """
        Initialize a ProfileAnalyzer.

        Args:
            threads: Whether stacks come from a per-thread profile
        """
        super().__init__()
        self.m_profile: CollapsedProfile = CollapsedProfile()
        self.m_threads: bool = threads
        self.m_callbacks: Dict[str, Callable[[StackSample], None]] = {}

        self.registerCallback("stack_recorder", self._record_stack)
        self.registerCallback("call_tree_builder", self._build_call_tree)
        self.registerCallback("self_time_tracker", self._track_self_time)

    def _record_stack(self, sample: StackSample) -> None:
        self.m_profile.addStack(sample)

    def _build_call_tree(self, sample: StackSample) -> None:
        self.m_profile.getCallTree().insertStack(sample.getFrames(), sample.getSamples())

    def _track_self_time(self, sample: StackSample) -> None:
        leaf = resolve_leaf(sample.getStack(), self.m_threads)
        if not leaf:
            return
        self.m_profile.addSelfSamples(leaf, sample.getSamples())
        self.m_profile.addTopStack(leaf, sample)

    def getProfile(self) -> CollapsedProfile:
        return self.m_profile

    def getThreads(self) -> bool:
        return self.m_threads

    def registerCallback(self, name: str, callback: Callable[[StackSample], None]) -> None:
        """
        Register a callback function to be invoked for each sample.

        Args:
            name: Name identifier for the callback
            callback: Function that takes a StackSample and returns None
        """
        self.m_callbacks[name] = callback

    def unregisterCallback(self, name: str) -> None:
        if name in self.m_callbacks:
            del self.m_callbacks[name]

    def clearCallbacks(self) -> None:
        """Clear all registered callbacks, including the aggregation steps."""
        self.m_callbacks.clear()

    def getCallbacks(self) -> Dict[str, Callable[[StackSample], None]]:
        return self.m_callbacks

    def addSample(self, sample: StackSample) -> None:
        """
        Fold one sample into the profile.

        Args:
            sample: Sample to process
        """
        for callback in self.m_callbacks.values():
            callback(sample)

    def analyze(self, samples: Iterable[StackSample]) -> CollapsedProfile:
        """
        Fold samples into a fresh profile.

        Args:
            samples: Samples in input order

        Returns:
            The aggregated profile
        """
        self.m_profile = CollapsedProfile()
        for sample in samples:
            self.addSample(sample)

        logger.debug(
            "aggregated %d stacks, %d samples, %d leaf frames",
            self.m_profile.getStackCount(),
            self.m_profile.getTotalSamples(),
            len(self.m_profile.getSelfSamples()),
        )
        return self.m_profile

    def run(self) -> None:
        """
        Execute profile aggregation.

        Consumes the StackSamples of the input flow data and outputs
        the resulting CollapsedProfile.
        """
        profile = self.analyze(self.m_inputs.get_data_of_type(StackSample))
        self.m_outputs.add_data(profile)
