'''
module sample data
'''

from typing import List

FRAME_SEPARATOR = ";"

'''
@class StackSample
One collapsed stack with its sample count
'''


class StackSample:
    """
    StackSample is one accepted line of collapsed profiler output.

    The stack is the root-to-leaf call path with frames joined by ';'.
    Instances are read-only once created.

    Attributes:
        m_stack: Semicolon-joined frame names
        m_samples: Number of samples recorded for this stack (>= 1)
    """

    __slots__ = ("m_stack", "m_samples")

    def __init__(self, stack: str, samples: int) -> None:
        """
        Initialize a StackSample.

        Args:
            stack: Semicolon-joined frame names, root first
            samples: Sample count for the stack
        """
        self.m_stack: str = stack
        self.m_samples: int = samples

    def getStack(self) -> str:
        """Get the stack string."""
        return self.m_stack

    def getSamples(self) -> int:
        """Get the sample count."""
        return self.m_samples

    def getFrames(self) -> List[str]:
        """
        Split the stack into frames.

        Returns:
            Frame names, root first, as they appear in the stack string
        """
        return self.m_stack.split(FRAME_SEPARATOR)

    def __repr__(self) -> str:
        return f"StackSample({self.m_stack!r}, {self.m_samples})"
