'''
module perf data
'''

from typing import Dict, List, Optional
from .sample_data import StackSample
from .calling_context_tree import CallTree

TOP_STACKS_PER_LEAF = 3

'''
@class CollapsedProfile
Aggregated view of a collapsed-stack profile
'''


class CollapsedProfile:
    """
    CollapsedProfile holds everything aggregated from one collapsed input.

    It is filled by a single analysis pass and read by the rankers and the
    report renderer afterwards.

    Attributes:
        m_total_samples: Sum of the sample counts of every accepted stack
        m_self_samples: Leaf frame name -> accumulated samples, first-seen order
        m_stacks: Every accepted StackSample in input order
        m_top_stacks_by_leaf: Leaf frame name -> heaviest stacks ending there
        m_call_tree: Weighted prefix tree over all stacks
    """

    def __init__(self) -> None:
        self.m_total_samples: int = 0
        self.m_self_samples: Dict[str, int] = {}
        self.m_stacks: List[StackSample] = []
        self.m_top_stacks_by_leaf: Dict[str, List[StackSample]] = {}
        self.m_call_tree: CallTree = CallTree()

    def addStack(self, sample: StackSample) -> None:
        """
        Record a stack in the totals and the stack list.

        Args:
            sample: Accepted stack sample
        """
        self.m_total_samples += sample.getSamples()
        self.m_stacks.append(sample)

    def addSelfSamples(self, leaf: str, samples: int) -> None:
        """
        Attribute samples to a leaf frame.

        Args:
            leaf: Leaf frame name
            samples: Number of samples to add
        """
        self.m_self_samples[leaf] = self.m_self_samples.get(leaf, 0) + samples

    def addTopStack(self, leaf: str, sample: StackSample, limit: int = TOP_STACKS_PER_LEAF) -> None:
        """
        Offer a stack to the bounded list of heaviest stacks of a leaf.

        The list is re-sorted on every insertion (heaviest first, earlier
        arrivals first among equals) and cut to `limit` entries.

        Args:
            leaf: Leaf frame name
            sample: Stack ending in that leaf
            limit: Maximum number of stacks kept per leaf
        """
        stacks = self.m_top_stacks_by_leaf.setdefault(leaf, [])
        stacks.append(sample)
        stacks.sort(key=lambda s: s.getSamples(), reverse=True)
        del stacks[limit:]

    def getTotalSamples(self) -> int:
        return self.m_total_samples

    def getSelfSamples(self) -> Dict[str, int]:
        return self.m_self_samples

    def getStacks(self) -> List[StackSample]:
        return self.m_stacks

    def getTopStacksByLeaf(self) -> Dict[str, List[StackSample]]:
        return self.m_top_stacks_by_leaf

    def getTopStacks(self, leaf: str) -> Optional[List[StackSample]]:
        """
        Get the heaviest stacks ending in a leaf frame.

        Args:
            leaf: Leaf frame name

        Returns:
            Stacks sorted by sample count, or None if the leaf was never seen
        """
        return self.m_top_stacks_by_leaf.get(leaf)

    def getCallTree(self) -> CallTree:
        return self.m_call_tree

    def getStackCount(self) -> int:
        """Get the number of accepted stacks."""
        return len(self.m_stacks)
