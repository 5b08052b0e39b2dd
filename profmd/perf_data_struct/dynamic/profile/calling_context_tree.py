'''
module call tree
'''

from typing import Iterable, List
from ...base import Tree, Node


ROOT_NAME = "<root>"

'''
@class CallTree
Weighted prefix tree over collapsed stacks
'''


class CallTree(Tree):
    """
    CallTree aggregates stacks by call path.

    Every stack is inserted frame by frame from the outermost call to the
    leaf. Each node on the path, and the root, receives the stack's sample
    count, so a node's weight is the total of all stacks passing through
    that frame at that position (inclusive weight).
    """

    def __init__(self) -> None:
        super().__init__()
        self.setRoot(ROOT_NAME)

    def insertStack(self, frames: Iterable[str], samples: int) -> None:
        """
        Add a stack to the tree.

        Frames are trimmed and empty frames skipped. Stacks without any
        frame, and non-positive counts, leave the tree untouched.

        Args:
            frames: Frame names, root first
            samples: Sample count of the stack
        """
        path = [frame.strip() for frame in frames]
        path = [frame for frame in path if frame]
        if not path or samples <= 0:
            return

        current = self.m_root
        current.addSamples(samples)
        for frame in path:
            current = self.getOrAddChild(current.getId(), frame)
            current.addSamples(samples)

    def getTotalSamples(self) -> int:
        """Get the weight of the root, i.e. of every inserted stack."""
        return self.m_root.getSamples()

    def getSortedChildren(self, node_id: int) -> List[Node]:
        """
        Get the children of a node, heaviest first.

        Equal weights keep their insertion order.

        Args:
            node_id: ID of the node

        Returns:
            Sorted list of child nodes
        """
        return sorted(self.getChildren(node_id), key=lambda n: n.getSamples(), reverse=True)

    def clear(self) -> None:
        """Drop every stack, keeping a fresh root."""
        super().clear()
        self.setRoot(ROOT_NAME)
