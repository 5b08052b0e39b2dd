'''
@module base
basic tree structure for aggregated performance data
'''

from typing import Dict, List, Optional

'''
@class Node
A Node is one frame at one position of a call path
'''


class Node:
    """
    Node is one vertex of a weighted tree.

    Attributes:
        m_id: Index of the node in its tree's node arena
        m_name: Name of the node (e.g., frame name)
        m_samples: Accumulated sample weight of everything passing through
    """

    def __init__(self, node_id: int, name: str) -> None:
        self.m_id: int = node_id
        self.m_name: str = name
        self.m_samples: int = 0

    def getId(self) -> int:
        """Get the node ID."""
        return self.m_id

    def getName(self) -> str:
        """Get the node name."""
        return self.m_name

    def getSamples(self) -> int:
        """Get the accumulated sample weight."""
        return self.m_samples

    def addSamples(self, samples: int) -> None:
        """
        Add weight to the node.

        Args:
            samples: Number of samples to add
        """
        self.m_samples += samples


'''
@class Tree
A Tree is an arena of nodes addressed by integer id
'''


class Tree:
    """
    Tree is a single-rooted tree whose nodes live in a list and refer
    to each other by index.

    Children of a node are keyed by name and kept in insertion order.

    Attributes:
        m_nodes: Node arena; a node's ID is its index in this list
        m_children: Dictionary mapping node IDs to {child name: child ID}
        m_root: Root node of the tree
    """

    def __init__(self) -> None:
        self.m_nodes: List[Node] = []
        self.m_children: Dict[int, Dict[str, int]] = {}
        self.m_root: Optional[Node] = None

    def _new_node(self, name: str) -> Node:
        node = Node(len(self.m_nodes), name)
        self.m_nodes.append(node)
        self.m_children[node.getId()] = {}
        return node

    def setRoot(self, name: str) -> Node:
        """
        Create the root node of an empty tree.

        Args:
            name: Name of the root node

        Returns:
            The root node
        """
        if self.m_nodes:
            raise ValueError("root must be the first node of the tree")
        self.m_root = self._new_node(name)
        return self.m_root

    def getRoot(self) -> Optional[Node]:
        """Get the root node of the tree."""
        return self.m_root

    def getNode(self, node_id: int) -> Node:
        """
        Get a node by ID.

        Args:
            node_id: ID of the node to retrieve

        Returns:
            Node object
        """
        return self.m_nodes[node_id]

    def getNodes(self) -> List[Node]:
        """Get all nodes in the tree."""
        return self.m_nodes

    def getNodeCount(self) -> int:
        """Get the number of nodes in the tree."""
        return len(self.m_nodes)

    def getChild(self, parent_id: int, name: str) -> Optional[Node]:
        """
        Get the child of a node by name.

        Args:
            parent_id: ID of the parent node
            name: Name of the child

        Returns:
            Child node, or None if the parent has no such child
        """
        child_id = self.m_children[parent_id].get(name)
        if child_id is None:
            return None
        return self.m_nodes[child_id]

    def getOrAddChild(self, parent_id: int, name: str) -> Node:
        """
        Get the child of a node by name, creating it if absent.

        Args:
            parent_id: ID of the parent node
            name: Name of the child

        Returns:
            Child node
        """
        child = self.getChild(parent_id, name)
        if child is None:
            child = self._new_node(name)
            self.m_children[parent_id][name] = child.getId()
        return child

    def getChildren(self, node_id: int) -> List[Node]:
        """
        Get children of a node in insertion order.

        Args:
            node_id: ID of the node

        Returns:
            List of child nodes
        """
        return [self.m_nodes[child_id] for child_id in self.m_children.get(node_id, {}).values()]

    def clear(self) -> None:
        """Remove every node, including the root."""
        self.m_nodes.clear()
        self.m_children.clear()
        self.m_root = None
