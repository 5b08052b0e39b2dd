'''
module flow data/node/graph
'''

import logging
from typing import Any, Dict, List
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

'''
@class FlowData
The data flowing through the edges between FlowNodes
'''


class FlowData:
    """
    FlowData carries intermediate results between FlowNodes.

    Items keep the order in which they were added, so a node consuming
    its inputs always sees them in the order its predecessors produced them.

    Attributes:
        m_data: Ordered list of data objects (samples, profiles, reports, ...)
    """

    def __init__(self) -> None:
        """Initialize a FlowData object with no data."""
        self.m_data: List[Any] = []

    def get_data(self) -> List[Any]:
        """
        Get the data items.

        Returns:
            List of data objects in insertion order
        """
        return self.m_data

    def add_data(self, data: Any) -> None:
        """
        Append a data object to the flow data.

        Args:
            data: Data object to add
        """
        self.m_data.append(data)

    def get_data_of_type(self, data_type: type) -> List[Any]:
        """
        Get the data items that are instances of a given type.

        Args:
            data_type: Type to filter by

        Returns:
            Matching data objects in insertion order
        """
        return [data for data in self.m_data if isinstance(data, data_type)]

    def clear(self) -> None:
        """Clear all data from the flow data."""
        self.m_data.clear()

    def size(self) -> int:
        """Get the number of data objects."""
        return len(self.m_data)


'''
@class FlowNode
The sub-task node
'''


class FlowNode(ABC):
    """
    FlowNode represents one step of the report pipeline.

    Each node consumes its input FlowData and produces output FlowData.
    Nodes are connected in a FlowGraph to form the whole conversion.

    Attributes:
        m_inputs: Input flow data for this node
        m_outputs: Output flow data from this node
    """

    def __init__(self) -> None:
        self.m_inputs: FlowData = FlowData()
        self.m_outputs: FlowData = FlowData()

    def get_inputs(self) -> FlowData:
        return self.m_inputs

    def get_outputs(self) -> FlowData:
        return self.m_outputs

    def set_inputs(self, inputs: FlowData) -> None:
        self.m_inputs = inputs

    def set_outputs(self, outputs: FlowData) -> None:
        self.m_outputs = outputs

    @abstractmethod
    def run(self) -> None:
        """
        Execute the task.

        Subclasses read self.m_inputs and write their results
        to self.m_outputs.
        """
        pass


'''
@class FlowGraph
The entire workflow
'''


class FlowGraph:
    """
    FlowGraph wires FlowNodes together and runs them.

    Nodes run in the order they were added; after a node runs, its
    outputs are appended to the inputs of each of its successors.

    Attributes:
        m_nodes: List of all FlowNodes in the graph
        m_edges: Dictionary mapping each node to its successor nodes
    """

    def __init__(self) -> None:
        self.m_nodes: List[FlowNode] = []
        self.m_edges: Dict[FlowNode, List[FlowNode]] = {}

    def add_node(self, node: FlowNode) -> None:
        """
        Add a node to the graph.

        Args:
            node: FlowNode to add to the graph
        """
        if node not in self.m_nodes:
            self.m_nodes.append(node)
            self.m_edges[node] = []

    def add_edge(self, from_node: FlowNode, to_node: FlowNode) -> None:
        """
        Add an edge between two nodes, adding the nodes if needed.

        Args:
            from_node: Source node
            to_node: Destination node
        """
        if from_node not in self.m_nodes:
            self.add_node(from_node)
        if to_node not in self.m_nodes:
            self.add_node(to_node)

        if to_node not in self.m_edges[from_node]:
            self.m_edges[from_node].append(to_node)

    def get_nodes(self) -> List[FlowNode]:
        return self.m_nodes

    def get_successors(self, node: FlowNode) -> List[FlowNode]:
        return self.m_edges.get(node, [])

    def run(self) -> None:
        """
        Execute the workflow.

        Nodes run in insertion order, so callers add producers before
        their consumers.
        """
        for node in self.m_nodes:
            logger.debug("running %s", type(node).__name__)
            node.run()

            for successor in self.get_successors(node):
                for data in node.get_outputs().get_data():
                    successor.get_inputs().add_data(data)

    def clear(self) -> None:
        """Clear all nodes and edges from the graph."""
        self.m_nodes.clear()
        self.m_edges.clear()
