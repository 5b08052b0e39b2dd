from .flow import FlowData, FlowNode, FlowGraph

__all__ = ['FlowData', 'FlowNode', 'FlowGraph']
