"""
Graph module.

Provides the graph object model and its translation for the algorithms:
- Node, Edge, Graph: Object model with identity and connectivity invariants
- LabelAllocator: Reclaimable node labels (156 symbols)
- AdjacencyMapping: Label-keyed snapshot consumed by the algorithms
- encode / decode_path / decode_trace: Conversions between the two
- random_graph, circle_graph, demo_graph: Graph generators
"""

from pathviz.graph.generate import circle_graph, demo_graph, random_graph
from pathviz.graph.labels import ALL_LABELS, LabelAllocator
from pathviz.graph.model import Edge, Graph, Node, node_distance
from pathviz.graph.translator import (
    AdjacencyMapping,
    MissingEndpointError,
    TraceDecodeError,
    decode_path,
    decode_trace,
    encode,
)

__all__ = [
    "ALL_LABELS",
    "AdjacencyMapping",
    "Edge",
    "Graph",
    "LabelAllocator",
    "MissingEndpointError",
    "Node",
    "TraceDecodeError",
    "circle_graph",
    "decode_path",
    "decode_trace",
    "demo_graph",
    "encode",
    "node_distance",
    "random_graph",
]
