"""
Graph subsystem for flowgraph.

Defines the workflow graph abstractions:
- nodes and their slots
- identifier allocation and node construction
- the graph store and its copy-on-write mutation engine
"""

from flowgraph.graph.graph_schema import Node, NodeKind
from flowgraph.graph.identifiers import (
    IdentifierSource,
    UUIDIdentifierSource,
    SequentialIdentifierSource,
)
from flowgraph.graph.node_factory import NodeFactory
from flowgraph.graph.graph_store import GraphStore
from flowgraph.graph.graph_mutator import GraphMutator

__all__ = [
    "Node",
    "NodeKind",
    "IdentifierSource",
    "UUIDIdentifierSource",
    "SequentialIdentifierSource",
    "NodeFactory",
    "GraphStore",
    "GraphMutator",
]
