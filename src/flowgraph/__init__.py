"""
flowgraph
=========

Core of a visual workflow builder: a branching workflow graph
(start -> actions / conditional branches -> end) edited through
copy-on-write mutations with full undo/redo.

Core idea:
- Every edit produces a new graph; history keeps immutable snapshots.

Public API:
- GraphStore
- GraphMutator
- HistoryManager
- WorkflowEditor
"""

from flowgraph.graph.graph_store import GraphStore
from flowgraph.graph.graph_mutator import GraphMutator
from flowgraph.history.history import HistoryManager
from flowgraph.editor.workflow_editor import WorkflowEditor

__all__ = [
    "GraphStore",
    "GraphMutator",
    "HistoryManager",
    "WorkflowEditor",
]

__version__ = "0.1.0"
