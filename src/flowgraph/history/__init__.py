"""
History subsystem for flowgraph.

Keeps the undo/redo timeline as stacks of immutable graph snapshots.
"""

from flowgraph.history.history import HistoryManager

__all__ = [
    "HistoryManager",
]
