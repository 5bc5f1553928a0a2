"""
Editor facade for flowgraph.

Routes presentation intents through the mutation engine and the
undo/redo history and reports typed results.
"""

from flowgraph.editor.intents import (
    InsertIntent,
    DeleteIntent,
    RelabelIntent,
    UndoIntent,
    RedoIntent,
    DispatchResult,
)
from flowgraph.editor.save_indicator import SaveIndicator
from flowgraph.editor.workflow_editor import WorkflowEditor

__all__ = [
    "InsertIntent",
    "DeleteIntent",
    "RelabelIntent",
    "UndoIntent",
    "RedoIntent",
    "DispatchResult",
    "SaveIndicator",
    "WorkflowEditor",
]
