"""
Typed failures raised by the workflow core.

Every failure is recoverable and local. The mutation engine and the
history manager raise these; ``WorkflowEditor.dispatch`` turns them
into a ``DispatchResult`` for the presentation layer.
"""

from __future__ import annotations


class FlowgraphError(Exception):
    """
    Base class for every failure the core can report.

    ``advisory`` errors are no-ops the UI should express by disabling
    an affordance rather than by showing a failure.
    """

    advisory: bool = False

    @property
    def kind(self) -> str:
        return type(self).__name__

    def __str__(self) -> str:
        # KeyError subclasses would otherwise repr() the message
        return self.args[0] if self.args else self.kind


class NodeNotFound(FlowgraphError, KeyError):
    def __init__(self, node_id: str) -> None:
        super().__init__(f"Node '{node_id}' not found")
        self.node_id = node_id


class InvalidKind(FlowgraphError, ValueError):
    def __init__(self, kind: object, reason: str | None = None) -> None:
        message = f"Invalid node kind: {kind!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.value = kind


class InvalidBranchKey(FlowgraphError, ValueError):
    def __init__(self, branch_key: object, reason: str | None = None) -> None:
        message = f"Invalid branch key: {branch_key!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.branch_key = branch_key


class SlotOccupied(FlowgraphError):
    def __init__(self, node_id: str, slot: str, child_id: str) -> None:
        super().__init__(
            f"Slot '{slot}' of node '{node_id}' already holds '{child_id}'"
        )
        self.node_id = node_id
        self.slot = slot
        self.child_id = child_id


class TerminalNode(FlowgraphError):
    def __init__(self, node_id: str) -> None:
        super().__init__(f"Node '{node_id}' is terminal and has no slots")
        self.node_id = node_id


class CannotDeleteRoot(FlowgraphError):
    def __init__(self, node_id: str) -> None:
        super().__init__(f"Node '{node_id}' is the Start node and cannot be deleted")
        self.node_id = node_id


class NothingToUndo(FlowgraphError):
    advisory = True

    def __init__(self) -> None:
        super().__init__("Nothing to undo")


class NothingToRedo(FlowgraphError):
    advisory = True

    def __init__(self) -> None:
        super().__init__("Nothing to redo")


class DanglingReference(FlowgraphError):
    """
    A node was stored with a slot pointing at an id the store
    does not hold. Only reachable through direct store misuse.
    """

    def __init__(self, node_id: str, slot: str, child_id: str) -> None:
        super().__init__(
            f"Slot '{slot}' of node '{node_id}' references unknown node '{child_id}'"
        )
        self.node_id = node_id
        self.slot = slot
        self.child_id = child_id


class DuplicateIdentifier(FlowgraphError):
    """
    The identifier source handed out an id the graph already holds.
    """

    def __init__(self, node_id: str) -> None:
        super().__init__(f"Identifier '{node_id}' is already in use")
        self.node_id = node_id


class UnsupportedIntent(FlowgraphError, TypeError):
    def __init__(self, intent: object) -> None:
        super().__init__(f"Unsupported intent: {intent!r}")
        self.intent = intent
