from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from flowgraph.errors import FlowgraphError
from flowgraph.graph.graph_schema import NodeKind
from flowgraph.graph.graph_store import GraphStore


@dataclass(frozen=True)
class InsertIntent:
    parent_id: str
    kind: Union[NodeKind, str]
    branch_key: Union[bool, str, None] = None
    label: Optional[str] = None


@dataclass(frozen=True)
class DeleteIntent:
    node_id: str


@dataclass(frozen=True)
class RelabelIntent:
    node_id: str
    label: str


@dataclass(frozen=True)
class UndoIntent:
    pass


@dataclass(frozen=True)
class RedoIntent:
    pass


Intent = Union[InsertIntent, DeleteIntent, RelabelIntent, UndoIntent, RedoIntent]


@dataclass(frozen=True)
class DispatchResult:
    """
    Outcome of a dispatched intent.

    - ok: whether the live graph moved
    - store: the live graph after the intent (unchanged on failure)
    - error: the typed failure, if any
    """

    ok: bool
    store: GraphStore
    error: Optional[FlowgraphError] = None

    @property
    def advisory(self) -> bool:
        return self.error is not None and self.error.advisory
