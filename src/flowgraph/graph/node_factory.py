from __future__ import annotations

from typing import Optional

from flowgraph.config.settings import FactoryConfig
from flowgraph.graph.graph_schema import Node, NodeKind
from flowgraph.graph.identifiers import IdentifierSource, UUIDIdentifierSource


class NodeFactory:
    """
    Builds new nodes with empty slots and a default label.

    The only side effect is identifier allocation.
    """

    def __init__(
        self,
        *,
        ids: Optional[IdentifierSource] = None,
        config: Optional[FactoryConfig] = None,
    ) -> None:
        self.config = config or FactoryConfig()
        self.ids = ids or UUIDIdentifierSource(self.config.id_length)

    def create(self, kind: NodeKind | str, label: Optional[str] = None) -> Node:
        node_kind = NodeKind.parse(kind)

        if label is None:
            label = self.default_label(node_kind)

        return Node(
            id=self.ids.next(),
            kind=node_kind,
            label=label,
            children={slot: None for slot in node_kind.slot_names()},
        )

    def default_label(self, kind: NodeKind) -> str:
        return self.config.default_labels.get(kind.value, kind.value.upper())
