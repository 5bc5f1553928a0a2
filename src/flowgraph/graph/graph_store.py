from __future__ import annotations

import networkx as nx
from typing import Any, Dict, Iterator, List, Optional, Set, Tuple

from flowgraph.errors import (
    CannotDeleteRoot,
    DanglingReference,
    InvalidKind,
    NodeNotFound,
)
from flowgraph.graph.graph_schema import BRANCH_SLOTS, Node, NodeKind


class GraphStore:
    """
    Authoritative in-memory workflow graph.

    Nodes live as ``data`` attributes on a directed graph; every
    non-empty slot is mirrored as an edge carrying the slot name.
    Node values are immutable, so ``clone`` only copies the mapping.
    """

    def __init__(self) -> None:
        self._graph = nx.DiGraph()
        self._root_id: Optional[str] = None
        self.metadata: Dict[str, Any] = {}

    @classmethod
    def with_root(cls, root: Node) -> "GraphStore":
        if root.kind is not NodeKind.START:
            raise InvalidKind(root.kind.value, "root must be a start node")
        store = cls()
        store.put_node(root)
        return store

    # -------------------- Nodes --------------------

    @property
    def root_id(self) -> str:
        if self._root_id is None:
            raise NodeNotFound("<root>")
        return self._root_id

    @property
    def root(self) -> Node:
        return self.get_node(self.root_id)

    def has_node(self, node_id: str) -> bool:
        return node_id in self._graph

    def get_node(self, node_id: str) -> Node:
        if node_id not in self._graph:
            raise NodeNotFound(node_id)
        return self._graph.nodes[node_id]["data"]

    def get_nodes(self) -> List[Node]:
        return [data["data"] for _, data in self._graph.nodes(data=True)]

    def put_node(self, node: Node) -> None:
        """
        Insert or replace a node and re-derive its outgoing edges.

        Every child it names must already be stored. A second Start
        node is rejected.
        """
        if node.kind is NodeKind.START and self._root_id not in (None, node.id):
            raise InvalidKind(node.kind.value, "store already has a start node")

        for slot, child_id in node.slots():
            if child_id is not None and child_id not in self._graph:
                raise DanglingReference(node.id, slot, child_id)

        if node.id in self._graph:
            self._graph.remove_edges_from(list(self._graph.out_edges(node.id)))

        self._graph.add_node(node.id, data=node)
        for slot, child_id in node.slots():
            if child_id is not None:
                self._graph.add_edge(node.id, child_id, slot=slot)

        if node.kind is NodeKind.START:
            self._root_id = node.id

    def remove_node(self, node_id: str) -> Node:
        """
        Drop a node that no slot references any more.
        """
        node = self.get_node(node_id)
        if node_id == self._root_id:
            raise CannotDeleteRoot(node_id)

        parent = self.parent_of(node_id)
        if parent is not None:
            parent_id, slot = parent
            raise DanglingReference(parent_id, slot, node_id)

        self._graph.remove_node(node_id)
        return node

    def drop_unreachable(self) -> List[str]:
        """
        Remove every node the root can no longer reach.

        Returns the dropped ids.
        """
        reachable = self.reachable_ids()
        orphans = [n for n in self._graph.nodes if n not in reachable]
        self._graph.remove_nodes_from(orphans)
        return orphans

    # -------------------- Slots --------------------

    def references_to(self, node_id: str) -> List[Tuple[str, str]]:
        """All ``(parent_id, slot)`` pairs pointing at ``node_id``."""
        if node_id not in self._graph:
            return []
        return [
            (parent_id, data["slot"])
            for parent_id, _, data in self._graph.in_edges(node_id, data=True)
        ]

    def parent_of(self, node_id: str) -> Optional[Tuple[str, str]]:
        refs = self.references_to(node_id)
        return refs[0] if refs else None

    # -------------------- Traversal --------------------

    def reachable_ids(self) -> Set[str]:
        if self._root_id is None:
            return set()
        return {self._root_id} | nx.descendants(self._graph, self._root_id)

    def walk(self) -> Iterator[Tuple[int, Optional[str], Node]]:
        """
        Depth-first pre-order from the root.

        Yields ``(depth, slot, node)``; ``true`` is visited before
        ``false``. This is the order a renderer lays nodes out in.
        """
        if self._root_id is None:
            return

        stack: List[Tuple[int, Optional[str], str]] = [(0, None, self._root_id)]
        seen: Set[str] = set()

        while stack:
            depth, slot, node_id = stack.pop()
            if node_id in seen:
                continue
            seen.add(node_id)

            node = self.get_node(node_id)
            yield depth, slot, node

            for child_slot, child_id in reversed(list(node.slots())):
                if child_id is not None:
                    stack.append((depth + 1, child_slot, child_id))

    # -------------------- Analytics --------------------

    def node_count(self) -> int:
        return self._graph.number_of_nodes()

    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    def validate(self) -> List[str]:
        """
        Check the structural invariants.

        Returns a list of error messages (empty = valid).
        """
        errors: List[str] = []

        starts = [n for n in self.get_nodes() if n.kind is NodeKind.START]
        if len(starts) != 1:
            errors.append(f"Expected exactly one start node, found {len(starts)}.")
        elif starts[0].id != self._root_id:
            errors.append("Start node is not the designated root.")

        for node in self.get_nodes():
            if node.is_branch and set(node.children) != set(BRANCH_SLOTS):
                errors.append(f"Branch '{node.id}' must have exactly true/false slots.")

            for slot, child_id in node.slots():
                if child_id is not None and child_id not in self._graph:
                    errors.append(
                        f"Slot '{slot}' of '{node.id}' references missing '{child_id}'."
                    )

        for node_id in self._graph.nodes:
            refs = self.references_to(node_id)
            if len(refs) > 1:
                errors.append(f"Node '{node_id}' has {len(refs)} parents.")
            if node_id == self._root_id and refs:
                errors.append("Start node must not be a child.")

        return errors

    # -------------------- Export --------------------

    def to_dict(self) -> Dict[str, Any]:
        nodes = {node.id: node.to_dict() for _, _, node in self.walk()}
        for node in self.get_nodes():
            nodes.setdefault(node.id, node.to_dict())
        return {"root": self._root_id, "nodes": nodes}

    # -------------------- Cloning --------------------

    def clone(self) -> "GraphStore":
        g = GraphStore()
        g._graph = self._graph.copy()
        g._root_id = self._root_id
        g.metadata = dict(self.metadata)
        return g

    # -------------------- Equality --------------------

    def _as_mapping(self) -> Dict[str, Node]:
        return {node.id: node for node in self.get_nodes()}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GraphStore):
            return NotImplemented
        return (
            self._root_id == other._root_id
            and self._as_mapping() == other._as_mapping()
        )

    __hash__ = None  # type: ignore[assignment]

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._graph

    def __len__(self) -> int:
        return self.node_count()
