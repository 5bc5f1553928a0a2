from __future__ import annotations

import logging
from typing import Optional

from flowgraph.errors import (
    CannotDeleteRoot,
    DuplicateIdentifier,
    InvalidBranchKey,
    InvalidKind,
    SlotOccupied,
    TerminalNode,
)
from flowgraph.graph.graph_schema import NEXT_SLOT, NodeKind, parse_branch_key
from flowgraph.graph.graph_store import GraphStore
from flowgraph.graph.node_factory import NodeFactory


class GraphMutator:
    """
    Structural edits over a workflow graph.

    Every operation takes a store and returns a new one; the input is
    never modified. Failures are raised before anything is copied, so
    a rejected edit has no effect at all.
    """

    def __init__(self, *, factory: Optional[NodeFactory] = None) -> None:
        self.factory = factory or NodeFactory()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def insert(
        self,
        store: GraphStore,
        *,
        parent_id: str,
        kind: NodeKind | str,
        branch_key: "bool | str | None" = None,
        label: Optional[str] = None,
    ) -> GraphStore:
        """
        Attach a new node of ``kind`` to an empty slot of ``parent_id``.

        Branch parents need ``branch_key`` (true/false); start and
        action parents have a single slot and ignore it.
        """

        node_kind = NodeKind.parse(kind)
        if node_kind is NodeKind.START:
            raise InvalidKind(node_kind.value, "a workflow has a single start node")

        parent = store.get_node(parent_id)

        # ---------------- Slot resolution ----------------

        if parent.is_terminal:
            raise TerminalNode(parent_id)

        if parent.is_branch:
            if branch_key is None:
                raise InvalidBranchKey(None, "branch parents need true or false")
            slot = parse_branch_key(branch_key)
        else:
            slot = NEXT_SLOT

        occupant = parent.children.get(slot)
        if occupant is not None:
            raise SlotOccupied(parent_id, slot, occupant)

        # ---------------- Apply ----------------

        node = self.factory.create(node_kind, label)
        if store.has_node(node.id):
            raise DuplicateIdentifier(node.id)

        g = store.clone()
        g.put_node(node)
        g.put_node(parent.with_child(slot, node.id))
        g.metadata["operation"] = "insert"
        g.metadata["node_id"] = node.id

        logging.getLogger("flowgraph.mutation").debug(
            "insert %s %s under %s[%s]",
            node.kind.value,
            node.id,
            parent_id,
            slot,
        )
        return g

    def delete(self, store: GraphStore, *, node_id: str) -> GraphStore:
        """
        Remove a node and rewire every slot that pointed at it.

        A non-branch node is spliced out: its parent slot takes over
        its single child. A branch node takes its subtree with it: the
        parent slot becomes empty and the orphans are swept.
        """

        if node_id == store.root_id:
            raise CannotDeleteRoot(node_id)

        target = store.get_node(node_id)
        replacement = None if target.is_branch else target.child

        g = store.clone()

        # ---------------- Rewire ----------------

        for parent_id, slot in g.references_to(node_id):
            g.put_node(g.get_node(parent_id).with_child(slot, replacement))

        g.remove_node(node_id)

        # ---------------- Sweep ----------------

        dropped = g.drop_unreachable()
        g.metadata["operation"] = "delete"
        g.metadata["node_id"] = node_id

        logging.getLogger("flowgraph.mutation").debug(
            "delete %s %s, spliced=%s, pruned=%d",
            target.kind.value,
            node_id,
            replacement,
            len(dropped),
        )
        return g

    def relabel(self, store: GraphStore, *, node_id: str, label: str) -> GraphStore:
        node = store.get_node(node_id)

        g = store.clone()
        g.put_node(node.with_label(label))
        g.metadata["operation"] = "relabel"
        g.metadata["node_id"] = node_id
        return g

    def prune_unreachable(self, store: GraphStore) -> GraphStore:
        g = store.clone()
        dropped = g.drop_unreachable()
        if dropped:
            logging.getLogger("flowgraph.mutation").info(
                "pruned %d unreachable nodes", len(dropped)
            )
        return g
