from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from flowgraph.config.settings import FlowgraphConfig
from flowgraph.errors import FlowgraphError, UnsupportedIntent
from flowgraph.graph.graph_mutator import GraphMutator
from flowgraph.graph.graph_schema import NodeKind
from flowgraph.graph.graph_store import GraphStore
from flowgraph.graph.identifiers import IdentifierSource
from flowgraph.graph.node_factory import NodeFactory
from flowgraph.history.history import HistoryManager
from flowgraph.editor.intents import (
    DeleteIntent,
    DispatchResult,
    InsertIntent,
    Intent,
    RedoIntent,
    RelabelIntent,
    UndoIntent,
)
from flowgraph.editor.save_indicator import SaveIndicator


class WorkflowEditor:
    """
    Entry point for a presentation layer.

    This is the ONLY place where:
    - config is interpreted
    - intents are routed to the mutation engine or the history
    - failures are turned into typed results
    """

    def __init__(
        self,
        *,
        config: Optional[FlowgraphConfig] = None,
        ids: Optional[IdentifierSource] = None,
    ) -> None:

        self.config = config or FlowgraphConfig()

        # ---------------- Mutation ----------------

        self.factory = NodeFactory(ids=ids, config=self.config.factory)
        self.mutator = GraphMutator(factory=self.factory)

        # ---------------- History ----------------

        root = self.factory.create(NodeKind.START)
        self.history = HistoryManager(
            GraphStore.with_root(root),
            config=self.config.history,
        )

        # ---------------- Save confirmation ----------------

        self.save_indicator = SaveIndicator(
            confirmation_seconds=self.config.save.confirmation_seconds,
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_live_store(self) -> GraphStore:
        """A private copy of the live graph; edits go through ``dispatch``."""
        return self.history.live

    def can_undo(self) -> bool:
        return self.history.can_undo()

    def can_redo(self) -> bool:
        return self.history.can_redo()

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def dispatch(self, intent: Intent) -> DispatchResult:
        logger = logging.getLogger("flowgraph.editor")

        try:
            store = self._apply(intent)
        except FlowgraphError as exc:
            if exc.advisory:
                logger.info("%s: %s", type(intent).__name__, exc)
            else:
                logger.warning("%s rejected: %s", type(intent).__name__, exc)
            return DispatchResult(ok=False, store=self.history.live, error=exc)

        logger.info(
            "%s applied, nodes=%d",
            type(intent).__name__,
            store.node_count(),
        )
        return DispatchResult(ok=True, store=store)

    def _apply(self, intent: Intent) -> GraphStore:
        live = self.history.live

        if isinstance(intent, InsertIntent):
            return self.history.commit(
                self.mutator.insert(
                    live,
                    parent_id=intent.parent_id,
                    kind=intent.kind,
                    branch_key=intent.branch_key,
                    label=intent.label,
                )
            )

        if isinstance(intent, DeleteIntent):
            return self.history.commit(
                self.mutator.delete(live, node_id=intent.node_id)
            )

        if isinstance(intent, RelabelIntent):
            return self.history.commit(
                self.mutator.relabel(live, node_id=intent.node_id, label=intent.label)
            )

        if isinstance(intent, UndoIntent):
            return self.history.undo()

        if isinstance(intent, RedoIntent):
            return self.history.redo()

        raise UnsupportedIntent(intent)

    # ------------------------------------------------------------------
    # Save
    # ------------------------------------------------------------------

    def save(self) -> Dict[str, Any]:
        """
        Export the live graph as a plain mapping.

        The export is logged and the save confirmation restarted.
        There is no matching load.
        """
        exported = self.history.live.to_dict()
        count = self.save_indicator.mark()

        logging.getLogger("flowgraph.editor").info(
            "workflow saved (#%d): %s", count, exported
        )
        return exported
