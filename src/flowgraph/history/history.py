from __future__ import annotations

import logging
from typing import List, Optional

from flowgraph.config.settings import HistoryConfig
from flowgraph.errors import NothingToRedo, NothingToUndo
from flowgraph.graph.graph_store import GraphStore


class HistoryManager:
    """
    Owns the live workflow graph and its undo/redo snapshots.

    ``past`` is ordered oldest first, ``future`` next-redo first.
    Every store that enters or leaves the manager is cloned, so
    neither the live graph nor a snapshot is ever shared with a
    caller. Edits reach the live graph only through ``commit``.
    """

    def __init__(
        self,
        initial: GraphStore,
        *,
        config: Optional[HistoryConfig] = None,
    ) -> None:
        self.config = config or HistoryConfig()
        self._live = initial.clone()
        self._past: List[GraphStore] = []
        self._future: List[GraphStore] = []

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def live(self) -> GraphStore:
        return self._live.clone()

    @property
    def past(self) -> List[GraphStore]:
        return [snapshot.clone() for snapshot in self._past]

    @property
    def future(self) -> List[GraphStore]:
        return [snapshot.clone() for snapshot in self._future]

    def can_undo(self) -> bool:
        return bool(self._past)

    def can_redo(self) -> bool:
        return bool(self._future)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def commit(self, new_store: GraphStore) -> GraphStore:
        adopted = new_store.clone()

        self._past.append(self._live.clone())
        self._future.clear()
        self._live = adopted

        max_depth = self.config.max_depth
        if max_depth is not None and len(self._past) > max_depth:
            del self._past[: len(self._past) - max_depth]

        logging.getLogger("flowgraph.history").debug(
            "commit past=%d future=%d", len(self._past), len(self._future)
        )
        return self._live.clone()

    def undo(self) -> GraphStore:
        if not self._past:
            raise NothingToUndo()

        previous = self._past.pop()
        self._future.insert(0, self._live.clone())
        self._live = previous

        logging.getLogger("flowgraph.history").debug(
            "undo past=%d future=%d", len(self._past), len(self._future)
        )
        return self._live.clone()

    def redo(self) -> GraphStore:
        if not self._future:
            raise NothingToRedo()

        following = self._future.pop(0)
        self._past.append(self._live.clone())
        self._live = following

        logging.getLogger("flowgraph.history").debug(
            "redo past=%d future=%d", len(self._past), len(self._future)
        )
        return self._live.clone()
