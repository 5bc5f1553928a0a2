from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

# ---------------------------------------------------------------------
# Node construction
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class FactoryConfig:
    """
    Controls how new nodes are identified and labelled.

    ``default_labels`` maps a kind value ("action", "branch", ...) to
    the label a new node receives when none is given. Kinds not listed
    fall back to the upper-cased kind name.
    """

    id_length: Optional[int] = 12
    default_labels: Dict[str, str] = field(
        default_factory=lambda: {"start": "Start"}
    )


# ---------------------------------------------------------------------
# Undo / redo history
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class HistoryConfig:
    """
    Controls the undo/redo snapshot stacks.

    ``max_depth`` of None keeps every snapshot for the lifetime of
    the editor.
    """

    max_depth: Optional[int] = None


# ---------------------------------------------------------------------
# Save confirmation
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class SaveConfig:
    """
    Controls the cosmetic "saved" confirmation shown after an export.
    """

    confirmation_seconds: float = 2.0


# ---------------------------------------------------------------------
# Root configuration object
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class FlowgraphConfig:
    """
    Root configuration object for flowgraph.

    Constructed explicitly and passed to ``WorkflowEditor``.
    """

    factory: FactoryConfig = field(default_factory=FactoryConfig)
    history: HistoryConfig = field(default_factory=HistoryConfig)
    save: SaveConfig = field(default_factory=SaveConfig)
