"""
Configuration layer for flowgraph.

Configuration contracts for node construction, undo/redo history and
save confirmation.

Configuration in flowgraph is:
- Explicit (passed, not global)
- Typed (frozen dataclasses)
"""

from flowgraph.config.settings import (
    FactoryConfig,
    HistoryConfig,
    SaveConfig,
    FlowgraphConfig,
)

__all__ = [
    "FactoryConfig",
    "HistoryConfig",
    "SaveConfig",
    "FlowgraphConfig",
]
