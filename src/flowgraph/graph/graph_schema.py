from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

from flowgraph.errors import InvalidBranchKey, InvalidKind

# Slot names. Start/Action expose a single ``next`` slot, Branch nodes
# expose exactly ``true`` and ``false``, End nodes expose none.
NEXT_SLOT = "next"
TRUE_SLOT = "true"
FALSE_SLOT = "false"
BRANCH_SLOTS: Tuple[str, str] = (TRUE_SLOT, FALSE_SLOT)


class NodeKind(str, Enum):
    START = "start"
    ACTION = "action"
    BRANCH = "branch"
    END = "end"

    @classmethod
    def parse(cls, value: "NodeKind | str") -> "NodeKind":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidKind(value)

    def slot_names(self) -> Tuple[str, ...]:
        if self is NodeKind.BRANCH:
            return BRANCH_SLOTS
        if self is NodeKind.END:
            return ()
        return (NEXT_SLOT,)


def parse_branch_key(value: "bool | str") -> str:
    """
    Normalize a branch key to ``"true"`` or ``"false"``.

    Accepts booleans and their string spellings.
    """
    if isinstance(value, bool):
        return TRUE_SLOT if value else FALSE_SLOT
    if isinstance(value, str) and value.strip().lower() in BRANCH_SLOTS:
        return value.strip().lower()
    raise InvalidBranchKey(value)


@dataclass(frozen=True)
class Node:
    """
    A single step of the workflow.

    ``children`` maps slot name to child id, ``None`` marking an empty
    slot. It is a read-only view, so a node shared between graph
    snapshots cannot change under any of them; ``with_label`` and
    ``with_child`` return new values.
    """

    id: str
    kind: NodeKind
    label: str
    children: Mapping[str, Optional[str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", MappingProxyType(dict(self.children)))

    @property
    def is_branch(self) -> bool:
        return self.kind is NodeKind.BRANCH

    @property
    def is_terminal(self) -> bool:
        return self.kind is NodeKind.END

    @property
    def child(self) -> Optional[str]:
        """Single downstream neighbour of a non-branch node."""
        return self.children.get(NEXT_SLOT)

    def slots(self) -> Iterator[Tuple[str, Optional[str]]]:
        for name in self.kind.slot_names():
            yield name, self.children.get(name)

    def child_ids(self) -> Iterator[str]:
        for _, child_id in self.slots():
            if child_id is not None:
                yield child_id

    def with_label(self, label: str) -> "Node":
        return Node(
            id=self.id,
            kind=self.kind,
            label=label,
            children=dict(self.children),
        )

    def with_child(self, slot: str, child_id: Optional[str]) -> "Node":
        if slot not in self.kind.slot_names():
            raise KeyError(f"{self.kind.value} node has no slot '{slot}'")
        children = dict(self.children)
        children[slot] = child_id
        return Node(
            id=self.id,
            kind=self.kind,
            label=self.label,
            children=children,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "kind": self.kind.value,
            "label": self.label,
            "children": dict(self.slots()),
        }
