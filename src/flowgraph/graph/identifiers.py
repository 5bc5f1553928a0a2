from __future__ import annotations

from itertools import count
from typing import Optional, Protocol
from uuid import uuid4


class IdentifierSource(Protocol):
    """
    Allocates node identifiers.

    Only uniqueness within a session is guaranteed; callers must not
    rely on ordering or format.
    """

    def next(self) -> str:
        ...


class UUIDIdentifierSource:
    """
    Random identifiers from ``uuid4``.

    ``length`` truncates the hex form for shorter, UI-friendly ids.
    """

    def __init__(self, length: Optional[int] = None) -> None:
        if length is not None and length < 8:
            raise ValueError("identifier length must be at least 8")
        self.length = length

    def next(self) -> str:
        value = uuid4().hex
        if self.length is not None:
            return value[: self.length]
        return value


class SequentialIdentifierSource:
    """
    Deterministic ``<prefix>1, <prefix>2, ...`` identifiers.
    """

    def __init__(self, prefix: str = "n", start: int = 1) -> None:
        self.prefix = prefix
        self._counter = count(start)

    def next(self) -> str:
        return f"{self.prefix}{next(self._counter)}"
