from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from flowgraph.utils.time import seconds_since, utc_now


@dataclass
class SaveIndicator:
    """
    Cosmetic "saved" confirmation.

    Only reads a monotonically increasing save counter and the last
    save time; it never touches the graph or its history.
    """

    confirmation_seconds: float
    save_count: int = 0
    last_saved_at: Optional[datetime] = None

    def mark(self, at: Optional[datetime] = None) -> int:
        self.save_count += 1
        self.last_saved_at = at or utc_now()
        return self.save_count

    def is_visible(self, now: Optional[datetime] = None) -> bool:
        if self.last_saved_at is None:
            return False
        return seconds_since(self.last_saved_at, now) < self.confirmation_seconds
