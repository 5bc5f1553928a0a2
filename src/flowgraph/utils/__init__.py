"""
Utility functions for flowgraph.

Low-level helpers used across the system.
No domain logic should live here.
"""

from flowgraph.utils.time import utc_now, seconds_since

__all__ = [
    "utc_now",
    "seconds_since",
]
