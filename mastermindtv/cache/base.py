"""
Cache snapshot and statistics types.
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from mastermindtv.integration.channel_source import ChannelRecord


@dataclass(frozen=True)
class CacheSnapshot:
    """An immutable channel list together with the time it was fetched."""

    records: Tuple[ChannelRecord, ...]
    fetched_at: float
    ttl: float

    def age(self, now: float) -> float:
        return now - self.fetched_at

    def is_fresh(self, now: float) -> bool:
        """A snapshot is servable without refresh while younger than its TTL."""
        return self.age(now) < self.ttl


@dataclass
class CacheStats:
    """Cache statistics."""
    hits: int = 0
    misses: int = 0
    refreshes: int = 0
    failures: int = 0
    coalesced: int = 0
    stale_served: int = 0

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate."""
        total = self.hits + self.misses
        return (self.hits / total * 100) if total > 0 else 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "hits": self.hits,
            "misses": self.misses,
            "refreshes": self.refreshes,
            "failures": self.failures,
            "coalesced": self.coalesced,
            "stale_served": self.stale_served,
            "hit_rate": round(self.hit_rate, 2),
        }
