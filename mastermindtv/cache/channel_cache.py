"""
Process-wide channel catalog cache.

Holds a single immutable CacheSnapshot and replaces it wholesale on every
successful refresh. Freshness is evaluated lazily on access; there are no
timers. Concurrent callers that find the snapshot stale share one in-flight
refresh, so the origin sees at most one request per expiry window.
"""

import asyncio
import logging
import time
from typing import Callable, Optional, Protocol, Sequence, Tuple

from mastermindtv.cache.base import CacheSnapshot, CacheStats
from mastermindtv.integration.channel_source import ChannelRecord, OriginError

logger = logging.getLogger(__name__)


class ChannelFetcher(Protocol):
    async def fetch(self) -> Sequence[ChannelRecord]: ...


class ChannelCache:
    """
    TTL cache for the channel list.

    Args:
        source: Object with an async ``fetch()`` returning channel records
            or raising OriginError.
        ttl: Snapshot lifetime in seconds, fixed for the cache's lifetime.
        clock: Monotonic time source in seconds.
        serve_stale_on_error: Return the previous snapshot's records when a
            refresh fails instead of an empty list.
    """

    def __init__(
        self,
        source: ChannelFetcher,
        ttl: float,
        clock: Callable[[], float] = time.monotonic,
        serve_stale_on_error: bool = False,
    ):
        if ttl <= 0:
            raise ValueError("ttl must be positive")
        self._source = source
        self._ttl = float(ttl)
        self._clock = clock
        self._serve_stale_on_error = serve_stale_on_error
        self._snapshot: Optional[CacheSnapshot] = None
        self._inflight: Optional[asyncio.Task] = None
        self.stats = CacheStats()

    @property
    def ttl(self) -> float:
        return self._ttl

    @property
    def snapshot(self) -> Optional[CacheSnapshot]:
        """The live snapshot, fresh or not. None until the first successful fetch."""
        return self._snapshot

    def snapshot_age(self) -> Optional[float]:
        snapshot = self._snapshot
        return None if snapshot is None else snapshot.age(self._clock())

    def is_fresh(self) -> bool:
        snapshot = self._snapshot
        return snapshot is not None and snapshot.is_fresh(self._clock())

    async def get_or_refresh(self) -> Tuple[ChannelRecord, ...]:
        """
        Return the cached channel list, refreshing it from the origin if stale.

        Never raises OriginError: a failed refresh yields an empty tuple (or
        the previous records when stale serving is enabled).
        """
        snapshot = self._snapshot
        if snapshot is not None and snapshot.is_fresh(self._clock()):
            self.stats.hits += 1
            logger.debug("Loading channels from cache.")
            return snapshot.records

        self.stats.misses += 1
        task = self._inflight
        if task is None:
            task = asyncio.ensure_future(self._refresh(snapshot))
            self._inflight = task
        else:
            self.stats.coalesced += 1
            logger.debug("Waiting for in-flight channel refresh")

        # A cancelled waiter must not cancel the refresh the others wait on
        return await asyncio.shield(task)

    async def _refresh(self, previous: Optional[CacheSnapshot]) -> Tuple[ChannelRecord, ...]:
        try:
            try:
                records = await self._source.fetch()
            except OriginError as e:
                self.stats.failures += 1
                logger.error(f"Error loading channels from origin: {e}")
                if self._serve_stale_on_error and previous is not None:
                    self.stats.stale_served += 1
                    logger.warning(
                        f"Serving {len(previous.records)} stale channels "
                        f"({previous.age(self._clock()):.0f}s old)"
                    )
                    return previous.records
                return ()

            snapshot = CacheSnapshot(
                records=tuple(records),
                fetched_at=self._clock(),
                ttl=self._ttl,
            )
            self._snapshot = snapshot
            self.stats.refreshes += 1
            logger.info(f"Loaded and cached {len(snapshot.records)} channels.")
            return snapshot.records
        finally:
            self._inflight = None
