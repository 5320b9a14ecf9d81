"""
Mastermind TV Caching Layer

Provides the TTL-expiring, single-flight cache for the remote channel list.
"""

from mastermindtv.cache.base import CacheSnapshot, CacheStats
from mastermindtv.cache.channel_cache import ChannelCache, ChannelFetcher

__all__ = [
    "CacheSnapshot",
    "CacheStats",
    "ChannelCache",
    "ChannelFetcher",
]
