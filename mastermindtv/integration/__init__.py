"""
Integrations with remote channel sources.
"""

from mastermindtv.integration.channel_source import (
    ChannelRecord,
    ChannelSource,
    OriginError,
    parse_channels,
)

__all__ = [
    "ChannelRecord",
    "ChannelSource",
    "OriginError",
    "parse_channels",
]
