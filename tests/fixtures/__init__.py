"""
Test Fixtures

Shared test data and fake collaborators.
"""

from .factories import TTL, ChannelFactory, FakeClock, FakeSource

__all__ = [
    "TTL",
    "ChannelFactory",
    "FakeClock",
    "FakeSource",
]
