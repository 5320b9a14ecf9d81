"""
Mastermind TV Test Configuration

Shared fixtures and configuration for all tests.
"""

import os
import sys
from pathlib import Path
from typing import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import mastermindtv.config as config_module
from mastermindtv.cache import ChannelCache
from mastermindtv.config import MastermindConfig
from mastermindtv.main import create_app
from tests.fixtures import TTL, ChannelFactory, FakeClock, FakeSource


# ============ Fake Collaborators ============


@pytest.fixture
def clock() -> FakeClock:
    """Manually advanced clock for cache expiry."""
    return FakeClock()


@pytest.fixture
def sample_channels() -> list:
    """A small catalog covering the interesting shapes of a channel."""
    return [
        ChannelFactory.create(id="vf-1", name="Canal A", group="ESPORTES", logo=None,
                              url="http://x/a.m3u8"),
        ChannelFactory.create(id="vf-2", name="Canal B", group="Música Clássica"),
        ChannelFactory.create(id="vf-3", name="Canal C", group=None),
        ChannelFactory.create(id="vf-4", name="Canal D", group="NOTÍCIAS", url=None),
    ]


@pytest.fixture
def source(sample_channels) -> FakeSource:
    """Fake origin serving the sample channels."""
    return FakeSource(sample_channels)


@pytest.fixture
def cache(source: FakeSource, clock: FakeClock) -> ChannelCache:
    """Channel cache wired to the fake origin and clock."""
    return ChannelCache(source, ttl=TTL, clock=clock)


# ============ FastAPI Test Client Fixtures ============


@pytest.fixture
def app_config() -> MastermindConfig:
    return MastermindConfig()


@pytest.fixture
def app(app_config: MastermindConfig, source: FakeSource, clock: FakeClock) -> FastAPI:
    """Create a test FastAPI application backed by the fake origin."""
    return create_app(app_config, source=source, clock=clock)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Create a synchronous test client."""
    with TestClient(app) as client:
        yield client


# ============ Temporary File Fixtures ============


@pytest.fixture
def temp_config_file(tmp_path: Path) -> Path:
    """Create a temporary config file."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        """
server:
  host: "127.0.0.1"
  port: 7000
  debug: true

cache:
  ttl_seconds: 60

logging:
  level: "DEBUG"
"""
    )
    return config_file


# ============ Environment Fixtures ============


@pytest.fixture(autouse=True)
def clean_environment():
    """Clean environment variables and the global config for each test."""
    original_env = os.environ.copy()

    for key in list(os.environ.keys()):
        if key.startswith("MASTERMINDTV_") or key == "PORT":
            del os.environ[key]
    config_module._config = None

    yield

    os.environ.clear()
    os.environ.update(original_env)
    config_module._config = None


# ============ Markers ============


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
