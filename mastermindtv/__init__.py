"""
Mastermind TV - Stremio live TV add-on

Serves a catalog of live TV channels read from a remote channel list:
- Catalog browsing with genre filter
- Per-channel metadata
- Playable stream resolution
- TTL cache in front of the remote list
"""

__version__ = "1.1.0"
__author__ = "Mastermind TV Contributors"
__license__ = "MIT"

from mastermindtv.config import get_config, load_config

__all__ = [
    "__version__",
    "get_config",
    "load_config",
]
