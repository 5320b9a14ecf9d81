"""Stremio add-on surface: manifest, projections and request handlers"""

from mastermindtv.addon.handlers import AddonHandlers
from mastermindtv.addon.manifest import build_manifest

__all__ = [
    "AddonHandlers",
    "build_manifest",
]
