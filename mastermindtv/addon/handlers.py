"""
Add-on request handlers.

Each handler asks the channel cache for the current record set and shapes
it into the response for one Stremio resource. Unsupported types or catalog
ids short-circuit to an empty answer without touching the cache.
"""

import logging
from typing import Any, Mapping, Optional

from mastermindtv.addon.catalog import browse
from mastermindtv.addon.meta import detail, streams
from mastermindtv.addon.schemas import CatalogResponse, MetaResponse, StreamResponse
from mastermindtv.cache.channel_cache import ChannelCache
from mastermindtv.config import AddonConfig

logger = logging.getLogger(__name__)


class AddonHandlers:
    """Catalog, meta and stream handlers backed by a ChannelCache."""

    def __init__(self, cache: ChannelCache, addon: AddonConfig):
        self.cache = cache
        self.addon = addon

    @property
    def item_type(self) -> str:
        return self.addon.catalog.type

    async def catalog(
        self,
        catalog_type: str,
        catalog_id: str,
        extra: Optional[Mapping[str, Any]] = None,
    ) -> CatalogResponse:
        logger.info(f"Request for catalog: type={catalog_type} id={catalog_id} extra={extra}")
        if catalog_type != self.item_type or catalog_id != self.addon.catalog.id:
            return CatalogResponse(metas=[])

        records = await self.cache.get_or_refresh()
        genre = (extra or {}).get("genre")
        return CatalogResponse(metas=browse(records, genre, item_type=self.item_type))

    async def meta(self, item_type: str, item_id: str) -> MetaResponse:
        logger.info(f"Request for meta: type={item_type} id={item_id}")
        if item_type != self.item_type:
            return MetaResponse(meta=None)

        records = await self.cache.get_or_refresh()
        return MetaResponse(
            meta=detail(
                records,
                item_id,
                item_type=self.item_type,
                description_template=self.addon.description_template,
            )
        )

    async def stream(self, item_type: str, item_id: str) -> StreamResponse:
        logger.info(f"Request for stream: type={item_type} id={item_id}")
        if item_type != self.item_type:
            return StreamResponse(streams=[])

        records = await self.cache.get_or_refresh()
        return StreamResponse(streams=streams(records, item_id, title=self.addon.stream_title))
