"""
Stremio add-on protocol routes.

Stremio requests resources as static-looking JSON paths:

    /manifest.json
    /catalog/{type}/{id}.json
    /catalog/{type}/{id}/{extra}.json   (extra = "genre=ESPORTES")
    /meta/{type}/{id}.json
    /stream/{type}/{id}.json
"""

import logging
from typing import Any
from urllib.parse import parse_qsl

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse

from mastermindtv.addon.handlers import AddonHandlers
from mastermindtv.addon.schemas import CatalogResponse, Manifest, MetaResponse, StreamResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Add-on"])


def get_handlers(request: Request) -> AddonHandlers:
    return request.app.state.handlers


def raw_extra_segment(extra: str, request: Request) -> str:
    """
    Return the extra segment exactly as sent, still percent-encoded.

    The ``{extra}`` path parameter is already decoded, so a value holding an
    encoded ``&`` or ``=`` could no longer be split correctly.
    """
    raw_path = request.scope.get("raw_path")
    if not raw_path:
        return extra
    segment = raw_path.decode("latin-1").rsplit("/", 1)[-1]
    return segment.removesuffix(".json")


def parse_extra(extra: str | None, request: Request) -> dict[str, Any]:
    """
    Merge the path-encoded extra segment with query parameters.

    ``extra`` is the raw, still percent-encoded segment. Repeated keys
    collect into a list, so ``genre=A&genre=B`` yields
    ``{"genre": ["A", "B"]}``.
    """
    pairs: list[tuple[str, str]] = []
    if extra:
        pairs.extend(parse_qsl(extra, keep_blank_values=False))
    pairs.extend(request.query_params.multi_items())

    parsed: dict[str, Any] = {}
    for key, value in pairs:
        if key in parsed:
            existing = parsed[key]
            if isinstance(existing, list):
                existing.append(value)
            else:
                parsed[key] = [existing, value]
        else:
            parsed[key] = value
    return parsed


@router.get("/", include_in_schema=False)
async def root() -> RedirectResponse:
    return RedirectResponse(url="/manifest.json")


@router.get("/manifest.json", response_model=Manifest, response_model_exclude_none=True)
async def manifest(request: Request) -> Manifest:
    return request.app.state.manifest


@router.get(
    "/catalog/{catalog_type}/{catalog_id}.json",
    response_model=CatalogResponse,
    response_model_exclude_none=True,
)
async def catalog(
    catalog_type: str,
    catalog_id: str,
    request: Request,
    handlers: AddonHandlers = Depends(get_handlers),
) -> CatalogResponse:
    return await handlers.catalog(catalog_type, catalog_id, parse_extra(None, request))


@router.get(
    "/catalog/{catalog_type}/{catalog_id}/{extra}.json",
    response_model=CatalogResponse,
    response_model_exclude_none=True,
)
async def catalog_with_extra(
    catalog_type: str,
    catalog_id: str,
    extra: str,
    request: Request,
    handlers: AddonHandlers = Depends(get_handlers),
) -> CatalogResponse:
    extras = parse_extra(raw_extra_segment(extra, request), request)
    return await handlers.catalog(catalog_type, catalog_id, extras)


@router.get("/meta/{item_type}/{item_id}.json", response_model=MetaResponse)
async def meta(
    item_type: str,
    item_id: str,
    handlers: AddonHandlers = Depends(get_handlers),
) -> MetaResponse:
    return await handlers.meta(item_type, item_id)


@router.get("/stream/{item_type}/{item_id}.json", response_model=StreamResponse)
async def stream(
    item_type: str,
    item_id: str,
    handlers: AddonHandlers = Depends(get_handlers),
) -> StreamResponse:
    return await handlers.stream(item_type, item_id)
