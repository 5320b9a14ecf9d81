"""Add-on manifest, built once from configuration at startup."""

from mastermindtv.addon.schemas import CatalogDescriptor, CatalogExtra, Manifest
from mastermindtv.config import AddonConfig

RESOURCES = ["stream", "catalog", "meta"]


def build_manifest(addon: AddonConfig) -> Manifest:
    catalog = addon.catalog
    return Manifest(
        id=addon.id,
        version=addon.version,
        name=addon.name,
        description=addon.description,
        resources=list(RESOURCES),
        types=[catalog.type],
        catalogs=[
            CatalogDescriptor(
                type=catalog.type,
                id=catalog.id,
                name=catalog.name,
                extra=[
                    CatalogExtra(name="genre", is_required=False, options=list(catalog.genres)),
                ],
            )
        ],
        id_prefixes=list(addon.id_prefixes),
        logo=addon.logo,
        background=addon.background,
    )
