"""Pydantic schemas for Stremio add-on responses"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

POSTER_SHAPE = "landscape"


class AddonModel(BaseModel):
    """Base for add-on payloads; serialized with Stremio's camelCase names."""

    model_config = ConfigDict(populate_by_name=True)


# Manifest Schemas
class CatalogExtra(AddonModel):
    name: str
    is_required: bool = Field(False, alias="isRequired")
    options: list[str] = Field(default_factory=list)


class CatalogDescriptor(AddonModel):
    type: str
    id: str
    name: str
    extra: list[CatalogExtra] = Field(default_factory=list)


class Manifest(AddonModel):
    id: str
    version: str
    name: str
    description: str
    resources: list[str]
    types: list[str]
    catalogs: list[CatalogDescriptor]
    id_prefixes: list[str] = Field(default_factory=list, alias="idPrefixes")
    logo: Optional[str] = None
    background: Optional[str] = None


# Meta Schemas
class MetaPreview(AddonModel):
    id: str
    name: str
    type: str
    poster: Optional[str] = None
    genres: list[str] = Field(default_factory=list)
    poster_shape: str = Field(POSTER_SHAPE, alias="posterShape")


class MetaDetail(MetaPreview):
    background: Optional[str] = None
    description: str = ""


# Stream Schemas
class Stream(AddonModel):
    title: str
    url: str


# Response envelopes
class CatalogResponse(AddonModel):
    metas: list[MetaPreview] = Field(default_factory=list)


class MetaResponse(AddonModel):
    meta: Optional[MetaDetail] = None


class StreamResponse(AddonModel):
    streams: list[Stream] = Field(default_factory=list)
