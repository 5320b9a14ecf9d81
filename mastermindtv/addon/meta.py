"""Detail and stream projections over cached channel records."""

from typing import Optional, Sequence

from mastermindtv.addon.schemas import MetaDetail, Stream
from mastermindtv.integration.channel_source import ChannelRecord

DEFAULT_DESCRIPTION = "Assista ao canal {name} ao vivo."
DEFAULT_STREAM_TITLE = "Assistir"


def find_channel(records: Sequence[ChannelRecord], channel_id: str) -> Optional[ChannelRecord]:
    """Linear scan for an exact id match; first one wins."""
    for record in records:
        if record.id == channel_id:
            return record
    return None


def detail(
    records: Sequence[ChannelRecord],
    channel_id: str,
    item_type: str = "tv",
    description_template: str = DEFAULT_DESCRIPTION,
) -> Optional[MetaDetail]:
    record = find_channel(records, channel_id)
    if record is None:
        return None

    return MetaDetail(
        id=record.id,
        name=record.name,
        type=item_type,
        poster=record.logo,
        background=record.logo,
        genres=record.genres,
        description=description_template.format(name=record.name),
    )


def streams(
    records: Sequence[ChannelRecord],
    channel_id: str,
    title: str = DEFAULT_STREAM_TITLE,
) -> list[Stream]:
    """At most one stream: the channel's own url, if it has one."""
    record = find_channel(records, channel_id)
    if record is None or not record.url:
        return []
    return [Stream(title=title, url=record.url)]
