"""
Catalog projection: turns cached channel records into a browse listing.

Genre filtering is a case- and accent-insensitive substring match against
the channel's group label, so a requested "musica" also matches
"MÚSICA CLÁSSICA".
"""

import unicodedata
from typing import Iterable, Sequence, Union

from mastermindtv.addon.schemas import MetaPreview
from mastermindtv.integration.channel_source import ChannelRecord

GenreFilter = Union[str, Iterable[str], None]


def fold(text: str) -> str:
    """Casefold and strip diacritics for comparison."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()


def normalize_genres(genre: GenreFilter) -> list[str]:
    """Accept a single genre or a sequence of them; drop blanks."""
    if genre is None:
        return []
    if isinstance(genre, str):
        genre = [genre]
    return [g for g in genre if g and g.strip()]


def matches_genre(record: ChannelRecord, genres: Sequence[str]) -> bool:
    if not record.group:
        return False
    group = fold(record.group)
    return any(fold(g) in group for g in genres)


def to_preview(record: ChannelRecord, item_type: str) -> MetaPreview:
    return MetaPreview(
        id=record.id,
        name=record.name,
        type=item_type,
        poster=record.logo,
        genres=record.genres,
    )


def browse(
    records: Sequence[ChannelRecord],
    genre: GenreFilter = None,
    item_type: str = "tv",
) -> list[MetaPreview]:
    """
    Project records into listing items, preserving cache order.

    With no (or an empty) genre filter every record is listed. Otherwise a
    record is listed only if its group contains one of the requested genres.
    """
    genres = normalize_genres(genre)
    if genres:
        records = [r for r in records if matches_genre(r, genres)]
    return [to_preview(r, item_type) for r in records]

