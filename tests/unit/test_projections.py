"""
Unit tests for the catalog, detail and stream projections.
"""

import pytest

from mastermindtv.addon.catalog import browse, fold, matches_genre, normalize_genres
from mastermindtv.addon.manifest import build_manifest
from mastermindtv.addon.meta import detail, find_channel, streams
from mastermindtv.config import AddonConfig
from tests.fixtures import ChannelFactory


@pytest.mark.unit
class TestGenreFilter:
    """Tests for genre matching."""

    def test_fold_ignores_case_and_accents(self):
        assert fold("Música Clássica") == fold("MUSICA CLASSICA")

    def test_normalize_single_string(self):
        assert normalize_genres("ESPORTES") == ["ESPORTES"]

    def test_normalize_drops_blanks(self):
        assert normalize_genres(["", "  ", "MÚSICA"]) == ["MÚSICA"]
        assert normalize_genres(None) == []

    def test_substring_match(self):
        record = ChannelFactory.create(group="MÚSICA CLÁSSICA")

        assert matches_genre(record, ["MÚSICA"])

    def test_case_insensitive_match(self):
        record = ChannelFactory.create(group="Música Clássica")

        assert matches_genre(record, ["musica"])

    def test_any_requested_genre_matches(self):
        record = ChannelFactory.create(group="ESPORTES")

        assert matches_genre(record, ["NOTÍCIAS", "esportes"])

    def test_no_group_never_matches(self):
        record = ChannelFactory.create(group=None)

        assert not matches_genre(record, ["ESPORTES"])


@pytest.mark.unit
class TestBrowse:
    """Tests for the browse listing."""

    def test_no_filter_lists_everything_in_order(self, sample_channels):
        items = browse(sample_channels)

        assert [i.id for i in items] == ["vf-1", "vf-2", "vf-3", "vf-4"]

    def test_empty_filter_lists_everything(self, sample_channels):
        assert len(browse(sample_channels, [])) == 4
        assert len(browse(sample_channels, "")) == 4

    def test_item_shape(self, sample_channels):
        item = browse(sample_channels)[1]

        assert item.name == "Canal B"
        assert item.type == "tv"
        assert item.poster == sample_channels[1].logo
        assert item.genres == ["Música Clássica"]
        assert item.poster_shape == "landscape"

    def test_record_without_group_has_no_genres(self, sample_channels):
        item = browse(sample_channels)[2]

        assert item.genres == []

    def test_filter_by_genre(self, sample_channels):
        items = browse(sample_channels, ["musica"])

        assert [i.id for i in items] == ["vf-2"]

    def test_filter_excludes_records_without_group(self, sample_channels):
        items = browse(sample_channels, ["ESPORTES", "NOTÍCIAS", "MÚSICA"])

        assert [i.id for i in items] == ["vf-1", "vf-2", "vf-4"]

    def test_filter_without_matches(self, sample_channels):
        assert browse(sample_channels, "INFANTIL") == []

    def test_short_token_over_matches_composite_groups(self):
        records = [
            ChannelFactory.create(id="vf-10", group="FILMES E SÉRIES"),
            ChannelFactory.create(id="vf-11", group="SÉRIES"),
        ]

        assert [i.id for i in browse(records, "SÉRIES")] == ["vf-10", "vf-11"]

    def test_serialized_with_stremio_names(self, sample_channels):
        payload = browse(sample_channels)[0].model_dump(by_alias=True, exclude_none=True)

        assert payload == {
            "id": "vf-1",
            "name": "Canal A",
            "type": "tv",
            "genres": ["ESPORTES"],
            "posterShape": "landscape",
        }


@pytest.mark.unit
class TestDetail:
    """Tests for the detail projection."""

    def test_find_first_match(self):
        first = ChannelFactory.create(id="vf-1", name="First")
        dup = ChannelFactory.create(id="vf-1", name="Duplicate")

        assert find_channel([first, dup], "vf-1") is first

    def test_find_exact_id_only(self, sample_channels):
        assert find_channel(sample_channels, "VF-1") is None
        assert find_channel(sample_channels, "vf-") is None

    def test_detail_found(self, sample_channels):
        meta = detail(sample_channels, "vf-2")

        assert meta.id == "vf-2"
        assert meta.name == "Canal B"
        assert meta.poster == sample_channels[1].logo
        assert meta.background == sample_channels[1].logo
        assert meta.genres == ["Música Clássica"]
        assert meta.poster_shape == "landscape"
        assert meta.description == "Assista ao canal Canal B ao vivo."

    def test_detail_not_found(self, sample_channels):
        assert detail(sample_channels, "vf-404") is None

    def test_custom_description_template(self, sample_channels):
        meta = detail(sample_channels, "vf-1", description_template="Watch {name} live.")

        assert meta.description == "Watch Canal A live."


@pytest.mark.unit
class TestStreams:
    """Tests for the stream projection."""

    def test_stream_found(self, sample_channels):
        result = streams(sample_channels, "vf-1")

        assert len(result) == 1
        assert result[0].title == "Assistir"
        assert result[0].url == "http://x/a.m3u8"

    def test_stream_without_url(self, sample_channels):
        assert streams(sample_channels, "vf-4") == []

    def test_stream_not_found(self, sample_channels):
        assert streams(sample_channels, "vf-404") == []

    def test_custom_title(self, sample_channels):
        assert streams(sample_channels, "vf-1", title="Play")[0].title == "Play"


@pytest.mark.unit
class TestManifest:
    """Tests for the add-on manifest."""

    def test_manifest_from_defaults(self):
        manifest = build_manifest(AddonConfig())
        payload = manifest.model_dump(by_alias=True)

        assert payload["id"] == "community.iptvbrasil.mastermind.online"
        assert payload["resources"] == ["stream", "catalog", "meta"]
        assert payload["types"] == ["tv"]
        assert payload["idPrefixes"] == ["vf-"]

        catalog = payload["catalogs"][0]
        assert catalog["id"] == "vivo-fibra-tv"
        assert catalog["extra"][0]["name"] == "genre"
        assert catalog["extra"][0]["isRequired"] is False
        assert "MÚSICA" in catalog["extra"][0]["options"]
