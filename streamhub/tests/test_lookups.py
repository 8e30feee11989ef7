"""
Tests for the static lookup tables.
"""
from datetime import timedelta

import pytest

from streamhub import lookups
from streamhub.catalog import BANDCAMP, NICONICO, SOUNDCLOUD, YOUTUBE


@pytest.mark.parametrize("service_id", [-1, 7, 8, 100])
def test_unknown_ids_get_generic_icon(service_id):
    assert lookups.get_icon(service_id) == lookups.GENERIC_ICON


def test_known_icons():
    assert lookups.get_icon(0) == "place_holder_youtube"
    assert lookups.get_icon(1) == "place_holder_cloud"
    assert lookups.get_icon(2) == "place_holder_gadse"
    assert lookups.get_icon(3) == "place_holder_peertube"
    assert lookups.get_icon(4) == "place_holder_bandcamp"
    assert lookups.get_icon(5) == lookups.get_icon(6) == "place_holder_niconico"


def test_filter_label_uses_localizer():
    """Verify known filter keys are resolved through the given localizer."""
    seen = []

    def localizer(key):
        seen.append(key)
        return key.upper()

    assert lookups.get_translated_filter_label("music_videos", localizer) == "VIDEOS_STRING"
    assert seen == ["videos_string"]


def test_filter_label_default_localizer_is_english():
    assert lookups.get_translated_filter_label("movies_and_tv") == "Movies & TV"
    assert lookups.get_translated_filter_label("sort_ascending") == "Ascending"


def test_every_filter_label_has_english_text():
    """Verify the bundled string table covers every filter label."""
    for filter_key in lookups.FILTER_LABELS:
        assert lookups.get_translated_filter_label(filter_key) != lookups.FILTER_LABELS[filter_key]


def test_unknown_filter_key_passes_through():
    def localizer(key):
        raise AssertionError("localizer must not be called")

    assert lookups.get_translated_filter_label("sort_weird", localizer) == "sort_weird"


def test_import_instructions():
    assert lookups.get_import_instructions(YOUTUBE.service_id) == "import_youtube_instructions"
    assert lookups.get_import_instructions(SOUNDCLOUD.service_id) == "import_soundcloud_instructions"
    assert lookups.get_import_instructions(BANDCAMP.service_id) == lookups.NOT_SUPPORTED


def test_import_instructions_hint():
    assert (
        lookups.get_import_instructions_hint(SOUNDCLOUD.service_id)
        == "import_soundcloud_instructions_hint"
    )
    assert lookups.get_import_instructions_hint(YOUTUBE.service_id) == -1


def test_cache_expiration():
    assert lookups.get_cache_expiration_millis(SOUNDCLOUD.service_id) == 300_000
    assert lookups.get_cache_expiration_millis(NICONICO.service_id) == 120_000
    assert lookups.get_cache_expiration_millis(YOUTUBE.service_id) == 3_600_000
    assert lookups.get_cache_expiration_millis(999) == 3_600_000
    assert lookups.get_cache_expiration(999) == timedelta(hours=1)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("YouTube", False),
        ("BiliBili", False),
        ("NicoNico", False),
        ("SoundCloud", True),
        ("PeerTube", True),
        ("Something New", True),
    ],
)
def test_is_experimental(name, expected):
    assert lookups.is_experimental(name) is expected
