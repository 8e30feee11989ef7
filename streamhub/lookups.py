# streamhub/lookups.py
"""
Static per-service lookup tables: icons, filter labels, import instructions,
cache expiration and the experimental flag.

All functions here are pure and total; every table has a default case.
"""
from datetime import timedelta
from typing import Dict, Optional, Union

from streamhub.catalog import BILIBILI, NICONICO, SOUNDCLOUD, YOUTUBE
from streamhub.i18n import Localizer, default_localizer

# Returned by the import-instruction lookups for services without import support.
NOT_SUPPORTED = -1

GENERIC_ICON = "place_holder_circle"

_ICONS: Dict[int, str] = {
    0: "place_holder_youtube",
    1: "place_holder_cloud",
    2: "place_holder_gadse",
    3: "place_holder_peertube",
    4: "place_holder_bandcamp",
    5: "place_holder_niconico",
    6: "place_holder_niconico",
}

# filter key -> string resource key
FILTER_LABELS: Dict[str, str] = {
    "search": "search",
    "all": "all",
    "videos": "videos_string",
    "sepia_videos": "videos_string",
    "music_videos": "videos_string",
    "channels": "channels",
    "playlists": "playlists",
    "music_playlists": "playlists",
    "tracks": "tracks",
    "users": "users",
    "conferences": "conferences",
    "events": "events",
    "music_songs": "songs",
    "music_albums": "albums",
    "music_artists": "artists",
    "lives": "lives",
    "animes": "animes",
    "movies_and_tv": "movies_and_tv",
    "tags_only": "tags_only",
    "sortby": "sortby",
    "sortorder": "sortorder",
    "features": "features",
    "sort_popular": "sort_popular",
    "sort_view": "sort_view",
    "sort_bookmark": "sort_bookmark",
    "sort_likes": "sort_likes",
    "sort_comments": "sort_comments",
    "sort_bullet_comments": "sort_bullet_comments",
    "sort_length": "sort_length",
    "sort_publish_time": "sort_publish_time",
    "sort_last_comment_time": "sort_last_comment_time",
    "sort_video_count": "sort_video_count",
    "sort_overall": "sort_overall",
    "sort_relevance": "sort_relevance",
    "sort_rating": "sort_rating",
    "sort_ascending": "sort_ascending",
}

_IMPORT_INSTRUCTIONS: Dict[int, str] = {
    0: "import_youtube_instructions",
    1: "import_soundcloud_instructions",
}

_IMPORT_INSTRUCTIONS_HINTS: Dict[int, str] = {
    1: "import_soundcloud_instructions_hint",
}

DEFAULT_CACHE_EXPIRATION = timedelta(hours=1)

_CACHE_EXPIRATION: Dict[int, timedelta] = {
    SOUNDCLOUD.service_id: timedelta(minutes=5),
    NICONICO.service_id: timedelta(minutes=2),
}

_STABLE_SERVICES = frozenset({YOUTUBE.name, BILIBILI.name, NICONICO.name})


def get_icon(service_id: int) -> str:
    return _ICONS.get(service_id, GENERIC_ICON)


def get_translated_filter_label(
    filter_key: str, localizer: Optional[Localizer] = None
) -> str:
    """Return the display label of a search filter or sort option.

    Unknown filter keys are returned unchanged.
    """
    resource = FILTER_LABELS.get(filter_key)
    if resource is None:
        return filter_key
    return (localizer or default_localizer)(resource)


def get_import_instructions(service_id: int) -> Union[str, int]:
    """Return the string resource with subscription import instructions.

    :return: the resource key, or `NOT_SUPPORTED` if the service has no import.
    """
    return _IMPORT_INSTRUCTIONS.get(service_id, NOT_SUPPORTED)


def get_import_instructions_hint(service_id: int) -> Union[str, int]:
    """Return the input hint for services that import from a channel URL.

    :return: the resource key, or `NOT_SUPPORTED` if the service has none.
    """
    return _IMPORT_INSTRUCTIONS_HINTS.get(service_id, NOT_SUPPORTED)


def get_cache_expiration(service_id: int) -> timedelta:
    return _CACHE_EXPIRATION.get(service_id, DEFAULT_CACHE_EXPIRATION)


def get_cache_expiration_millis(service_id: int) -> int:
    return get_cache_expiration(service_id) // timedelta(milliseconds=1)


def is_experimental(service_name: str) -> bool:
    return service_name not in _STABLE_SERVICES
