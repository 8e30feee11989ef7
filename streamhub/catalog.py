# streamhub/catalog.py
"""
The built-in service catalog, preference keys and backend preference schemas.
"""
from streamhub.schemas.preferences import (
    BackendPreferences,
    PreferenceField,
    PreferenceType,
)
from streamhub.schemas.service import InstanceDescriptor, ServiceInfo

YOUTUBE = ServiceInfo(service_id=0, name="YouTube")
SOUNDCLOUD = ServiceInfo(service_id=1, name="SoundCloud")
MEDIA_CCC = ServiceInfo(service_id=2, name="media.ccc.de")
PEERTUBE = ServiceInfo(service_id=3, name="PeerTube")
BANDCAMP = ServiceInfo(service_id=4, name="Bandcamp")
BILIBILI = ServiceInfo(service_id=5, name="BiliBili")
NICONICO = ServiceInfo(service_id=6, name="NicoNico")

SERVICES = (YOUTUBE, SOUNDCLOUD, MEDIA_CCC, PEERTUBE, BANDCAMP, BILIBILI, NICONICO)

DEFAULT_FALLBACK_SERVICE = YOUTUBE

DEFAULT_PEERTUBE_INSTANCE = InstanceDescriptor(
    url="https://framatube.org", name="FramaTube"
)

# Selection keys
CURRENT_SERVICE_KEY = "current_service"

# Per-backend credential keys
PEERTUBE_SELECTED_INSTANCE_KEY = "peertube_selected_instance"
NICONICO_COOKIES_KEY = "niconico_cookies"
OVERRIDE_COOKIES_NICONICO_KEY = "override_cookies_niconico"
OVERRIDE_COOKIES_NICONICO_VALUE_KEY = "override_cookies_niconico_value"
BILIBILI_COOKIES_KEY = "bilibili_cookies"
OVERRIDE_COOKIES_BILIBILI_KEY = "override_cookies_bilibili"
OVERRIDE_COOKIES_BILIBILI_VALUE_KEY = "override_cookies_bilibili_value"


def _cookie_preferences(
    service: ServiceInfo, cookies_key: str, flag_key: str, value_key: str
) -> BackendPreferences:
    return BackendPreferences(
        service_name=service.name,
        target="auth_token",
        primary=PreferenceField(key=cookies_key, type=PreferenceType.STRING),
        override_flag=PreferenceField(
            key=flag_key, type=PreferenceType.BOOLEAN, default=False
        ),
        override_value=PreferenceField(key=value_key, type=PreferenceType.STRING),
    )


BACKEND_PREFERENCES = (
    BackendPreferences(
        service_name=PEERTUBE.name,
        target="instance",
        primary=PreferenceField(
            key=PEERTUBE_SELECTED_INSTANCE_KEY, type=PreferenceType.INSTANCE
        ),
    ),
    _cookie_preferences(
        NICONICO,
        NICONICO_COOKIES_KEY,
        OVERRIDE_COOKIES_NICONICO_KEY,
        OVERRIDE_COOKIES_NICONICO_VALUE_KEY,
    ),
    _cookie_preferences(
        BILIBILI,
        BILIBILI_COOKIES_KEY,
        OVERRIDE_COOKIES_BILIBILI_KEY,
        OVERRIDE_COOKIES_BILIBILI_VALUE_KEY,
    ),
)
