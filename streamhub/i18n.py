# streamhub/i18n.py
"""
Loading and caching of localized UI strings.

String tables live in ``resources/strings/<locale>.yaml`` as flat
``resource key -> text`` mappings.
"""
import functools
from pathlib import Path
from typing import Callable, Dict

import yaml

from streamhub.utils.logger import setup_logger

logger = setup_logger(__name__)

STRINGS_DIR = Path(__file__).parent / "resources" / "strings"
DEFAULT_LOCALE = "en"

# Resolves a string resource key to display text.
Localizer = Callable[[str], str]


@functools.cache
def load_strings(locale: str = DEFAULT_LOCALE) -> Dict[str, str]:
    """
    Loads and caches the string table of a locale.
    Falls back to the default locale if the table is missing or invalid.
    """
    strings_file = STRINGS_DIR / f"{locale}.yaml"
    if not strings_file.is_file():
        if locale == DEFAULT_LOCALE:
            logger.error(f"Default string table missing: '{strings_file}'.")
            return {}
        logger.warning(f"No strings for locale '{locale}'. Using '{DEFAULT_LOCALE}'.")
        return load_strings(DEFAULT_LOCALE)

    try:
        with strings_file.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse string table '{strings_file}': {e}")
        data = {}
    if not isinstance(data, dict):
        data = {}
    strings = {str(k): str(v) for k, v in data.items()}
    if locale != DEFAULT_LOCALE:
        strings = {**load_strings(DEFAULT_LOCALE), **strings}
    return strings


def get_localizer(locale: str = DEFAULT_LOCALE) -> Localizer:
    """Return a localizer for `locale`; unknown resource keys come back unchanged."""
    strings = load_strings(locale)
    return lambda key: strings.get(key, key)


def default_localizer(key: str) -> str:
    return load_strings(DEFAULT_LOCALE).get(key, key)
