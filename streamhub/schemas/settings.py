# streamhub/schemas/settings.py
"""
Environment overrides loaded with pydantic-settings.

Every field is optional. A value that is set wins over the matching key in
`streamhub.yaml`. Variables may also live in a `.env` file.
"""
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Loads streamhub environment variables into a structured Pydantic model.

    :ivar STREAMHUB_LOG_LEVEL: Overrides `logging.level`.
    :vartype STREAMHUB_LOG_LEVEL: Optional[str]
    :ivar STREAMHUB_PREFERENCES_PATH: Overrides `preferences.path`.
    :vartype STREAMHUB_PREFERENCES_PATH: Optional[str]
    :ivar STREAMHUB_DEFAULT_SERVICE: Overrides `selection.default_service`.
    :vartype STREAMHUB_DEFAULT_SERVICE: Optional[str]
    """

    STREAMHUB_LOG_LEVEL: Optional[str] = None
    STREAMHUB_PREFERENCES_PATH: Optional[str] = None
    STREAMHUB_DEFAULT_SERVICE: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )
