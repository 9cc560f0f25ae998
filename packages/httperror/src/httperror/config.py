# This project was developed with assistance from AI tools.
"""Problem details configuration via pydantic-settings.

All settings read from ``HTTPERROR_*`` environment variables.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class HttpErrorSettings(BaseSettings):
    """Serialization and rendering settings -- reads from environment variables."""

    model_config = SettingsConfigDict(env_prefix="HTTPERROR_", extra="ignore")

    # -- Serialization --
    SORT_EXTENSION_KEYS: bool = Field(
        default=True,
        description="Emit extension members sorted by key instead of insertion order.",
    )

    # -- Rendering (FastAPI adapter) --
    MEDIA_TYPE: str = "application/problem+json"
    DEFAULT_TYPE_URI: str = Field(
        default="about:blank",
        description="Problem type used when converting framework exceptions.",
    )
    EXPOSE_INTERNAL_ERRORS: bool = Field(
        default=False,
        description="Include the exception text in the detail of unhandled 500 responses.",
    )


settings = HttpErrorSettings()
