from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="DECKSTRINGS_")

    app_name: str = "deckstrings"
    debug: bool = False
    log_level: str = "INFO"

    # Capacity of the name buffer used when reading page text titles.
    # Matches the historical default string buffer size of deck trackers.
    name_buffer_capacity: int = 256

    # Format tag value used when a deck is built without one (2 = STANDARD)
    default_format: int = 2


settings = Settings()


# =============================================================================
# DECKSTRING WIRE CONSTANTS
# =============================================================================

# Version written by the encoder
DECKSTRING_VERSION = 1

# Versions the decoder knows how to parse
SUPPORTED_VERSIONS = frozenset({1})

# Varints wider than this are rejected as overflow
MAX_VARINT_BITS = 64
