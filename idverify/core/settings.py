"""
Centralized application settings using Pydantic.

Environment variables (prefix ``IDVERIFY_``) are read once at import and
validated. Use this instead of scattered os.getenv() calls.
"""

from pydantic import SecretStr
from pydantic_settings import BaseSettings

from idverify.core.config import DEFAULT_NAME_FUZZY_THRESHOLD
from idverify.models.dto import NameComparison


class AppSettings(BaseSettings):
    """General application settings."""

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    # One of: exact, contains_either_direction, fuzzy
    NAME_MATCH_MODE: NameComparison = NameComparison.CONTAINS_EITHER_DIRECTION
    NAME_FUZZY_THRESHOLD: int = DEFAULT_NAME_FUZZY_THRESHOLD

    # Salt for hashing ID numbers before storage
    ID_HASH_SALT: SecretStr = SecretStr("idverify-default-id-hash-salt")

    model_config = {
        "case_sensitive": True,
        "env_file": ".env",
        "env_prefix": "IDVERIFY_",
        "extra": "ignore",
    }


# Singleton instance - loaded once at module import
app_settings = AppSettings()
