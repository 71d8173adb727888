"""
formbrowser configuration using pydantic-settings.

All settings can be set via environment variables with FORMBROWSER_ prefix,
or via Docker secrets in /run/secrets directory.
"""

from importlib.metadata import version

from anystore.settings import BaseSettings
from pydantic import Field
from pydantic_settings import SettingsConfigDict

# Get version from package metadata
try:
    VERSION = version("formbrowser")
except Exception:
    VERSION = "0.0.0"


class Settings(BaseSettings):
    """
    formbrowser configuration using pydantic-settings.

    Settings are loaded from (in order of priority, highest first):
    1. Environment variables with FORMBROWSER_ prefix
    2. .env file
    3. Docker secrets in /run/secrets directory
    """

    model_config = SettingsConfigDict(
        env_prefix="formbrowser_",
        env_nested_delimiter="__",
        env_file=".env",
        secrets_dir="/run/secrets",
        extra="ignore",
    )

    debug: bool = Field(default=False)

    # HTTP configuration
    http_timeout: float = Field(default=30.0)
    verify_ssl: bool = Field(default=True)
    user_agent: str = Field(
        default="Mozilla/5.0 (Windows; U; Windows NT 6.0; en-US; rv:1.1) "
        f"formbrowser/{VERSION}"
    )

    max_history: int = Field(
        default=10, ge=0, description="Pages kept for Browser.back()"
    )
