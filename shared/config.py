"""
Shared configuration management for SVG switch processing.
"""

from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_prefix="SVG_SWITCH_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    log_level: str = Field(default="info")


class SwitchSettings(BaseConfig):
    """Settings for conditional processing."""

    # Colon-separated, most preferred first, e.g. "fr_CA:fr:en"
    languages: Optional[str] = Field(default=None)

    def language_override(self) -> List[str]:
        """Preferred languages set through configuration, if any."""
        if not self.languages:
            return []
        return [lang.strip() for lang in self.languages.split(":") if lang.strip()]


def get_settings() -> SwitchSettings:
    """Get conditional processing settings."""
    return SwitchSettings()
