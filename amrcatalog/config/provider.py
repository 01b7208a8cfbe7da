"""Configuration provider following Black Box Design principles."""
import os
from dataclasses import dataclass
from typing import Protocol


@dataclass
class CatalogConfig:
    """AMR catalogue configuration."""
    accept_legacy_aliases: bool
    log_level: str


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_catalog_config(self) -> CatalogConfig:
        """Get catalogue configuration."""
        ...


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def get_catalog_config(self) -> CatalogConfig:
        """Get catalogue configuration from environment variables."""
        return CatalogConfig(
            accept_legacy_aliases=os.getenv("AMR_ACCEPT_LEGACY_ALIASES", "true").lower() == "true",
            log_level=os.getenv("AMR_LOG_LEVEL", "INFO").upper(),
        )
