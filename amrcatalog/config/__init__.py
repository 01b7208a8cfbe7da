"""Configuration providers for amrcatalog."""

from .provider import CatalogConfig, ConfigProvider, EnvConfigProvider

__all__ = ["CatalogConfig", "ConfigProvider", "EnvConfigProvider"]
