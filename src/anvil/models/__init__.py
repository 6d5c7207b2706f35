"""Anvil data models - re-exports all public model classes."""

from anvil.models.config import CLISettings, load_settings
from anvil.models.project import (
    DeploymentConfig,
    GoogleProvider,
    PackageManifest,
    ProvidersConfig,
    RedisConfig,
    development_config,
    generate_secret,
    production_config,
)

__all__ = [
    "CLISettings",
    "DeploymentConfig",
    "GoogleProvider",
    "PackageManifest",
    "ProvidersConfig",
    "RedisConfig",
    "development_config",
    "generate_secret",
    "load_settings",
    "production_config",
]
