"""
Configuration module.

Provides the feature flag configuration schema and YAML loader.

Usage:
    from feature_flag_bundle.config import load_config

    config = load_config()
    config.providers.cookie.values  # {"betaUI": ("on",)}
"""

from feature_flag_bundle.config.loader import (
    DEFAULT_CONFIG_PATH,
    load_config,
    parse_config,
)
from feature_flag_bundle.config.schema import (
    FeatureFlagConfig,
    ProvidersConfig,
    ProviderValues,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "FeatureFlagConfig",
    "ProvidersConfig",
    "ProviderValues",
    "load_config",
    "parse_config",
]
