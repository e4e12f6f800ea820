"""
Feature flags resolved from request cookies and the User-Agent header.

Usage:
    from feature_flag_bundle import FeatureFlagResolver, load_config

    resolver = FeatureFlagResolver.from_config(load_config())

    if resolver.is_enabled("betaUI", request):
        # Use new feature
        pass
"""

from feature_flag_bundle.config import FeatureFlagConfig, load_config, parse_config
from feature_flag_bundle.exceptions import (
    ConfigurationError,
    FeatureFlagError,
    ProviderNotFoundError,
)
from feature_flag_bundle.providers import (
    CookieValueProvider,
    FeatureFlagResolver,
    MatchingProvider,
    UserAgentValueProvider,
    ValueExtractor,
)

__all__ = [
    "ConfigurationError",
    "CookieValueProvider",
    "FeatureFlagConfig",
    "FeatureFlagError",
    "FeatureFlagResolver",
    "MatchingProvider",
    "ProviderNotFoundError",
    "UserAgentValueProvider",
    "ValueExtractor",
    "load_config",
    "parse_config",
]
