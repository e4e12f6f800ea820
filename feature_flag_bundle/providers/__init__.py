"""
Value provider layer.

Each provider extracts a value from the current request (a cookie, the
User-Agent header) and enables a flag when that value is one of the flag's
configured allowed values.

Architecture:
    FeatureFlagResolver
         ↓
    MatchingProvider (shared matching)
         ↓
    ValueExtractor (cookie / User-Agent)
         ↓
    Request
"""

from feature_flag_bundle.providers.base import MatchingProvider, RequestContext, ValueExtractor
from feature_flag_bundle.providers.cookie import CookieValueExtractor, CookieValueProvider
from feature_flag_bundle.providers.registry import (
    COOKIE_PROVIDER,
    USER_AGENT_PROVIDER,
    FeatureFlagResolver,
)
from feature_flag_bundle.providers.user_agent import (
    UserAgentValueExtractor,
    UserAgentValueProvider,
)

__all__ = [
    "COOKIE_PROVIDER",
    "USER_AGENT_PROVIDER",
    "CookieValueExtractor",
    "CookieValueProvider",
    "FeatureFlagResolver",
    "MatchingProvider",
    "RequestContext",
    "UserAgentValueExtractor",
    "UserAgentValueProvider",
    "ValueExtractor",
]
