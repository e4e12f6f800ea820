"""
Feature flag resolver.

Holds the named value providers built from configuration and answers flag
checks across them.

Usage:
    from feature_flag_bundle.config import load_config
    from feature_flag_bundle.providers import FeatureFlagResolver

    resolver = FeatureFlagResolver.from_config(load_config())

    # Any provider
    resolver.is_enabled("betaUI", request)

    # A specific provider
    resolver.is_enabled("legacyClient", request, provider="userAgent")
"""

import logging
from typing import Any

from feature_flag_bundle.config.schema import FeatureFlagConfig
from feature_flag_bundle.exceptions import ProviderNotFoundError
from feature_flag_bundle.providers.base import MatchingProvider, RequestContext
from feature_flag_bundle.providers.cookie import CookieValueProvider
from feature_flag_bundle.providers.user_agent import UserAgentValueProvider

logger = logging.getLogger(__name__)

COOKIE_PROVIDER = "cookie"
USER_AGENT_PROVIDER = "userAgent"


class FeatureFlagResolver:
    """Registry of value providers keyed by name.

    Built once at startup. Registering replaces any provider with the same
    name; lookups never mutate state.
    """

    def __init__(self, providers: dict[str, MatchingProvider] | None = None) -> None:
        self._providers: dict[str, MatchingProvider] = {}
        for name, provider in (providers or {}).items():
            self.register(name, provider)

    @classmethod
    def from_config(
        cls,
        config: FeatureFlagConfig,
        cookie_prefix: str = "",
    ) -> "FeatureFlagResolver":
        """Build the cookie and userAgent providers from configuration.

        Args:
            config: Validated feature flag configuration
            cookie_prefix: Prefix prepended to flag names to form cookie names

        Returns:
            Resolver with both providers registered
        """
        return cls(
            {
                COOKIE_PROVIDER: CookieValueProvider(
                    config.providers.cookie, cookie_prefix=cookie_prefix
                ),
                USER_AGENT_PROVIDER: UserAgentValueProvider(config.providers.user_agent),
            }
        )

    def register(self, name: str, provider: MatchingProvider) -> None:
        """Register a provider under a name.

        Args:
            name: Unique identifier for this provider
            provider: MatchingProvider instance
        """
        if name in self._providers:
            logger.warning(f"Replacing existing value provider: {name}")

        self._providers[name] = provider
        logger.info(f"Registered value provider: {name} ({len(provider.flag_names())} flags)")

    def get(self, name: str) -> MatchingProvider:
        """Get a provider by name.

        Raises:
            ProviderNotFoundError: If no provider has that name
        """
        provider = self._providers.get(name)
        if provider is None:
            raise ProviderNotFoundError(name, details={"available": self.list_providers()})
        return provider

    def list_providers(self) -> list[str]:
        """List registered provider names."""
        return list(self._providers.keys())

    def is_enabled(
        self,
        flag_name: str,
        context: RequestContext | None,
        provider: str | None = None,
    ) -> bool:
        """Check if a flag is enabled for the given request.

        Args:
            flag_name: Name of the flag
            context: The active request, or None outside a request
            provider: Restrict the check to one provider (any provider if None)

        Returns:
            True if the named provider (or any provider) enables the flag

        Raises:
            ProviderNotFoundError: If ``provider`` is not registered
        """
        if provider is not None:
            return self.get(provider).is_enabled(flag_name, context)

        return any(p.is_enabled(flag_name, context) for p in self._providers.values())

    def status(self, context: RequestContext | None) -> dict[str, Any]:
        """Get summary of all flags for debugging.

        Returns:
            Dict with per-provider flag statuses for the given request
        """
        providers = {}
        for name, provider in self._providers.items():
            providers[name] = {
                flag: provider.is_enabled(flag, context) for flag in provider.flag_names()
            }

        return {
            "total_flags": sum(len(flags) for flags in providers.values()),
            "enabled_flags": sum(
                1 for flags in providers.values() for enabled in flags.values() if enabled
            ),
            "providers": providers,
        }
