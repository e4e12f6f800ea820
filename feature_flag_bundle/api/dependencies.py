"""
FastAPI wiring for the feature flag resolver.

The resolver is built once and stored on ``app.state``; route handlers get
it, or a request-bound view of it, through dependencies.

Example:
    >>> install(app, FeatureFlagResolver.from_config(load_config()))
    >>>
    >>> @app.get("/")
    >>> async def index(flags: RequestFeatureFlags = Depends(get_feature_flags)):
    >>>     if flags.is_enabled("betaUI"):
    >>>         ...
"""

import logging

from fastapi import FastAPI, Request

from feature_flag_bundle.exceptions import ConfigurationError
from feature_flag_bundle.providers.base import RequestContext
from feature_flag_bundle.providers.registry import FeatureFlagResolver

logger = logging.getLogger(__name__)

STATE_ATTR = "feature_flags"


def install(app: FastAPI, resolver: FeatureFlagResolver) -> None:
    """Attach a resolver to the application."""
    setattr(app.state, STATE_ATTR, resolver)
    logger.info(f"Feature flag resolver installed with providers: {resolver.list_providers()}")


class RequestFeatureFlags:
    """Resolver bound to a single request."""

    def __init__(self, resolver: FeatureFlagResolver, context: RequestContext | None) -> None:
        self.resolver = resolver
        self.context = context

    def is_enabled(self, flag_name: str, provider: str | None = None) -> bool:
        """Check a flag against the bound request.

        Args:
            flag_name: Name of the flag
            provider: Restrict the check to one provider (any if None)
        """
        return self.resolver.is_enabled(flag_name, self.context, provider=provider)


def get_resolver(request: Request) -> FeatureFlagResolver:
    """Dependency returning the application's resolver.

    Raises:
        ConfigurationError: If install() was never called for this app
    """
    resolver = getattr(request.app.state, STATE_ATTR, None)
    if resolver is None:
        raise ConfigurationError("Feature flag resolver is not installed on this application")
    return resolver


def get_feature_flags(request: Request) -> RequestFeatureFlags:
    """Dependency returning the resolver bound to the current request."""
    return RequestFeatureFlags(get_resolver(request), request)
