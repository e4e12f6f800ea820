"""
Exception hierarchy for feature_flag_bundle.

Only configuration problems propagate to callers. Flag evaluation never
raises: a missing request, cookie or header simply means "not enabled".

Usage:
    from feature_flag_bundle.exceptions import ConfigurationError

    try:
        config = load_config()
    except ConfigurationError as e:
        logger.error(f"Refusing to start: {e}")
        raise
"""

from typing import Any


class FeatureFlagError(Exception):
    """Base exception for all feature flag errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dict with additional error context.
    """

    def __init__(
        self,
        message: str,
        *,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class ConfigurationError(FeatureFlagError):
    """Feature flag configuration is invalid.

    Raised when:
    - An allowed value is empty after string coercion
    - The configuration file is not valid YAML
    - Unknown keys appear under ``providers``

    Attributes:
        field: Dotted path of the offending entry, when known.
    """

    def __init__(
        self,
        message: str = "Invalid feature flag configuration",
        *,
        field: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.field = field

    def __str__(self) -> str:
        if self.field:
            return f"{self.message} (at {self.field})"
        return self.message


class ProviderNotFoundError(FeatureFlagError):
    """Requested value provider is not registered.

    Attributes:
        provider: Name that was looked up.
    """

    def __init__(self, provider: str, **kwargs: Any) -> None:
        super().__init__(f"Unknown value provider: {provider}", **kwargs)
        self.provider = provider


__all__ = [
    "FeatureFlagError",
    "ConfigurationError",
    "ProviderNotFoundError",
]
