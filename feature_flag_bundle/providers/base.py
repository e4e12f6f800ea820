"""
Base classes for feature flag value providers.

A provider answers "is flag F enabled for this request?" by extracting a
raw value from the request and checking it against the flag's allowed
values. Extraction differs per source; matching is shared, so providers
are built by composing a ValueExtractor into a MatchingProvider.

Example:
    class HeaderExtractor(ValueExtractor):
        def extract(self, context, flag_name):
            return context.headers.get("x-beta")

    provider = MatchingProvider(ProviderValues(values={"beta": ["yes"]}), HeaderExtractor())
    provider.is_enabled("beta", request)
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from types import MappingProxyType
from typing import Protocol

from feature_flag_bundle.config.schema import ProviderValues

logger = logging.getLogger(__name__)


class RequestContext(Protocol):
    """Per-request data a provider may read.

    Starlette/FastAPI ``Request`` objects satisfy this protocol.
    """

    @property
    def cookies(self) -> Mapping[str, str]: ...

    @property
    def headers(self) -> Mapping[str, str]: ...


class ValueExtractor(ABC):
    """Reads the current raw value for a flag from a request."""

    #: Short source name used in logs
    source: str = "unknown"

    @abstractmethod
    def extract(self, context: RequestContext, flag_name: str) -> str | None:
        """Extract the current value.

        Args:
            context: The active request
            flag_name: Flag being evaluated

        Returns:
            The raw value, or None if the source has no value
        """
        pass


class MatchingProvider:
    """Evaluates flags by matching an extracted value against allowed values.

    Immutable after construction and holds no request state, so one
    instance can serve concurrent requests.
    """

    def __init__(self, config: ProviderValues, extractor: ValueExtractor) -> None:
        self._values: Mapping[str, frozenset[str]] = MappingProxyType(
            {name: frozenset(allowed) for name, allowed in config.values.items()}
        )
        self._extractor = extractor

    @property
    def extractor(self) -> ValueExtractor:
        return self._extractor

    @property
    def source(self) -> str:
        return self._extractor.source

    def flag_names(self) -> list[str]:
        """List configured flag names."""
        return list(self._values.keys())

    def allowed_values(self, flag_name: str) -> frozenset[str]:
        """Allowed values for a flag (empty if the flag is not configured)."""
        return self._values.get(flag_name, frozenset())

    def current_value(self, flag_name: str, context: RequestContext | None) -> str | None:
        """Extract the current value, treating any failure as absent."""
        if context is None:
            logger.debug(f"No active request, {self.source} value for {flag_name} is absent")
            return None

        try:
            value = self._extractor.extract(context, flag_name)
        except Exception as e:
            logger.warning(
                f"Failed to extract {self.source} value for {flag_name}: {e}",
                extra={"provider": self.source, "flag": flag_name},
            )
            return None

        if value is not None and not isinstance(value, str):
            logger.warning(
                f"Ignoring non-string {self.source} value for {flag_name}: "
                f"{type(value).__name__}",
                extra={"provider": self.source, "flag": flag_name},
            )
            return None

        return value

    def is_enabled(self, flag_name: str, context: RequestContext | None) -> bool:
        """Check if a flag is enabled for the given request.

        Args:
            flag_name: Name of the flag
            context: The active request, or None outside a request

        Returns:
            True if the extracted value is one of the flag's allowed values.
            Unknown flags and absent values give False.
        """
        allowed = self._values.get(flag_name)
        if allowed is None:
            logger.debug(f"Unknown {self.source} flag: {flag_name}")
            return False

        value = self.current_value(flag_name, context)
        if value is None:
            return False

        return value in allowed

    def enabled_flags(self, context: RequestContext | None) -> list[str]:
        """Names of configured flags enabled for the given request."""
        return [name for name in self._values if self.is_enabled(name, context)]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(source={self.source!r}, flags={self.flag_names()!r})"
