"""Shared fixtures for feature flag tests."""

from dataclasses import dataclass, field

import pytest

from feature_flag_bundle.config.schema import FeatureFlagConfig, ProviderValues


@dataclass
class FakeRequest:
    """Minimal request context with plain-dict cookies and headers."""

    cookies: dict[str, str] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)


@pytest.fixture
def make_request():
    """Factory for fake request contexts."""

    def _make(cookies: dict[str, str] | None = None, headers: dict[str, str] | None = None):
        return FakeRequest(cookies=cookies or {}, headers=headers or {})

    return _make


@pytest.fixture
def cookie_values():
    """Cookie provider config with a single betaUI flag."""
    return ProviderValues(values={"betaUI": ["on"]})


@pytest.fixture
def user_agent_values():
    """User-Agent provider config with a single legacyClient flag."""
    return ProviderValues(values={"legacyClient": ["OldBrowser/1.0"]})


@pytest.fixture
def flag_config():
    """Root config using both providers."""
    return FeatureFlagConfig.model_validate(
        {
            "providers": {
                "cookie": {"values": {"betaUI": ["on"], "darkMode": ["yes", "1"]}},
                "userAgent": {"values": {"legacyClient": ["OldBrowser/1.0"]}},
            }
        }
    )
