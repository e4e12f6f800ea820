"""Tests for feature_flag_bundle/api - FastAPI integration."""

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from feature_flag_bundle.api.dependencies import (
    RequestFeatureFlags,
    get_feature_flags,
    get_resolver,
    install,
)
from feature_flag_bundle.api.main import create_app
from feature_flag_bundle.api.routes import router
from feature_flag_bundle.exceptions import ConfigurationError
from feature_flag_bundle.providers.registry import FeatureFlagResolver


def create_test_app(resolver: FeatureFlagResolver | None) -> FastAPI:
    """Create a FastAPI app with the status router and a flag-checking route."""
    app = FastAPI()
    if resolver is not None:
        install(app, resolver)
    app.include_router(router)

    @app.get("/check/{flag}")
    async def check(flag: str, flags: RequestFeatureFlags = Depends(get_feature_flags)):
        return {
            "any": flags.is_enabled(flag),
            "cookie": flags.is_enabled(flag, provider="cookie"),
        }

    return app


@pytest.fixture
def client(flag_config):
    """Create a test client with both providers configured."""
    return TestClient(create_test_app(FeatureFlagResolver.from_config(flag_config)))


class TestInstall:
    """Tests for install/get_resolver."""

    def test_install_sets_state(self, flag_config):
        """install should store the resolver on app.state."""
        app = FastAPI()
        resolver = FeatureFlagResolver.from_config(flag_config)

        install(app, resolver)

        assert app.state.feature_flags is resolver

    def test_get_resolver_not_installed(self):
        """A missing resolver is a configuration error."""
        client = TestClient(create_test_app(None), raise_server_exceptions=True)

        with pytest.raises(ConfigurationError):
            client.get("/api/feature-flags")

    def test_get_resolver_returns_installed(self, flag_config):
        """get_resolver should return the installed resolver."""
        app = create_test_app(FeatureFlagResolver.from_config(flag_config))

        @app.get("/resolver")
        async def resolver_route(resolver: FeatureFlagResolver = Depends(get_resolver)):
            return {"providers": resolver.list_providers()}

        response = TestClient(app).get("/resolver")

        assert response.json() == {"providers": ["cookie", "userAgent"]}


class TestRequestFeatureFlags:
    """Tests for the request-bound dependency."""

    def test_cookie_enables_flag(self, client):
        """Cookie betaUI=on should enable betaUI."""
        client.cookies.set("betaUI", "on")
        response = client.get("/check/betaUI")

        assert response.status_code == 200
        assert response.json() == {"any": True, "cookie": True}

    def test_cookie_other_value(self, client):
        """Cookie betaUI=off should not enable betaUI."""
        client.cookies.set("betaUI", "off")
        response = client.get("/check/betaUI")

        assert response.json() == {"any": False, "cookie": False}

    def test_user_agent_enables_flag(self, client):
        """An allowed User-Agent should enable legacyClient."""
        response = client.get("/check/legacyClient", headers={"User-Agent": "OldBrowser/1.0"})

        assert response.json() == {"any": True, "cookie": False}

    def test_unknown_flag(self, client):
        """Unknown flags should be disabled."""
        response = client.get("/check/unknown", headers={"User-Agent": "OldBrowser/1.0"})

        assert response.json() == {"any": False, "cookie": False}

    def test_unbound_context(self, flag_config):
        """A view without a request should report everything disabled."""
        flags = RequestFeatureFlags(FeatureFlagResolver.from_config(flag_config), None)

        assert flags.is_enabled("betaUI") is False
        assert flags.is_enabled("legacyClient", provider="userAgent") is False


class TestStatusEndpoint:
    """Tests for GET /api/feature-flags."""

    def test_status(self, client):
        """Status should evaluate every flag for the caller."""
        client.cookies.set("darkMode", "1")
        response = client.get("/api/feature-flags", headers={"User-Agent": "OldBrowser/1.0"})

        assert response.status_code == 200
        data = response.json()
        assert data["total_flags"] == 3
        assert data["enabled_flags"] == 2
        assert data["providers"]["cookie"] == {"betaUI": False, "darkMode": True}
        assert data["providers"]["userAgent"] == {"legacyClient": True}


class TestCreateApp:
    """Tests for the application factory."""

    def test_create_app_from_file(self, tmp_path):
        """create_app should load the config and install the resolver."""
        path = tmp_path / "flags.yaml"
        path.write_text("providers:\n  cookie:\n    values:\n      betaUI: ['on']\n")

        app = create_app(config_path=path, cookie_prefix="", configure_logging=False)
        client = TestClient(app)
        client.cookies.set("betaUI", "on")

        data = client.get("/api/feature-flags").json()
        assert data["providers"]["cookie"] == {"betaUI": True}
        assert data["providers"]["userAgent"] == {}

    def test_create_app_cookie_prefix_env(self, tmp_path, monkeypatch):
        """The cookie prefix should default to the env var."""
        path = tmp_path / "flags.yaml"
        path.write_text("providers:\n  cookie:\n    values:\n      betaUI: ['on']\n")
        monkeypatch.setenv("FEATURE_FLAG_COOKIE_PREFIX", "ff_")

        client = TestClient(create_app(config_path=path, configure_logging=False))
        client.cookies.set("ff_betaUI", "on")

        assert client.get("/api/feature-flags").json()["enabled_flags"] == 1

    def test_create_app_invalid_config(self, tmp_path):
        """An invalid config should stop the app from being created."""
        path = tmp_path / "flags.yaml"
        path.write_text("providers:\n  userAgent:\n    values:\n      legacyClient: ['']\n")

        with pytest.raises(ConfigurationError):
            create_app(config_path=path, configure_logging=False)
