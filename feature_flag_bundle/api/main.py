"""FastAPI application factory with feature flags wired in.

Configuration is loaded and validated before the app is returned, so a bad
flag configuration stops the process at boot.
"""

import logging
import os
from pathlib import Path

from fastapi import FastAPI

from feature_flag_bundle.api import routes
from feature_flag_bundle.api.dependencies import install
from feature_flag_bundle.config import load_config
from feature_flag_bundle.logging_config import setup_logging
from feature_flag_bundle.providers.registry import FeatureFlagResolver

logger = logging.getLogger(__name__)


def create_app(
    config_path: Path | None = None,
    cookie_prefix: str | None = None,
    configure_logging: bool = True,
) -> FastAPI:
    """Create a FastAPI app with the feature flag resolver installed.

    Args:
        config_path: Flag config file (FEATURE_FLAG_CONFIG / default if None)
        cookie_prefix: Cookie name prefix (FEATURE_FLAG_COOKIE_PREFIX if None)
        configure_logging: Install structured JSON logging (LOG_LEVEL env var)

    Raises:
        ConfigurationError: If the flag configuration is invalid
    """
    if configure_logging:
        setup_logging(level=os.getenv("LOG_LEVEL", "INFO"))

    if cookie_prefix is None:
        cookie_prefix = os.getenv("FEATURE_FLAG_COOKIE_PREFIX", "")

    resolver = FeatureFlagResolver.from_config(
        load_config(config_path), cookie_prefix=cookie_prefix
    )

    app = FastAPI(
        title="Feature Flag API",
        description="Cookie and User-Agent feature flag evaluation",
        version="0.1.0",
    )
    install(app, resolver)
    app.include_router(routes.router)

    logger.info("Feature flag API created")
    return app
