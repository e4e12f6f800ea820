"""FastAPI integration for feature flags."""

from feature_flag_bundle.api.dependencies import (
    RequestFeatureFlags,
    get_feature_flags,
    get_resolver,
    install,
)

__all__ = ["RequestFeatureFlags", "get_feature_flags", "get_resolver", "install"]
