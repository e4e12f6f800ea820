"""
Feature flag configuration loading.

Reads the YAML file once at startup and validates it against the schema.
Any violation raises ConfigurationError; the application must not boot with
a half-valid flag configuration.

Usage:
    from feature_flag_bundle.config import load_config

    config = load_config()                      # default path / env var
    config = load_config(Path("flags.yaml"))    # explicit path
"""

import logging
import os
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from feature_flag_bundle.config.schema import FeatureFlagConfig
from feature_flag_bundle.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Default config path
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "feature_flags.yaml"

CONFIG_PATH_ENV = "FEATURE_FLAG_CONFIG"

# Optional top-level key wrapping the whole configuration
ROOT_KEY = "feature_flag"

BOOL_TAG = "tag:yaml.org,2002:bool"


class FlagConfigLoader(yaml.SafeLoader):
    """SafeLoader with YAML 1.2 booleans.

    Only true/false resolve to booleans. on, off, yes and no stay strings,
    so ``betaUI: [on]`` allows the cookie value "on".
    """


FlagConfigLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
FlagConfigLoader.add_implicit_resolver(
    BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def resolve_config_path(config_path: Path | None = None) -> Path:
    """Pick the config file: argument, then env var, then the default."""
    if config_path is not None:
        return Path(config_path)

    env_path = os.environ.get(CONFIG_PATH_ENV)
    if env_path:
        return Path(env_path)

    return DEFAULT_CONFIG_PATH


def parse_config(data: Any) -> FeatureFlagConfig:
    """Validate an already-parsed configuration mapping.

    Args:
        data: Mapping as produced by the YAML parser (None means empty)

    Returns:
        Validated FeatureFlagConfig

    Raises:
        ConfigurationError: If the data violates the schema
    """
    if data is None:
        data = {}

    if not isinstance(data, Mapping):
        raise ConfigurationError(
            f"Feature flag configuration must be a mapping, got {type(data).__name__}"
        )

    if ROOT_KEY in data:
        siblings = sorted(str(key) for key in data if key != ROOT_KEY)
        if siblings:
            raise ConfigurationError(
                f"Unexpected keys next to '{ROOT_KEY}': {', '.join(siblings)}",
                field=siblings[0],
            )
        data = data[ROOT_KEY] or {}

    try:
        return FeatureFlagConfig.model_validate(data)
    except ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"])
        raise ConfigurationError(
            f"Invalid feature flag configuration: {error['msg']}",
            field=field or None,
            details={"errors": e.errors(include_url=False)},
        ) from e


def load_config(config_path: Path | None = None) -> FeatureFlagConfig:
    """Load and validate feature flag configuration from YAML.

    A missing file is not an error: every provider starts with no flags.

    Args:
        config_path: Path to config file (env var / default if None)

    Returns:
        Validated FeatureFlagConfig

    Raises:
        ConfigurationError: If the file is not valid YAML or fails validation
    """
    path = resolve_config_path(config_path)

    if not path.exists():
        logger.warning(f"Feature flag config not found: {path}")
        return FeatureFlagConfig()

    try:
        with open(path) as f:
            data = yaml.load(f, Loader=FlagConfigLoader)  # noqa: S506 - SafeLoader subclass
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Failed to parse feature flag config {path}: {e}"
        ) from e

    config = parse_config(data)

    logger.info(
        f"Loaded feature flags from {path}: "
        f"{len(config.providers.cookie.values)} cookie, "
        f"{len(config.providers.user_agent.values)} userAgent"
    )
    return config
