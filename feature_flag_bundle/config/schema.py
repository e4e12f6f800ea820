"""
Configuration schema for feature flag value providers.

Maps each provider to ``flag name -> allowed values``. Allowed values are
normalised once at load time:

- a scalar is accepted as shorthand for a one-element list
- every element is coerced to a string
- an element that is empty after coercion fails validation

Example:
    providers:
      cookie:
        values:
          betaUI: [on]          # "on", YAML 1.2 booleans are only true/false
      userAgent:
        values:
          legacyClient: "OldBrowser/1.0"
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def coerce_allowed_value(value: Any) -> str:
    """Render a single allowed value as a string.

    Booleans follow the string-cast rules the configuration format has
    always used (``true`` -> ``"1"``, ``false`` -> ``""``) so existing
    config files keep their meaning. Whole floats drop the fractional part
    (``1.0`` -> ``"1"``). ``None`` becomes an empty string.

    Raises:
        ValueError: If the value is a nested collection.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, (Mapping, list, tuple, set)):
        raise ValueError(f"allowed value must be a scalar, got {type(value).__name__}")
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def normalize_allowed_values(flag_name: str, raw: Any) -> tuple[str, ...]:
    """Normalise the allowed values of one flag.

    Args:
        flag_name: Flag the values belong to (used in error messages)
        raw: Scalar or list of scalars from the config file

    Returns:
        Tuple of non-empty strings

    Raises:
        ValueError: If any element is empty after coercion
    """
    items = list(raw) if isinstance(raw, (list, tuple)) else [raw]

    normalized = []
    for index, item in enumerate(items):
        value = coerce_allowed_value(item)
        if value == "":
            raise ValueError(
                f"allowed value #{index} of flag '{flag_name}' cannot be empty"
            )
        normalized.append(value)

    return tuple(normalized)


class ProviderValues(BaseModel):
    """Allowed values per flag for a single provider.

    Attributes:
        values: Flag name -> allowed values. Unknown flags are never enabled.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    values: Mapping[str, tuple[str, ...]] = Field(
        default_factory=lambda: MappingProxyType({})
    )

    @field_validator("values", mode="before")
    @classmethod
    def normalize_values(cls, v: Any) -> dict[str, tuple[str, ...]]:
        """Normalise every flag's allowed values."""
        if v is None:
            return {}
        if not isinstance(v, Mapping):
            raise ValueError("values must map flag names to allowed values")

        return {
            str(flag_name): normalize_allowed_values(str(flag_name), raw)
            for flag_name, raw in v.items()
        }

    @field_validator("values")
    @classmethod
    def freeze_values(cls, v: Mapping[str, tuple[str, ...]]) -> Mapping[str, tuple[str, ...]]:
        return MappingProxyType(dict(v))


class ProvidersConfig(BaseModel):
    """Per-provider configuration. Omitted providers get no flags."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    cookie: ProviderValues = Field(default_factory=ProviderValues)
    user_agent: ProviderValues = Field(default_factory=ProviderValues, alias="userAgent")

    @field_validator("cookie", "user_agent", mode="before")
    @classmethod
    def default_when_empty(cls, v: Any) -> Any:
        return {} if v is None else v


class FeatureFlagConfig(BaseModel):
    """Root feature flag configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    providers: ProvidersConfig = Field(default_factory=ProvidersConfig)

    @field_validator("providers", mode="before")
    @classmethod
    def default_when_empty(cls, v: Any) -> Any:
        return {} if v is None else v
