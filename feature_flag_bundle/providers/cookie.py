"""Cookie-backed value provider."""

from feature_flag_bundle.config.schema import ProviderValues
from feature_flag_bundle.providers.base import MatchingProvider, RequestContext, ValueExtractor


class CookieValueExtractor(ValueExtractor):
    """Reads the cookie named ``<prefix><flag name>``."""

    source = "cookie"

    def __init__(self, cookie_prefix: str = "") -> None:
        self.cookie_prefix = cookie_prefix

    def cookie_name(self, flag_name: str) -> str:
        return f"{self.cookie_prefix}{flag_name}"

    def extract(self, context: RequestContext, flag_name: str) -> str | None:
        return context.cookies.get(self.cookie_name(flag_name))


class CookieValueProvider(MatchingProvider):
    """Enables a flag when its cookie holds one of the allowed values.

    Example:
        provider = CookieValueProvider(ProviderValues(values={"betaUI": ["on"]}))
        provider.is_enabled("betaUI", request)  # True for cookie betaUI=on
    """

    def __init__(self, config: ProviderValues, cookie_prefix: str = "") -> None:
        super().__init__(config, CookieValueExtractor(cookie_prefix))
