"""User-Agent header value provider."""

from feature_flag_bundle.config.schema import ProviderValues
from feature_flag_bundle.providers.base import MatchingProvider, RequestContext, ValueExtractor

USER_AGENT_HEADER = "User-Agent"


class UserAgentValueExtractor(ValueExtractor):
    """Reads the User-Agent header, whatever the flag."""

    source = "userAgent"

    def extract(self, context: RequestContext, flag_name: str) -> str | None:
        headers = context.headers
        value = headers.get(USER_AGENT_HEADER.lower())
        if value is None:
            # Plain dicts are case-sensitive, Starlette headers are not
            value = headers.get(USER_AGENT_HEADER)
        return value


class UserAgentValueProvider(MatchingProvider):
    """Enables a flag when the User-Agent is one of the allowed values.

    Matching is exact and case-sensitive: list full User-Agent strings.
    """

    def __init__(self, config: ProviderValues) -> None:
        super().__init__(config, UserAgentValueExtractor())
