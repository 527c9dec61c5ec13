"""Data models for publisher settings."""

from dataclasses import dataclass, replace


DEFAULT_API_URL = 'http://your-wiki.js/graphql'


@dataclass(frozen=True)
class Settings:
    """Connection settings for one installation.

    Constructed once per invocation and passed explicitly to the GraphQL
    client and the publisher. Frozen so a publish can never mutate it.

    Attributes:
        api_url: Wiki.js GraphQL endpoint URL
        bearer_token: Wiki.js API key sent as a bearer token
        debug: Emit diagnostic log lines for intermediate publish steps

    Example:
        >>> settings = Settings(api_url="https://wiki.example.com/graphql", bearer_token="abc")
    """
    api_url: str = DEFAULT_API_URL
    bearer_token: str = ""
    debug: bool = False

    def with_values(self, **changes) -> 'Settings':
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def masked_token(self) -> str:
        """Token for display: last four characters visible."""
        if not self.bearer_token:
            return "(not set)"
        if len(self.bearer_token) <= 4:
            return "****"
        return "*" * (len(self.bearer_token) - 4) + self.bearer_token[-4:]
