class TopMoversError(Exception):
    """Base class for every failure the topmovers tool turns into an error result."""


class TransportError(TopMoversError):
    """The HTTP call failed or came back with a non-success status."""


class ProviderError(TopMoversError):
    """Alpha Vantage answered with an API-level error message."""


class RateLimitError(TopMoversError):
    """Alpha Vantage answered with its rate-limit notice."""


class SchemaError(TopMoversError):
    """The response body does not look like a TOP_GAINERS_LOSERS payload."""
