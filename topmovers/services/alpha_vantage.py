from typing import Any, Optional

import httpx
from pydantic import ValidationError

from topmovers.models.movers import MoversSnapshot
from topmovers.services.errors import (
    ProviderError,
    RateLimitError,
    SchemaError,
    TransportError,
)
from topmovers.utils.logger import logger

TOP_GAINERS_LOSERS = "TOP_GAINERS_LOSERS"
MOVERS_FIELDS = ("top_gainers", "top_losers", "most_actively_traded")

RATE_LIMIT_MESSAGE = "API rate limit exceeded. Please try again later."
UNEXPECTED_FORMAT_MESSAGE = "Unexpected response format from Alpha Vantage API."


def check_api_errors(data: Any) -> None:
    """
    Raise if Alpha Vantage reported an error instead of data.

    "Error Message" is an API-level error, "Note" is the rate-limit notice
    (detected by presence alone) and "Information" covers plan/throttling notices.
    """
    if not isinstance(data, dict):
        return
    if "Error Message" in data:
        raise ProviderError(f"Alpha Vantage API error: {data['Error Message']}")
    if "Note" in data:
        raise RateLimitError(RATE_LIMIT_MESSAGE)
    if "Information" in data:
        raise ProviderError(str(data["Information"]))


def parse_snapshot(data: Any) -> MoversSnapshot:
    """Validate a decoded body into a MoversSnapshot, or raise SchemaError."""
    if not isinstance(data, dict) or not all(field in data for field in MOVERS_FIELDS):
        raise SchemaError(UNEXPECTED_FORMAT_MESSAGE)
    try:
        return MoversSnapshot.model_validate(data)
    except ValidationError as e:
        logger.debug(f"Snapshot validation failed: {e}")
        raise SchemaError(UNEXPECTED_FORMAT_MESSAGE) from e


class AlphaVantageClient:
    """
    Fetches the TOP_GAINERS_LOSERS snapshot from Alpha Vantage.

    One GET per call, no retries and no caching. A fresh httpx.AsyncClient is
    opened for every call, so concurrent invocations share nothing.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://www.alphavantage.co",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self._transport = transport

    async def fetch_snapshot(self) -> MoversSnapshot:
        params = {"function": TOP_GAINERS_LOSERS, "apikey": self.api_key}
        logger.info("📡 Requesting top movers from Alpha Vantage")
        try:
            async with httpx.AsyncClient(base_url=self.base_url, transport=self._transport) as client:
                response = await client.get("/query", params=params)
        except httpx.RequestError as exc:
            logger.error(f"❌ Request to Alpha Vantage failed: {exc}")
            raise TransportError(f"Alpha Vantage request failed: {exc}") from exc

        if not response.is_success:
            logger.error(f"❌ Alpha Vantage returned HTTP {response.status_code} {response.reason_phrase}")
            raise TransportError(f"Alpha Vantage API error: {response.reason_phrase}")

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"❌ Alpha Vantage returned a non-JSON body: {e}")
            raise SchemaError(UNEXPECTED_FORMAT_MESSAGE) from e

        check_api_errors(data)
        snapshot = parse_snapshot(data)
        logger.info(f"✅ Top movers received (last updated: {snapshot.last_updated})")
        return snapshot
