from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_LIMIT = 10
MIN_LIMIT = 1
MAX_LIMIT = 20


class StockEntry(BaseModel):
    """One row of a movers list, exactly as Alpha Vantage sends it."""
    model_config = ConfigDict(frozen=True)

    ticker: str  # Stock symbol (e.g., AAPL)
    price: str  # Decimal as string (e.g., "12.34")
    change_amount: str  # Signed decimal as string
    change_percentage: str  # Signed percentage as string (e.g., "-4.5%")
    volume: str  # Integer as string


class MoversSnapshot(BaseModel):
    """Point-in-time gainers/losers/most-active lists plus the provider timestamp."""
    model_config = ConfigDict(frozen=True)

    top_gainers: Tuple[StockEntry, ...]
    top_losers: Tuple[StockEntry, ...]
    most_actively_traded: Tuple[StockEntry, ...]
    last_updated: str
    metadata: Optional[str] = None


class TopMoversRequest(BaseModel):
    limit: int = Field(
        default=DEFAULT_LIMIT,
        ge=MIN_LIMIT,
        le=MAX_LIMIT,
        description="Number of stocks to display per category (default: 10)",
    )
