import json
import os

# topmovers.main resolves its settings at import time
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
os.environ.setdefault("ALPHA_VANTAGE_API_KEY", "test-api-key-123456")
os.environ.setdefault("CONFIG_PATH", os.path.join(ROOT_DIR, "config", "config.yaml"))

import httpx
import pytest

from topmovers.services.alpha_vantage import AlphaVantageClient


def make_entries(prefix: str, count: int) -> list[dict]:
    return [
        {
            "ticker": f"{prefix}{i}",
            "price": f"{10 + i}.25",
            "change_amount": f"{i}.5" if prefix != "L" else f"-{i}.5",
            "change_percentage": f"{i * 3}.1%" if prefix != "L" else f"-{i * 3}.1%",
            "volume": str(100000 + i),
        }
        for i in range(count)
    ]


def make_payload(gainers: int = 20, losers: int = 20, active: int = 20) -> dict:
    return {
        "metadata": "Top gainers, losers, and most actively traded US tickers",
        "last_updated": "2025-01-10 16:15:59 US/Eastern",
        "top_gainers": make_entries("G", gainers),
        "top_losers": make_entries("L", losers),
        "most_actively_traded": make_entries("A", active),
    }


def make_client(handler) -> AlphaVantageClient:
    return AlphaVantageClient(
        api_key="test-api-key-123456",
        base_url="https://www.alphavantage.co",
        transport=httpx.MockTransport(handler),
    )


def json_client(body, status_code: int = 200) -> AlphaVantageClient:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, content=json.dumps(body).encode(), headers={"Content-Type": "application/json"})

    return make_client(handler)


@pytest.fixture
def payload() -> dict:
    return make_payload()


@pytest.fixture
def client(payload) -> AlphaVantageClient:
    return json_client(payload)
