from typing import Annotated

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult, TextContent
from pydantic import Field

from topmovers.api.widget import WIDGET_URI
from topmovers.models.movers import DEFAULT_LIMIT, MAX_LIMIT, MIN_LIMIT, TopMoversRequest
from topmovers.services.alpha_vantage import AlphaVantageClient
from topmovers.services.errors import TopMoversError
from topmovers.services.shaper import shape_snapshot
from topmovers.utils.logger import logger

TOOL_NAME = "topmovers"
TOOL_TITLE = "Top Stock Market Movers"
TOOL_DESCRIPTION = (
    "Fetches and displays the top gaining, losing, and most actively traded stocks in the US market"
)
TOOL_META = {
    "openai/outputTemplate": WIDGET_URI,
    "openai/toolInvocation/invoking": "Fetching top market movers...",
    "openai/toolInvocation/invoked": "Displayed top market movers",
    "openai/widgetAccessible": True,
}


def error_result(message: str) -> CallToolResult:
    return CallToolResult(
        content=[TextContent(type="text", text=f"Error fetching top movers: {message}")],
        isError=True,
    )


async def fetch_top_movers(client: AlphaVantageClient, request: TopMoversRequest) -> CallToolResult:
    """
    Run one topmovers invocation: fetch, truncate to request.limit, package.

    Every TopMoversError ends here as an error result; nothing is raised to the transport.
    """
    limit = request.limit
    logger.info(f"📡 Received topmovers request (limit={limit})")

    try:
        snapshot = await client.fetch_snapshot()
    except TopMoversError as e:
        logger.warning(f"❌ topmovers failed: {e}")
        return error_result(str(e))

    shaped = shape_snapshot(snapshot, limit)
    return CallToolResult(
        content=[
            TextContent(
                type="text",
                text=(
                    f"Retrieved top {limit} gainers, losers, and most active stocks. "
                    f"Last updated: {snapshot.last_updated}"
                ),
            )
        ],
        structuredContent=shaped.model_dump(mode="json", exclude_none=True),
        _meta={"fullData": snapshot.model_dump(mode="json", exclude_none=True)},
    )


def register_topmovers_tool(mcp: FastMCP, client: AlphaVantageClient) -> None:
    """Register the `topmovers` tool on the given FastMCP server."""

    @mcp.tool(name=TOOL_NAME, title=TOOL_TITLE, description=TOOL_DESCRIPTION, meta=TOOL_META)
    async def topmovers(
        limit: Annotated[
            int,
            Field(
                ge=MIN_LIMIT,
                le=MAX_LIMIT,
                description="Number of stocks to display per category (default: 10)",
            ),
        ] = DEFAULT_LIMIT,
    ) -> CallToolResult:
        return await fetch_top_movers(client, TopMoversRequest(limit=limit))
