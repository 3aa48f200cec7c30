from mcp.server.fastmcp import FastMCP

from topmovers.api.tools import register_topmovers_tool
from topmovers.api.widget import build_widget_html, register_widget_resource
from topmovers.services.alpha_vantage import AlphaVantageClient
from topmovers.utils.config import Settings
from topmovers.utils.logger import logger

MCP_PATH = "/mcp"
MESSAGES_PATH = "/messages/"


def create_mcp_server(settings: Settings, client: AlphaVantageClient | None = None) -> FastMCP:
    """Build the FastMCP server with the topmovers tool and its widget resource."""
    mcp = FastMCP(
        settings.server_name,
        host="0.0.0.0",
        port=settings.port,
        sse_path=MCP_PATH,
        message_path=MESSAGES_PATH,
    )

    if client is None:
        client = AlphaVantageClient(
            api_key=settings.alpha_vantage_api_key,
            base_url=settings.alpha_vantage_base_url,
        )

    widget_html = build_widget_html(settings.widget_js, settings.widget_css)
    register_widget_resource(mcp, widget_html, settings.widget_domain)
    register_topmovers_tool(mcp, client)

    logger.info(f"✅ MCP server '{settings.server_name}' ready with tool 'topmovers'")
    return mcp
