from mcp.server.fastmcp import FastMCP

WIDGET_NAME = "topmovers-widget"
WIDGET_URI = "ui://widget/topmovers.html"
WIDGET_MIME_TYPE = "text/html+skybridge"
WIDGET_DESCRIPTION = (
    "Displays an interactive widget showing top stock market gainers, losers, "
    "and most actively traded stocks from Alpha Vantage."
)


def build_widget_html(widget_js: str, widget_css: str) -> str:
    """Assemble the widget document from the built JS/CSS assets."""
    parts = ['<div id="topmovers-root"></div>']
    if widget_css:
        parts.append(f"<style>{widget_css}</style>")
    parts.append(f'<script type="module">{widget_js}</script>')
    return "\n".join(parts)


def widget_meta(widget_domain: str) -> dict:
    return {
        "openai/widgetPrefersBorder": True,
        "openai/widgetDomain": widget_domain,
        "openai/widgetCSP": {
            "connect_domains": ["https://www.alphavantage.co"],
            "resource_domains": [],
        },
        "openai/widgetDescription": WIDGET_DESCRIPTION,
    }


def register_widget_resource(mcp: FastMCP, widget_html: str, widget_domain: str) -> None:
    """Expose the widget document as an MCP resource."""

    @mcp.resource(
        WIDGET_URI,
        name=WIDGET_NAME,
        description=WIDGET_DESCRIPTION,
        mime_type=WIDGET_MIME_TYPE,
        meta=widget_meta(widget_domain),
    )
    def topmovers_widget() -> str:
        return widget_html
