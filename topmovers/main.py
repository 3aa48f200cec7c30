import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from topmovers.api.mcp_server import MCP_PATH, create_mcp_server
from topmovers.utils.config import Settings, load_settings
from topmovers.utils.logger import configure_logging, logger, mask_secret


def create_app(settings: Settings) -> FastAPI:
    # -------------------------------------------------------------------------
    # Initialize FastAPI
    # -------------------------------------------------------------------------
    app = FastAPI(title=settings.app_name, version=settings.app_version)
    app.state.settings = settings

    # -------------------------------------------------------------------------
    # CORS
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.allowed_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Health check
    # -------------------------------------------------------------------------
    @app.get("/")
    async def root():
        return {
            "status": "ok",
            "name": settings.app_name,
            "version": settings.app_version,
            "endpoints": {
                "mcp": MCP_PATH,
                "health": "/",
            },
        }

    @app.post(MCP_PATH)
    async def mcp_post():
        logger.info("📡 MCP POST request received")
        return JSONResponse(status_code=405, content={"error": "Use GET for SSE connection"})

    # -------------------------------------------------------------------------
    # MCP over SSE (GET /mcp opens the stream, POST /messages/ carries requests)
    # -------------------------------------------------------------------------
    mcp = create_mcp_server(settings)
    app.state.mcp = mcp
    app.mount("/", mcp.sse_app())

    return app


# -----------------------------------------------------------------------------
# Load settings, set up logging, build the app
# -----------------------------------------------------------------------------
settings = load_settings()
configure_logging(settings.logging)
app = create_app(settings)

logger.info(f"🔑 Using Alpha Vantage API key: {mask_secret(settings.alpha_vantage_api_key)}")
logger.info(f"✅ {settings.app_name} is starting up!")


def run():
    logger.info(f"✅ MCP Server running on http://localhost:{settings.port}")
    logger.info(f"✅ MCP endpoint: http://localhost:{settings.port}{MCP_PATH}")
    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
