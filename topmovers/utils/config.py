import os
from typing import Any, Dict, Tuple

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from topmovers.utils.logger import logger

DEFAULT_CONFIG_PATH = "config/config.yaml"
DEFAULT_PORT = 3000


class Settings(BaseModel):
    """Everything the server needs, resolved once at startup."""
    model_config = ConfigDict(frozen=True)

    app_name: str = "TopMovers MCP Server"
    app_version: str = "1.0.0"
    server_name: str = "topmovers-server"
    port: int = DEFAULT_PORT
    allowed_origins: Tuple[str, ...] = ("*",)

    alpha_vantage_api_key: str = Field(min_length=1)
    alpha_vantage_base_url: str = "https://www.alphavantage.co"

    widget_js: str = ""
    widget_css: str = ""
    widget_domain: str = "https://alphavantage.co"

    logging: Dict[str, Any] = Field(default_factory=dict)


def load_config(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r") as f:
            cfg = yaml.safe_load(f)
            if not cfg:
                raise ValueError("Config file is empty or invalid.")
            return cfg
    except FileNotFoundError:
        logger.error(f"❌ Config not found at {path}")
        raise SystemExit(f"Config not found: {path}")
    except yaml.YAMLError as e:
        logger.error(f"❌ Error parsing {path}: {e}")
        raise SystemExit(f"Error parsing config: {e}")
    except ValueError as e:
        logger.error(f"❌ Invalid config at {path}: {e}")
        raise SystemExit(f"Failed to load config: {e}")


def read_widget_asset(path: str | None) -> str:
    """Read a built widget asset; a missing file is a build problem, not a fatal one."""
    if not path:
        return ""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        logger.warning(f"⚠️ Widget asset not found at {path}. Build the widget to generate it.")
        return ""


def load_settings() -> Settings:
    """
    Build the immutable Settings from .env, the process environment and config.yaml.

    Raises SystemExit when the config file is unusable or ALPHA_VANTAGE_API_KEY is missing.
    """
    load_dotenv()

    config = load_config(os.getenv("CONFIG_PATH", DEFAULT_CONFIG_PATH))

    api_key = os.getenv("ALPHA_VANTAGE_API_KEY")
    if not api_key:
        logger.error("❌ ALPHA_VANTAGE_API_KEY not set in environment")
        raise SystemExit("ALPHA_VANTAGE_API_KEY is required in .env file")

    port_raw = os.getenv("PORT", str(DEFAULT_PORT))
    try:
        port = int(port_raw)
    except ValueError:
        logger.warning(f"⚠️ Invalid PORT={port_raw!r}; using {DEFAULT_PORT}")
        port = DEFAULT_PORT

    app_cfg = config.get("app", {})
    av_cfg = config.get("alpha_vantage", {})
    widget_cfg = config.get("widget", {})
    origins = [o.strip() for o in os.getenv("ALLOWED_ORIGINS", "*").split(",") if o.strip()]

    settings = Settings(
        app_name=app_cfg.get("name", "TopMovers MCP Server"),
        app_version=str(app_cfg.get("version", "1.0.0")),
        server_name=app_cfg.get("server_name", "topmovers-server"),
        port=port,
        allowed_origins=tuple(origins) or ("*",),
        alpha_vantage_api_key=api_key,
        alpha_vantage_base_url=av_cfg.get("base_url", "https://www.alphavantage.co"),
        widget_js=read_widget_asset(widget_cfg.get("js_path")),
        widget_css=read_widget_asset(widget_cfg.get("css_path")),
        widget_domain=widget_cfg.get("domain", "https://alphavantage.co"),
        logging=config.get("logging", {}),
    )
    return settings
