import logging
import os

DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(module)s - %(message)s"

# Shared logger instance; handlers are attached by configure_logging()
logger = logging.getLogger("topmovers")


def configure_logging(log_cfg: dict | None = None) -> None:
    """
    Set up root logging from the `logging` section of config.yaml.

    Supported keys: level, format, log_file, use_stream_handler.
    """
    log_cfg = log_cfg or {}
    handlers = []
    log_file = log_cfg.get("log_file")
    if log_file:
        # Ensure log directory exists
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))
    if log_cfg.get("use_stream_handler", True):
        handlers.append(logging.StreamHandler())
    if not handlers:
        handlers.append(logging.StreamHandler())

    logging.basicConfig(
        level=str(log_cfg.get("level", "INFO")).upper(),
        format=log_cfg.get("format", DEFAULT_FORMAT),
        handlers=handlers,
    )


def mask_secret(value: str, visible: int = 8) -> str:
    """Show only the first few characters of a secret in log output."""
    if not value:
        return ""
    return f"{value[:visible]}..."
