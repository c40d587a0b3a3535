import logging
import os
import sys
from pathlib import Path

import structlog
from dotenv import load_dotenv

SERVICE_NAME = "pms"

# third-party loggers that follow LOG_LEVEL instead of the root DEBUG level
_QUIET_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "mcp", "httpx")


def _add_service(logger, method_name, event_dict):
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def _render_chain(fmt: str) -> list:
    if fmt == "console":
        return [structlog.dev.ConsoleRenderer()]
    return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]


def setup_logging(stream=None):
    """Route structlog through stdlib logging.

    Events go to ``stream`` (stdout by default) at LOG_LEVEL, and errors are
    also appended to LOG_ERROR_FILE when it is set. LOG_FORMAT=console
    switches from JSON lines to the coloured dev renderer.
    """
    load_dotenv(dotenv_path=Path(__file__).resolve().parents[1] / ".env")
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    log_level = getattr(logging, level_name, logging.INFO)
    error_log_path = os.getenv("LOG_ERROR_FILE", "").strip()
    fmt = os.getenv("LOG_FORMAT", "json").strip().lower()

    formatter = logging.Formatter("%(message)s")
    handlers = []
    stream_handler = logging.StreamHandler(stream or sys.stdout)
    stream_handler.setLevel(log_level)
    handlers.append(stream_handler)
    if error_log_path:
        Path(error_log_path).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(error_log_path)
        file_handler.setLevel(logging.ERROR)
        handlers.append(file_handler)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            _add_service,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            *_render_chain(fmt),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG),
        cache_logger_on_first_use=False,
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(log_level)
