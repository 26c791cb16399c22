"""
Entry point for running the Todo API under uvicorn.
"""

import logging
import sys

import uvicorn

from .logging_utils import configure_logging
from .settings import get_settings

logger = logging.getLogger(__name__)

APP_PATH = "todo_api.main:app"

USAGE = """
Todo API - Launch Utility

Usage:
  todo-api [command]

Commands:
  dev        - Run with auto-reload
  prod       - Run a single-worker server (default)
  help       - Show this help message

Environment:
  PORT, TODO_API_HOST, LOG_LEVEL, TODO_ID_STRATEGY,
  TODO_API_DOCS_ENABLED, TODO_API_DOCS_URL, TODO_API_OPENAPI_URL
""".strip()


def log_startup(host: str, port: int) -> None:
    """Log a single startup line for process managers."""
    settings = get_settings()
    logger.info(
        "Starting on %s:%s (ID_STRATEGY=%s)",
        host,
        port,
        settings.id_strategy.value,
    )


def run_development() -> None:
    settings = get_settings()
    log_startup(settings.host, settings.port)
    uvicorn.run(
        APP_PATH,
        host=settings.host,
        port=settings.port,
        reload=True,
        log_level=settings.log_level.lower(),
    )


def run_production() -> None:
    # one process only: each worker would hold its own todo list
    settings = get_settings()
    log_startup(settings.host, settings.port)
    uvicorn.run(
        APP_PATH,
        host=settings.host,
        port=settings.port,
        workers=1,
        log_level=settings.log_level.lower(),
    )


def show_help() -> None:
    print(USAGE)


def main(argv=None) -> None:
    args = sys.argv[1:] if argv is None else argv
    mode = args[0].lower() if args else "prod"

    try:
        configure_logging(get_settings().log_level)
        if mode == "dev":
            run_development()
        elif mode == "prod":
            run_production()
        elif mode in ["help", "-h", "--help"]:
            show_help()
        else:
            print(f"Unknown mode: {mode}")
            show_help()
            sys.exit(1)

    except KeyboardInterrupt:
        logger.info("Shutdown requested...")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
