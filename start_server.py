"""
Task Service Launcher

Starts the HTTP API server for the in-memory task list.

Usage:
    python start_server.py
    python start_server.py --port 8080
    python start_server.py --host 0.0.0.0 --port 9000 --env production
"""

import argparse
import os
import sys

import uvicorn

from task_service.config import ConfigProperties, ServerConfig, RunMode
from task_service.utils.exceptions import ConfigurationError
from task_service.utils.logger import get_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Task Service HTTP API")
    parser.add_argument("--host", default=None, help="Host to bind (default: TASK_SERVICE_HOST or 127.0.0.1)")
    parser.add_argument("--port", type=int, default=None, help="Port to bind (default: TASK_SERVICE_PORT or 3000)")
    parser.add_argument(
        "--env",
        dest="environment",
        choices=[m.value for m in RunMode],
        default=None,
        help="Run mode (default: TASK_SERVICE_ENV or development)",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: TASK_SERVICE_LOG_LEVEL or INFO)")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload (ignored in production)")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    ConfigProperties.load_env_file()
    try:
        config = ServerConfig.from_env(
            host=args.host,
            port=args.port,
            environment=args.environment,
            log_level=args.log_level,
        )
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    # the app module reads these when uvicorn imports it
    os.environ["TASK_SERVICE_HOST"] = config.host
    os.environ["TASK_SERVICE_PORT"] = str(config.port)
    os.environ["TASK_SERVICE_ENV"] = config.environment
    os.environ["TASK_SERVICE_LOG_LEVEL"] = config.log_level

    logger = get_logger("task_service.launcher")
    reload = args.reload and not config.is_production
    if args.reload and config.is_production:
        logger.warning("Auto-reload is disabled in production mode")

    logger.info(f"Server is running on http://{config.host}:{config.port} ({config.environment})")

    uvicorn.run(
        "api.server:app",
        host=config.host,
        port=config.port,
        reload=reload,
        log_level=config.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
