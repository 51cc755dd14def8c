"""Command-line entry point of the gallery generator."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from datetime import datetime

from .config import ConfigError, load_config
from .process import process

log = logging.getLogger(__name__)

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


def log_level_from_env(environ=None) -> int:
    """Logging level named by LOG_LEVEL; info when unset or unknown."""
    if environ is None:
        environ = os.environ
    name = environ.get("LOG_LEVEL", "") or "info"
    return _LEVELS.get(name.lower(), logging.INFO)


def _configure_logging(environ) -> None:
    add_source = environ.get("ADD_SOURCE", "").lower() == "true"
    fmt = "time=%(asctime)s level=%(levelname)s"
    if add_source:
        fmt += " source=%(pathname)s:%(lineno)d"
    fmt += " msg=%(message)s"

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt))
    package_logger = logging.getLogger("photogallery")
    package_logger.handlers[:] = [handler]
    package_logger.setLevel(log_level_from_env(environ))
    package_logger.propagate = False


def main(argv=None) -> int:
    """Build the gallery described by the configuration file."""
    parser = argparse.ArgumentParser(prog="photogallery", description="Generate a static photo gallery.")
    parser.add_argument("--config", default="config.yml", help="configuration file (default: config.yml)")
    parser.add_argument("--templates", default="templates", help="templates directory (default: templates)")
    args = parser.parse_args(argv)

    _configure_logging(os.environ)
    log.debug("Starting application at %s", datetime.now().astimezone().isoformat())

    try:
        config = load_config(args.config)
    except (ConfigError, OSError) as exc:
        log.error("Failed to load config: %s", exc)
        return 1

    try:
        process(config, args.templates)
    except Exception as exc:
        log.error("Failed to process: %s", exc)
        return 1

    log.debug("Application finished successfully at %s", datetime.now().astimezone().isoformat())
    return 0


if __name__ == "__main__":
    sys.exit(main())