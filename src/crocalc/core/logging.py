"""
Logging setup shared by the API and the CLI.

Handlers and formats come from the packaged `logging.yaml`; the level comes from
`app.log_level` (or `CROCALC_LOG_LEVEL`) so operators can turn on calculator debug
output without editing the YAML.
"""

from __future__ import annotations

import copy
import logging.config

from crocalc.config.settings import get_logging_config, get_settings


def configure_logging() -> None:
    """Configure the Python logging system based on packaged YAML config + settings."""
    settings = get_settings()
    # The packaged config is cached; work on a copy so repeated calls start clean.
    config = copy.deepcopy(get_logging_config())

    level = settings.app.log_level.upper()
    config.setdefault("root", {})["level"] = level
    for handler in config.get("handlers", {}).values():
        if isinstance(handler, dict) and "level" in handler:
            handler["level"] = level

    logging.config.dictConfig(config)
