"""
Institute catalog loader.

The catalog is a JSON array of training institutes with coordinates. A default catalog
ships with the package (`crocalc/catalog/institutes.json`); deployments can point
`catalog.path` (or `CROCALC_CATALOG_PATH`) at their own file.

The loaded catalog is an immutable tuple in file order. That order is the tie-break
order of the nearest-institute search, so it is preserved exactly.
"""

from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path

from pydantic import TypeAdapter

from crocalc.config.settings import Settings
from crocalc.core.env import resolve_project_path
from crocalc.domain.models import Institute

logger = logging.getLogger(__name__)

_INSTITUTES_ADAPTER = TypeAdapter(list[Institute])

DEFAULT_CATALOG_FILENAME = "institutes.json"


def parse_institutes(payload: object) -> tuple[Institute, ...]:
    """Validate a decoded JSON payload into catalog entries."""
    return tuple(_INSTITUTES_ADAPTER.validate_python(payload))


def load_institutes(path: str | Path) -> tuple[Institute, ...]:
    """Load and validate an institute catalog JSON file."""
    resolved = resolve_project_path(path)
    payload = json.loads(resolved.read_text(encoding="utf-8"))
    institutes = parse_institutes(payload)
    logger.info("Loaded %d institutes from %s", len(institutes), resolved)
    return institutes


def load_default_institutes() -> tuple[Institute, ...]:
    """Load the catalog packaged with `crocalc.catalog`."""
    text = resources.files("crocalc.catalog").joinpath(DEFAULT_CATALOG_FILENAME).read_text(encoding="utf-8")
    return parse_institutes(json.loads(text))


def load_catalog(settings: Settings) -> tuple[Institute, ...]:
    """Load the catalog configured in `settings` (packaged catalog when no path is set)."""
    if settings.catalog.path:
        return load_institutes(settings.catalog.path)
    return load_default_institutes()
