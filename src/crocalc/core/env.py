"""
Path and `.env` handling for deployments.

A deployment can keep `CROCALC_*` settings in a `.env` file and point
`catalog.path` at its own institute list. Both are looked up relative to the
deployment directory: `CROCALC_PROJECT_ROOT` when set, the working directory otherwise.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv


def project_root() -> Path:
    """Directory that relative catalog/config paths are resolved against."""
    override = os.getenv("CROCALC_PROJECT_ROOT")
    return Path(override).expanduser().resolve() if override else Path.cwd().resolve()


@lru_cache
def load_dotenv_if_present() -> Path | None:
    """Load `<project root>/.env` once; existing env vars win. Returns the loaded path."""
    env_path = project_root() / ".env"
    if not env_path.is_file():
        return None
    load_dotenv(dotenv_path=env_path, override=False)
    return env_path


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a configured path; relative paths are taken from the project root."""
    p = Path(path).expanduser()
    return p if p.is_absolute() else (project_root() / p).resolve()
