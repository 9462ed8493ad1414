# src/crocalc/config/settings.py
"""
Application settings (Pydantic).

Settings are loaded from `src/crocalc/config/defaults.yaml`, then optionally overridden by:
- environment variables (e.g., `CROCALC_LOG_LEVEL`, `CROCALC_CATALOG_PATH`)
- an external YAML file via `CROCALC_CONFIG_PATH`

Design rule:
- Pricing policy (staff fees, travel rate, online seat bands) lives in YAML, not in
  the calculation code, so it can change without touching the engine.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, model_validator

from crocalc.core.env import load_dotenv_if_present


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `crocalc.config`."""
    text = resources.files("crocalc.config").joinpath(filename).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {filename}; expected a mapping.")
    return data


def _read_yaml_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML file from disk and return its mapping root."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {path}; expected a mapping.")
    return data


class AppSettings(BaseModel):
    name: str = "Crocodile Savings Calculator"
    log_level: str = "INFO"


class CatalogSettings(BaseModel):
    # None means "use the institute catalog packaged with crocalc.catalog".
    path: str | None = None


class TraditionalCostSettings(BaseModel):
    """Fees for in-person training, per person and training cycle."""

    cost_per_dentist: float = Field(1200, ge=0)
    cost_per_assistant: float = Field(280, ge=0)


class TravelSettings(BaseModel):
    average_speed_kmh: float = Field(60, gt=0)
    cost_per_km: float = Field(0.30, ge=0)
    carpool_size: int = Field(5, ge=1)


class OnlinePricingBand(BaseModel):
    """Per-seat price for teams of `min_team_size..max_team_size` (inclusive)."""

    min_team_size: int = Field(..., ge=1)
    max_team_size: int | None = Field(default=None, ge=1)
    price_per_seat: float = Field(..., ge=0)

    @model_validator(mode="after")
    def _validate_range(self) -> "OnlinePricingBand":
        if self.max_team_size is not None and self.max_team_size < self.min_team_size:
            raise ValueError("max_team_size must be >= min_team_size")
        return self

    def covers(self, team_size: int) -> bool:
        if team_size < self.min_team_size:
            return False
        return self.max_team_size is None or team_size <= self.max_team_size


class OnlinePricingSettings(BaseModel):
    bands: list[OnlinePricingBand] = Field(..., min_length=1)

    @model_validator(mode="after")
    def _validate_coverage(self) -> "OnlinePricingSettings":
        # Bands must tile [1, inf) without gaps or overlaps so every team has a price.
        ordered = sorted(self.bands, key=lambda b: b.min_team_size)
        if ordered[0].min_team_size != 1:
            raise ValueError("online_pricing.bands must start at min_team_size 1")
        for prev, nxt in zip(ordered, ordered[1:]):
            if prev.max_team_size is None:
                raise ValueError("only the last online_pricing band may be open-ended")
            if nxt.min_team_size != prev.max_team_size + 1:
                raise ValueError(
                    f"online_pricing.bands must be contiguous: band ending at {prev.max_team_size} "
                    f"is followed by band starting at {nxt.min_team_size}"
                )
        if ordered[-1].max_team_size is not None:
            raise ValueError("the last online_pricing band must be open-ended (max_team_size: null)")
        self.bands = ordered
        return self


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    catalog: CatalogSettings = Field(default_factory=CatalogSettings)
    traditional: TraditionalCostSettings = Field(default_factory=TraditionalCostSettings)
    travel: TravelSettings = Field(default_factory=TravelSettings)
    online_pricing: OnlinePricingSettings


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload.

    Note: pricing knobs are intentionally not exposed through env vars; change them in YAML.
    """
    load_dotenv_if_present()
    data = dict(data)

    log_level = os.getenv("CROCALC_LOG_LEVEL")
    if log_level:
        data.setdefault("app", {})["log_level"] = log_level

    catalog_path = os.getenv("CROCALC_CATALOG_PATH")
    if catalog_path:
        data.setdefault("catalog", {})["path"] = catalog_path

    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    load_dotenv_if_present()
    config_path = os.getenv("CROCALC_CONFIG_PATH")
    raw = _read_yaml_file(config_path) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
