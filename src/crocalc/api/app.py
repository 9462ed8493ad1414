# src/crocalc/api/app.py
"""
FastAPI application wiring.

This file creates the `FastAPI` instance for the calculator widget backend.
Business logic lives in `crocalc.api.routes` and `crocalc.calculator`.
"""

from __future__ import annotations

import os

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from crocalc.core.logging import configure_logging

from .routes import router

configure_logging()

app = FastAPI(title="Crocodile Savings Calculator API", version="0.1.0")

LOCALHOST_ORIGIN_REGEX = r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$"


def _cors_options() -> dict | None:
    """CORS options for the marketing pages embedding the widget, or None to skip CORS.

    `CROCALC_CORS_ORIGINS` is a comma-separated allowlist. Without it, localhost
    origins are allowed unless `CROCALC_CORS_ALLOW_LOCAL` is falsy.
    """
    origins = [s.strip() for s in os.getenv("CROCALC_CORS_ORIGINS", "").split(",") if s.strip()]
    if origins:
        return {"allow_origins": origins}
    allow_local = os.getenv("CROCALC_CORS_ALLOW_LOCAL", "1").strip().lower() in {"1", "true", "yes", "y"}
    return {"allow_origin_regex": LOCALHOST_ORIGIN_REGEX} if allow_local else None


cors = _cors_options()
if cors is not None:
    # Widget calls are anonymous: no cookies, any method/header.
    app.add_middleware(CORSMiddleware, allow_credentials=False, allow_methods=["*"], allow_headers=["*"], **cors)

app.include_router(router)
