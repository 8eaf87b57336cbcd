"""Centralized runtime configuration.

Loads environment variables (``.env`` supported) at import time.
Consumed by:
  - ``CalculationOptions`` defaults (weighting strategy, output format)
  - The calculation route (batch size limit)
  - ``main`` (CORS origins, host, port, debug)
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

from .constants import DEFAULT_MAX_BATCH_SIZE

load_dotenv()

logger = logging.getLogger(__name__)


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "")
    if not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("[CONFIG] %s=%r is not an integer — using %d", name, raw, default)
        return default
    if value < 1:
        logger.warning("[CONFIG] %s=%d must be positive — using %d", name, value, default)
        return default
    return value


DEFAULT_WEIGHTING_STRATEGY: str = os.getenv("FORCES_DEFAULT_WEIGHTING_STRATEGY", "confidence").strip().lower()
DEFAULT_OUTPUT_FORMAT: str = os.getenv("FORCES_DEFAULT_OUTPUT_FORMAT", "summary").strip().lower()
MAX_BATCH_SIZE: int = _int_env("FORCES_MAX_BATCH_SIZE", DEFAULT_MAX_BATCH_SIZE)

CORS_ORIGINS: list[str] = [
    origin.strip()
    for origin in os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000",
    ).split(",")
    if origin.strip()
]

DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
HOST: str = os.getenv("HOST", "127.0.0.1")
PORT: int = _int_env("PORT", 8000)
