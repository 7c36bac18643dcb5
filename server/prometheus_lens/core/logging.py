from __future__ import annotations
"""server/prometheus_lens/core/logging.py
~~~~~~~~~~~~~~~~~~~~~~~~
Configuration logs.
"""
import logging

from prometheus_lens.core.config import settings


def setup_logging(level: int | str | None = None) -> None:
    if level is None:
        level = getattr(logging, str(settings.LOG_LEVEL).upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s %(message)s")
