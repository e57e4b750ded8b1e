"""Package configuration from environment variables."""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


class Settings(BaseSettings):
    widgetgeom_log_level: str = "info"

    # Points per 90° arc when flattening outlines (bounds, polygons)
    widgetgeom_arc_samples: int = 12

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()


def configure_logging(level: str | None = None) -> int:
    """Install a root handler at the configured level. Returns the numeric level."""
    name = (level or settings.widgetgeom_log_level).upper()
    numeric = getattr(logging, name, logging.INFO)
    if not isinstance(numeric, int):
        numeric = logging.INFO
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    logging.getLogger("widgetgeom").setLevel(numeric)
    return numeric
