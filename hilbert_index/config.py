"""Library configuration from HILBERT_* environment variables."""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


class Settings(BaseSettings):
    log_level: str = "info"

    # Reject out-of-range points and indices instead of returning garbage
    strict: bool = False

    # Rows per numpy chunk in the batch transforms
    batch_chunk: int = 65536

    # The .env belongs to the host application; skip keys that are not ours
    model_config = {
        "env_prefix": "HILBERT_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Install a root handler at the configured level."""
    name = level or settings.log_level
    logging.basicConfig(
        level=getattr(logging, name.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
