"""
Configuration - Settings read from the environment.

Environment variables:
    DIALECTIC_ENV         development | production (default: development)
    DIALECTIC_HOST        bind address (default: 0.0.0.0)
    DIALECTIC_PORT        bind port (default: 8080)
    DIALECTIC_DATA_DIR    directory for player JSON files; unset keeps
                          players in memory
    DIALECTIC_RULES_FILE  JSON file overriding rule tables
    DIALECTIC_LOG_LEVEL   logging level name (default: INFO)
    ALLOWED_ORIGINS       comma-separated CORS origins (default: *)
"""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass, field
from typing import Mapping

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    env: str = "development"
    host: str = "0.0.0.0"
    port: int = 8080
    data_dir: str | None = None
    rules_file: str | None = None
    log_level: str = "INFO"
    allowed_origins: list[str] = field(default_factory=lambda: ["*"])

    @property
    def is_production(self) -> bool:
        return self.env == "production"


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from os.environ (or the given mapping)."""
    env = os.environ if environ is None else environ

    raw_port = env.get("DIALECTIC_PORT", "8080")
    try:
        port = int(raw_port)
    except ValueError:
        raise ValueError(f"DIALECTIC_PORT must be an integer, got {raw_port!r}") from None

    origins = [
        origin.strip()
        for origin in env.get("ALLOWED_ORIGINS", "*").split(",")
        if origin.strip()
    ]

    return Settings(
        env=env.get("DIALECTIC_ENV", "development"),
        host=env.get("DIALECTIC_HOST", "0.0.0.0"),
        port=port,
        data_dir=env.get("DIALECTIC_DATA_DIR") or None,
        rules_file=env.get("DIALECTIC_RULES_FILE") or None,
        log_level=env.get("DIALECTIC_LOG_LEVEL", "INFO").upper(),
        allowed_origins=origins or ["*"],
    )


def configure_logging(level: str | int = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
