"""Runtime settings read from the environment and an optional ``.env`` file.

Recognised variables:

- ``DOC_FILER_SEED``: integer seed for the train/test split (unset: random).
- ``DOC_FILER_EXTENSIONS``: comma-separated document suffixes (default ``.pdf``).
- ``DOC_FILER_LOG_LEVEL``: logging level name (default ``WARNING``).
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .corpus import DEFAULT_EXTENSIONS
from .errors import ConfigError

ENV_SEED = "DOC_FILER_SEED"
ENV_EXTENSIONS = "DOC_FILER_EXTENSIONS"
ENV_LOG_LEVEL = "DOC_FILER_LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    seed: Optional[int] = None
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    log_level: str = "WARNING"


def parse_extensions(value: str) -> tuple[str, ...]:
    """Parse ``".pdf, docx"`` into ``(".pdf", ".docx")``."""
    parts = [p.strip().lower() for p in value.split(",") if p.strip()]
    if not parts:
        raise ConfigError(f"{ENV_EXTENSIONS} must name at least one extension")
    return tuple(p if p.startswith(".") else f".{p}" for p in parts)


def _parse_seed(value: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigError(f"{ENV_SEED} must be an integer, got {value!r}") from exc


def _parse_log_level(value: str) -> str:
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"{ENV_LOG_LEVEL} is not a logging level: {value!r}")
    return level


def settings_from_env(env: Mapping[str, str]) -> Settings:
    """Build settings from a mapping of environment variables.

    Raises:
        ConfigError: If a variable holds an invalid value.
    """
    seed = env.get(ENV_SEED)
    extensions = env.get(ENV_EXTENSIONS)
    log_level = env.get(ENV_LOG_LEVEL)
    return Settings(
        seed=_parse_seed(seed) if seed else None,
        extensions=parse_extensions(extensions) if extensions else DEFAULT_EXTENSIONS,
        log_level=_parse_log_level(log_level) if log_level else "WARNING",
    )


def load_settings() -> Settings:
    """Load ``.env`` from the working directory (without overriding the
    environment) and read settings."""
    load_dotenv(find_dotenv(usecwd=True))
    return settings_from_env(os.environ)
