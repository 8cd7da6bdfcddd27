"""
Configuration for errlift's ambient logging.

- Frozen dataclass validated in __post_init__.
- Loads from OS env; a .env file in the working directory is read first
  (existing env vars win).
- Cached via functools.lru_cache; call get_settings.cache_clear() after
  changing the environment.
"""

from __future__ import annotations

import functools
import os
import re
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "ERRLIFT_"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# ------------------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------------------
def _load_dotenv(env_path: Path) -> None:
    if env_path.exists():
        load_dotenv(dotenv_path=str(env_path), override=False)


def _get_env_str(environ: dict[str, str], key: str, default: str) -> str:
    v = environ.get(ENV_PREFIX + key)
    if v is None or v.strip() == "":
        return default
    return v.strip()


def _get_env_bool(environ: dict[str, str], key: str, default: bool = False) -> bool:
    v = environ.get(ENV_PREFIX + key)
    if v is None or v.strip() == "":
        return default
    v = v.strip().lower()
    if v in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if v in {"0", "false", "f", "no", "n", "off"}:
        return False
    raise ValueError(f"Env var {ENV_PREFIX}{key} must be a boolean, got {v!r}")


# ------------------------------------------------------------------------------
# Settings dataclass (immutable)
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class Settings:
    # Observability
    log_level: str = "INFO"
    json_logs: bool = True

    def __post_init__(self) -> None:
        if not re.fullmatch(r"(?i)DEBUG|INFO|WARNING|ERROR|CRITICAL", self.log_level.strip()):
            raise ValueError(f"{ENV_PREFIX}LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
        object.__setattr__(self, "log_level", self.log_level.strip().upper())

    @classmethod
    def from_env(cls, environ: dict[str, str]) -> Settings:
        return cls(
            log_level=_get_env_str(environ, "LOG_LEVEL", "INFO"),
            json_logs=_get_env_bool(environ, "JSON_LOGS", True),
        )


# ------------------------------------------------------------------------------
# Loader (singleton)
# ------------------------------------------------------------------------------
@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_dotenv(Path.cwd() / ".env")
    return Settings.from_env(dict(os.environ))
