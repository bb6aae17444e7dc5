"""Configuration helpers for header-tool."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Iterable

from dotenv import dotenv_values


DEFAULT_ENVIRONMENT = "development"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class Settings:
    """Container for environment-derived runtime settings.

    Nothing here changes the banner itself; these only tune the ambient logging.
    """

    environment: str = DEFAULT_ENVIRONMENT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, *, env_files: Iterable[str] | None = None) -> "Settings":
        """Build settings from environment variables, optionally loading dotenv files."""

        env_overrides: dict[str, str] = {}
        if env_files:
            for candidate in env_files:
                candidate_path = os.path.abspath(candidate)
                if os.path.isfile(candidate_path):
                    values = {
                        key: value
                        for key, value in dotenv_values(candidate_path).items()
                        if value is not None
                    }
                    env_overrides.update(values)

        def lookup(key: str, default: str) -> str:
            if key in os.environ:
                return os.environ[key]
            value = env_overrides.get(key)
            if value is None or not value.strip():
                return default
            return value.strip()

        return cls(
            environment=lookup("HEADERTOOL_ENV", DEFAULT_ENVIRONMENT),
            log_level=lookup("HEADERTOOL_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        )

    def resolved_log_level(self) -> int | None:
        """Return the ``logging`` level for ``log_level``, or None if unrecognised."""
        raw = self.log_level.strip()
        if raw.isdecimal():
            return int(raw)
        level = logging.getLevelName(raw.upper())
        return level if isinstance(level, int) else None
