#!/usr/bin/env python3
"""
Configuration for the RandomUser client.

Values come from environment variables, optionally loaded from a .env file
that sits in the project root (one directory above this package).
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent
# Project root (the folder that holds the randomuser package and the .env file).

DEFAULT_BASE_URL = "https://randomuser.me"
DEFAULT_TIMEOUT = 10.0
DEFAULT_DATE_FORMAT = "MM/DD/YYYY"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    date_format: str = DEFAULT_DATE_FORMAT
    data_dir: Path = BASE_DIR / "data"
    log_level: str = DEFAULT_LOG_LEVEL
    headers: Optional[dict] = None

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        """Build settings from a mapping of environment variables (os.environ by default)."""
        env = os.environ if environ is None else environ

        raw_timeout = env.get("RANDOMUSER_TIMEOUT", str(DEFAULT_TIMEOUT))
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ValueError(f"RANDOMUSER_TIMEOUT must be a number, got {raw_timeout!r}") from None
        if timeout <= 0:
            raise ValueError(f"RANDOMUSER_TIMEOUT must be positive, got {timeout}")

        data_dir = env.get("RANDOMUSER_DATA_DIR")
        return cls(
            base_url=env.get("RANDOMUSER_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            timeout=timeout,
            date_format=env.get("RANDOMUSER_DATE_FORMAT", DEFAULT_DATE_FORMAT),
            data_dir=Path(data_dir) if data_dir else BASE_DIR / "data",
            log_level=env.get("RANDOMUSER_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )


def load_settings(env_file: Optional[Path] = None) -> Settings:
    # Existing environment variables win over the .env file (load_dotenv does not override).
    load_dotenv(env_file or BASE_DIR / ".env")
    return Settings.from_env()
