from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    # Logs share the terminal with the menu output.
    log_level: str = "WARNING"

    # Reject dates that don't parse as DD-MM-YYYY.
    strict_dates: bool = False

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


def _parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if level not in _LOG_LEVELS:
        raise RuntimeError(f"Invalid LOG_LEVEL value: {raw!r}. Expected one of {', '.join(_LOG_LEVELS)}.")
    return level


def load_settings(dotenv_path: str | None = None) -> Settings:
    # Prefer .env in repo root; dotenv_path allows overriding in tests.
    load_dotenv(dotenv_path=dotenv_path, override=False)

    log_level = _parse_log_level(os.getenv("LOG_LEVEL", "WARNING"))

    strict_raw = os.getenv("STRICT_DATES", "0").strip().lower()
    strict_dates = strict_raw in {"1", "true", "yes"}

    return Settings(
        log_level=log_level,
        strict_dates=strict_dates,
    )
