# src/tasklist/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is required: every variable has a sensible default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKLIST"

ID_MODES = ("numeric", "token")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip()
    for choice in choices:
        if value.lower() == choice.lower():
            return choice
    return default


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path
    log_to_file: bool

    # ---- Task store ----
    id_mode: str

    # ---- Console ----
    prompt: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "tasklist").strip() or "tasklist"
        log_level = _env_choice(_k("LOG_LEVEL"), LOG_LEVELS, "INFO")
        log_dir = _env_path(_k("LOG_DIR"), Path(".local/tasklist"))
        log_to_file = _env_bool(_k("LOG_TO_FILE"), True)

        id_mode = _env_choice(_k("ID_MODE"), ID_MODES, "numeric")

        # Not stripped: the default prompt ends with a space.
        prompt = _env(_k("PROMPT"), "> ")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            log_to_file=log_to_file,
            id_mode=id_mode,
            prompt=prompt,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load .env (without overriding real env vars) and build Settings once."""
    load_dotenv(override=False)
    return Settings.from_env()
