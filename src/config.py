"""Settings loaded from environment variables (+ optional .env file).

Priority: real environment variable > .env entry > default. The .env file
is read from the current working directory and never overrides variables
that are already set.
"""
from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from storage import DEFAULT_TASKS_FILE

ENV_PREFIX = 'TRACKER'


def _k(suffix: str) -> str:
    return f'{ENV_PREFIX}_{suffix}'


def _env_path(name: str, default: Optional[Path]) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True)
class Settings:
    data_file: Path = DEFAULT_TASKS_FILE
    log_level: str = 'WARNING'
    log_file: Optional[Path] = None


def get_settings(dotenv: bool = True) -> Settings:
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True), override=False)
    return Settings(
        data_file=_env_path(_k('DATA_FILE'), DEFAULT_TASKS_FILE) or DEFAULT_TASKS_FILE,
        log_level=(os.getenv(_k('LOG_LEVEL')) or 'WARNING').strip().upper(),
        log_file=_env_path(_k('LOG_FILE'), None),
    )
