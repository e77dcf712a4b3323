"""Logging configuration for the interactive tracker.

The console handler writes to stderr so log lines never mix with command
responses on stdout.
"""
from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import Optional, Union

APP_LOGGERS = ('cli', 'command_parser', 'config', 'main', 'storage', 'task_list')


class _ConsoleNoiseFilter(logging.Filter):
    """Keep our own records; let third-party loggers through only at ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        root_name = record.name.split('.', 1)[0]
        if root_name in APP_LOGGERS:
            return True
        return record.levelno >= logging.ERROR


def level_from_name(name: str, default: int = logging.WARNING) -> int:
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def setup_logging(
    console_level: int = logging.WARNING,
    log_file: Optional[Union[str, Path]] = None,
    file_level: int = logging.DEBUG,
) -> None:
    """Configure the root logger once, before the first command runs."""
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt='%(asctime)s %(levelname)s %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(path), encoding='utf-8')
        fh.setLevel(file_level)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    logging.captureWarnings(True)
