"""Main entry point for the task tracker.

Settings come from the environment / .env; command-line options win.
"""
import logging
from pathlib import Path
from typing import Optional

import click

from cli import CLI
from command_parser import CommandParser
from config import get_settings
from logging_setup import level_from_name, setup_logging
from storage import Storage
from task_list import TaskList
from theme import Theme
from ui import Ui

logger = logging.getLogger(__name__)


@click.command()
@click.option('--data-file', type=click.Path(dir_okay=False, path_type=Path), default=None,
              help='Task file to load and save (default: $TRACKER_DATA_FILE or data/tasks.txt).')
@click.option('--log-level', default=None,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Console log level (default: $TRACKER_LOG_LEVEL or WARNING).')
def main(data_file: Optional[Path], log_level: Optional[str]) -> None:
    """Track todos, deadlines and events from the terminal."""
    settings = get_settings()
    setup_logging(console_level=level_from_name(log_level or settings.log_level),
                  log_file=settings.log_file)
    storage = Storage(data_file or settings.data_file)
    tasks = TaskList(storage.load_all())
    logger.info('Session started with %d task(s) from %s', len(tasks), storage.path)
    parser = CommandParser(tasks, storage, Ui())
    CLI(parser, Theme.from_env()).run()


if __name__ == "__main__":
    main()
