"""Interactive loop: read a line, print the response, stop after ``bye``.

The loop owns the decision to stop; the parser only reports whether the
line was the exit command.
"""
import logging
from typing import Optional

import click

from command_parser import CommandParser
from theme import Theme

PROMPT = '> '

logger = logging.getLogger(__name__)


class CLI:
    def __init__(self, parser: CommandParser, theme: Optional[Theme] = None):
        self.parser: CommandParser = parser
        self.theme: Theme = theme or Theme()

    def run(self) -> None:
        """Main REPL loop. EOF or Ctrl-C ends the session like ``bye``."""
        click.echo(self.theme.color(self.parser.ui.greeting(), self.theme.primary, self.theme.bold))
        try:
            while True:
                line = input(self.theme.color(PROMPT, self.theme.primary)).strip()
                if not line:
                    continue
                click.echo(self.theme.highlight_done(self.parser.interpret(line)))
                if self.parser.is_exit(line):
                    break
        except (KeyboardInterrupt, EOFError):
            logger.debug('Input closed; ending session')
            click.echo()
            click.echo(self.parser.ui.farewell())
