"""
jump.log — Log output.

All modules log through the "jump" logger. The CLI attaches a
handler that prints through click, so messages land on stderr
next to the command's own error output.
"""

from __future__ import annotations

import logging

import click


LOGGER_NAME = "jump"


class ClickEchoHandler(logging.Handler):
    """Write log records with click.echo(err=True)."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


class PrefixFormatter(logging.Formatter):
    """INFO prints bare, everything else gets a 'Level: ' prefix."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if record.levelno == logging.INFO:
            return message
        return f"{record.levelname.capitalize()}: {message}"


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def setup_logging(debug: bool = False) -> logging.Logger:
    """Attach the click handler to the "jump" logger.

    Safe to call more than once; earlier click handlers are replaced.
    """
    logger = get_logger()
    for h in list(logger.handlers):
        if isinstance(h, ClickEchoHandler):
            logger.removeHandler(h)

    handler = ClickEchoHandler()
    handler.setFormatter(PrefixFormatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.propagate = False
    return logger
