#!/usr/bin/env python3

import logging
import os
import sys
from typing import Any, Optional

import click

from .config import (
    get_logger_path,
    get_logger_verbosity,
    get_match_mode,
    load_config,
)
from .validate import PatternMismatch, validate


def configure_logging(
    log_file: str = "commithook.log", config: Optional[dict[str, Any]] = None
) -> None:
    """Configure logging to write to a file, and to stderr in debug mode.

    The log level is determined from the configuration file.
    It can be overridden by setting the COMMITHOOK_DEBUG_LEVEL environment
    variable. Setting COMMITHOOK_DEBUG forces DEBUG and also echoes records
    to stderr. Example: COMMITHOOK_DEBUG=1 commithook "feat: x"

    The log directory is read from the configuration file's logger.path setting.
    By default, logs are written to $HOME/.commithook.

    Pass an already loaded config to avoid reading the rc file again.

    Nothing is ever logged to stdout, which carries the hook's report.
    """
    if config is None:
        config = load_config()

    log_dir = get_logger_path(config)
    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, log_file)

    log_level_str = (
        os.environ.get("COMMITHOOK_DEBUG_LEVEL") or get_logger_verbosity(config)
    )

    log_level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }

    # Default to INFO if invalid
    log_level = log_level_map.get(log_level_str.upper(), logging.INFO)

    debug_mode = False
    if os.environ.get("COMMITHOOK_DEBUG"):
        log_level = logging.DEBUG
        debug_mode = True

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    file_handler = logging.FileHandler(log_path)
    file_handler.setLevel(log_level)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    if debug_mode:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    logging.debug(f"Logging configured. Log file: {log_path}")
    logging.debug(f"Log level set to: {logging.getLevelName(log_level)}")


class MessageCommand(click.Command):
    """Command whose single argument is always message text.

    Commit messages such as "--help" or "-WIP" must be validated, not parsed
    as options, so a lone argument is placed after an implicit "--".
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        if len(args) == 1:
            args = ["--", *args]
        return super().parse_args(ctx, args)


@click.command(cls=MessageCommand, add_help_option=False)
@click.argument("message", type=str)
def cli(message: str) -> None:
    """Check that MESSAGE starts with an alphanumeric title and a colon.

    Exits 0 when the commit message is valid and 1 when it is not.
    Multi-line handling is set by validation.match_mode in commithookrc.
    """
    config = load_config()
    configure_logging(config=config)
    mode = get_match_mode(config)

    click.echo(f"Commit Message:\n{message}\n")

    try:
        title = validate(message, mode)
    except PatternMismatch as e:
        logging.info(f"Rejected commit message ({e.mode} mode): {e.text!r}")
        click.echo("Commit message is invalid.")
        sys.exit(1)

    logging.info(f"Accepted commit message with title {title!r}")
    click.echo(f"Title:\n{title}\n")
    click.echo("Commit message is valid.")
    sys.exit(0)
