"""CLI entry point for inv. Uses Click for argument parsing."""

from __future__ import annotations

import logging
import sys

import click

from inv.config import Config, load_config
from inv.errors import InvError
from inv.session import run_session
from inv.terminal import ProcessTerminal, Terminal

logger = logging.getLogger(__name__)


def _setup_logging(config: Config) -> None:
    # Nothing may reach the screen while the terminal is raw, so logs only
    # go to a file when one is configured.
    if not config.log_file:
        return
    logging.basicConfig(
        filename=config.log_file,
        level=logging.DEBUG,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _make_terminal(config: Config) -> Terminal:
    return ProcessTerminal(read_timeout_ds=config.read_timeout_ds)


@click.command()
@click.argument("path", required=False)
def main(path):
    """View the first line of PATH in the terminal. Quit with :q"""
    if path is None:
        return

    config = load_config()
    _setup_logging(config)

    try:
        run_session(path, _make_terminal(config), config)
    except (InvError, OSError) as e:
        logger.exception("Session for %s failed", path)
        click.echo(f"inv: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
