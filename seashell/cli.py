"""Command line entry point for the seashell interpreter."""

import logging
import sys
from typing import Optional

import click

from seashell.context import ShellConfig
from seashell.shell import Shell

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="seashell")
@click.option("--prompt", "prompt_symbol", default=None, help="Prompt symbol (default: '$ ').")
@click.option("--no-cwd", is_flag=True, help="Do not print the working directory above the prompt.")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    envvar="SEASHELL_LOG_LEVEL",
    show_default=True,
    help="Logging level for diagnostics on stderr.",
)
def cli(prompt_symbol: Optional[str], no_cwd: bool, log_level: str) -> None:
    """A minimal Unix shell with builtins and I/O redirection."""
    logging.basicConfig(
        level=log_level.upper(),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = ShellConfig.from_env(prompt_symbol=prompt_symbol, show_cwd=not no_cwd)
    sys.exit(Shell(config).run())


def main() -> None:
    """CLI entry point used by the `seashell` console script."""
    cli()
