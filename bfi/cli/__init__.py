"""bfi CLI Package - Command structure for the tape interpreter"""

import click

from bfi import __version__
from bfi.cli.run import run_command
from bfi.cli.check import check_command
from bfi.cli.tokens import tokens_command


@click.group()
@click.version_option(__version__, prog_name="bfi")
def main():
    """bfi - Deterministic interpreter for the eight-instruction tape language."""
    pass


main.add_command(run_command, "run")
main.add_command(check_command, "check")
main.add_command(tokens_command, "tokens")

__all__ = [
    "main",
    "run_command",
    "check_command",
    "tokens_command",
]
