"""Shared helpers for bfi CLI commands."""

import logging
import sys
from typing import Optional, TextIO

import click

# Prints "Hello World!\n"
EXAMPLE_PROGRAM = (
    "++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]"
    ">>.>---.+++++++..+++.>>.<-.<.+++.------.--------.>>+.>++."
)

program_argument = click.argument(
    "program",
    type=click.File("r", encoding="utf-8", errors="replace"),
    required=False,
)
eval_option = click.option(
    "--eval", "-e", "code",
    help="Program text given on the command line instead of a file.",
)
json_option = click.option(
    "--json-output", "-j", "json_output", is_flag=True, help="Output as JSON",
)


def read_program(program: Optional[TextIO], code: Optional[str]) -> str:
    """Program text from -e, a file (or '-' for stdin), else the built-in example."""
    if code is not None and program is not None:
        raise click.UsageError("Give either PROGRAM or --eval, not both.")
    if code is not None:
        return code
    if program is not None:
        return program.read()
    return EXAMPLE_PROGRAM


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
