"""Tokens command for bfi CLI."""

import json

import click

from bfi.lexer import render, tokenize
from bfi.cli.common import eval_option, json_option, program_argument, read_program


@click.command()
@program_argument
@eval_option
@json_option
def tokens_command(program, code, json_output):
    """Print a program's instructions with comments stripped."""
    instructions = tokenize(read_program(program, code))

    if json_output:
        click.echo(json.dumps([i.name for i in instructions]))
    else:
        click.echo(render(instructions))
