"""Check command for bfi CLI - loop structure validation."""

import json
import sys

import click

from bfi.lexer import Instruction, tokenize
from bfi.resolver import check_loops
from bfi.cli.common import eval_option, json_option, program_argument, read_program


@click.command()
@program_argument
@eval_option
@json_option
def check_command(program, code, json_output):
    """Check that every loop in a program is closed."""
    instructions = tokenize(read_program(program, code))
    errors = check_loops(instructions)

    output = {
        "valid": not errors,
        "instruction_count": len(instructions),
        "loop_count": instructions.count(Instruction.LOOP_OPEN),
        "errors": [e.to_dict() for e in errors],
    }

    if errors:
        click.echo(json.dumps(output, indent=2), err=True)
        sys.exit(1)

    if json_output:
        click.echo(json.dumps(output, indent=2))
    else:
        click.echo("✓ Program valid")
        click.echo(f"  Instructions: {output['instruction_count']}")
        click.echo(f"  Loops: {output['loop_count']}")
