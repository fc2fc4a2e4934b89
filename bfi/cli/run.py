"""Run command for bfi CLI."""

import json
import sys

import click

from bfi.runtime.environment import BufferSink, Environment, StreamSink, StreamSource
from bfi.runtime.executor import EofPolicy, ExecutionConfig
from bfi.runtime.interpreter import Interpreter
from bfi.runtime.state import DEFAULT_TAPE_SIZE
from bfi.cli.common import (
    configure_logging,
    eval_option,
    json_option,
    program_argument,
    read_program,
)


@click.command()
@program_argument
@eval_option
@click.option('--input', '-i', 'input_file', type=click.File('rb'),
              help='Read program input from a file instead of stdin.')
@click.option('--eof', type=click.Choice([p.value for p in EofPolicy]),
              default=EofPolicy.ERROR.value, show_default=True,
              help="What ',' does once input is exhausted.")
@click.option('--tape-size', type=click.IntRange(min=1), default=DEFAULT_TAPE_SIZE,
              show_default=True, help='Number of memory cells.')
@click.option('--max-steps', type=click.IntRange(min=1), default=None,
              help='Stop with an error after this many instructions.')
@json_option
@click.option('--verbose', '-v', is_flag=True, help='Log pipeline details to stderr.')
def run_command(program, code, input_file, eof, tape_size, max_steps, json_output, verbose):
    """Run a program. Without PROGRAM or --eval, runs a built-in example."""
    configure_logging(verbose)
    source = read_program(program, code)

    config = ExecutionConfig(tape_size=tape_size, eof_policy=eof, max_steps=max_steps)
    stdin = input_file or click.get_binary_stream('stdin')

    if json_output:
        env = Environment(StreamSource(stdin), BufferSink())
    else:
        env = Environment(StreamSource(stdin), StreamSink(click.get_binary_stream('stdout')))

    result = Interpreter(config).interpret(source, env)

    if json_output:
        click.echo(json.dumps(result.to_dict(), indent=2))

    if not result.success:
        click.echo(f"Error: {result.error_kind}: {'; '.join(result.errors)}", err=True)
        sys.exit(1)
