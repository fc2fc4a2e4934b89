"""
bfi Interpreter

Wires the lexer, loop resolver and executor into one pipeline.

Key classes:
- Program: Instructions plus their resolved jump map
- ExecutionResult: Outcome of a run, errors included
- Interpreter: Main entry point for running program text
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from bfi.errors import BFError
from bfi.lexer import Instruction, render, tokenize
from bfi.resolver import JumpMap, resolve
from bfi.runtime.environment import Environment
from bfi.runtime.executor import ExecutionConfig, Executor
from bfi.runtime.state import RuntimeState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Program:
    """A lexed and resolved program, ready to run any number of times."""
    instructions: Tuple[Instruction, ...]
    jumps: JumpMap

    @property
    def loop_count(self) -> int:
        return len(self.jumps) // 2

    def __len__(self) -> int:
        return len(self.instructions)

    def __str__(self) -> str:
        return render(self.instructions)


@dataclass
class ExecutionResult:
    """Result of running a program."""
    success: bool
    output: bytes = b""
    output_size: int = 0
    steps: int = 0
    error_kind: Optional[str] = None
    errors: List[str] = field(default_factory=list)
    execution_time_ms: float = 0.0
    final_state: Optional[RuntimeState] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "output": self.output.decode("latin-1"),
            "output_size": self.output_size,
            "steps": self.steps,
            "error_kind": self.error_kind,
            "errors": self.errors,
            "execution_time_ms": self.execution_time_ms,
        }


class Interpreter:
    """
    Main interpreter.

    Pipeline:
    1. tokenize(source) -> instructions
    2. resolve(instructions) -> jumps; a bracket error stops here, before
       any output is produced
    3. Executor.execute(...) against the environment's source and sink
    """

    def __init__(self, config: ExecutionConfig = None):
        self.config = config or ExecutionConfig()
        self.executor = Executor(self.config)

    def load(self, source: str) -> Program:
        """
        Lex and resolve program text.

        Raises:
            UnmatchedLoopOpen, UnmatchedLoopClose
        """
        instructions = tokenize(source)
        return Program(instructions, resolve(instructions))

    def interpret(self,
                  program: Union[str, Program],
                  environment: Environment = None) -> ExecutionResult:
        """
        Run a program and report the outcome.

        Interpreter errors never escape; they are returned in the result.
        Output written before a runtime error is kept.

        Args:
            program: Program text or a Program from load()
            environment: Input/output; defaults to empty input and captured output

        Returns:
            ExecutionResult
        """
        env = environment or Environment.from_bytes()
        start = time.time()
        result = ExecutionResult(success=False)

        try:
            if isinstance(program, str):
                program = self.load(program)
            state = self.executor.execute(
                program.instructions, program.jumps, env.source, env.sink
            )
        except BFError as e:
            logger.info("Program failed: %s: %s", e.kind, e.message)
            result.error_kind = e.kind
            result.errors.append(e.message)
            result.steps = getattr(e, "state", {}).get("steps", 0)
        else:
            result.success = True
            result.steps = state.steps
            result.final_state = state

        result.output = env.captured_output()
        result.output_size = env.output_size()
        result.execution_time_ms = (time.time() - start) * 1000
        return result

    def run(self, source: str, input_data: bytes = b"") -> bytes:
        """
        Run program text on in-memory input and return its output.

        Unlike interpret(), errors are raised.
        """
        program = self.load(source)
        env = Environment.from_bytes(input_data)
        self.executor.execute(program.instructions, program.jumps, env.source, env.sink)
        return env.captured_output()
