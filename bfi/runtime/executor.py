"""
bfi Executor

Runs a resolved instruction sequence against a fresh RuntimeState.

Key classes:
- EofPolicy: What ',' does when the input source is exhausted
- ExecutionConfig: Configuration for execution
- Executor: Main execution loop
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional, Sequence

from bfi.errors import InputExhausted, PointerOutOfBounds, StepLimitExceeded
from bfi.lexer import Instruction
from bfi.runtime.environment import ByteSink, ByteSource
from bfi.runtime.state import DEFAULT_TAPE_SIZE, RuntimeState

logger = logging.getLogger(__name__)


class EofPolicy(Enum):
    ERROR = "error"
    ZERO = "zero"
    UNCHANGED = "unchanged"


@dataclass
class ExecutionConfig:
    """Configuration for program execution."""
    tape_size: int = DEFAULT_TAPE_SIZE
    eof_policy: EofPolicy = EofPolicy.ERROR
    max_steps: Optional[int] = None

    def __post_init__(self) -> None:
        self.eof_policy = EofPolicy(self.eof_policy)
        if self.tape_size < 1:
            raise ValueError(f"tape_size must be at least 1, got {self.tape_size}")
        if self.max_steps is not None and self.max_steps < 1:
            raise ValueError(f"max_steps must be at least 1, got {self.max_steps}")


class Executor:
    """
    Main execution engine.

    Each call to execute() owns a new RuntimeState; nothing carries over
    between runs, so one Executor may run any number of programs in turn.
    """

    def __init__(self, config: ExecutionConfig = None):
        self.config = config or ExecutionConfig()

    def execute(self,
                instructions: Sequence[Instruction],
                jumps: Mapping[int, int],
                source: ByteSource,
                sink: ByteSink) -> RuntimeState:
        """
        Execute an instruction sequence.

        Args:
            instructions: Sequence from the lexer
            jumps: Jump map from the resolver for the same sequence
            source: Where ',' reads from
            sink: Where '.' writes to

        Returns:
            The final RuntimeState

        Raises:
            PointerOutOfBounds: Pointer left the tape
            InputExhausted: ',' at end of input under EofPolicy.ERROR
            StepLimitExceeded: More than config.max_steps instructions ran
        """
        config = self.config
        state = RuntimeState(tape_size=config.tape_size)
        tape_size = config.tape_size
        max_steps = config.max_steps
        end = len(instructions)

        logger.debug("Executing %d instructions (tape_size=%d, max_steps=%s)",
                     end, tape_size, max_steps)

        while state.pc < end:
            if max_steps is not None and state.steps >= max_steps:
                raise StepLimitExceeded(max_steps, state.pc, state.to_dict())

            pc = state.pc
            instruction = instructions[pc]

            if instruction is Instruction.MOVE_RIGHT:
                if state.pointer + 1 >= tape_size:
                    raise PointerOutOfBounds(state.pointer + 1, tape_size, pc, state.to_dict())
                state.pointer += 1
            elif instruction is Instruction.MOVE_LEFT:
                if state.pointer == 0:
                    raise PointerOutOfBounds(-1, tape_size, pc, state.to_dict())
                state.pointer -= 1
            elif instruction is Instruction.INCREMENT:
                state.cell += 1
            elif instruction is Instruction.DECREMENT:
                state.cell -= 1
            elif instruction is Instruction.OUTPUT:
                sink.write_byte(state.cell)
            elif instruction is Instruction.INPUT:
                self._read_input(state, source)
            elif instruction is Instruction.LOOP_OPEN:
                if state.cell == 0:
                    state.pc = jumps[pc]
            elif instruction is Instruction.LOOP_CLOSE:
                if state.cell != 0:
                    state.pc = jumps[pc]

            state.pc += 1
            state.steps += 1

        logger.debug("Execution finished after %d steps", state.steps)
        return state

    def _read_input(self, state: RuntimeState, source: ByteSource) -> None:
        value = source.read_byte()
        if value is not None:
            state.cell = value
            return

        policy = self.config.eof_policy
        if policy is EofPolicy.ERROR:
            raise InputExhausted(state.pc, state.to_dict())
        if policy is EofPolicy.ZERO:
            state.cell = 0
