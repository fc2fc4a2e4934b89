"""
bfi Lexer

Turns program text into an instruction sequence. Any character outside the
eight-symbol alphabet is a comment and is dropped without error.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, Tuple

logger = logging.getLogger(__name__)


class Instruction(Enum):
    MOVE_RIGHT = ">"
    MOVE_LEFT = "<"
    INCREMENT = "+"
    DECREMENT = "-"
    OUTPUT = "."
    INPUT = ","
    LOOP_OPEN = "["
    LOOP_CLOSE = "]"

    @property
    def symbol(self) -> str:
        return self.value


SYMBOLS = frozenset(i.value for i in Instruction)


def tokenize(source: str) -> Tuple[Instruction, ...]:
    """
    Lex program text into an instruction sequence.

    Args:
        source: Arbitrary text; non-instruction characters are ignored

    Returns:
        Tuple of instructions in source order
    """
    instructions = tuple(Instruction(ch) for ch in source if ch in SYMBOLS)
    logger.debug("Lexed %d instructions from %d characters",
                 len(instructions), len(source))
    return instructions


def render(instructions: Iterable[Instruction]) -> str:
    """Canonical program text for an instruction sequence."""
    return "".join(i.value for i in instructions)
