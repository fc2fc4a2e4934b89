"""
bfi Loop Resolver

Precomputes the partner of every '[' and ']' so the executor can jump in
constant time.

Key functions:
- resolve: Build the symmetric jump map, raising on the first bracket error
- check_loops: Report every bracket error in a program
"""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence, Tuple

from bfi.errors import LoopStructureError, UnmatchedLoopClose, UnmatchedLoopOpen
from bfi.lexer import Instruction

logger = logging.getLogger(__name__)

JumpMap = Dict[int, int]


def _scan(instructions: Sequence[Instruction]) -> Tuple[JumpMap, List[int], List[int]]:
    """Single pass bracket match. Returns (jumps, stray closes, unclosed opens)."""
    jumps: JumpMap = {}
    stray: List[int] = []
    stack: List[int] = []

    for index, instruction in enumerate(instructions):
        if instruction is Instruction.LOOP_OPEN:
            stack.append(index)
        elif instruction is Instruction.LOOP_CLOSE:
            if not stack:
                stray.append(index)
                continue
            start = stack.pop()
            jumps[start] = index
            jumps[index] = start

    return jumps, stray, stack


def check_loops(instructions: Sequence[Instruction]) -> List[LoopStructureError]:
    """
    Collect every bracket error in the program.

    Stray ']' come first in program order, followed by unclosed '[' in
    program order. An empty list means the program is well bracketed.
    """
    _, stray, unclosed = _scan(instructions)
    errors: List[LoopStructureError] = [UnmatchedLoopClose(i) for i in stray]
    errors.extend(UnmatchedLoopOpen(i) for i in unclosed)
    return errors


def resolve(instructions: Sequence[Instruction]) -> JumpMap:
    """
    Build the loop jump map.

    Args:
        instructions: Instruction sequence from the lexer

    Returns:
        Mapping from each bracket index to its partner's index

    Raises:
        UnmatchedLoopClose: A ']' appears with no open loop
        UnmatchedLoopOpen: A '[' is never closed
    """
    jumps, stray, unclosed = _scan(instructions)
    if stray:
        raise UnmatchedLoopClose(stray[0])
    if unclosed:
        raise UnmatchedLoopOpen(unclosed[0])

    logger.debug("Resolved %d loops", len(jumps) // 2)
    return jumps
