"""
bfi Runtime State

The mutable machine of a single run: memory tape, data pointer, program
counter and step count. A fresh RuntimeState is created for every execution.

Key classes:
- RuntimeState: Tape, pointer and counters for one run
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

DEFAULT_TAPE_SIZE = 30000


@dataclass
class RuntimeState:
    """
    Runtime state during program execution.

    Tracks:
    - tape: one unsigned byte per cell, zero initialised
    - pointer: index of the current cell
    - pc: index of the next instruction
    - steps: instructions executed so far
    """
    tape_size: int = DEFAULT_TAPE_SIZE
    tape: bytearray = field(init=False, repr=False)
    pointer: int = 0
    pc: int = 0
    steps: int = 0

    def __post_init__(self) -> None:
        self.tape = bytearray(self.tape_size)

    @property
    def cell(self) -> int:
        """Value of the cell under the data pointer."""
        return self.tape[self.pointer]

    @cell.setter
    def cell(self, value: int) -> None:
        """Store modulo 256, so +1 on 255 gives 0 and -1 on 0 gives 255."""
        self.tape[self.pointer] = value & 0xFF

    def window(self, radius: int = 8) -> Dict[int, int]:
        """Cells within `radius` of the pointer, keyed by address."""
        start = max(0, self.pointer - radius)
        end = min(self.tape_size, self.pointer + radius + 1)
        return {addr: self.tape[addr] for addr in range(start, end)}

    def to_dict(self, radius: int = 8) -> Dict[str, Any]:
        return {
            "tape_size": self.tape_size,
            "pointer": self.pointer,
            "pc": self.pc,
            "steps": self.steps,
            "cells": {str(k): v for k, v in self.window(radius).items()},
        }
