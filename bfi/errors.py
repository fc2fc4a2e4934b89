"""
bfi error taxonomy

Structural errors are raised by the loop resolver before a program runs;
execution errors are raised by the executor at the instruction that failed.

Key classes:
- BFError: Base of everything the interpreter raises
- LoopStructureError: UnmatchedLoopOpen / UnmatchedLoopClose
- ExecutionError: PointerOutOfBounds / InputExhausted / StepLimitExceeded
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class BFError(Exception):
    """Base exception for all interpreter errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def kind(self) -> str:
        return type(self).__name__

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "message": self.message}


class LoopStructureError(BFError):
    """A loop bracket without a partner, found while resolving jumps."""

    def __init__(self, message: str, index: int):
        super().__init__(f"{message} at instruction {index}")
        self.index = index

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["index"] = self.index
        return data


class UnmatchedLoopOpen(LoopStructureError):
    def __init__(self, index: int):
        super().__init__("Unmatched '['", index)


class UnmatchedLoopClose(LoopStructureError):
    def __init__(self, index: int):
        super().__init__("Unmatched ']'", index)


class ExecutionError(BFError):
    """
    Fatal error raised while a program is running.

    `pc` is the index of the failing instruction; `state` is a snapshot of
    the runtime state at that point, when the executor supplies one.
    """

    def __init__(self, message: str, pc: int, state: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.pc = pc
        self.state = state or {}

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["pc"] = self.pc
        return data


class PointerOutOfBounds(ExecutionError):
    def __init__(self, pointer: int, tape_size: int, pc: int,
                 state: Optional[Dict[str, Any]] = None):
        super().__init__(
            f"Data pointer moved to {pointer}, outside tape [0, {tape_size})",
            pc, state,
        )
        self.pointer = pointer
        self.tape_size = tape_size


class InputExhausted(ExecutionError):
    def __init__(self, pc: int, state: Optional[Dict[str, Any]] = None):
        super().__init__(f"Input exhausted at instruction {pc}", pc, state)


class StepLimitExceeded(ExecutionError):
    def __init__(self, max_steps: int, pc: int, state: Optional[Dict[str, Any]] = None):
        super().__init__(f"Program exceeded step limit of {max_steps}", pc, state)
        self.max_steps = max_steps
