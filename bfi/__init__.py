"""
bfi - Tape Language Interpreter

A deterministic interpreter for the eight-instruction tape language
(> < + - . , [ ]) operating on a 30,000 cell byte tape.

Exports:
- tokenize / render: Lexer
- resolve / check_loops: Loop resolver
- Interpreter, Executor, ExecutionConfig, EofPolicy: Runtime
- BFError and its subclasses: Error taxonomy
"""

from bfi.lexer import Instruction, tokenize, render
from bfi.resolver import resolve, check_loops
from bfi.runtime import (
    Interpreter,
    Executor,
    ExecutionConfig,
    ExecutionResult,
    EofPolicy,
    Environment,
    Program,
    RuntimeState,
)
from bfi.errors import (
    BFError,
    LoopStructureError,
    UnmatchedLoopOpen,
    UnmatchedLoopClose,
    ExecutionError,
    PointerOutOfBounds,
    InputExhausted,
    StepLimitExceeded,
)

__version__ = "1.0.0"

__all__ = [
    "Instruction",
    "tokenize",
    "render",
    "resolve",
    "check_loops",
    "Interpreter",
    "Executor",
    "ExecutionConfig",
    "ExecutionResult",
    "EofPolicy",
    "Environment",
    "Program",
    "RuntimeState",
    "BFError",
    "LoopStructureError",
    "UnmatchedLoopOpen",
    "UnmatchedLoopClose",
    "ExecutionError",
    "PointerOutOfBounds",
    "InputExhausted",
    "StepLimitExceeded",
]
