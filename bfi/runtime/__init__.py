"""
bfi Runtime Engine

This module provides the runtime for executing programs:
- Executor: Instruction dispatch loop over a memory tape
- Interpreter: Lexer -> resolver -> executor pipeline
- State: Per-run tape, pointer and counters
- Environment: Byte source and sink collaborators
"""

from bfi.runtime.executor import Executor, ExecutionConfig, EofPolicy
from bfi.runtime.interpreter import Interpreter, ExecutionResult, Program
from bfi.runtime.state import RuntimeState, DEFAULT_TAPE_SIZE
from bfi.runtime.environment import (
    Environment,
    ByteSource,
    ByteSink,
    BytesSource,
    StreamSource,
    BufferSink,
    StreamSink,
)

__all__ = [
    "Executor",
    "ExecutionConfig",
    "EofPolicy",
    "Interpreter",
    "ExecutionResult",
    "Program",
    "RuntimeState",
    "DEFAULT_TAPE_SIZE",
    "Environment",
    "ByteSource",
    "ByteSink",
    "BytesSource",
    "StreamSource",
    "BufferSink",
    "StreamSink",
]
