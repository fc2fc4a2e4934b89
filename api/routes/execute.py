"""Execute endpoint for running programs."""

from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field, field_validator

from bfi.runtime.environment import Environment
from bfi.runtime.executor import EofPolicy, ExecutionConfig
from bfi.runtime.interpreter import Interpreter
from bfi.runtime.state import DEFAULT_TAPE_SIZE

router = APIRouter()

# Requests always run under a step budget so a looping program cannot hold a worker.
MAX_STEPS_LIMIT = 1_000_000
MAX_TAPE_SIZE = 1_000_000


class ExecuteRequest(BaseModel):
    """Request body for program execution."""
    source: str
    input: str = ""
    eof: EofPolicy = EofPolicy.ERROR
    tape_size: int = Field(default=DEFAULT_TAPE_SIZE, ge=1, le=MAX_TAPE_SIZE)
    max_steps: int = Field(default=MAX_STEPS_LIMIT, ge=1, le=MAX_STEPS_LIMIT)

    @field_validator("input")
    @classmethod
    def input_is_latin1(cls, value: str) -> str:
        try:
            value.encode("latin-1")
        except UnicodeEncodeError as e:
            raise ValueError(
                f"input character {value[e.start]!r} at position {e.start} is not a single byte"
            ) from e
        return value


class ExecuteResponse(BaseModel):
    """Response body for program execution."""
    success: bool
    output: str = ""
    output_size: int = 0
    steps: int = 0
    error_kind: Optional[str] = None
    error: Optional[str] = None
    execution_time_ms: float


@router.post("/execute", response_model=ExecuteResponse)
def execute_program(request: ExecuteRequest):
    """Run a program; input and output are latin-1 text, one character per byte."""
    config = ExecutionConfig(
        tape_size=request.tape_size,
        eof_policy=request.eof,
        max_steps=request.max_steps,
    )
    env = Environment.from_bytes(request.input.encode("latin-1"))
    result = Interpreter(config).interpret(request.source, env)

    return ExecuteResponse(
        success=result.success,
        output=result.output.decode("latin-1"),
        output_size=result.output_size,
        steps=result.steps,
        error_kind=result.error_kind,
        error="; ".join(result.errors) if result.errors else None,
        execution_time_ms=result.execution_time_ms,
    )
