"""Validate endpoint for loop structure checks."""

from typing import List, Optional

from fastapi import APIRouter
from pydantic import BaseModel

from bfi.lexer import Instruction, tokenize
from bfi.resolver import check_loops

router = APIRouter()


class ValidateRequest(BaseModel):
    """Request body for program validation."""
    source: str


class LoopError(BaseModel):
    kind: str
    message: str
    index: Optional[int] = None


class ValidateResponse(BaseModel):
    """Response body for program validation."""
    valid: bool
    instruction_count: int = 0
    loop_count: int = 0
    errors: List[LoopError] = []


@router.post("/validate", response_model=ValidateResponse)
async def validate_program(request: ValidateRequest):
    """Validate a program's loop structure without running it."""
    instructions = tokenize(request.source)
    errors = check_loops(instructions)
    return ValidateResponse(
        valid=not errors,
        instruction_count=len(instructions),
        loop_count=instructions.count(Instruction.LOOP_OPEN),
        errors=[LoopError(**e.to_dict()) for e in errors],
    )
