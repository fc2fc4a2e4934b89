"""Health and readiness endpoints."""

import logging
from typing import Dict

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from bfi import __version__
from bfi.errors import BFError
from bfi.lexer import tokenize
from bfi.resolver import resolve
from bfi.runtime.interpreter import Interpreter

logger = logging.getLogger(__name__)

router = APIRouter()

# Reads one byte, adds one and echoes it: exercises lexer, resolver, I/O and loops.
READINESS_PROGRAM = ",[->+<]>+."
READINESS_INPUT = b"A"
READINESS_OUTPUT = b"B"


def self_check() -> Dict[str, bool]:
    """Run each pipeline stage on a known program."""
    checks = {"lexer": False, "resolver": False, "runtime": False}

    instructions = tokenize(READINESS_PROGRAM)
    checks["lexer"] = len(instructions) == len(READINESS_PROGRAM)
    try:
        checks["resolver"] = resolve(instructions) == {1: 6, 6: 1}
        output = Interpreter().run(READINESS_PROGRAM, READINESS_INPUT)
        checks["runtime"] = output == READINESS_OUTPUT
    except BFError as e:
        logger.warning("Readiness program failed: %s: %s", e.kind, e.message)
    return checks


@router.get("/health")
async def health_check():
    """Liveness: the process is up."""
    return {
        "status": "healthy",
        "version": __version__,
        "service": "bfi-api",
    }


@router.get("/health/ready")
def readiness_check():
    """Readiness: 200 only when every pipeline stage produced the expected result."""
    checks = self_check()
    ready = all(checks.values())
    return JSONResponse(
        status_code=200 if ready else 503,
        content={"ready": ready, "checks": checks},
    )
