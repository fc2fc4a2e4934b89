"""
bfi API - FastAPI Application

Run with: uvicorn api.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bfi import __version__
from api.routes.execute import router as execute_router
from api.routes.validate import router as validate_router
from api.routes.health import router as health_router, self_check

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    checks = self_check()
    if all(checks.values()):
        logger.info("bfi API %s ready", __version__)
    else:
        failed = [name for name, ok in checks.items() if not ok]
        logger.error("bfi API started with failing pipeline stages: %s", ", ".join(failed))
    yield
    logger.info("bfi API shutting down")


app = FastAPI(
    title="bfi API",
    description="API for bfi - deterministic tape language interpreter",
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health_router, tags=["Health"])
app.include_router(execute_router, prefix="/api/v1", tags=["Execution"])
app.include_router(validate_router, prefix="/api/v1", tags=["Validation"])


@app.get("/")
async def root():
    """API root endpoint."""
    return {
        "name": "bfi API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
        "ready": "/health/ready",
        "execute": "/api/v1/execute",
        "validate": "/api/v1/validate",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
