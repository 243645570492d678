"""
RPN API - FastAPI Application

Run with: uvicorn api.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from rpn import __version__
from api.routes.evaluate import router as evaluate_router
from api.routes.validate import router as validate_router
from api.routes.health import router as health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info("RPN API starting...")
    yield
    logger.info("RPN API shutting down...")


app = FastAPI(
    title="RPN API",
    description="Postfix integer evaluator",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(health_router, prefix="/api/v1", tags=["Health"])
app.include_router(evaluate_router, prefix="/api/v1", tags=["Evaluation"])
app.include_router(validate_router, prefix="/api/v1", tags=["Validation"])


@app.get("/")
async def root():
    """API root endpoint."""
    return {
        "name": "RPN API",
        "version": __version__,
        "docs": "/docs",
        "health": "/api/v1/health",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
