"""
FastAPI backend for turnip pattern analysis.

Stateless server for host applications:
- Posterior analysis of a week's prices
- Per-step checkpoints
- Reference tables (priors, pattern phases)
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routers import analysis_router, reference_router

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Turnip Analysis Server",
    description="Pattern probabilities from observed turnip prices",
    version="0.1.0",
)

# Enable CORS for browser clients
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Core API Endpoints
# ============================================================================


@app.get("/api/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}


app.include_router(analysis_router)
app.include_router(reference_router)
