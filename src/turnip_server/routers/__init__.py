"""
Router package for the Turnip Analysis Server.

Routers:
- analysis.py: Posterior and per-step checkpoint endpoints
- reference.py: Prior table and pattern phase table
"""

from .analysis import router as analysis_router
from .reference import router as reference_router

__all__ = [
    "analysis_router",
    "reference_router",
]
