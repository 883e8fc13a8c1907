"""
Pydantic models for the Turnip Analysis API.

All request/response schemas for analysis endpoints.
"""
from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Analysis Models
# ============================================================================


class AnalyzeRequest(BaseModel):
    """Inputs of one analysis: the week's base price and observed prices."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "base_price": 95,
                "prices": [102, 127, None],
                "previous_pattern": "largespike",
            }
        }
    )

    base_price: int
    prices: List[Optional[int]] = Field(default_factory=list)
    previous_pattern: Optional[str] = None


class PatternProbability(BaseModel):
    """Posterior probability of one pattern."""
    pattern: str  # "decreasing", "random", "smallspike", "largespike"
    probability: float


class AnalyzeResponse(BaseModel):
    """Posterior distribution, most likely pattern first."""
    results: List[PatternProbability]
    observed_count: int
    previous_pattern: Optional[str] = None


class CheckpointResponse(BaseModel):
    """Posterior after one observed step (results is None once inconsistent)."""
    step: int
    price: Optional[int] = None
    consistent: bool
    results: Optional[List[PatternProbability]] = None


class CheckpointsResponse(BaseModel):
    checkpoints: List[CheckpointResponse]


# ============================================================================
# Reference Models
# ============================================================================


class PriorTableResponse(BaseModel):
    """Prior rows keyed by previous pattern ('unknown' for the marginal row)."""
    priors: Dict[str, Dict[str, float]]


class PhaseResponse(BaseModel):
    index: int
    name: str
    min_factor: float
    max_factor: float
    decrement: Optional[List[float]] = None
    length_kind: str
    min_len: int
    max_len: int
    successor: Optional[int] = None


class PatternTableResponse(BaseModel):
    patterns: Dict[str, List[PhaseResponse]]
    period_length: int
