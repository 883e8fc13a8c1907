"""
Analysis router for the Turnip Analysis API.

Endpoints:
- POST /api/analyze - Posterior distribution for one week
- POST /api/analyze/checkpoints - Posterior after each observed step
"""

import logging
from typing import List

from fastapi import APIRouter, HTTPException

from turnip_analysis import (
    InconsistentObservationsError,
    InvalidInputError,
    Pattern,
    PatternResult,
    compute,
    compute_checkpoints,
)
from ..schemas import (
    AnalyzeRequest,
    AnalyzeResponse,
    CheckpointResponse,
    CheckpointsResponse,
    PatternProbability,
)

logger = logging.getLogger(__name__)
router = APIRouter(tags=["analysis"])


def _to_probabilities(results: List[PatternResult]) -> List[PatternProbability]:
    return [
        PatternProbability(pattern=r.pattern.value, probability=r.probability)
        for r in results
    ]


@router.post("/api/analyze", response_model=AnalyzeResponse)
async def analyze(request: AnalyzeRequest):
    """
    Posterior probability of each pattern given the observed prices.

    Returns:
        AnalyzeResponse with all four patterns, most likely first.

    Raises:
        400 for invalid input, 422 when no pattern matches the prices.
    """
    try:
        results = compute(
            request.base_price,
            request.prices,
            request.previous_pattern,
        )
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except InconsistentObservationsError as e:
        logger.info(f"Inconsistent observations: {e}")
        raise HTTPException(
            status_code=422,
            detail={
                "error": "inconsistent_observations",
                "message": str(e),
                "base_price": e.base_price,
                "prices": e.prices,
                "step": e.step,
            },
        )

    return AnalyzeResponse(
        results=_to_probabilities(results),
        observed_count=len(request.prices),
        previous_pattern=(
            Pattern.parse(request.previous_pattern).value
            if request.previous_pattern is not None else None
        ),
    )


@router.post("/api/analyze/checkpoints", response_model=CheckpointsResponse)
async def analyze_checkpoints(request: AnalyzeRequest):
    """
    Posterior after each observed step.

    Inconsistency is reported per checkpoint (consistent=false) rather
    than as an error.
    """
    try:
        checkpoints = compute_checkpoints(
            request.base_price,
            request.prices,
            request.previous_pattern,
        )
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return CheckpointsResponse(checkpoints=[
        CheckpointResponse(
            step=cp.step,
            price=cp.price,
            consistent=cp.consistent,
            results=_to_probabilities(cp.results) if cp.results is not None else None,
        )
        for cp in checkpoints
    ])
