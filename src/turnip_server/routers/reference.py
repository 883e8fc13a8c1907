"""
Reference data router for the Turnip Analysis API.

Endpoints:
- GET /api/priors - Prior table
- GET /api/patterns - Phase table of every pattern
"""

from fastapi import APIRouter

from turnip_analysis import PRIOR_TABLE
from turnip_analysis.patterns import describe_table, max_period_length
from ..schemas import PatternTableResponse, PhaseResponse, PriorTableResponse

router = APIRouter(tags=["reference"])


@router.get("/api/priors", response_model=PriorTableResponse)
async def get_priors():
    """Prior of each pattern given last week's pattern."""
    return PriorTableResponse(priors=PRIOR_TABLE.to_dict())


@router.get("/api/patterns", response_model=PatternTableResponse)
async def get_patterns():
    """Phase structure of the four patterns."""
    return PatternTableResponse(
        patterns={
            name: [PhaseResponse(**phase) for phase in phases]
            for name, phases in describe_table().items()
        },
        period_length=max_period_length(),
    )
