"""Pattern phase graphs and the phase model shared by all patterns.

Key Components:
- PhaseSpec / LengthRule / PhaseEntry / PatternSpec: frozen phase data
- PATTERN_TABLE: the four patterns' phase graphs
- phase_model: band evolution, duration and transition rules
"""

from .phase import LengthRule, PatternSpec, PhaseEntry, PhaseSpec
from .table import (
    PATTERN_TABLE,
    describe_table,
    max_period_length,
    pattern_spec,
    root_phase,
)
from .phase_model import (
    ADVANCE,
    STAY,
    factor_bounds,
    next_interval,
    observation_overlap,
    resolve_length,
    transition_options,
)

__all__ = [
    # Data
    "LengthRule",
    "PatternSpec",
    "PhaseEntry",
    "PhaseSpec",
    # Table
    "PATTERN_TABLE",
    "describe_table",
    "max_period_length",
    "pattern_spec",
    "root_phase",
    # Phase model
    "ADVANCE",
    "STAY",
    "factor_bounds",
    "next_interval",
    "observation_overlap",
    "resolve_length",
    "transition_options",
]
