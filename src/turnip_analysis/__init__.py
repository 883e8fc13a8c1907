# Turnip Analysis Module
#
# Probabilistic matching of observed turnip prices against the four
# weekly price patterns.

from .types import Pattern, PatternResult, Checkpoint
from .analysis_config import AnalysisConfig
from .errors import (
    TurnipAnalysisError,
    InvalidInputError,
    InconsistentObservationsError,
)
from .events import TraversalEvent, FrontierPrunedEvent, PatternEliminatedEvent

# Phase graphs and search
from .patterns import PATTERN_TABLE, PatternSpec, PhaseSpec, pattern_spec, root_phase
from .search import SearchNode, NodeExpander, PatternTraversal

# Bayes layer
from .priors import PRIOR_TABLE, PriorTable
from .posterior import PosteriorAggregator

# Public operation
from .analyzer import PatternAnalyzer, compute, compute_checkpoints
