"""
Node expansion logic for the traversal layer.

Handles the per-node half of a traversal round:
- Observation: prune a node whose band excludes the price, otherwise
  weight its mass by the share of the band consistent with the price
- Expansion: replace the node by its stay/advance children, splitting
  the mass between them
"""

from dataclasses import replace
from typing import List, Optional

from ..analysis_config import AnalysisConfig
from ..patterns.phase import PatternSpec
from ..patterns.phase_model import (
    STAY,
    next_interval,
    observation_overlap,
    resolve_length,
    transition_options,
)
from .node import SearchNode


class NodeExpander:
    """
    Stateless helper for seeding and expanding search nodes.

    All methods take nodes as parameters rather than storing them, so the
    same expander serves every round of a traversal.
    """

    def __init__(self, base_price: int, config: AnalysisConfig):
        """
        Initialize with the period's base price and configuration.

        Args:
            base_price: Reference price the phase factors multiply.
            config: AnalysisConfig with period length and tolerance.
        """
        self.base_price = base_price
        self.config = config

    def seed(self, spec: PatternSpec) -> List[SearchNode]:
        """
        Root nodes for a pattern, one per entry phase.

        Entry weights of a pattern sum to 1, so the seeded mass of every
        pattern starts at 1.
        """
        nodes = []
        for entry in spec.entries:
            nodes.append(self._enter(
                spec,
                phase_index=entry.phase,
                lengths=tuple(entry.skipped),
                mass=entry.weight,
            ))
        return nodes

    def expand(
        self,
        spec: PatternSpec,
        node: SearchNode,
        price: Optional[int],
    ) -> List[SearchNode]:
        """
        Consume one step for a node and return its children.

        Args:
            spec: The node's pattern graph.
            node: Hypothesis for the step being observed.
            price: Observed price, or None if the step was missed.

        Returns:
            Child hypotheses for the following step. Empty if the node is
            pruned. The children's masses sum to the node's mass times the
            observation weight.
        """
        if node.is_complete:
            # No step left in the period to explain this price.
            return []

        if price is None:
            weight, interval = 1.0, node.interval
        else:
            weight, interval = observation_overlap(
                node.interval, price, self.base_price, self.config.float_tolerance
            )
            if weight <= 0.0:
                return []

        mass = node.mass * weight
        children = []
        for branch, branch_weight in transition_options(node.min_len, node.max_len):
            if branch == STAY:
                children.append(self._stay(spec, node, interval, mass * branch_weight))
            else:
                children.append(self._advance(spec, node, mass * branch_weight))
        return children

    def _stay(
        self,
        spec: PatternSpec,
        node: SearchNode,
        interval,
        mass: float,
    ) -> SearchNode:
        """The next step of the same phase."""
        low, high = next_interval(spec.phase(node.phase_index), interval)
        return replace(
            node,
            min_len=node.min_len - 1,
            max_len=node.max_len - 1,
            min_factor=low,
            max_factor=high,
            mass=mass,
            length=node.length + 1,
        )

    def _advance(self, spec: PatternSpec, node: SearchNode, mass: float) -> SearchNode:
        """The first step of the following phase (or the end of the period)."""
        lengths = node.lengths + (node.length,)
        successor = spec.phase(node.phase_index).successor
        if successor is None:
            return SearchNode(
                pattern=node.pattern,
                phase_index=None,
                min_len=0,
                max_len=0,
                min_factor=0.0,
                max_factor=0.0,
                mass=mass,
                length=0,
                lengths=lengths,
            )
        return self._enter(spec, successor, lengths, mass)

    def _enter(
        self,
        spec: PatternSpec,
        phase_index: int,
        lengths: tuple,
        mass: float,
    ) -> SearchNode:
        phase = spec.phase(phase_index)
        min_len, max_len = resolve_length(phase.length, lengths, self.config.period_length)
        return SearchNode(
            pattern=spec.pattern,
            phase_index=phase_index,
            min_len=min_len,
            max_len=max_len,
            min_factor=phase.min_factor,
            max_factor=phase.max_factor,
            mass=mass,
            length=1,
            lengths=lengths,
        )
