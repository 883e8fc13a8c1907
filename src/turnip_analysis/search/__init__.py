"""Breadth-first search over the pattern phase graphs.

Key Components:
- SearchNode: one hypothesis (pattern, phase, price band, mass)
- NodeExpander: stateless observe-and-expand step for a single node
- PatternTraversal: per-pattern frontiers advanced one price at a time

Example:
    >>> from turnip_analysis.search import PatternTraversal
    >>> traversal = PatternTraversal(base_price=100)
    >>> events = traversal.process_prices([90, 87, None, 78])
    >>> masses = traversal.masses()
"""

from .node import SearchNode
from .expander import NodeExpander
from .traversal import PatternTraversal

__all__ = [
    "SearchNode",
    "NodeExpander",
    "PatternTraversal",
]
