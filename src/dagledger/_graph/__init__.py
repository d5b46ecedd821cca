"""Graph module providing directed graph abstractions.

This module contains:
- AdjacencyLedger[N]: per-node predecessor/successor bookkeeping
- DirectedGraph[N]: a general mutable directed graph
- DirectedAcyclicGraph[N]: a directed graph that refuses cycles on insertion
- Algorithms over the Graph protocol (reachability, routes, cycles, ordering)
"""

from ._acyclic_graph import DirectedAcyclicGraph
from ._algorithms import (
    copy_graph,
    find_cycle,
    has_cycle,
    has_route,
    induced_subgraph,
    is_empty,
    reachable_nodes,
    topological_sort,
)
from ._contract import Edge, Graph
from ._directed_graph import DirectedGraph
from ._ledger import AdjacencyLedger, Relation

__all__ = [
    "AdjacencyLedger",
    "DirectedAcyclicGraph",
    "DirectedGraph",
    "Edge",
    "Graph",
    "Relation",
    "copy_graph",
    "find_cycle",
    "has_cycle",
    "has_route",
    "induced_subgraph",
    "is_empty",
    "reachable_nodes",
    "topological_sort",
]
