"""Directed graphs with an acyclic variant and traversal algorithms."""

__all__ = [
    "AdjacencyLedger",
    "ConfigError",
    "CycleError",
    "DirectedAcyclicGraph",
    "DirectedGraph",
    "Edge",
    "Graph",
    "GraphConfig",
    "GraphError",
    "GraphValidationError",
    "InvalidNodeError",
    "NodeNotFoundError",
    "Relation",
    "SelfLoopError",
    "active_config",
    "copy_graph",
    "find_cycle",
    "find_pyproject_toml",
    "get_config",
    "has_cycle",
    "has_route",
    "induced_subgraph",
    "is_empty",
    "load_config",
    "reachable_nodes",
    "render_graph",
    "render_reachability",
    "topological_sort",
    "use_config",
]

from ._config import GraphConfig, active_config, find_pyproject_toml, get_config, load_config, use_config
from ._errors import (
    ConfigError,
    CycleError,
    GraphError,
    GraphValidationError,
    InvalidNodeError,
    NodeNotFoundError,
    SelfLoopError,
)
from ._graph import (
    AdjacencyLedger,
    DirectedAcyclicGraph,
    DirectedGraph,
    Edge,
    Graph,
    Relation,
    copy_graph,
    find_cycle,
    has_cycle,
    has_route,
    induced_subgraph,
    is_empty,
    reachable_nodes,
    topological_sort,
)
from ._render import render_graph, render_reachability
