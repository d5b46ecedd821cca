"""Directed graph that rejects every edge closing a cycle."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable

from dagledger._errors import CycleError, GraphValidationError, SelfLoopError

from ._algorithms import fill_copy, fill_induced_subgraph, find_cycle, has_route
from ._contract import Graph
from ._directed_graph import DirectedGraph

logger = logging.getLogger(__name__)


class DirectedAcyclicGraph[N: Hashable](DirectedGraph[N]):
    """A DirectedGraph that stays acyclic after every mutation.

    Storage is the same as DirectedGraph; only edge insertion differs. An edge
    u -> v is refused when v can already reach u, and a refused insertion
    leaves the graph untouched.

    Example:
        >>> dag = DirectedAcyclicGraph()
        >>> dag.put_edge("a", "b")
        >>> dag.put_edge("b", "a")
        Traceback (most recent call last):
        ...
        dagledger._errors.CycleError: Edge 'b' -> 'a' would create a cycle

    """

    __slots__ = ()

    @classmethod
    def copy_of(cls, source: Graph[N]) -> DirectedAcyclicGraph[N]:
        """Copy any graph into a new acyclic graph.

        Nodes and edges are replayed without per-edge route checks, then the
        copy as a whole is checked for cycles.

        Raises:
            GraphValidationError: If *source* contains a cycle.

        """
        copy = cls()
        fill_copy(copy, source)
        copy._validate("copy")
        return copy

    @classmethod
    def sub_graph(cls, source: Graph[N], nodes: Iterable[N] | None) -> DirectedAcyclicGraph[N]:
        """Create the acyclic subgraph of *source* induced by *nodes*.

        Args:
            source: The graph to take nodes and edges from.
            nodes: Nodes to keep. None or empty gives an empty graph.

        Returns:
            A new graph with exactly *nodes* and every edge of *source* whose
            endpoints are both kept.

        Raises:
            NodeNotFoundError: If a node of the subset is not in *source*.
            GraphValidationError: If the induced subgraph contains a cycle.

        """
        sub = cls()
        fill_induced_subgraph(sub, source, nodes)
        sub._validate("subgraph")
        return sub

    def put_edge(self, source: N, target: N) -> None:
        """Add the edge source -> target unless it would close a cycle.

        Raises:
            InvalidNodeError: If either endpoint is None.
            SelfLoopError: If *source* equals *target*.
            CycleError: If *target* already has a route to *source*.

        """
        if source is not None and source == target:
            raise SelfLoopError(source)
        if source in self and target in self and has_route(self, target, source):
            logger.debug("Rejected edge %r -> %r: route %r ~> %r exists", source, target, target, source)
            raise CycleError.for_edge(source, target)
        super().put_edge(source, target)

    def _validate(self, kind: str) -> None:
        cycle = find_cycle(self)
        if cycle is not None:
            path = " -> ".join(str(node) for node in cycle)
            msg = f"Graph {kind} has cycle: {path}"
            raise GraphValidationError(msg)
        logger.debug("Validated acyclic %s with %d nodes, %d edges", kind, self.node_count, self.edge_count)
