"""Edge value type and the abstract graph contract."""

from __future__ import annotations

from collections.abc import Hashable, Iterator, Set
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class Edge[N: Hashable]:
    """A directed edge from ``source`` to ``target``.

    Edges carry no identity or payload: two edges are equal iff both endpoints
    are equal.

    Example:
        >>> source, target = Edge("a", "b")
        >>> str(Edge("a", "b"))
        '(a -> b)'

    """

    source: N
    target: N

    def __iter__(self) -> Iterator[N]:
        yield self.source
        yield self.target

    def reversed(self) -> Edge[N]:
        """Return the edge pointing the other way."""
        return Edge(self.target, self.source)

    def __str__(self) -> str:
        return f"({self.source} -> {self.target})"


class Graph[N: Hashable](Protocol):
    """Mutable directed graph operations.

    Algorithms in this package only talk to graphs through this protocol, so
    any implementation providing these methods can be analysed.
    """

    def add_node(self, node: N) -> bool:
        """Add *node*; return False if it was already present."""
        ...

    def put_edge(self, source: N, target: N) -> None:
        """Add the edge source -> target, creating missing endpoints."""
        ...

    def remove_node(self, node: N) -> bool:
        """Remove *node* with all incident edges; return False if absent."""
        ...

    def remove_edge(self, source: N, target: N) -> bool:
        """Remove the edge source -> target; return whether it existed."""
        ...

    def nodes(self) -> Set[N]:
        """All nodes, in first-insertion order."""
        ...

    def edges(self) -> Set[Edge[N]]:
        """All edges, unordered."""
        ...

    def successors(self, node: N) -> Set[N]:
        """Direct successors of *node*."""
        ...

    def predecessors(self, node: N) -> Set[N]:
        """Direct predecessors of *node*."""
        ...
