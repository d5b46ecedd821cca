"""Exception types raised by graph operations."""

from __future__ import annotations

from collections.abc import Hashable, Iterable


class GraphError(Exception):
    """Base class for all dagledger errors."""


class InvalidNodeError(GraphError, ValueError):
    """A ``None`` node reference was passed to a graph operation."""


class NodeNotFoundError(GraphError, LookupError):
    """The queried node is not an element of the graph."""

    def __init__(self, node: Hashable) -> None:
        self.node = node
        super().__init__(f"Node {node!r} is not an element of this graph")


class SelfLoopError(GraphError, ValueError):
    """An acyclic graph was asked to connect a node to itself."""

    def __init__(self, node: Hashable) -> None:
        self.node = node
        super().__init__(f"Acyclic graph cannot contain self-loop on {node!r}")


class CycleError(GraphError):
    """An operation would create, or ran into, a directed cycle.

    Attributes:
        source: Source of the rejected edge, if the error comes from an insertion.
        target: Target of the rejected edge, if the error comes from an insertion.
        nodes: Nodes involved in the cycle (rejected edge endpoints, or the nodes
            a topological sort could not order).

    """

    def __init__(
        self,
        msg: str,
        *,
        source: Hashable | None = None,
        target: Hashable | None = None,
        nodes: Iterable[Hashable] = (),
    ) -> None:
        self.source = source
        self.target = target
        self.nodes = tuple(nodes)
        super().__init__(msg)

    @classmethod
    def for_edge(cls, source: Hashable, target: Hashable) -> CycleError:
        """Build the error for an edge insertion that would close a cycle."""
        msg = f"Edge {source!r} -> {target!r} would create a cycle"
        return cls(msg, source=source, target=target, nodes=(source, target))


class GraphValidationError(GraphError, ValueError):
    """A constructed graph violates the acyclicity contract."""


class ConfigError(GraphError):
    """Error in dagledger configuration."""
