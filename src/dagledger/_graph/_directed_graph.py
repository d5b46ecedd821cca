"""General mutable directed graph."""

from __future__ import annotations

from collections.abc import Hashable, Iterator, KeysView

from dagledger._errors import InvalidNodeError, NodeNotFoundError

from ._contract import Edge
from ._ledger import AdjacencyLedger


def _require_node(node: object, name: str = "node") -> None:
    if node is None:
        msg = f"{name} must not be None"
        raise InvalidNodeError(msg)


class DirectedGraph[N: Hashable]:
    """A mutable directed graph storing one AdjacencyLedger per node.

    Nodes keep their first-insertion order. Repeated insertion of the same edge
    is a no-op: parallel edges are not represented.

    The ``nodes()`` and ``edges()`` views are computed on first access and
    reused until a mutation changes them, so they must not be held across
    mutations by callers expecting live results.

    Example:
        >>> graph = DirectedGraph()
        >>> graph.put_edge("a", "b")
        >>> sorted(graph.successors("a"))
        ['b']
        >>> graph.edge_count
        1

    """

    __slots__ = ("_edge_count", "_edges_view", "_ledgers", "_nodes_view")

    def __init__(self) -> None:
        self._ledgers: dict[N, AdjacencyLedger[N]] = {}
        self._edge_count = 0
        self._nodes_view: KeysView[N] | None = None
        self._edges_view: frozenset[Edge[N]] | None = None

    # ---- mutation --------------------------------------------------------

    def add_node(self, node: N) -> bool:
        """Add *node* to the graph.

        Args:
            node: The node to add. Must not be None.

        Returns:
            False if *node* was already present, True if it was added.

        Raises:
            InvalidNodeError: If *node* is None.

        """
        _require_node(node)
        if node in self._ledgers:
            return False
        self._add_node_internal(node)
        return True

    def put_edge(self, source: N, target: N) -> None:
        """Add the edge source -> target.

        Missing endpoints are created. Inserting an existing edge again leaves
        the graph unchanged.

        Raises:
            InvalidNodeError: If either endpoint is None.

        """
        _require_node(source, "source")
        _require_node(target, "target")
        source_ledger = self._ledgers.get(source)
        if source_ledger is None:
            source_ledger = self._add_node_internal(source)
        target_ledger = self._ledgers.get(target)
        if target_ledger is None:
            target_ledger = self._add_node_internal(target)

        already_present = source_ledger.add_successor(target)
        target_ledger.add_predecessor(source)
        if not already_present:
            self._edge_count += 1
            self._edges_view = None

    def remove_node(self, node: N) -> bool:
        """Remove *node* together with every edge touching it.

        Returns:
            False if *node* was not in the graph, True otherwise.

        Raises:
            InvalidNodeError: If *node* is None.

        """
        _require_node(node)
        ledger = self._ledgers.get(node)
        if ledger is None:
            return False

        successors = ledger.successors()
        predecessors = ledger.predecessors()
        for successor in successors:
            if successor != node:
                self._ledgers[successor].remove_predecessor(node)
        for predecessor in predecessors:
            if predecessor != node:
                self._ledgers[predecessor].remove_successor(node)
        # A self-loop shows up on both sides but is a single edge
        self._edge_count -= len(successors) + len(predecessors - {node})

        del self._ledgers[node]
        self._nodes_view = None
        self._edges_view = None
        return True

    def remove_edge(self, source: N, target: N) -> bool:
        """Remove the edge source -> target.

        Returns:
            True if the edge existed and was removed.

        Raises:
            InvalidNodeError: If either endpoint is None.

        """
        _require_node(source, "source")
        _require_node(target, "target")
        source_ledger = self._ledgers.get(source)
        target_ledger = self._ledgers.get(target)
        if source_ledger is None or target_ledger is None:
            return False
        if not source_ledger.remove_successor(target):
            return False
        target_ledger.remove_predecessor(source)
        self._edge_count -= 1
        self._edges_view = None
        return True

    # ---- queries ---------------------------------------------------------

    def nodes(self) -> KeysView[N]:
        """All nodes in first-insertion order, as a read-only set view."""
        if self._nodes_view is None:
            self._nodes_view = dict.fromkeys(self._ledgers).keys()
        return self._nodes_view

    def edges(self) -> frozenset[Edge[N]]:
        """All edges of the graph."""
        if self._edges_view is None:
            self._edges_view = frozenset(
                Edge(node, successor)
                for node, ledger in self._ledgers.items()
                for successor in ledger.successors()
            )
        return self._edges_view

    def successors(self, node: N) -> frozenset[N]:
        """Direct successors of *node*.

        Raises:
            InvalidNodeError: If *node* is None.
            NodeNotFoundError: If *node* is not in the graph.

        """
        return self._checked_ledger(node).successors()

    def predecessors(self, node: N) -> frozenset[N]:
        """Direct predecessors of *node*.

        Raises:
            InvalidNodeError: If *node* is None.
            NodeNotFoundError: If *node* is not in the graph.

        """
        return self._checked_ledger(node).predecessors()

    def in_degree(self, node: N) -> int:
        return self._checked_ledger(node).predecessor_count

    def out_degree(self, node: N) -> int:
        return self._checked_ledger(node).successor_count

    def has_node(self, node: N) -> bool:
        return node in self._ledgers

    def has_edge(self, source: N, target: N) -> bool:
        ledger = self._ledgers.get(source)
        if ledger is None:
            return False
        relation = ledger.relation(target)
        return relation is not None and relation.is_successor

    @property
    def node_count(self) -> int:
        return len(self._ledgers)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    # ---- internals -------------------------------------------------------

    def _checked_ledger(self, node: N) -> AdjacencyLedger[N]:
        ledger = self._ledgers.get(node)
        if ledger is None:
            _require_node(node)
            raise NodeNotFoundError(node)
        return ledger

    def _add_node_internal(self, node: N) -> AdjacencyLedger[N]:
        ledger: AdjacencyLedger[N] = AdjacencyLedger()
        self._ledgers[node] = ledger
        self._nodes_view = None
        return ledger

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, node: object) -> bool:
        return node in self._ledgers

    def __iter__(self) -> Iterator[N]:
        return iter(self._ledgers)

    def __len__(self) -> int:
        return len(self._ledgers)

    def __eq__(self, other: object) -> bool:
        """Compare node and edge sets, ignoring insertion order."""
        if self is other:
            return True
        if not isinstance(other, DirectedGraph):
            return NotImplemented
        return self.nodes() == other.nodes() and self.edges() == other.edges()

    def __hash__(self) -> int:
        """Hash the edge set only, so node order never affects it."""
        return hash(self.edges())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(nodes={self.node_count}, edges={self.edge_count})"

    def __str__(self) -> str:
        nodes = ", ".join(str(node) for node in self._ledgers)
        edges = ", ".join(sorted(str(edge) for edge in self.edges()))
        return f"{type(self).__name__}{{nodes=[{nodes}], edges=[{edges}]}}"
