"""Graph algorithms working against the Graph protocol.

None of these functions touch graph internals: they only call ``nodes``,
``edges``, ``successors`` and ``predecessors``, so they work on any object
satisfying the protocol. Depth-first searches keep an explicit stack of
successor iterators instead of recursing, so deep graphs cannot exhaust the
interpreter's recursion limit.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Hashable, Iterable, Iterator, KeysView
from enum import Enum, auto

from dagledger._config import active_config
from dagledger._errors import CycleError, InvalidNodeError, NodeNotFoundError

from ._contract import Graph
from ._directed_graph import DirectedGraph

logger = logging.getLogger(__name__)


class _VisitState(Enum):
    PENDING = auto()  # on the current DFS path
    COMPLETE = auto()  # fully explored, never rescanned


def _require_node(node: object, name: str) -> None:
    if node is None:
        msg = f"{name} must not be None"
        raise InvalidNodeError(msg)


def is_empty[N: Hashable](graph: Graph[N] | None) -> bool:
    """Check whether *graph* is None or has no nodes."""
    return graph is None or len(graph.nodes()) == 0


def reachable_nodes[N: Hashable](graph: Graph[N], start: N) -> KeysView[N]:
    """Collect every node reachable from *start*, breadth first.

    Args:
        graph: The graph to traverse.
        start: The node to start from.

    Returns:
        Ordered set view of the reachable nodes in first-visit order. *start*
        is always the first element.

    Raises:
        InvalidNodeError: If *start* is None.
        NodeNotFoundError: If *start* is not in the graph.

    Example:
        >>> graph = DirectedGraph()
        >>> graph.put_edge("a", "b")
        >>> graph.put_edge("b", "c")
        >>> list(reachable_nodes(graph, "a"))
        ['a', 'b', 'c']

    """
    _require_node(start, "start")
    if start not in graph.nodes():
        raise NodeNotFoundError(start)

    visited: dict[N, None] = {start: None}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for successor in graph.successors(node):
            if successor not in visited:
                visited[successor] = None
                queue.append(successor)
    return visited.keys()


def has_route[N: Hashable](graph: Graph[N], source: N, target: N) -> bool:
    """Check whether a directed path leads from *source* to *target*.

    A node always has a route to itself (a path of length zero).

    Raises:
        InvalidNodeError: If either node is None.
        NodeNotFoundError: If *source* differs from *target* and is not in the graph.

    """
    _require_node(source, "source")
    _require_node(target, "target")
    if source == target:
        return True

    visited: set[N] = {source}
    stack: list[Iterator[N]] = [iter(graph.successors(source))]
    while stack:
        successor = next(stack[-1], None)
        if successor is None:
            stack.pop()
            continue
        if successor == target:
            return True
        if successor not in visited:
            visited.add(successor)
            stack.append(iter(graph.successors(successor)))
    return False


def find_cycle[N: Hashable](graph: Graph[N]) -> list[N] | None:
    """Find one directed cycle in *graph*.

    Runs a depth-first search from every node, marking nodes PENDING while
    they are on the current path and COMPLETE once explored. Reaching a
    PENDING node closes a cycle.

    Returns:
        The cycle as ``[v0, v1, ..., vk, v0]`` where consecutive nodes are
        edges, or None if the graph is acyclic.

    """
    if not graph.edges():
        return None

    state: dict[N, _VisitState] = {}
    for root in graph.nodes():
        if root in state:
            continue
        state[root] = _VisitState.PENDING
        path: list[N] = [root]
        stack: list[Iterator[N]] = [iter(graph.successors(root))]
        while stack:
            successor = next(stack[-1], None)
            if successor is None:
                stack.pop()
                state[path.pop()] = _VisitState.COMPLETE
                continue
            match state.get(successor):
                case _VisitState.PENDING:
                    return [*path[path.index(successor) :], successor]
                case _VisitState.COMPLETE:
                    continue
                case None:
                    state[successor] = _VisitState.PENDING
                    path.append(successor)
                    stack.append(iter(graph.successors(successor)))
    return None


def has_cycle[N: Hashable](graph: Graph[N]) -> bool:
    """Check if the graph contains a directed cycle (self-loops included)."""
    return find_cycle(graph) is not None


def topological_sort[N: Hashable](graph: Graph[N], *, strict: bool | None = None) -> list[N]:
    """Sort nodes so that every edge points forward (Kahn's algorithm).

    Nodes without predecessors are seeded in ``nodes()`` order.

    Args:
        graph: The graph to sort.
        strict: Raise on cycles (True) or return the partial order (False).
            Defaults to ``active_config().strict_topological_sort``.

    Returns:
        List of nodes with each node before all of its successors. In
        non-strict mode nodes on or downstream of a cycle are left out.

    Raises:
        CycleError: If *strict* and the graph contains a cycle. ``nodes`` holds
            the nodes that could not be ordered.

    Example:
        >>> graph = DirectedGraph()
        >>> graph.put_edge("a", "b")
        >>> graph.put_edge("b", "c")
        >>> topological_sort(graph)
        ['a', 'b', 'c']

    """
    if strict is None:
        strict = active_config().strict_topological_sort

    indegree: dict[N, int] = {node: len(graph.predecessors(node)) for node in graph.nodes()}
    queue = deque(node for node, degree in indegree.items() if degree == 0)
    order: list[N] = []

    while queue:
        node = queue.popleft()
        order.append(node)
        for successor in graph.successors(node):
            indegree[successor] -= 1
            if indegree[successor] == 0:
                queue.append(successor)

    if len(order) != len(indegree):
        sorted_nodes = set(order)
        remaining = [node for node in graph.nodes() if node not in sorted_nodes]
        logger.debug("Topological sort left %d node(s) unsorted", len(remaining))
        if strict:
            msg = f"Cycle detected: {len(remaining)} node(s) could not be ordered"
            raise CycleError(msg, nodes=remaining)

    return order


def _checked_subset[N: Hashable](graph: Graph[N], nodes: Iterable[N] | None) -> list[N]:
    """Deduplicate *nodes* in iteration order, checking each is in *graph*."""
    if nodes is None:
        return []
    available = graph.nodes()
    subset: dict[N, None] = {}
    for node in nodes:
        _require_node(node, "node")
        if node not in available:
            raise NodeNotFoundError(node)
        subset[node] = None
    return list(subset)


def fill_induced_subgraph[N: Hashable](
    target: DirectedGraph[N],
    graph: Graph[N],
    nodes: Iterable[N] | None,
) -> DirectedGraph[N]:
    """Add the subgraph of *graph* induced by *nodes* into *target*.

    Edges are inserted with ``DirectedGraph.put_edge`` directly, bypassing any
    check a subclass of *target* adds on insertion.

    Raises:
        NodeNotFoundError: If a node of the subset is not in *graph*.

    """
    subset = _checked_subset(graph, nodes)
    for node in subset:
        target.add_node(node)
    members = target.nodes()
    for node in subset:
        for successor in graph.successors(node):
            if successor in members:
                DirectedGraph.put_edge(target, node, successor)
    return target


def fill_copy[N: Hashable](target: DirectedGraph[N], graph: Graph[N]) -> DirectedGraph[N]:
    """Replay every node, then every edge, of *graph* into *target*.

    Like ``fill_induced_subgraph``, edges bypass subclass insertion checks.
    """
    for node in graph.nodes():
        target.add_node(node)
    for edge in graph.edges():
        DirectedGraph.put_edge(target, edge.source, edge.target)
    return target


def induced_subgraph[N: Hashable](graph: Graph[N], nodes: Iterable[N] | None) -> DirectedGraph[N]:
    """Create the subgraph induced by *nodes*.

    The result holds exactly the given nodes and every edge of *graph* whose
    endpoints are both among them. An empty or None subset gives an empty graph.

    Raises:
        NodeNotFoundError: If a node of the subset is not in *graph*.

    """
    return fill_induced_subgraph(DirectedGraph(), graph, nodes)


def copy_graph[N: Hashable](graph: Graph[N]) -> DirectedGraph[N]:
    """Create a structural copy of *graph* as a DirectedGraph."""
    return fill_copy(DirectedGraph(), graph)
