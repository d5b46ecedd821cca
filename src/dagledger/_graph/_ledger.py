"""Per-node adjacency bookkeeping.

A single map from neighbor to a Relation tag is kept instead of separate
successor and predecessor maps, so a pair of nodes connected in both
directions (u -> v and v -> u) stores the neighbor key only once.
"""

from __future__ import annotations

from collections.abc import Hashable
from enum import StrEnum, auto


class Relation(StrEnum):
    """How a neighbor is related to the node owning the ledger."""

    SUCCESSOR = auto()  # owner -> neighbor
    PREDECESSOR = auto()  # neighbor -> owner
    BOTH = auto()  # owner -> neighbor and neighbor -> owner

    @property
    def is_successor(self) -> bool:
        """Whether this tag carries the successor role."""
        return self is not Relation.PREDECESSOR

    @property
    def is_predecessor(self) -> bool:
        """Whether this tag carries the predecessor role."""
        return self is not Relation.SUCCESSOR


def _with_successor(tag: Relation | None) -> Relation:
    match tag:
        case None | Relation.SUCCESSOR:
            return Relation.SUCCESSOR
        case Relation.PREDECESSOR | Relation.BOTH:
            return Relation.BOTH


def _with_predecessor(tag: Relation | None) -> Relation:
    match tag:
        case None | Relation.PREDECESSOR:
            return Relation.PREDECESSOR
        case Relation.SUCCESSOR | Relation.BOTH:
            return Relation.BOTH


def _without_successor(tag: Relation | None) -> Relation | None:
    match tag:
        case None | Relation.SUCCESSOR:
            return None
        case Relation.PREDECESSOR | Relation.BOTH:
            return Relation.PREDECESSOR


def _without_predecessor(tag: Relation | None) -> Relation | None:
    match tag:
        case None | Relation.PREDECESSOR:
            return None
        case Relation.SUCCESSOR | Relation.BOTH:
            return Relation.SUCCESSOR


class AdjacencyLedger[N: Hashable]:
    """Predecessors and successors of one node, with maintained counts.

    The ledger knows nothing about the graph-wide edge count; callers use the
    boolean results of the add/remove methods to keep it in sync.
    """

    __slots__ = ("_neighbors", "_predecessor_count", "_successor_count")

    def __init__(self) -> None:
        self._neighbors: dict[N, Relation] = {}
        self._predecessor_count = 0
        self._successor_count = 0

    @property
    def predecessor_count(self) -> int:
        """Number of neighbors tagged PREDECESSOR or BOTH."""
        return self._predecessor_count

    @property
    def successor_count(self) -> int:
        """Number of neighbors tagged SUCCESSOR or BOTH."""
        return self._successor_count

    def add_successor(self, node: N) -> bool:
        """Tag *node* as a successor.

        Returns:
            True if *node* was already a successor (nothing changed).

        """
        previous = self._neighbors.get(node)
        if previous is not None and previous.is_successor:
            return True
        self._neighbors[node] = _with_successor(previous)
        self._successor_count += 1
        return False

    def add_predecessor(self, node: N) -> bool:
        """Tag *node* as a predecessor.

        Returns:
            True if *node* was already a predecessor (nothing changed).

        """
        previous = self._neighbors.get(node)
        if previous is not None and previous.is_predecessor:
            return True
        self._neighbors[node] = _with_predecessor(previous)
        self._predecessor_count += 1
        return False

    def remove_successor(self, node: N) -> bool:
        """Drop the successor role of *node*, returning whether it had one."""
        previous = self._neighbors.get(node)
        if previous is None or not previous.is_successor:
            return False
        self._set(node, _without_successor(previous))
        self._successor_count -= 1
        return True

    def remove_predecessor(self, node: N) -> bool:
        """Drop the predecessor role of *node*, returning whether it had one."""
        previous = self._neighbors.get(node)
        if previous is None or not previous.is_predecessor:
            return False
        self._set(node, _without_predecessor(previous))
        self._predecessor_count -= 1
        return True

    def successors(self) -> frozenset[N]:
        """Neighbors reached by an edge leaving the owner."""
        return frozenset(n for n, tag in self._neighbors.items() if tag.is_successor)

    def predecessors(self) -> frozenset[N]:
        """Neighbors with an edge into the owner."""
        return frozenset(n for n, tag in self._neighbors.items() if tag.is_predecessor)

    def relation(self, node: N) -> Relation | None:
        """Return the tag stored for *node*, or None if it is not a neighbor."""
        return self._neighbors.get(node)

    def neighbors(self) -> frozenset[N]:
        """All nodes adjacent to the owner in either direction."""
        return frozenset(self._neighbors)

    def _set(self, node: N, tag: Relation | None) -> None:
        if tag is None:
            del self._neighbors[node]
        else:
            self._neighbors[node] = tag

    def __contains__(self, node: object) -> bool:
        return node in self._neighbors

    def __len__(self) -> int:
        return len(self._neighbors)

    def __repr__(self) -> str:
        return (
            f"AdjacencyLedger(predecessors={self._predecessor_count}, "
            f"successors={self._successor_count})"
        )
