"""Rich rendering utilities for graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from ._errors import NodeNotFoundError
from ._graph import Graph

if TYPE_CHECKING:
    from rich.console import Console


def _format_node(node: object) -> str:
    return escape(str(node))


def render_graph[N: Hashable](graph: Graph[N], console: Console) -> None:
    """Render the nodes of a graph as a Rich table.

    One row per node in insertion order, with its degrees and successors.

    Args:
        graph: Graph to render.
        console: Rich Console to output to.

    """
    nodes = graph.nodes()
    if not nodes:
        console.print("[dim]Empty graph[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Node", style="bold")
    table.add_column("In", justify="right")
    table.add_column("Out", justify="right")
    table.add_column("Successors")

    for node in nodes:
        successors = sorted(_format_node(s) for s in graph.successors(node))
        table.add_row(
            _format_node(node),
            str(len(graph.predecessors(node))),
            str(len(successors)),
            ", ".join(successors) if successors else "[dim]-[/dim]",
        )

    console.print(table)
    console.print(f"\n[dim]Total: {len(nodes)} nodes, {len(graph.edges())} edges[/dim]")


def render_reachability[N: Hashable](graph: Graph[N], start: N, console: Console) -> None:
    """Render the breadth-first tree of nodes reachable from *start*.

    Each reachable node appears once, under the node it was first reached from.

    Args:
        graph: Graph to traverse.
        start: Root of the tree.
        console: Rich Console to output to.

    Raises:
        NodeNotFoundError: If *start* is not in the graph.

    """
    if start not in graph.nodes():
        raise NodeNotFoundError(start)

    root = Tree(f"[bold]{_format_node(start)}[/bold]")
    branches: dict[N, Tree] = {start: root}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for successor in sorted(graph.successors(node), key=str):
            if successor not in branches:
                branches[successor] = branches[node].add(_format_node(successor))
                queue.append(successor)

    console.print(root)
