"""Tests for graph algorithms."""

import random

import pytest

from dagledger import (
    CycleError,
    DirectedAcyclicGraph,
    DirectedGraph,
    Edge,
    GraphConfig,
    InvalidNodeError,
    NodeNotFoundError,
    copy_graph,
    find_cycle,
    has_cycle,
    has_route,
    induced_subgraph,
    is_empty,
    reachable_nodes,
    topological_sort,
    use_config,
)


def _graph[N](edges: list[tuple[N, N]]) -> DirectedGraph[N]:
    graph: DirectedGraph[N] = DirectedGraph()
    for source, target in edges:
        graph.put_edge(source, target)
    return graph


def _random_dag(rng: random.Random, size: int) -> DirectedGraph[int]:
    graph: DirectedGraph[int] = DirectedGraph()
    for node in range(size):
        graph.add_node(node)
    for source in range(size):
        for target in range(source + 1, size):
            if rng.random() < 0.2:
                graph.put_edge(source, target)
    return graph


class TestTopologicalSort:
    """Tests for the topological_sort algorithm."""

    def test_empty_graph(self) -> None:
        assert topological_sort(DirectedGraph()) == []

    def test_single_node(self) -> None:
        graph: DirectedGraph[str] = DirectedGraph()
        graph.add_node("a")
        assert topological_sort(graph) == ["a"]

    def test_linear_chain(self) -> None:
        # a -> b -> c (c depends on b, b depends on a)
        assert topological_sort(_graph([("a", "b"), ("b", "c")])) == ["a", "b", "c"]

    def test_diamond_dependency(self) -> None:
        result = topological_sort(_graph([("a", "b"), ("a", "c"), ("b", "d"), ("c", "d")]))
        assert result[0] == "a"
        assert result[-1] == "d"
        assert result.index("b") < result.index("d")
        assert result.index("c") < result.index("d")

    def test_multiple_roots_seeded_in_node_order(self) -> None:
        graph = _graph([("b", "c"), ("a", "c")])
        assert topological_sort(graph) == ["b", "a", "c"]

    def test_cycle_detection(self) -> None:
        with pytest.raises(CycleError, match="Cycle"):
            topological_sort(_graph([("a", "b"), ("b", "a")]))

    def test_self_loop_detection(self) -> None:
        with pytest.raises(CycleError, match="Cycle"):
            topological_sort(_graph([("a", "a")]))

    def test_cycle_error_lists_unsorted_nodes(self) -> None:
        graph = _graph([("root", "a"), ("a", "b"), ("b", "c"), ("c", "a"), ("c", "tail")])
        with pytest.raises(CycleError) as exc_info:
            topological_sort(graph)
        assert exc_info.value.nodes == ("a", "b", "c", "tail")

    def test_non_strict_returns_partial_order(self) -> None:
        graph = _graph([("root", "a"), ("a", "b"), ("b", "a"), ("x", "y")])
        assert topological_sort(graph, strict=False) == ["root", "x", "y"]

    def test_config_controls_default(self) -> None:
        graph = _graph([("a", "b"), ("b", "a")])
        previous = use_config(GraphConfig(strict_topological_sort=False))
        try:
            assert topological_sort(graph) == []
        finally:
            use_config(previous)
        with pytest.raises(CycleError):
            topological_sort(graph)

    def test_works_with_integers(self) -> None:
        assert topological_sort(_graph([(1, 2), (2, 3)])) == [1, 2, 3]

    def test_respects_every_edge_on_random_dags(self) -> None:
        rng = random.Random(42)
        for _ in range(30):
            graph = _random_dag(rng, rng.randint(2, 25))
            order = topological_sort(graph)
            assert sorted(order) == sorted(graph.nodes())
            position = {node: i for i, node in enumerate(order)}
            for source, target in graph.edges():
                assert position[source] < position[target]


class TestReachableNodes:
    """Tests for breadth-first reachability."""

    def test_contains_start(self) -> None:
        graph: DirectedGraph[str] = DirectedGraph()
        graph.add_node("a")
        assert list(reachable_nodes(graph, "a")) == ["a"]

    def test_breadth_first_order(self) -> None:
        graph = _graph([("a", "b"), ("b", "c"), ("c", "d"), ("a", "x")])
        result = list(reachable_nodes(graph, "a"))
        assert result[0] == "a"
        assert set(result[1:3]) == {"b", "x"}
        assert result[3:] == ["c", "d"]

    def test_does_not_follow_predecessors(self) -> None:
        graph = _graph([("a", "b"), ("b", "c")])
        assert reachable_nodes(graph, "b") == {"b", "c"}

    def test_terminates_on_cycles(self) -> None:
        graph = _graph([("a", "b"), ("b", "c"), ("c", "a")])
        assert reachable_nodes(graph, "b") == {"a", "b", "c"}

    def test_closed_under_successors(self) -> None:
        rng = random.Random(7)
        graph = _random_dag(rng, 20)
        reached = reachable_nodes(graph, 0)
        for node in reached:
            assert graph.successors(node) <= reached

    def test_missing_start_raises(self) -> None:
        with pytest.raises(NodeNotFoundError, match="not an element"):
            reachable_nodes(_graph([("a", "b")]), "z")

    def test_none_start_raises(self) -> None:
        with pytest.raises(InvalidNodeError):
            reachable_nodes(_graph([("a", "b")]), None)


class TestHasRoute:
    """Tests for depth-first route existence."""

    def test_route_to_self(self) -> None:
        graph: DirectedGraph[str] = DirectedGraph()
        graph.add_node("a")
        assert has_route(graph, "a", "a")

    def test_direct_and_transitive(self) -> None:
        graph = _graph([("a", "b"), ("b", "c")])
        assert has_route(graph, "a", "b")
        assert has_route(graph, "a", "c")
        assert not has_route(graph, "c", "a")

    def test_unrelated_branches(self) -> None:
        graph = _graph([("a", "b"), ("a", "c")])
        assert not has_route(graph, "b", "c")

    def test_terminates_on_cycles(self) -> None:
        graph = _graph([("a", "b"), ("b", "a"), ("b", "c")])
        assert has_route(graph, "a", "c")
        assert not has_route(graph, "a", "z")

    def test_deep_chain_has_no_recursion_limit(self) -> None:
        graph = _graph([(i, i + 1) for i in range(5000)])
        assert has_route(graph, 0, 5000)
        assert not has_route(graph, 5000, 0)

    def test_missing_source_raises(self) -> None:
        with pytest.raises(NodeNotFoundError):
            has_route(_graph([("a", "b")]), "z", "a")

    def test_none_raises(self) -> None:
        with pytest.raises(InvalidNodeError):
            has_route(_graph([("a", "b")]), "a", None)


class TestCycleDetection:
    """Tests for has_cycle and find_cycle."""

    def test_no_edges(self) -> None:
        graph: DirectedGraph[str] = DirectedGraph()
        graph.add_node("a")
        assert not has_cycle(graph)
        assert find_cycle(graph) is None

    def test_acyclic_diamond(self) -> None:
        assert not has_cycle(_graph([("a", "b"), ("a", "c"), ("b", "d"), ("c", "d")]))

    def test_two_node_cycle(self) -> None:
        assert has_cycle(_graph([("a", "b"), ("b", "a")]))

    def test_self_loop(self) -> None:
        graph = _graph([("x", "x")])
        assert has_cycle(graph)
        assert find_cycle(graph) == ["x", "x"]

    def test_cycle_path_follows_edges(self) -> None:
        graph = _graph([("a", "b"), ("b", "c"), ("c", "d"), ("d", "b")])
        path = find_cycle(graph)
        assert path is not None
        assert path[0] == path[-1]
        assert set(path) == {"b", "c", "d"}
        for source, target in zip(path, path[1:], strict=False):
            assert graph.has_edge(source, target)

    def test_cycle_reached_from_later_root(self) -> None:
        graph = _graph([("a", "b"), ("x", "y"), ("y", "x")])
        assert has_cycle(graph)

    def test_deep_chain_has_no_recursion_limit(self) -> None:
        graph = _graph([(i, i + 1) for i in range(5000)])
        assert not has_cycle(graph)
        graph.put_edge(5000, 0)
        assert has_cycle(graph)

    def test_no_false_positives_random_dags(self) -> None:
        rng = random.Random(42)
        for _ in range(30):
            assert not has_cycle(_random_dag(rng, rng.randint(2, 30)))

    def test_acyclic_graph_never_has_cycle(self) -> None:
        rng = random.Random(3)
        dag: DirectedAcyclicGraph[int] = DirectedAcyclicGraph()
        for _ in range(200):
            source, target = rng.randrange(15), rng.randrange(15)
            if source != target and not (source in dag and target in dag and has_route(dag, target, source)):
                dag.put_edge(source, target)
        assert not has_cycle(dag)


class TestSubgraphAndCopy:
    """Tests for induced_subgraph and copy_graph."""

    def test_induced_subgraph(self) -> None:
        graph = _graph([("a", "b"), ("b", "c"), ("c", "a"), ("c", "d")])
        sub = induced_subgraph(graph, ["c", "a", "d"])
        assert list(sub.nodes()) == ["c", "a", "d"]
        assert sub.edges() == frozenset({Edge("c", "a"), Edge("c", "d")})

    def test_induced_subgraph_keeps_cycles(self) -> None:
        graph = _graph([("a", "b"), ("b", "a")])
        assert has_cycle(induced_subgraph(graph, ["a", "b"]))

    def test_induced_subgraph_duplicates_ignored(self) -> None:
        sub = induced_subgraph(_graph([("a", "b")]), ["a", "a", "b"])
        assert list(sub.nodes()) == ["a", "b"]

    def test_induced_subgraph_empty(self) -> None:
        assert is_empty(induced_subgraph(_graph([("a", "b")]), None))

    def test_copy_graph(self) -> None:
        graph = _graph([("a", "b"), ("b", "a"), ("c", "c")])
        graph.add_node("d")
        copy = copy_graph(graph)
        assert copy == graph
        assert copy.edge_count == 3
        copy.remove_node("a")
        assert graph.edge_count == 3


class TestIsEmpty:
    """Tests for is_empty."""

    def test_none(self) -> None:
        assert is_empty(None)

    def test_no_nodes(self) -> None:
        assert is_empty(DirectedGraph())

    def test_with_nodes(self) -> None:
        graph: DirectedGraph[str] = DirectedGraph()
        graph.add_node("a")
        assert not is_empty(graph)
