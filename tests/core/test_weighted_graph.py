"""
Tests for weighted graph storage.
"""

import pytest

from mazegraph.core.exceptions import (
    DuplicateVertexError,
    GraphOperationError,
    InvalidWeightError,
    VertexNotFoundError,
)
from mazegraph.core.graph import WeightedGraph
from mazegraph.core.models import Juncture


def test_add_vertex_and_contains():
    """Test adding vertices and checking membership."""
    graph: WeightedGraph[str] = WeightedGraph()
    graph.add_vertex("A")

    assert graph.contains_vertex("A")
    assert "A" in graph
    assert not graph.contains_vertex("B")
    assert len(graph) == 1
    assert graph.get_neighbors("A") == {}


def test_add_duplicate_vertex_fails():
    """Test that adding an existing vertex raises."""
    graph: WeightedGraph[str] = WeightedGraph()
    graph.add_vertex("A")

    with pytest.raises(DuplicateVertexError, match="already exists"):
        graph.add_vertex("A")
    assert len(graph) == 1


def test_duplicate_detection_uses_value_equality():
    """Test that equal junctures built separately count as the same vertex."""
    graph: WeightedGraph[Juncture] = WeightedGraph()
    graph.add_vertex(Juncture(1, 2))

    with pytest.raises(DuplicateVertexError):
        graph.add_vertex(Juncture(1, 2))


def test_add_edge_is_directed(diamond_graph):
    """Test that edges only exist in the direction they were added."""
    assert diamond_graph.get_weight("A", "B") == 1
    assert diamond_graph.get_weight("B", "A") is None
    assert diamond_graph.has_edge("A", "B")
    assert not diamond_graph.has_edge("B", "A")


def test_add_edge_overwrites_weight(diamond_graph):
    """Test that re-adding an edge replaces its weight without adding an edge."""
    edges_before = diamond_graph.get_edge_count()
    diamond_graph.add_edge("A", "B", 7)

    assert diamond_graph.get_weight("A", "B") == 7
    assert diamond_graph.get_edge_count() == edges_before


def test_add_edge_zero_weight_and_self_loop():
    """Test that zero weights and self-loops are accepted."""
    graph: WeightedGraph[str] = WeightedGraph()
    graph.add_vertex("A")
    graph.add_edge("A", "A", 0)

    assert graph.get_weight("A", "A") == 0


def test_add_edge_unknown_vertex_fails(diamond_graph):
    """Test that edges to or from unknown vertices raise."""
    with pytest.raises(VertexNotFoundError, match="Source vertex 'Z'"):
        diamond_graph.add_edge("Z", "A", 1)
    with pytest.raises(VertexNotFoundError, match="Target vertex 'Z'"):
        diamond_graph.add_edge("A", "Z", 1)
    assert "Z" not in diamond_graph


def test_add_edge_negative_weight_leaves_graph_unchanged(diamond_graph):
    """Test that a negative weight raises and modifies nothing."""
    neighbors_before = diamond_graph.get_neighbors("A")
    edges_before = diamond_graph.get_edge_count()

    with pytest.raises(InvalidWeightError, match="non-negative"):
        diamond_graph.add_edge("A", "D", -1)

    assert diamond_graph.get_neighbors("A") == neighbors_before
    assert diamond_graph.get_edge_count() == edges_before
    assert diamond_graph.get_weight("A", "D") is None


@pytest.mark.parametrize("weight", [1.5, "3", True, None])
def test_add_edge_non_integer_weight_fails(diamond_graph, weight):
    """Test that weights must be plain integers."""
    with pytest.raises(InvalidWeightError, match="must be an integer"):
        diamond_graph.add_edge("A", "D", weight)


def test_negative_weight_checked_before_vertices():
    """Test that an invalid weight is reported even for unknown vertices."""
    graph: WeightedGraph[str] = WeightedGraph()
    with pytest.raises(InvalidWeightError):
        graph.add_edge("X", "Y", -5)


def test_get_weight_unknown_vertex_fails(diamond_graph):
    """Test that weight lookups with unknown endpoints raise."""
    with pytest.raises(VertexNotFoundError):
        diamond_graph.get_weight("A", "Z")
    with pytest.raises(VertexNotFoundError):
        diamond_graph.get_weight("Z", "A")


def test_get_weight_missing_edge_returns_none(diamond_graph):
    """Test that known but unconnected vertices yield None."""
    assert diamond_graph.get_weight("A", "E") is None


def test_get_neighbors_returns_copy(diamond_graph):
    """Test that callers cannot mutate the adjacency through get_neighbors."""
    neighbors = diamond_graph.get_neighbors("A")
    neighbors.clear()

    assert diamond_graph.get_neighbors("A") == {"B": 1, "C": 4}


def test_get_neighbors_unknown_vertex_fails(diamond_graph):
    """Test that neighbour lookups on unknown vertices raise."""
    with pytest.raises(VertexNotFoundError):
        diamond_graph.get_neighbors("Z")


def test_vertices_and_edges_keep_insertion_order(diamond_graph):
    """Test iteration order of vertices and edges."""
    assert diamond_graph.get_vertices() == ["A", "B", "C", "D", "E"]
    assert list(diamond_graph) == ["A", "B", "C", "D", "E"]
    assert list(diamond_graph.get_edges()) == [
        ("A", "B", 1),
        ("A", "C", 4),
        ("B", "C", 2),
        ("B", "D", 5),
        ("C", "D", 1),
    ]
    assert diamond_graph.get_edge_count() == 5


def test_errors_share_graph_operation_base():
    """Test that all graph misuse errors can be caught together."""
    graph: WeightedGraph[str] = WeightedGraph()
    graph.add_vertex("A")

    for action in (
        lambda: graph.add_vertex("A"),
        lambda: graph.add_edge("A", "B", 1),
        lambda: graph.add_edge("A", "A", -1),
    ):
        with pytest.raises(GraphOperationError):
            action()


def test_graphs_are_independent():
    """Test that two graph instances share no state."""
    first: WeightedGraph[str] = WeightedGraph()
    second: WeightedGraph[str] = WeightedGraph()
    first.add_vertex("A")
    first.add_observer(object())  # type: ignore[arg-type]

    assert "A" not in second
    assert second.observers == ()


@pytest.mark.parametrize("algorithm", ["bfs", "dfs", "dijkstra"])
def test_traverse_dispatches_by_name(diamond_graph, recorder, algorithm):
    """Test running a traversal by its registered name."""
    diamond_graph.add_observer(recorder)

    by_name = diamond_graph.traverse(algorithm, "A", "D")
    direct = {
        "bfs": diamond_graph.breadth_first_search,
        "dfs": diamond_graph.depth_first_search,
        "dijkstra": diamond_graph.dijkstra,
    }[algorithm]("A", "D")

    half = len(recorder.events) // 2
    assert by_name == direct
    assert recorder.events[:half] == recorder.events[half:]


def test_traverse_unknown_algorithm_fails(diamond_graph):
    """Test that unregistered algorithm names are rejected."""
    with pytest.raises(GraphOperationError, match="Unknown algorithm 'astar'"):
        diamond_graph.traverse("astar", "A", "D")
