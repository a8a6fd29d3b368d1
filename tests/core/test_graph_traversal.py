"""Tests for breadth-first and depth-first traversal."""

import pytest

from mazegraph.core.events import TraversalEvent
from mazegraph.core.exceptions import VertexNotFoundError
from mazegraph.core.graph import WeightedGraph
from mazegraph.core.models import Juncture


def test_bfs_visit_order(diamond_graph, recorder):
    """Test that BFS visits level by level and stops at the end vertex."""
    diamond_graph.add_observer(recorder)
    result = diamond_graph.breadth_first_search("A", "D")

    assert result.visited == ["A", "B", "C", "D"]
    assert result.found
    assert recorder.visited == ["A", "B", "C", "D"]


def test_bfs_notification_sequence(diamond_graph, recorder):
    """Test the begun / visited / over bracketing of a BFS run."""
    diamond_graph.add_observer(recorder)
    diamond_graph.breadth_first_search("A", "C")

    assert recorder.kinds == [
        TraversalEvent.BFS_BEGUN,
        TraversalEvent.VERTEX_VISITED,
        TraversalEvent.VERTEX_VISITED,
        TraversalEvent.VERTEX_VISITED,
        TraversalEvent.SEARCH_OVER,
    ]


def test_bfs_unreachable_end(diamond_graph, recorder):
    """Test that an unreachable end exhausts the queue without raising."""
    diamond_graph.add_observer(recorder)
    result = diamond_graph.breadth_first_search("A", "E")

    assert not result.found
    assert result.visited == ["A", "B", "C", "D"]
    assert recorder.kinds[0] is TraversalEvent.BFS_BEGUN
    assert recorder.kinds[-1] is TraversalEvent.SEARCH_OVER
    assert recorder.kinds.count(TraversalEvent.SEARCH_OVER) == 1


def test_bfs_start_equals_end(diamond_graph, recorder):
    """Test that a search for the start vertex visits exactly one vertex."""
    diamond_graph.add_observer(recorder)
    result = diamond_graph.breadth_first_search("B", "B")

    assert result.visited == ["B"]
    assert result.found
    assert recorder.visited == ["B"]


def test_bfs_visits_each_vertex_once_with_cycles():
    """Test that cycles and converging edges never cause a second visit."""
    graph: WeightedGraph[int] = WeightedGraph()
    for vertex in range(4):
        graph.add_vertex(vertex)
    for source in range(4):
        for target in range(4):
            graph.add_edge(source, target, 1)

    result = graph.breadth_first_search(0, 3)

    assert len(result.visited) == len(set(result.visited))
    assert result.visited == [0, 1, 2, 3]


def test_bfs_open_maze(open_maze_graph, recorder):
    """Test BFS across the open 2x2 maze."""
    open_maze_graph.add_observer(recorder)
    result = open_maze_graph.breadth_first_search(Juncture(0, 0), Juncture(1, 1))

    assert result.visited[0] == Juncture(0, 0)
    assert result.visited[-1] == Juncture(1, 1)
    assert set(result.visited[1:3]) == {Juncture(1, 0), Juncture(0, 1)}
    assert recorder.kinds.count(TraversalEvent.BFS_BEGUN) == 1
    assert recorder.kinds.count(TraversalEvent.SEARCH_OVER) == 1


def test_dfs_visit_order(diamond_graph, recorder):
    """Test that DFS follows the most recently pushed neighbour first."""
    diamond_graph.add_observer(recorder)
    result = diamond_graph.depth_first_search("A", "D")

    assert result.visited == ["A", "C", "D"]
    assert result.found
    assert recorder.kinds == [
        TraversalEvent.DFS_BEGUN,
        TraversalEvent.VERTEX_VISITED,
        TraversalEvent.VERTEX_VISITED,
        TraversalEvent.VERTEX_VISITED,
        TraversalEvent.SEARCH_OVER,
    ]


def test_dfs_open_maze(open_maze_graph):
    """Test DFS across the open 2x2 maze."""
    result = open_maze_graph.depth_first_search(Juncture(0, 0), Juncture(1, 1))

    assert result.visited == [Juncture(0, 0), Juncture(1, 0), Juncture(1, 1)]


def test_dfs_unreachable_end(diamond_graph):
    """Test that DFS to an unreachable vertex visits everything reachable."""
    result = diamond_graph.depth_first_search("A", "E")

    assert not result.found
    assert sorted(result.visited) == ["A", "B", "C", "D"]


def test_dfs_start_equals_end(diamond_graph, recorder):
    """Test that a DFS for the start vertex visits exactly one vertex."""
    diamond_graph.add_observer(recorder)
    diamond_graph.depth_first_search("D", "D")

    assert recorder.visited == ["D"]


def test_dfs_visits_each_vertex_once_with_back_edges():
    """Test that back edges to visited vertices never cause a second visit."""
    graph: WeightedGraph[str] = WeightedGraph()
    for vertex in "ABC":
        graph.add_vertex(vertex)
    graph.add_edge("A", "B", 1)
    graph.add_edge("B", "A", 1)
    graph.add_edge("B", "C", 1)
    graph.add_edge("C", "A", 1)

    result = graph.depth_first_search("A", "C")

    assert result.visited == ["A", "B", "C"]
    assert len(result.visited) == len(set(result.visited))


@pytest.mark.parametrize("method", ["breadth_first_search", "depth_first_search"])
def test_traversal_unknown_vertices_raise_before_notifying(diamond_graph, recorder, method):
    """Test that unknown endpoints raise before any notification."""
    diamond_graph.add_observer(recorder)
    search = getattr(diamond_graph, method)

    with pytest.raises(VertexNotFoundError, match="Start vertex"):
        search("Z", "A")
    with pytest.raises(VertexNotFoundError, match="End vertex"):
        search("A", "Z")
    assert recorder.events == []


def test_traversal_does_not_mutate_graph(diamond_graph):
    """Test that the graph is unchanged after every traversal."""
    edges_before = list(diamond_graph.get_edges())

    diamond_graph.breadth_first_search("A", "E")
    diamond_graph.depth_first_search("A", "E")
    diamond_graph.dijkstra("A", "E")

    assert list(diamond_graph.get_edges()) == edges_before
    assert diamond_graph.get_vertices() == ["A", "B", "C", "D", "E"]
