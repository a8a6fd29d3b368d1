"""
Graph algorithm event system.

This module provides the observer contract through which the weighted graph
reports the progress of its traversal algorithms. Observers are notified
synchronously, inline with the traversal, in registration order. An observer
that raises stops the traversal: the error propagates to the caller of the
traversal method.

Notification order per algorithm:
    BFS:      on_bfs_begun, on_vertex_visited*, on_search_over
    DFS:      on_dfs_begun, on_vertex_visited*, on_search_over
    Dijkstra: on_dijkstra_begun, on_dijkstra_vertex_finished*, on_dijkstra_over
"""

import logging
from enum import Enum
from typing import Any, Generic, List, Protocol, Sequence, Tuple, TypeVar

logger = logging.getLogger(__name__)

V = TypeVar("V")
V_contra = TypeVar("V_contra", contravariant=True)


class TraversalEvent(Enum):
    """Notification points emitted by the traversal algorithms."""

    BFS_BEGUN = "on_bfs_begun"
    DFS_BEGUN = "on_dfs_begun"
    DIJKSTRA_BEGUN = "on_dijkstra_begun"
    VERTEX_VISITED = "on_vertex_visited"
    SEARCH_OVER = "on_search_over"
    DIJKSTRA_VERTEX_FINISHED = "on_dijkstra_vertex_finished"
    DIJKSTRA_OVER = "on_dijkstra_over"

    @property
    def callback(self) -> str:
        """Name of the observer method handling this event."""
        return self.value


class GraphAlgorithmObserver(Protocol[V_contra]):
    """Protocol for objects that follow the progress of graph algorithms."""

    def on_bfs_begun(self) -> None:
        """Called once before a breadth-first search does any work."""
        ...

    def on_dfs_begun(self) -> None:
        """Called once before a depth-first search does any work."""
        ...

    def on_dijkstra_begun(self) -> None:
        """Called once before Dijkstra's algorithm does any work."""
        ...

    def on_vertex_visited(self, vertex: V_contra) -> None:
        """Called once per distinct vertex visited by BFS or DFS."""
        ...

    def on_search_over(self) -> None:
        """Called once when BFS or DFS ends, whether or not the end was found."""
        ...

    def on_dijkstra_vertex_finished(self, vertex: V_contra, cost: float) -> None:
        """
        Called when Dijkstra's algorithm confirms the final cost of a vertex.

        Args:
            vertex: The vertex that was finished
            cost: Its shortest distance from the start, math.inf if unreachable
        """
        ...

    def on_dijkstra_over(self, path: Sequence[V_contra]) -> None:
        """
        Called once when Dijkstra's algorithm has finished every vertex.

        Args:
            path: The shortest route from start to end; empty when the end
                is unreachable
        """
        ...


class BaseObserver(Generic[V]):
    """Observer that ignores every notification; override what you need."""

    def on_bfs_begun(self) -> None:
        pass

    def on_dfs_begun(self) -> None:
        pass

    def on_dijkstra_begun(self) -> None:
        pass

    def on_vertex_visited(self, vertex: V) -> None:
        pass

    def on_search_over(self) -> None:
        pass

    def on_dijkstra_vertex_finished(self, vertex: V, cost: float) -> None:
        pass

    def on_dijkstra_over(self, path: Sequence[V]) -> None:
        pass


class ObserverRegistry(Generic[V]):
    """
    Ordered collection of observers owned by a single graph.

    Attributes:
        _observers (List[GraphAlgorithmObserver]): Registered observers in
            notification order
    """

    def __init__(self) -> None:
        self._observers: List[GraphAlgorithmObserver[V]] = []

    def __len__(self) -> int:
        return len(self._observers)

    def __iter__(self):
        return iter(tuple(self._observers))

    def add(self, observer: GraphAlgorithmObserver[V]) -> None:
        """
        Register an observer.

        The same observer may be registered more than once, in which case it
        receives every notification once per registration.

        Args:
            observer: The observer to append to the notification order
        """
        self._observers.append(observer)

    def remove(self, observer: GraphAlgorithmObserver[V]) -> None:
        """Remove the first registration of an observer, if any."""
        if observer in self._observers:
            self._observers.remove(observer)

    def clear(self) -> None:
        """Remove all observers."""
        self._observers.clear()

    def notify(self, event: TraversalEvent, *args: Any) -> None:
        """
        Deliver an event to every observer in registration order.

        Exceptions raised by an observer are not caught.

        Args:
            event: The notification point being reached
            *args: Arguments forwarded to the observer callback
        """
        for observer in tuple(self._observers):
            getattr(observer, event.callback)(*args)


class LoggingObserver(BaseObserver[V]):
    """Observer that writes every notification to a logger."""

    def __init__(self, log: logging.Logger = logger, level: int = logging.INFO):
        self.log = log
        self.level = level

    def on_bfs_begun(self) -> None:
        self.log.log(self.level, "Breadth-first search has begun")

    def on_dfs_begun(self) -> None:
        self.log.log(self.level, "Depth-first search has begun")

    def on_dijkstra_begun(self) -> None:
        self.log.log(self.level, "Dijkstra's algorithm has begun")

    def on_vertex_visited(self, vertex: V) -> None:
        self.log.log(self.level, f"Visited {vertex}")

    def on_search_over(self) -> None:
        self.log.log(self.level, "Search is over")

    def on_dijkstra_vertex_finished(self, vertex: V, cost: float) -> None:
        self.log.log(self.level, f"Finished {vertex} with cost {cost}")

    def on_dijkstra_over(self, path: Sequence[V]) -> None:
        route = " -> ".join(str(vertex) for vertex in path) or "<unreachable>"
        self.log.log(self.level, f"Dijkstra's algorithm is over, route: {route}")


class RecordingObserver(BaseObserver[V]):
    """
    Observer that records every notification it receives.

    Useful for replaying a traversal later, for instance to animate it.

    Attributes:
        events (List[Tuple[TraversalEvent, Tuple[Any, ...]]]): Received
            notifications with their arguments, in arrival order
    """

    def __init__(self) -> None:
        self.events: List[Tuple[TraversalEvent, Tuple[Any, ...]]] = []

    def _record(self, event: TraversalEvent, *args: Any) -> None:
        self.events.append((event, args))

    def on_bfs_begun(self) -> None:
        self._record(TraversalEvent.BFS_BEGUN)

    def on_dfs_begun(self) -> None:
        self._record(TraversalEvent.DFS_BEGUN)

    def on_dijkstra_begun(self) -> None:
        self._record(TraversalEvent.DIJKSTRA_BEGUN)

    def on_vertex_visited(self, vertex: V) -> None:
        self._record(TraversalEvent.VERTEX_VISITED, vertex)

    def on_search_over(self) -> None:
        self._record(TraversalEvent.SEARCH_OVER)

    def on_dijkstra_vertex_finished(self, vertex: V, cost: float) -> None:
        self._record(TraversalEvent.DIJKSTRA_VERTEX_FINISHED, vertex, cost)

    def on_dijkstra_over(self, path: Sequence[V]) -> None:
        self._record(TraversalEvent.DIJKSTRA_OVER, list(path))

    def events_of(self, event: TraversalEvent) -> List[Tuple[Any, ...]]:
        """Arguments of every recorded notification of the given kind."""
        return [args for kind, args in self.events if kind is event]

    @property
    def kinds(self) -> List[TraversalEvent]:
        """Kinds of the recorded notifications, in arrival order."""
        return [kind for kind, _ in self.events]

    @property
    def visited(self) -> List[V]:
        """Vertices reported by on_vertex_visited, in order."""
        return [args[0] for args in self.events_of(TraversalEvent.VERTEX_VISITED)]

    @property
    def finished(self) -> List[Tuple[V, float]]:
        """(vertex, cost) pairs reported by Dijkstra, in finishing order."""
        return [
            (args[0], args[1])
            for args in self.events_of(TraversalEvent.DIJKSTRA_VERTEX_FINISHED)
        ]

    def clear(self) -> None:
        """Forget all recorded notifications."""
        self.events.clear()
