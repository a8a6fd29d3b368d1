"""Base classes for graph traversal algorithms."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, Optional, TypeVar

from mazegraph.core.events import ObserverRegistry, TraversalEvent
from mazegraph.core.exceptions import VertexNotFoundError

if TYPE_CHECKING:
    from mazegraph.core.graph import WeightedGraph

V = TypeVar("V")
# Type variable for traversal results
R = TypeVar("R")


class GraphTraversal(ABC, Generic[V, R]):
    """Abstract base class for traversal algorithms over a weighted graph."""

    name: str = "traversal"

    def __init__(
        self,
        graph: "WeightedGraph[V]",
        observers: Optional[ObserverRegistry[V]] = None,
    ):
        """Initialize traversal with graph and the observers to notify."""
        self.graph = graph
        self.observers: ObserverRegistry[V] = (
            observers if observers is not None else ObserverRegistry()
        )

    @abstractmethod
    def run(self, start: V, end: V) -> R:
        """Traverse the graph from start towards end."""
        pass

    def validate_vertices(self, start: V, end: V) -> None:
        """Validate that both endpoints exist in the graph."""
        if not self.graph.contains_vertex(start):
            raise VertexNotFoundError(f"Start vertex '{start}' not found")
        if not self.graph.contains_vertex(end):
            raise VertexNotFoundError(f"End vertex '{end}' not found")

    def notify(self, event: TraversalEvent, *args: Any) -> None:
        """Forward an event to the registered observers."""
        self.observers.notify(event, *args)
