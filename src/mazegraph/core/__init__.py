"""Core graph functionality."""

from .events import (
    BaseObserver,
    GraphAlgorithmObserver,
    LoggingObserver,
    ObserverRegistry,
    RecordingObserver,
    TraversalEvent,
)
from .exceptions import (
    ConfigurationError,
    DuplicateVertexError,
    GraphOperationError,
    InvalidWeightError,
    ValidationError,
    VertexNotFoundError,
)
from .graph import WeightedGraph
from .models import Juncture, ShortestPathResult, TraversalResult
from .types import Direction, MazeProtocol

__all__ = [
    "BaseObserver",
    "ConfigurationError",
    "Direction",
    "DuplicateVertexError",
    "GraphAlgorithmObserver",
    "GraphOperationError",
    "InvalidWeightError",
    "Juncture",
    "LoggingObserver",
    "MazeProtocol",
    "ObserverRegistry",
    "RecordingObserver",
    "ShortestPathResult",
    "TraversalEvent",
    "TraversalResult",
    "ValidationError",
    "VertexNotFoundError",
    "WeightedGraph",
]
