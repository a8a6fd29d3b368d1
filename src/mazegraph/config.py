"""
Configuration for the maze solver front end.

Settings come from keyword arguments or from the environment:

    MAZEGRAPH_ALGORITHM   bfs, dfs or dijkstra (default: dijkstra)
    MAZEGRAPH_LOG_LEVEL   standard logging level name (default: WARNING)
    MAZEGRAPH_TRACE       1/true/yes to log every traversal notification
"""

import logging
import os
from typing import Mapping, Optional

from .core.exceptions import ConfigurationError
from .core.traversal import ALGORITHMS

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
ENV_PREFIX = "MAZEGRAPH_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


class SolverConfig:
    """
    Configuration for a maze solving run.

    Attributes:
        algorithm: Name of the traversal to run
        log_level: Logging level name for the mazegraph logger
        trace: Whether to attach a LoggingObserver to the graph
    """

    def __init__(
        self,
        algorithm: str = "dijkstra",
        log_level: str = "WARNING",
        trace: bool = False,
    ):
        algorithm = algorithm.lower()
        if algorithm not in ALGORITHMS:
            raise ConfigurationError(
                f"Unknown algorithm '{algorithm}', expected one of {sorted(ALGORITHMS)}"
            )
        log_level = log_level.upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigurationError(f"Unknown log level '{log_level}'")

        self.algorithm = algorithm
        self.log_level = log_level
        self.trace = trace

    def __repr__(self) -> str:
        return (
            f"SolverConfig(algorithm={self.algorithm!r}, "
            f"log_level={self.log_level!r}, trace={self.trace!r})"
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SolverConfig":
        """Build a configuration from MAZEGRAPH_* environment variables."""
        env = os.environ if environ is None else environ
        return cls(
            algorithm=env.get(f"{ENV_PREFIX}ALGORITHM", "dijkstra"),
            log_level=env.get(f"{ENV_PREFIX}LOG_LEVEL", "WARNING"),
            trace=_parse_bool(env.get(f"{ENV_PREFIX}TRACE", ""), f"{ENV_PREFIX}TRACE"),
        )

    def replace(self, **overrides) -> "SolverConfig":
        """Return a copy with the non-None overrides applied."""
        values = {
            "algorithm": self.algorithm,
            "log_level": self.log_level,
            "trace": self.trace,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return SolverConfig(**values)


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """
    Attach a stream handler to the mazegraph logger.

    Calling this more than once replaces the previously installed handler.
    """
    logger = logging.getLogger("mazegraph")
    for handler in list(logger.handlers):
        if getattr(handler, "_mazegraph_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._mazegraph_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    return logger


def _parse_bool(value: str, name: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got '{value}'")
