"""Command Line Interface for the maze graph solver.

This module provides a CLI that loads a maze layout, builds its graph and runs
one of the traversal algorithms over it, printing the outcome as JSON.

The CLI supports the following commands:
    - solve: Run bfs, dfs or dijkstra between two cells of a maze
    - validate: Check a maze layout against the layout schema

JSON input can be provided either as a direct string or as a file path prefixed with '@'.
Relative file paths are resolved against the current directory.

Example Usage:
    python -m mazegraph solve @mazes/open_2x2.json --algorithm bfs
    python -m mazegraph solve '{"width": 3, "height": 1}' --start 0,0 --end 2,0
    python -m mazegraph validate @mazes/open_2x2.json
"""

import argparse
import json
import logging
import os
import sys
from typing import Any, Dict, List, Optional

from mazegraph.config import SolverConfig, configure_logging
from mazegraph.core.events import LoggingObserver
from mazegraph.core.exceptions import ConfigurationError, GraphOperationError, ValidationError
from mazegraph.core.models import Juncture
from mazegraph.core.traversal import ALGORITHMS
from mazegraph.maze import GridMaze, MazeGraph
from mazegraph.utils.validation import SchemaValidator

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_INPUT = 2


def parse_json_input(json_str: str) -> Dict[str, Any]:
    """Parse JSON input from either a string or file.

    Args:
        json_str (str): Either a JSON string or a file path prefixed with '@'.

    Returns:
        dict: Parsed JSON data.

    Raises:
        ValueError: If the JSON is invalid or the specified file is not found.
    """
    if json_str.startswith("@"):
        file_path = json_str[1:]
        if not os.path.isabs(file_path):
            file_path = os.path.join(os.getcwd(), file_path)

        if not os.path.isfile(file_path):
            raise ValueError(f"File not found: {file_path}")

        try:
            with open(file_path, "r") as f:
                json_str = f.read()
        except OSError as e:
            raise ValueError(f"Cannot read {file_path}: {e}")

    try:
        return json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON input: {e}")


def parse_cell(value: Optional[str]) -> Optional[Juncture]:
    """Parse an 'X,Y' cell argument."""
    if value is None:
        return None
    parts = value.split(",")
    if len(parts) != 2:
        raise ValueError(f"Cell must be given as X,Y, got '{value}'")
    try:
        return Juncture(int(parts[0]), int(parts[1]))
    except ValueError:
        raise ValueError(f"Cell coordinates must be integers, got '{value}'")


def solve(args: argparse.Namespace, config: SolverConfig) -> Dict[str, Any]:
    """Load the layout named on the command line and run the configured search."""
    maze = GridMaze.from_dict(parse_json_input(args.layout))
    graph = MazeGraph(maze)

    start = parse_cell(args.start) or maze.start or Juncture(0, 0)
    end = parse_cell(args.end) or maze.end or Juncture(maze.width - 1, maze.height - 1)
    # Resolve through the graph so out-of-grid cells fail as unknown vertices
    start = graph.juncture(start.x, start.y)
    end = graph.juncture(end.x, end.y)

    if config.trace:
        graph.add_observer(LoggingObserver())

    logger.info(f"Running {config.algorithm} from {start} to {end}")
    return graph.traverse(config.algorithm, start, end).to_dict()


def validate(args: argparse.Namespace) -> Dict[str, Any]:
    """Check a layout against the schema and report every problem found."""
    result = SchemaValidator().validate_layout(parse_json_input(args.layout))
    return {"valid": result.is_valid, "errors": result.errors}


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="mazegraph", description="Search weighted grid mazes with BFS, DFS or Dijkstra."
    )
    parser.add_argument("--log-level", help="Logging level (default: MAZEGRAPH_LOG_LEVEL)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    solve_parser = subparsers.add_parser("solve", help="Search a maze between two cells")
    solve_parser.add_argument("layout", help="JSON layout or @path to a JSON file")
    solve_parser.add_argument(
        "--algorithm", choices=sorted(ALGORITHMS), help="Traversal to run (default: dijkstra)"
    )
    solve_parser.add_argument("--start", help="Start cell as X,Y (default: layout start or 0,0)")
    solve_parser.add_argument("--end", help="End cell as X,Y (default: layout end or far corner)")
    solve_parser.add_argument(
        "--trace", action="store_true", default=None, help="Log every traversal notification"
    )

    validate_parser = subparsers.add_parser("validate", help="Validate a maze layout")
    validate_parser.add_argument("layout", help="JSON layout or @path to a JSON file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)

    try:
        config = SolverConfig.from_env().replace(
            algorithm=getattr(args, "algorithm", None),
            log_level=args.log_level,
            trace=getattr(args, "trace", None),
        )
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    level = config.log_level
    if config.trace and logging.getLevelName(level) > logging.INFO:
        level = "INFO"
    configure_logging(level)

    try:
        if args.command == "solve":
            output = solve(args, config)
        else:
            output = validate(args)
    except (ValueError, ValidationError, GraphOperationError) as e:
        logger.error(f"Failed to {args.command} maze: {str(e)}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    print(json.dumps(output, indent=2))
    if args.command == "validate" and not output["valid"]:
        return EXIT_INVALID_INPUT
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
