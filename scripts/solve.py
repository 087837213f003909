#!/usr/bin/env python3
"""
Maze Graph CLI - Load a maze and report paths, traversals and matrices.

Usage:
    python scripts/solve.py
    python scripts/solve.py data/mazes/sample.txt --show path
    python scripts/solve.py maze.txt --show traversals --strategy greedy
    python scripts/solve.py maze.txt --show matrices -v

Sections:
    info        - Maze dimensions, node/edge counts, start and goal
    path        - Shortest path from A to B, drawn on the maze
    traversals  - DFS (pre/in/post-order), BFS and greedy best-first
    matrices    - Adjacency and incidence matrices
    all         - Everything above (default)

Exit codes:
    0 - Success
    1 - Maze could not be read or is malformed
    2 - Path requested but B is unreachable from A
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Must run before mazegraph.config reads LOG_LEVEL
load_dotenv(project_root / ".env")

from mazegraph.config import (  # noqa: E402
    BANNER_WIDTH,
    DEFAULT_MAZE_PATH,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    LOG_LEVEL,
)
from mazegraph.errors import MazeError  # noqa: E402
from mazegraph.render import (  # noqa: E402
    format_matrix,
    format_path,
    format_summary,
    format_traversal,
    render_maze,
)
from mazegraph.solver import MazeSolver  # noqa: E402
from mazegraph.traversal import TraversalStrategy, get_traversal  # noqa: E402

SECTIONS = ["info", "path", "traversals", "matrices", "all"]


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Solve a text maze as a graph",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "maze",
        type=Path,
        nargs="?",
        default=DEFAULT_MAZE_PATH,
        help=f"Maze file to load (default: {DEFAULT_MAZE_PATH.name})",
    )
    parser.add_argument(
        "--show",
        type=str,
        default="all",
        choices=SECTIONS,
        help="Which report to print (default: all)",
    )
    parser.add_argument(
        "--strategy",
        type=str,
        default=None,
        choices=[s.value for s in TraversalStrategy],
        help="Only run this traversal (default: run all)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def banner(title: str) -> str:
    line = "=" * BANNER_WIDTH
    return f"\n{line}\n{title}\n{line}"


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )

    try:
        solver = MazeSolver.from_file(args.maze)
    except (MazeError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    show = {args.show} if args.show != "all" else set(SECTIONS)
    exit_code = 0

    if "info" in show:
        print(banner("GRAPH INFORMATION"))
        print(format_summary(solver.summary()))
        print()
        print(render_maze(solver.grid))

    if "path" in show:
        print(banner("SHORTEST PATH (A -> B)"))
        result = solver.shortest_path()
        print(format_path(solver.graph, result.node_ids))
        if result.found:
            print()
            print(render_maze(solver.grid, solver.graph, result.node_ids))
        else:
            exit_code = 2

    if "traversals" in show:
        print(banner("GRAPH TRAVERSALS"))
        if args.strategy:
            results = [solver.traverse(get_traversal(args.strategy))]
        else:
            results = solver.run_all_traversals()
        for result in results:
            print()
            print(format_traversal(solver.graph, get_traversal(result.name).title, result.node_ids))

    if "matrices" in show:
        print(banner("GRAPH MATRICES"))
        print()
        print(format_matrix("Adjacency matrix", solver.matrices.adjacency_matrix()))
        print()
        print(format_matrix("Incidence matrix", solver.matrices.incidence_matrix()))

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
