#!/usr/bin/env python3
"""
Pathviz CLI - Run a path-search strategy on a graph and animate it.

Usage:
    python scripts/play.py --algorithm dij
    python scripts/play.py --algorithm dfs --graph random --size l --seed 7
    python scripts/play.py --algorithm ast --graph random --distanced --speed 6
    python scripts/play.py --algorithm sma --graph circle --size s
    python scripts/play.py --algorithm gre --instant --html output/greedy.html

Algorithms:
    dij  - Dijkstra (cheapest path)
    gre  - Greedy (cheapest next edge, may loop or dead-end)
    sma  - Smart greedy (greedy that never revisits a node)
    dfs  - Depth-first search over all simple paths
    bfs  - Breadth-first search over all simple paths
    ast  - A* (Dijkstra guided by straight-line distance)
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pathviz.algorithms import Algorithm  # noqa: E402
from pathviz.animation import AnimationInterpreter, Renderer, Termination  # noqa: E402
from pathviz.config import DEFAULT_SPEED_LEVEL, LOG_LEVEL, SPEED_PRESETS  # noqa: E402
from pathviz.engine import RunResult, SearchEngine  # noqa: E402
from pathviz.graph import Graph, MissingEndpointError, circle_graph, demo_graph, random_graph  # noqa: E402
from pathviz.render import ConsoleRenderer, FigureRenderer  # noqa: E402


class _Fanout(Renderer):
    """Forwards every call to several renderers and resolves a future on finish."""

    def __init__(self, renderers: list[Renderer], done: asyncio.Future):
        self._renderers = renderers
        self._done = done

    def draw(self, element):
        for renderer in self._renderers:
            renderer.draw(element)

    def highlight(self, element, color):
        for renderer in self._renderers:
            renderer.highlight(element, color)

    def redraw_all(self):
        for renderer in self._renderers:
            renderer.redraw_all()

    def on_state(self, state):
        for renderer in self._renderers:
            renderer.on_state(state)

    def on_step(self, count):
        for renderer in self._renderers:
            renderer.on_step(count)

    def on_finish(self, termination, cost):
        for renderer in self._renderers:
            renderer.on_finish(termination, cost)
        if not self._done.done():
            self._done.set_result(termination)

    def on_abort(self):
        for renderer in self._renderers:
            renderer.on_abort()
        if not self._done.done():
            self._done.cancel()


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Animate a path-search strategy on a graph",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--algorithm",
        "-a",
        type=str,
        default=Algorithm.DIJKSTRA.value,
        choices=[algorithm.value for algorithm in Algorithm],
        help="Search strategy to run (default: dij)",
    )
    parser.add_argument(
        "--graph",
        type=str,
        default="demo",
        choices=["demo", "random", "circle"],
        help="Graph to search (default: demo)",
    )
    parser.add_argument(
        "--size",
        type=str,
        default="m",
        choices=["s", "m", "l"],
        help="Random or circle graph size (default: m)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random graph",
    )
    parser.add_argument(
        "--distanced",
        action="store_true",
        help="Use node distances as edge costs",
    )
    parser.add_argument(
        "--speed",
        type=int,
        default=DEFAULT_SPEED_LEVEL,
        choices=sorted(SPEED_PRESETS),
        help=f"Animation speed level (default: {DEFAULT_SPEED_LEVEL})",
    )
    parser.add_argument(
        "--instant",
        action="store_true",
        help="Skip the animation and show the result immediately",
    )
    parser.add_argument(
        "--html",
        type=Path,
        default=None,
        help="Write the final figure to this HTML file",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def build_graph(args: argparse.Namespace) -> Graph:
    if args.graph == "random":
        graph = random_graph(args.size, seed=args.seed)
    elif args.graph == "circle":
        graph = circle_graph(args.size, seed=args.seed)
    else:
        graph = demo_graph()

    if args.distanced:
        graph.apply_distance_costs()
    return graph


async def animate(result: RunResult, renderers: list[Renderer], args: argparse.Namespace) -> Termination:
    """Replay a result on the running loop and wait until it terminates."""
    done = asyncio.get_running_loop().create_future()
    interpreter = AnimationInterpreter(_Fanout(renderers, done))
    interpreter.set_speed_level(args.speed)

    if args.instant:
        interpreter.reveal_instant(result)
    else:
        interpreter.start(result)

    try:
        return await done
    except asyncio.CancelledError:
        interpreter.abort()
        raise


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        graph = build_graph(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    algorithm = Algorithm.from_key(args.algorithm)
    speed_name = SPEED_PRESETS[args.speed][0]

    print("\n" + "=" * 60)
    print("Pathviz")
    print("=" * 60)
    print(f"  Algorithm: {algorithm.title} - {algorithm.description}")
    print(f"  Graph:     {args.graph} ({len(graph.nodes)} nodes, {len(graph.edges)} edges)")
    print(f"  Speed:     {'instant' if args.instant else speed_name}")
    print("=" * 60 + "\n")

    try:
        result = SearchEngine(graph).run(algorithm)
    except MissingEndpointError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    figure = FigureRenderer(graph, title=algorithm.title)
    renderers: list[Renderer] = [ConsoleRenderer(verbose=not args.instant), figure]

    try:
        termination = asyncio.run(animate(result, renderers, args))
    except KeyboardInterrupt:
        print("\n\nAnimation interrupted by user")
        return 130  # Standard exit code for Ctrl+C

    print("\n" + "=" * 60)
    if termination is Termination.SUCCESS:
        print(f"Reached the finish with cost {result.cost}")
    else:
        print(f"No path to the finish ({termination.value})")
    print("=" * 60)

    print(f"\nIterations: {result.iterations}")
    print(f"Search time: {result.elapsed_ms:.2f}ms")

    if args.html:
        path = figure.write_html(args.html)
        print(f"Figure: {path}")

    return 0 if termination is Termination.SUCCESS else 1


if __name__ == "__main__":
    sys.exit(main())
