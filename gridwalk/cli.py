"""Command line front end for rendering grids and searching paths.

Usage:
    gridwalk render maze.txt --legend --cell-width 2
    gridwalk path maze.txt --start S --end E --wall "#" --show
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from .config import Config
from .errors import GridParseError
from .grid import Grid
from .logging_utils import log_error, log_info, log_success
from .puzzle import Puzzle

EXIT_OK = 0
EXIT_NO_PATH = 1
EXIT_BAD_INPUT = 2

PATH_MARKER = "O"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gridwalk", description="Sparse grid rendering and path search")
    subparsers = parser.add_subparsers(dest="command", required=True)

    render = subparsers.add_parser("render", help="Print a grid file, optionally transformed")
    render.add_argument("file", type=Path, help="Text file, one grid row per line")
    render.add_argument("--legend", action="store_true", help="Label rows and columns")
    render.add_argument("--cell-width", type=int, default=None, help="Display width of every cell")
    render.add_argument("--digits", action="store_true", help="Require every cell to be a decimal digit")
    render.add_argument("--transpose", action="store_true", help="Swap rows and columns before printing")
    render.add_argument("--diagonal", action="store_true", help="Rotate 45 degrees clockwise before printing")

    path = subparsers.add_parser("path", help="Find a path between two marker cells")
    path.add_argument("file", type=Path, help="Text file, one grid row per line")
    path.add_argument("--start", required=True, help="Marker character of the start cell")
    path.add_argument("--end", required=True, help="Marker character of the end cell")
    path.add_argument(
        "--wall",
        action="append",
        default=None,
        help="Marker character of obstacle cells (repeatable, default '#')",
    )
    mode = path.add_mutually_exclusive_group()
    mode.add_argument("--dfs", action="store_true", help="Depth-first: any path, not the shortest")
    mode.add_argument("--weighted", action="store_true", help="Use the label-correcting weighted search")
    path.add_argument("--show", action="store_true", help=f"Print the grid with the path drawn as '{PATH_MARKER}'")
    return parser


def _verbose() -> bool:
    return Config.LOG_LEVEL.upper() in {"DEBUG", "INFO"}


def _load(file: Path, digits: bool = False) -> Grid:
    puzzle = Puzzle.from_file(file)
    if digits:
        return Grid.from_digits(puzzle)
    return Grid.from_text(puzzle)


def run_render(args: argparse.Namespace) -> int:
    grid = _load(args.file, digits=args.digits)
    if args.transpose:
        grid.transpose()
    if args.diagonal:
        grid.to_diagonal()

    printer = grid.printer()
    if args.legend:
        printer.with_legend()
    if args.cell_width is not None:
        printer.with_cell_width(args.cell_width)
    if _verbose():
        width, height = grid.size()
        log_info(f"{args.file}: {len(grid)} cells, width {width}, height {height}")
    printer.print()
    return EXIT_OK


def run_path(args: argparse.Namespace) -> int:
    grid = _load(args.file)
    walls = args.wall or ["#"]

    finder = grid.apply_path_finder().with_start(args.start).with_end(args.end)
    if finder.start is None or finder.end is None:
        missing = args.start if finder.start is None else args.end
        log_error(f"Marker {missing!r} not found in {args.file}")
        return EXIT_BAD_INPUT
    for wall in walls:
        finder.with_obstacles(wall)

    if args.weighted:
        path = finder.dijkstra().run().path()
    else:
        builder = finder.bfs()
        if args.dfs:
            builder.use_dfs()
        result = builder.run()
        path = result.path if result is not None else None

    if path is None:
        log_error(f"No path from {finder.start} to {finder.end}")
        return EXIT_NO_PATH

    log_success(f"Path from {finder.start} to {finder.end}: {len(path) - 1} steps")
    if args.show:
        on_path = set(path[1:-1])
        grid.printer().with_cell_override_fn(
            lambda coord: PATH_MARKER if coord in on_path else None
        ).print()
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Parse CLI arguments and run the selected command."""

    parser = build_parser()
    args = parser.parse_args(argv)
    Config.validate()

    try:
        if args.command == "render":
            return run_render(args)
        return run_path(args)
    except GridParseError as exc:
        log_error(f"Could not parse {args.file}: {exc}")
        return EXIT_BAD_INPUT
    except ValidationError as exc:
        log_error(f"Invalid options: {exc.error_count()} error(s)\n{exc}")
        return EXIT_BAD_INPUT
    except OSError as exc:
        log_error(f"Could not read {args.file}: {exc}")
        return EXIT_BAD_INPUT
