"""Command-line interface for solving a day's puzzle."""

from __future__ import annotations

import argparse
from pathlib import Path

from aoc2023.core.config import RunPaths, TrackingConfig
from aoc2023.core.logging import build_run_logger
from aoc2023.core.timing import measure
from aoc2023.io import read_input, read_stream, read_text
from aoc2023.puzzles import SOLVERS, get_solver


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aoc2023",
        description="Solve an Advent of Code 2023 grid puzzle and print the answer.",
    )
    parser.add_argument(
        "--day",
        type=int,
        required=True,
        choices=sorted({day for day, _ in SOLVERS}),
        help="Puzzle day",
    )
    parser.add_argument(
        "--part",
        dest="parts",
        type=int,
        action="append",
        choices=(1, 2),
        help="Puzzle part. Can be provided twice; defaults to both parts.",
    )
    parser.add_argument(
        "--input",
        type=str,
        default=None,
        help="Puzzle input file, or '-' to read from stdin. Defaults to <inputs-dir>/DD.txt",
    )
    parser.add_argument(
        "--inputs-dir",
        type=Path,
        default=Path("inputs"),
        help="Directory holding cached puzzle inputs",
    )
    parser.add_argument(
        "--mlflow",
        action="store_true",
        help="Log answers and timings to MLflow (requires the tracking extra)",
    )
    parser.add_argument(
        "--experiment",
        type=str,
        default="aoc2023",
        help="MLflow experiment name",
    )
    parser.add_argument(
        "--tracking-uri",
        type=str,
        default=None,
        help="MLflow tracking URI",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print timings alongside the answers",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Optional argument list (defaults to sys.argv)

    Returns:
        Parsed arguments namespace
    """
    return build_parser().parse_args(argv)


def load_text(args: argparse.Namespace) -> str:
    if args.input == "-":
        return read_stream()
    if args.input is not None:
        return read_text(Path(args.input))
    return read_input(args.day, RunPaths(inputs_dir=args.inputs_dir))


def describe_source(args: argparse.Namespace) -> str:
    """Label for where the puzzle text came from, used as a run tag."""
    if args.input == "-":
        return "stdin"
    if args.input is not None:
        return f"file:{args.input}"
    return f"inputs:{RunPaths(inputs_dir=args.inputs_dir).input_for(args.day)}"


def solver_name(solver) -> str:
    return f"{solver.__module__.rsplit('.', 1)[-1]}.{solver.__name__}"


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the solver CLI.

    Args:
        argv: Optional argument list (defaults to sys.argv)
    """
    args = parse_args(argv)
    parts = args.parts or [1, 2]
    solvers = [(part, get_solver(args.day, part)) for part in parts]
    text = load_text(args)

    run_logger = build_run_logger(
        TrackingConfig(
            enabled=args.mlflow,
            experiment_name=args.experiment,
            run_name=f"day{args.day:02d}",
            tracking_uri=args.tracking_uri,
            tags={"aoc.day": str(args.day)},
        )
    )
    try:
        run_logger.log_params({"day": args.day, "parts": ",".join(map(str, parts))})
        run_logger.set_tags(
            {
                "aoc.input": describe_source(args),
                "aoc.solvers": ",".join(solver_name(solver) for _, solver in solvers),
            }
        )
        for part, solver in solvers:
            result = measure(lambda: solver(text))
            if result.answer is None:
                print(f"Day {args.day} part {part}: no solution")
            else:
                print(f"Day {args.day} part {part}: {result.answer}")
            run_logger.log_solve(part, result)
            if args.verbose:
                print(f"Time taken: {result.duration_ms:.2f}ms")
    finally:
        run_logger.close()


__all__ = ["main", "parse_args", "build_parser"]


if __name__ == "__main__":
    main()
