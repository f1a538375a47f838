"""
Command-line runner: read a board, solve it, print the result.

Usage:
    python -m akari.runners.solve_puzzle board.txt
    cat board.txt | python -m akari.runners.solve_puzzle --backend pulp --timeout 10
    python -m akari.runners.solve_puzzle board.txt --config akari.json --diagnostics-json out.json

Exit codes:
    0  Sat (solution printed)
    1  Unsat or Unknown
    2  Invalid board, clue or config
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from akari.config.store import load_solver_config
from akari.config.types import SolverConfig
from akari.core.board_io import load_board, read_board
from akari.core.errors import AkariError, ConfigError
from akari.runners.kernel import solve_board
from akari.runners.results import summarize
from akari.solver.factory import get_backend_names


logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments for the solver runner.
    """
    parser = argparse.ArgumentParser(
        description="Solve an Akari (light up) puzzle with a SAT/SMT/ILP backend."
    )
    parser.add_argument(
        "board",
        type=Path,
        nargs="?",
        default=None,
        help="Board text file ('-' empty, 'x' wall, '0'-'4' clue). Reads stdin if omitted.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON solver config; command-line flags override its values.",
    )
    parser.add_argument(
        "--backend",
        choices=get_backend_names(),
        default=None,
        help="Solver backend (default: z3).",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Backend time limit in seconds; expiry reports Unknown.",
    )
    parser.add_argument(
        "--compact",
        action="store_true",
        help="Print boards without spaces between cells.",
    )
    parser.add_argument(
        "--no-verify",
        action="store_true",
        help="Skip re-checking the decoded board against the puzzle rules.",
    )
    parser.add_argument(
        "--diagnostics-json",
        type=Path,
        default=None,
        help="Write solve diagnostics as JSON to this path.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> SolverConfig:
    """
    Merge config file (if any) with command-line overrides.
    """
    config = SolverConfig()
    if args.config is not None:
        loaded = load_solver_config(args.config)
        if loaded is None:
            logger.warning("Config file %s not found, using defaults", args.config)
        else:
            config = loaded
    if args.backend is not None:
        config.backend = args.backend
    if args.timeout is not None:
        config.timeout_sec = args.timeout
    if args.compact:
        config.pretty = False
    if args.no_verify:
        config.verify = False
    config.validate()
    if config.backend not in get_backend_names():
        raise ConfigError(
            f"Unknown backend {config.backend!r}, choose from {get_backend_names()}"
        )
    return config


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    try:
        config = build_config(args)
        board = load_board(args.board) if args.board is not None else read_board(sys.stdin)
    except (AkariError, OSError) as e:
        logger.error("%s", e)
        return 2

    print(f"problem\n{board.render(pretty=config.pretty)}\n")

    try:
        diag = solve_board(board, config)
    except AkariError as e:
        logger.error("%s", e)
        return 2

    print(diag.verdict)
    if diag.is_sat:
        print(f"\nsolution found in {diag.elapsed_sec:.3f}s\n{board.render(pretty=config.pretty)}")

    logger.info(summarize(diag))

    if args.diagnostics_json is not None:
        args.diagnostics_json.parent.mkdir(parents=True, exist_ok=True)
        with args.diagnostics_json.open("w", encoding="utf-8") as f:
            json.dump(diag.to_dict(), f, indent=2)

    return 0 if diag.is_sat else 1


if __name__ == "__main__":
    sys.exit(main())
