"""Command line entry point for running puzzle solutions."""

from __future__ import annotations

import argparse

from .fetcher import AOC_SESSION_ENV_VAR, set_session
from .solutions.registry import run

VERSION = "1.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aockit",
        description="Run Advent of Code 2025 puzzle solutions.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument(
        "--aoc-session",
        help=f"AOC session id; if not set uses env var {AOC_SESSION_ENV_VAR}",
    )
    parser.add_argument("-d", "--day", type=int, help="Puzzle day to run")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.aoc_session is not None:
        set_session(args.aoc_session)
    run(args.day)
    return 0