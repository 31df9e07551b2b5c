"""Command-line interface for the puzzle solutions."""

from __future__ import annotations

import argparse
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from aoc2023 import PARTS, PUZZLE_FILES, solve
from aoc2023.cubes import COLOURS, CUBE_LIMITS
from aoc2023.errors import PuzzleInputError
from aoc2023.reader import read_source

CONFIG_NAME = "aoc2023.toml"
DEFAULT_PUZZLE_DIR = "puzzles"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    days: list[int]
    parts: list[int]
    input_file: Path | None
    puzzle_dir: Path
    limits: dict[str, int]
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="aoc2023",
        description="Advent of Code 2023 puzzle solutions",
    )
    p.add_argument(
        "days",
        nargs="*",
        type=int,
        metavar="DAY",
        help="Days to solve (default: all)",
    )
    p.add_argument("-p", "--part", type=int, choices=PARTS, help="Solve only this part")
    p.add_argument("-i", "--input", metavar="FILE", help="Input file (requires a single DAY)")
    p.add_argument(
        "--puzzle-dir",
        metavar="DIR",
        help=f"Directory of default input files (default: {DEFAULT_PUZZLE_DIR})",
    )
    p.add_argument(
        "--limit",
        action="append",
        default=[],
        metavar="COLOUR=N",
        help="Override a day 2 cube limit (repeatable)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    p.add_argument("--debug", action="store_true", help="Dump parsed input to stderr")
    return p


def parse_limit_arg(s: str) -> tuple[str, int]:
    """Parse a COLOUR=N string into (colour, count)."""
    if "=" not in s:
        raise argparse.ArgumentTypeError(f"invalid limit format (expected COLOUR=N): {s}")
    colour, _, raw = s.partition("=")
    return _check_limit(colour.strip(), raw.strip())


def _check_limit(colour: str, raw: Any) -> tuple[str, int]:
    if colour not in COLOURS:
        raise argparse.ArgumentTypeError(
            f"unknown cube colour {colour!r} (expected one of {', '.join(COLOURS)})"
        )
    try:
        count = int(raw)
    except (TypeError, ValueError):
        raise argparse.ArgumentTypeError(f"invalid cube limit for {colour}: {raw!r}") from None
    if count < 0:
        raise argparse.ArgumentTypeError(f"cube limit for {colour} must not be negative")
    return colour, count


def load_config(config_path: Path | None, base_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else base_dir / CONFIG_NAME

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        try:
            return tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise argparse.ArgumentTypeError(f"invalid config file {path}: {exc}") from None


def resolve_options(args: argparse.Namespace, cwd: Path | None = None) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    base_dir = cwd if cwd is not None else Path(".")
    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, base_dir)

    days = list(args.days) or sorted(PUZZLE_FILES)
    for day in days:
        if day not in PUZZLE_FILES:
            raise argparse.ArgumentTypeError(
                f"unknown day {day} (expected one of {', '.join(map(str, sorted(PUZZLE_FILES)))})"
            )

    parts = [args.part] if args.part is not None else list(PARTS)

    input_file = Path(args.input) if args.input else None
    if input_file is not None and len(days) != 1:
        raise argparse.ArgumentTypeError("--input requires exactly one DAY")

    # Puzzle directory: config < CLI
    puzzle_dir = Path(DEFAULT_PUZZLE_DIR)
    cfg_puzzles = config.get("puzzles")
    if isinstance(cfg_puzzles, dict):
        cfg_dir = cfg_puzzles.get("dir")
        if isinstance(cfg_dir, str):
            puzzle_dir = Path(cfg_dir)
    if args.puzzle_dir:
        puzzle_dir = Path(args.puzzle_dir)
    if not puzzle_dir.is_absolute():
        puzzle_dir = base_dir / puzzle_dir

    # Cube limits: defaults < config < CLI
    limits = dict(CUBE_LIMITS)
    cfg_cubes = config.get("cubes")
    if isinstance(cfg_cubes, dict):
        for k, v in cfg_cubes.items():
            colour, count = _check_limit(str(k), v)
            limits[colour] = count
    for raw in args.limit:
        colour, count = parse_limit_arg(raw)
        limits[colour] = count

    return CliOptions(
        days=days,
        parts=parts,
        input_file=input_file,
        puzzle_dir=puzzle_dir,
        limits=limits,
        debug=args.debug,
    )


def input_path(options: CliOptions, day: int) -> Path:
    """Input file for day: the explicit --input, or the day's file in the puzzle dir."""
    if options.input_file is not None:
        return options.input_file
    return options.puzzle_dir / PUZZLE_FILES[day]


def dump_input(day: int, source: str, filename: str) -> None:
    """Write the parsed form of a day's input to stderr."""
    from aoc2023.cubes import parse_game
    from aoc2023.debug import dump_calibration, dump_games, dump_schematic
    from aoc2023.reader import parse_records, split_lines
    from aoc2023.schematic import parse_schematic

    if day == 1:
        dump_calibration(split_lines(source), file=sys.stderr)
    elif day == 2:
        dump_games(parse_records(source, parse_game, filename), file=sys.stderr)
    elif day == 3:
        dump_schematic(parse_schematic(source, filename), file=sys.stderr)


def solve_day(options: CliOptions, day: int) -> list[tuple[int, int]]:
    """Read one day's input and solve the selected parts. Returns (part, answer) pairs."""
    path = input_path(options, day)
    source = read_source(path)
    if options.debug:
        dump_input(day, source, str(path))
    return [
        (part, solve(day, part, source, str(path), limits=options.limits))
        for part in options.parts
    ]


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    status = 0
    # A failing day does not stop the others
    for day in options.days:
        try:
            answers = solve_day(options, day)
        except PuzzleInputError as exc:
            print(str(exc), file=sys.stderr)
            status = 1
            continue
        except OSError as exc:
            reason = exc.strerror or str(exc)
            print(f"error: cannot read {input_path(options, day)}: {reason}", file=sys.stderr)
            status = 1
            continue
        for part, answer in answers:
            print(f"Day{day}-{part}: {answer}")

    return status
