"""
Advent of Code 2020 runner

Parses a day's input, runs its parts, logs the answers and optionally emits
receipts.

Modes:
  - solve: one day against one input file
  - all: every day that has a dayNN.txt file in an inputs directory
  - audit: print the stored receipt of one day

CLI:
  python -m aoc2020.solve --mode solve --day 13 --input inputs/day13.txt
  python -m aoc2020.solve --mode solve --day 13 --input inputs/day13.txt --part 2
  python -m aoc2020.solve --mode all --inputs inputs/ --receipts outputs/receipts.jsonl
  python -m aoc2020.solve --mode all --inputs inputs/ --expected answers.json
  python -m aoc2020.solve --mode audit --day 13 --receipts outputs/receipts.jsonl
"""

import argparse
import json
import logging
import time
from pathlib import Path
from types import ModuleType
from typing import Any, Dict, List, Optional, Sequence

from aoc2020 import (
    day01, day02, day03, day04, day05, day06, day07, day08, day09,
    day10, day11, day12, day13, day14, day15, day16, day17,
)
from aoc2020.inputs import read_text
from aoc2020.receipts import (
    build_day_receipt, find_receipt, sha256_text, triage, write_jsonl,
)

DAYS: Dict[int, ModuleType] = {
    1: day01, 2: day02, 3: day03, 4: day04, 5: day05, 6: day06,
    7: day07, 8: day08, 9: day09, 10: day10, 11: day11, 12: day12,
    13: day13, 14: day14, 15: day15, 16: day16, 17: day17,
}

PARTS = (1, 2)


def input_name(day: int) -> str:
    """Conventional input file name for a day, e.g. day07.txt."""
    return f"day{day:02d}.txt"


def load_expected(path: Path) -> Dict[int, List[Optional[int]]]:
    """
    Load expected answers.

    The file is a JSON object mapping the day (as a string) to
    [part1, part2]; null marks an unknown answer.
    """
    with open(path, 'r', encoding='utf-8') as f:
        raw = json.load(f)
    return {int(day): list(answers) for day, answers in raw.items()}


def run_day(day: int, input_path: Path, parts: Sequence[int] = PARTS) -> Dict[str, Any]:
    """
    Parse and solve one day.

    Args:
        day: Puzzle day, a key of DAYS
        input_path: Puzzle input file
        parts: Which parts to run

    Returns:
        Receipt dict for the run

    Raises:
        ValueError: on malformed input or an unsolvable puzzle
    """
    module = DAYS[day]
    text = read_text(input_path)

    start = time.perf_counter()
    data = module.parse(text)
    answers: Dict[str, Optional[int]] = {}
    for part in PARTS:
        solver = getattr(module, f"part{part}")
        answers[f"part{part}"] = solver(data) if part in parts else None
    elapsed_us = int((time.perf_counter() - start) * 1_000_000)

    logging.info(
        f"Day {day} ({module.TITLE}): part1={answers['part1']}, "
        f"part2={answers['part2']}, elapsed_us={elapsed_us}"
    )
    return build_day_receipt(
        day=day,
        title=module.TITLE,
        input_path=input_path,
        input_sha256=sha256_text(text),
        answers=answers,
        elapsed_us=elapsed_us,
    )


def run_solve(
    day: int,
    input_path: Path,
    parts: Sequence[int] = PARTS,
    receipts_path: Optional[Path] = None,
    expected: Optional[Dict[int, List[Optional[int]]]] = None,
) -> Dict[str, Any]:
    """Solve mode: one day, one input, optional receipt and triage."""
    try:
        receipt = run_day(day, input_path, parts)
    except ValueError as exc:
        logging.error(f"Day {day} failed: {exc}")
        raise SystemExit(1)

    if expected is not None:
        receipt["triage"] = triage(receipt, expected.get(day))
        logging.info(f"Day {day} triage: {receipt['triage']['status']}")

    if receipts_path:
        write_jsonl(receipts_path, [receipt])
    return receipt


def run_all(
    inputs_dir: Path,
    parts: Sequence[int] = PARTS,
    receipts_path: Optional[Path] = None,
    expected: Optional[Dict[int, List[Optional[int]]]] = None,
) -> List[Dict[str, Any]]:
    """
    All mode: every day whose input file exists in inputs_dir.

    A failing day is logged and skipped; the process exits with status 1
    after the remaining days ran and the receipts were written.
    """
    receipts: List[Dict[str, Any]] = []
    missing: List[int] = []
    failed: List[int] = []
    counts = {"MATCH": 0, "MISMATCH": 0, "SKIPPED": 0}

    for day in sorted(DAYS):
        input_path = inputs_dir / input_name(day)
        if not input_path.exists():
            missing.append(day)
            continue
        try:
            receipt = run_day(day, input_path, parts)
        except ValueError as exc:
            logging.error(f"Day {day} failed: {exc}")
            failed.append(day)
            continue

        if expected is not None:
            receipt["triage"] = triage(receipt, expected.get(day))
            counts[receipt["triage"]["status"]] += 1
        receipts.append(receipt)

    if receipts_path:
        write_jsonl(receipts_path, receipts)

    total_us = sum(r["elapsed_us"] for r in receipts)
    logging.info("=" * 60)
    logging.info("Advent of Code 2020 Summary")
    logging.info("=" * 60)
    logging.info(f"Days solved: {len(receipts)}")
    logging.info(f"Days without input: {missing}")
    logging.info(f"Days failed: {failed}")
    if expected is not None:
        logging.info(
            f"Triage: {counts['MATCH']} MATCH, {counts['MISMATCH']} MISMATCH, "
            f"{counts['SKIPPED']} SKIPPED"
        )
    logging.info(f"Total elapsed: {total_us} us")
    if receipts_path:
        logging.info(f"Receipts written to: {receipts_path}")
    logging.info("=" * 60)

    if failed:
        raise SystemExit(1)
    return receipts


def run_audit(day: int, receipts_path: Path) -> None:
    """Audit mode - print receipt for given day."""
    receipt = find_receipt(receipts_path, day)
    if receipt is None:
        logging.error(f"Day {day} not found in receipts")
        return
    print(json.dumps(receipt, indent=2, sort_keys=True))


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point with argparse."""
    parser = argparse.ArgumentParser(
        description="Advent of Code 2020 solvers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--mode",
        type=str,
        required=True,
        choices=["solve", "all", "audit"],
        help="solve (one day), all (every day with an input file) or audit (print a stored receipt)",
    )

    parser.add_argument(
        "--day",
        type=int,
        choices=sorted(DAYS),
        help="Puzzle day (solve and audit modes)",
    )

    parser.add_argument(
        "--input",
        type=Path,
        help="Puzzle input file (solve mode)",
    )

    parser.add_argument(
        "--inputs",
        type=Path,
        help="Directory holding dayNN.txt input files (all mode)",
    )

    parser.add_argument(
        "--part",
        type=int,
        choices=list(PARTS),
        help="Run only this part (default: both)",
    )

    parser.add_argument(
        "--receipts",
        type=Path,
        help="Output path for receipts JSONL (solve/all modes) or input (audit mode)",
    )

    parser.add_argument(
        "--expected",
        type=Path,
        help="JSON file of expected answers {\"day\": [part1, part2]} for triage",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(message)s",
    )

    parts = (args.part,) if args.part else PARTS

    expected = None
    if args.expected:
        if not args.expected.exists():
            logging.error(f"Expected answers file not found: {args.expected}")
            raise SystemExit(1)
        expected = load_expected(args.expected)

    if args.mode in ("solve", "audit") and args.day is None:
        logging.error(f"--day is required for {args.mode} mode")
        raise SystemExit(1)

    if args.mode == "solve":
        if not args.input or not args.input.exists():
            logging.error(f"Input file not found or not specified: {args.input}")
            raise SystemExit(1)
        run_solve(
            day=args.day,
            input_path=args.input,
            parts=parts,
            receipts_path=args.receipts,
            expected=expected,
        )

    elif args.mode == "all":
        if not args.inputs or not args.inputs.is_dir():
            logging.error(f"Inputs directory not found or not specified: {args.inputs}")
            raise SystemExit(1)
        run_all(
            inputs_dir=args.inputs,
            parts=parts,
            receipts_path=args.receipts,
            expected=expected,
        )

    elif args.mode == "audit":
        if not args.receipts or not args.receipts.exists():
            logging.error(f"Receipts file not found or not specified: {args.receipts}")
            raise SystemExit(1)
        run_audit(
            day=args.day,
            receipts_path=args.receipts,
        )


if __name__ == "__main__":
    main()
