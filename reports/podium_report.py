"""Print the podium for a block of biathlon result records.

Usage (from repo root):
    python -m reports.podium_report --results-path results.csv
    cat results.csv | python -m reports.podium_report --strict-shots
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from standings.ranking.podium import compute_podium
from standings.records.athlete import Athlete
from standings.records.timing import format_minutes


def _read_input(results_path: str | None) -> str:
    if results_path is None:
        return sys.stdin.read()
    path = Path(results_path)
    return path.read_text(encoding="utf-8")


def _format_rows(athletes: list[Athlete]) -> tuple[list[str], list[list[str]], list[int]]:
    headers = [
        "rank",
        "number",
        "name",
        "country",
        "ski_time",
        "penalty_s",
        "final_time",
    ]
    rows = [
        [
            str(idx),
            str(athlete.athlete_number),
            athlete.athlete_name,
            athlete.country_code,
            format_minutes(athlete.ski_time_minutes),
            str(athlete.total_shooting_penalty),
            format_minutes(athlete.final_time_minutes),
        ]
        for idx, athlete in enumerate(athletes, start=1)
    ]

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))
    return headers, rows, widths


def _print_podium(athletes: list[Athlete]) -> None:
    headers, rows, widths = _format_rows(athletes)

    def fmt_row(cells: list[str]) -> str:
        return " | ".join(cell.ljust(widths[i]) for i, cell in enumerate(cells))

    print("Podium")
    print(fmt_row(headers))
    print("-+-".join("-" * w for w in widths))
    for row in rows:
        print(fmt_row(row))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Rank biathlon results and print the top three.")
    parser.add_argument("--results-path", type=str, default=None)
    parser.add_argument(
        "--strict-shots",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Reject shot symbols other than 'x' (hit) and 'o' (miss) (default: False).",
    )
    parser.add_argument("--verbose", action="store_true", help="Log per-record debug output.")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    text = _read_input(args.results_path)
    outcome = compute_podium(text, strict_shots=args.strict_shots)
    if not outcome.ok:
        print(f"ERROR: {outcome.error}", file=sys.stderr)
        return 1

    _print_podium(outcome.unwrap())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
