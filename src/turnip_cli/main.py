"""
Main CLI Module for Turnip Pattern Analysis

Provides the command-line interface to the analysis engine.

Commands:
- analyze: Pattern probabilities for one week of observed prices
- batch: Analyse every week in a CSV file

Specifying last week's pattern improves accuracy, since the previous
pattern affects the chance of the next one.

Example:
    turnip-calc analyze --last-week smallspike 90 55 52 ? 43
"""

import argparse
import logging
import sys
from typing import List, Optional

from turnip_analysis import (
    InconsistentObservationsError,
    InvalidInputError,
    Pattern,
    compute,
    compute_checkpoints,
)
from turnip_analysis.batch import analyze_csv
from turnip_analysis.constants import HALF_DAYS_PER_WEEK

MISSING_PRICE = "?"

EXIT_OK = 0
EXIT_INCONSISTENT = 1
EXIT_INVALID = 2

NO_MATCH_MESSAGE = (
    "These prices did not match any known pattern. Either your numbers are "
    "wrong, or there is a bug."
)


def parse_price(value: str) -> Optional[int]:
    """argparse type for a price: a non-negative integer or '?'."""
    if value == MISSING_PRICE:
        return None
    try:
        price = int(value)
    except ValueError:
        price = -1
    if price < 0:
        raise argparse.ArgumentTypeError(
            f"'{value}' should be a non-negative integer or the character '?'"
        )
    return price


def parse_pattern(value: str) -> Pattern:
    try:
        return Pattern.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def format_results(results) -> List[str]:
    """Result lines for the patterns still possible."""
    lines = ["Analysis:"]
    for result in results:
        if result.probability > 0:
            lines.append(f"{result.pattern.display_name}: {result.percent:.0f}%")
    return lines


def run_analyze_command(args) -> int:
    """Print pattern probabilities for one week."""
    logger = logging.getLogger(__name__)
    prices = args.prices or []
    if len(prices) > HALF_DAYS_PER_WEEK:
        print(f"Error: at most {HALF_DAYS_PER_WEEK} prices can be given")
        return EXIT_INVALID

    try:
        if args.steps:
            checkpoints = compute_checkpoints(args.base_price, prices, args.last_week)
            for cp in checkpoints:
                label = MISSING_PRICE if cp.price is None else cp.price
                if not cp.consistent:
                    print(f"Step {cp.step} ({label}): no match")
                    continue
                summary = ", ".join(
                    f"{r.pattern.display_name} {r.percent:.0f}%"
                    for r in cp.results if r.probability > 0
                )
                print(f"Step {cp.step} ({label}): {summary}")
        results = compute(args.base_price, prices, args.last_week, debug=args.debug)
    except InvalidInputError as e:
        logger.debug(f"Invalid input: {e}")
        print(f"Error: {e}")
        return EXIT_INVALID
    except InconsistentObservationsError as e:
        logger.debug(str(e))
        print(NO_MATCH_MESSAGE)
        return EXIT_INCONSISTENT

    for line in format_results(results):
        print(line)
    return EXIT_OK


def run_batch_command(args) -> int:
    """Analyse a CSV of weeks."""
    try:
        combined = analyze_csv(args.input, args.output)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return EXIT_INVALID

    if args.output:
        print(f"Results for {len(combined)} weeks written to {args.output}")
    else:
        print(combined.to_string())
    return EXIT_OK


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="turnip-calc",
        description="Calculate the chance of each turnip price pattern from observed prices.",
        epilog=(
            "In theory this tool lists precisely the remaining possible patterns, "
            "with the most accurate estimate of probability one can calculate, "
            "assuming the reverse-engineered turnip mechanics are accurate."
        ),
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Analyze command
    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Pattern probabilities for one week",
        description="Pattern probabilities for one week. Missed prices can be replaced with '?'.",
    )
    analyze_parser.add_argument(
        "base_price",
        type=int,
        help="The price you bought turnips for"
    )
    analyze_parser.add_argument(
        "prices",
        nargs="*",
        type=parse_price,
        help="The sell prices observed so far, in order ('?' for a missed price)"
    )
    analyze_parser.add_argument(
        "-l", "--last-week",
        type=parse_pattern,
        default=None,
        help="Last week's pattern: " + ", ".join(p.value for p in Pattern)
    )
    analyze_parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Enable debug dumps of the remaining hypotheses"
    )
    analyze_parser.add_argument(
        "--steps",
        action="store_true",
        help="Also print the probabilities after each observed price"
    )

    # Batch command
    batch_parser = subparsers.add_parser(
        "batch",
        help="Analyse every week in a CSV file",
        description=(
            "CSV columns: base_price, optional previous_pattern, and "
            "mon_am .. sat_pm (empty or '?' for missed prices)."
        ),
    )
    batch_parser.add_argument(
        "input",
        help="Input CSV file"
    )
    batch_parser.add_argument(
        "-o", "--output",
        help="Write results to this CSV instead of printing them"
    )
    batch_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_INVALID

    debug = getattr(args, "debug", False)
    verbose = getattr(args, "verbose", False)
    logging.basicConfig(
        level=logging.DEBUG if debug else (logging.INFO if verbose else logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if args.command == "analyze":
        return run_analyze_command(args)
    if args.command == "batch":
        return run_batch_command(args)

    parser.print_help()
    return EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
