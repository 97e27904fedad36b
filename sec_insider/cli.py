"""
Command-line interface for tracking SEC Form 4 insider filings.

Usage:
    uv run python -m sec_insider
    uv run python -m sec_insider --ticker AAPL
    uv run sec-insider --min-value 100000
"""

import argparse
import sys

from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from sec_insider.config import BROWSE_URL, DEFAULT_COUNT, FeedSettings
from sec_insider.display import display_table
from sec_insider.feed import FeedClient, FeedFetchError
from sec_insider.filters import filter_filings
from sec_insider.models import FilterOptions


console = Console()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sec-insider",
        description="sec-insider - Track SEC Form 4 insider trading filings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  sec-insider
  sec-insider --ticker AAPL
  sec-insider --min-value 100000
  sec-insider --ticker TSLA --min-value 500000
        """,
    )
    parser.add_argument(
        "--ticker",
        "-t",
        help="Filter by company ticker symbol (matched against the company name)",
    )
    parser.add_argument(
        "--min-value",
        type=int,
        metavar="AMOUNT",
        help="Filter by minimum transaction value in whole dollars (integer)",
    )
    parser.add_argument(
        "--count",
        "-c",
        type=int,
        default=DEFAULT_COUNT,
        help=f"Number of feed entries to request (default: {DEFAULT_COUNT})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the insider filings CLI."""
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)
    if args.count < 1:
        parser.error("--count must be a positive integer")

    try:
        settings = FeedSettings.from_env(count=args.count)
    except ValueError as e:
        console.print(f"[red]Configuration error: {escape(str(e))}[/red]", emoji=False)
        sys.exit(1)

    console.print("Fetching recent Form 4 filings from SEC EDGAR...\n", highlight=False)

    client = FeedClient(settings, verbose=args.verbose)
    try:
        filings = client.fetch_filings()
    except FeedFetchError as e:
        console.print(f"[red]Error fetching filings: {escape(str(e))}[/red]", emoji=False)
        sys.exit(1)

    options = FilterOptions(ticker=args.ticker, min_value=args.min_value)
    filtered = filter_filings(filings, options)
    display_table(filtered, console)

    console.print(
        f"View filing details at: {BROWSE_URL}\n",
        markup=False,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )


if __name__ == "__main__":
    main()
