"""
SEC insider filing tracker.

Polls the EDGAR current-filings feed for Form 4 filings, extracts the entries
with regular expressions, filters them and prints a text table.
"""

from sec_insider.feed import FeedClient, FeedFetchError
from sec_insider.filters import filter_filings
from sec_insider.models import Filing, FilterOptions
from sec_insider.parser import parse_feed

__all__ = [
    "FeedClient",
    "FeedFetchError",
    "Filing",
    "FilterOptions",
    "filter_filings",
    "parse_feed",
]
