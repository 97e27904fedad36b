"""Filtering of parsed filings by company name and transaction value."""

from sec_insider.models import Filing, FilterOptions


def filter_filings(filings: list[Filing], options: FilterOptions) -> list[Filing]:
    """
    Return the filings that satisfy every option that is set.

    The ticker is matched as a case-insensitive substring of the company name,
    since the feed does not carry ticker symbols.
    """
    filtered = list(filings)

    if options.ticker:
        ticker = options.ticker.upper()
        filtered = [f for f in filtered if ticker in f.company.upper()]

    if options.min_value:
        filtered = [f for f in filtered if f.value >= options.min_value]

    return filtered
