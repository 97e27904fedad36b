"""
Data models for SEC insider filings.

These models describe a single Form 4 entry taken from the EDGAR
current-filings feed and the filters applied to a batch of them.
"""

from dataclasses import asdict, dataclass


@dataclass
class Filing:
    """A Form 4 filing as listed in the EDGAR Atom feed."""

    company: str
    cik: str
    accession: str
    form_type: str
    filer_type: str
    summary: str
    link: str
    updated: str
    # Transaction details live in the filing document itself, not the feed.
    insider: str | None = None
    insider_title: str | None = None
    transaction_type: str | None = None
    shares: float | None = None
    price: float | None = None
    value: float = 0

    @property
    def updated_display(self) -> str:
        """Timestamp trimmed to seconds, e.g. '2024-01-02 16:05:11'."""
        return self.updated[:19].replace("T", " ", 1)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return asdict(self)


@dataclass
class FilterOptions:
    """Criteria used to narrow down a list of filings."""

    ticker: str | None = None
    min_value: int | None = None
