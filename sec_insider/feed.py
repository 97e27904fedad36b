"""
Client for the EDGAR current-filings Atom feed.

Makes a single GET request per call and hands the body to the parser. There
is no retry: any failure is raised as FeedFetchError for the caller to report.
"""

import requests

from sec_insider.config import FeedSettings
from sec_insider.models import Filing
from sec_insider.parser import parse_feed


class FeedFetchError(Exception):
    """Raised when the feed cannot be retrieved."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class FeedClient:
    """
    Fetches recent Form 4 filings from SEC EDGAR.

    The SEC rejects requests without an identifying User-Agent, which is taken
    from the settings (SEC_USER_AGENT when built from the environment).
    """

    def __init__(self, settings: FeedSettings | None = None, verbose: bool = False):
        """
        Initialize the feed client.

        Args:
            settings: Request settings; defaults are used when omitted
            verbose: Whether to print progress messages
        """
        self.settings = settings or FeedSettings()
        self.verbose = verbose

    def _log(self, message: str) -> None:
        """Print a message if verbose mode is enabled."""
        if self.verbose:
            print(message)

    def fetch(self) -> str:
        """
        Download the raw feed document.

        Returns:
            Feed body as text

        Raises:
            FeedFetchError: On a network error or a non-2xx response
        """
        url = self.settings.feed_url
        self._log(f"GET {url}")

        try:
            response = requests.get(
                url,
                headers=self.settings.headers,
                timeout=self.settings.timeout,
            )
        except requests.RequestException as e:
            raise FeedFetchError(str(e)) from e

        if not 200 <= response.status_code < 300:
            raise FeedFetchError(
                f"SEC API returned {response.status_code}: {response.reason}",
                status_code=response.status_code,
            )

        self._log(f"Received {len(response.text)} characters")
        return response.text

    def fetch_filings(self) -> list[Filing]:
        """Fetch the feed and parse it into Form 4 filings."""
        filings = parse_feed(self.fetch())
        self._log(f"Parsed {len(filings)} Form 4 filings")
        return filings
