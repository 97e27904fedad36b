"""
Configuration for the EDGAR current-filings feed.

Settings are read from the environment. The CLI calls ``load_dotenv()`` first,
so values may also come from a ``.env`` file in the working directory.
"""

import os
from dataclasses import dataclass

# SEC requires a descriptive User-Agent on every request
DEFAULT_USER_AGENT = "sec-insider-cli/1.0 (contact@example.com)"
DEFAULT_TIMEOUT = 30.0
DEFAULT_COUNT = 100

SEC_RSS_URL_TEMPLATE = (
    "https://www.sec.gov/cgi-bin/browse-edgar"
    "?action=getcurrent&type=4&dateb=&owner=include&count={count}&output=atom"
)
BROWSE_URL = "https://www.sec.gov/cgi-bin/browse-edgar?action=getcurrent&type=4&owner=include"


@dataclass
class FeedSettings:
    """Request settings for the Form 4 Atom feed."""

    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = DEFAULT_TIMEOUT
    count: int = DEFAULT_COUNT

    @classmethod
    def from_env(cls, count: int = DEFAULT_COUNT) -> "FeedSettings":
        """
        Build settings from SEC_USER_AGENT and SEC_TIMEOUT.

        Args:
            count: Number of feed entries to request

        Raises:
            ValueError: If SEC_TIMEOUT is set but is not a number
        """
        user_agent = os.environ.get("SEC_USER_AGENT", "").strip() or DEFAULT_USER_AGENT

        raw_timeout = os.environ.get("SEC_TIMEOUT", "").strip()
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ValueError(
                    f"SEC_TIMEOUT must be a number of seconds, got {raw_timeout!r}"
                ) from None
        else:
            timeout = DEFAULT_TIMEOUT

        return cls(user_agent=user_agent, timeout=timeout, count=count)

    @property
    def feed_url(self) -> str:
        return SEC_RSS_URL_TEMPLATE.format(count=self.count)

    @property
    def headers(self) -> dict[str, str]:
        return {
            "User-Agent": self.user_agent,
            "Accept": "application/atom+xml",
        }
