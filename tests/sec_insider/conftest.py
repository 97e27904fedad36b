"""Shared fixtures for sec_insider tests."""

from unittest.mock import Mock

import pytest

from sec_insider.models import Filing


SAMPLE_FEED = """<?xml version="1.0" encoding="ISO-8859-1" ?>
<feed xmlns="http://www.w3.org/2005/Atom">
<title>Latest Filings - Tue, 02 Jan 2024 16:06:00 EST</title>
<link rel="alternate" href="/cgi-bin/browse-edgar?action=getcurrent"/>
<updated>2024-01-02T16:06:00-05:00</updated>
<entry>
<title>4 - Cook Timothy D (0001214156) (Reporting)</title>
<link rel="alternate" type="text/html" href="https://www.sec.gov/Archives/edgar/data/1214156/000032019324000001/0000320193-24-000001-index.htm"/>
<summary type="html"> &lt;b&gt;Filed:&lt;/b&gt; 2024-01-02 &lt;b&gt;AccNo:&lt;/b&gt; 0000320193-24-000001 &lt;b&gt;Size:&lt;/b&gt; 5 KB</summary>
<updated>2024-01-02T16:05:11-05:00</updated>
<category scheme="https://www.sec.gov/" label="form type" term="4"/>
<id>urn:tag:sec.gov,2008:accession-number=0000320193-24-000001</id>
</entry>
<entry>
<title>4 - Apple Inc. (0000320193) (Issuer)</title>
<link rel="alternate" type="text/html" href="https://www.sec.gov/Archives/edgar/data/320193/000032019324000001/0000320193-24-000001-index.htm"/>
<summary type="html"> &lt;b&gt;Filed:&lt;/b&gt; 2024-01-02 &lt;b&gt;AccNo:&lt;/b&gt; 0000320193-24-000001 &lt;b&gt;Size:&lt;/b&gt; 5 KB</summary>
<updated>2024-01-02T16:05:11-05:00</updated>
</entry>
<entry>
<title>4 - Musk Elon (0001494730) (Reporting)</title>
<link rel="alternate" type="text/html" href='https://www.sec.gov/Archives/edgar/data/1494730/000110465924000002/'/>
<summary type="html"><![CDATA[<b>Filed:</b> 2024-01-03 <b>AccNo:</b> 0001104659-24-000002]]></summary>
<updated>2024-01-03T09:30:00-05:00</updated>
</entry>
<entry>
<title>4/A - Doe Jane (0009999999) (Reporting)</title>
<link rel="alternate" type="text/html" href="https://www.sec.gov/Archives/edgar/data/9999999/000999999924000003/0009999999-24-000003-index.htm"/>
<summary type="html">Amended</summary>
<updated>2024-01-03T10:00:00-05:00</updated>
</entry>
<entry>
<title>not a filing title</title>
</entry>
</feed>
"""


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's SEC_* settings out of the tests."""
    monkeypatch.delenv("SEC_USER_AGENT", raising=False)
    monkeypatch.delenv("SEC_TIMEOUT", raising=False)


@pytest.fixture
def sample_feed() -> str:
    """A small Atom feed covering the entry layouts seen on EDGAR."""
    return SAMPLE_FEED


def make_filing(
    company: str = "Cook Timothy D",
    cik: str = "0001214156",
    accession: str = "0000320193-24-000001",
    updated: str = "2024-01-02T16:05:11-05:00",
    value: float = 0,
) -> Filing:
    """Create a Filing with sensible defaults for testing."""
    return Filing(
        company=company,
        cik=cik,
        accession=accession,
        form_type="4",
        filer_type="Reporting",
        summary="",
        link=f"https://www.sec.gov/Archives/edgar/data/{cik}/{accession}-index.htm",
        updated=updated,
        value=value,
    )


@pytest.fixture
def filings() -> list[Filing]:
    """A handful of filings for filter and display tests."""
    return [
        make_filing(),
        make_filing(company="APPLE INC", cik="0000320193", accession="0000320193-24-000002"),
        make_filing(company="Tesla, Inc.", cik="0001318605", accession="0001318605-24-000003"),
    ]


def mock_response(text: str = "", status_code: int = 200, reason: str = "OK") -> Mock:
    """Create a mock requests.Response."""
    response = Mock()
    response.text = text
    response.status_code = status_code
    response.reason = reason
    return response
