"""
Regex extraction of Form 4 entries from the EDGAR Atom feed.

The feed is read as plain text rather than through an XML parser: each
``<entry>`` block is located by pattern and its fields are pulled out one tag
at a time. Anything that does not match comes back as an empty string, so a
change in the feed layout produces blank fields instead of an exception.
"""

import re
from typing import Iterator

from sec_insider.models import Filing

ENTRY_RE = re.compile(r"<entry>([\s\S]*?)</entry>")
CDATA_RE = re.compile(r"<!\[CDATA\[([\s\S]*?)\]\]>")

# "4 - Doe John (0001234567) (Reporting)"
TITLE_RE = re.compile(r"^(\S+)\s*-\s*(.+?)\s*\((\d+)\)\s*\((Reporting|Filer)\)")

# The summary is HTML inside XML, so the closing </b> usually arrives escaped.
SUMMARY_ACCESSION_RE = re.compile(r"AccNo:(?:</b>|&lt;/b&gt;)\s*(\d+-\d+-\d+)")
LINK_ACCESSION_RE = re.compile(r"/(\d+-\d+-\d+)-index\.htm")

FORM_TYPE = "4"
FILER_TYPE = "Reporting"


def extract_tag(xml: str, tag: str) -> str:
    """Return the stripped text of the first ``<tag>`` element, or ''."""
    pattern = re.compile(rf"<{tag}[^>]*>([\s\S]*?)</{tag}>", re.IGNORECASE)
    match = pattern.search(xml)
    if not match:
        return ""
    return CDATA_RE.sub(r"\1", match.group(1), count=1).strip()


def extract_attribute(xml: str, tag: str, attr: str) -> str:
    """Return the value of ``attr`` on the first ``<tag>`` element, or ''."""
    pattern = re.compile(rf"<{tag}[^>]*{attr}=[\"']([^\"']+)[\"']", re.IGNORECASE)
    match = pattern.search(xml)
    return match.group(1) if match else ""


def iter_entries(xml: str) -> Iterator[str]:
    """Yield the inner text of every ``<entry>`` block in document order."""
    for match in ENTRY_RE.finditer(xml):
        yield match.group(1)


def parse_title(title: str) -> tuple[str, str, str, str]:
    """
    Split an entry title into its parts.

    Returns:
        Tuple of (form_type, company, cik, filer_type). When the title does not
        follow the usual layout, the whole title is used as the company name.
    """
    match = TITLE_RE.match(title)
    if not match:
        return "", title, "", ""
    form_type, company, cik, filer_type = match.groups()
    return form_type.strip(), company.strip(), cik, filer_type


def extract_accession(summary: str, link: str) -> str:
    """Find the accession number in the summary, falling back to the link."""
    match = SUMMARY_ACCESSION_RE.search(summary) or LINK_ACCESSION_RE.search(link)
    return match.group(1) if match else ""


def parse_entry(entry_xml: str) -> Filing:
    """Build a Filing from the contents of one ``<entry>`` block."""
    title = extract_tag(entry_xml, "title")
    summary = extract_tag(entry_xml, "summary")
    link = extract_attribute(entry_xml, "link", "href")
    updated = extract_tag(entry_xml, "updated")

    form_type, company, cik, filer_type = parse_title(title)

    return Filing(
        company=company,
        cik=cik,
        accession=extract_accession(summary, link),
        form_type=form_type,
        filer_type=filer_type,
        summary=summary,
        link=link,
        updated=updated,
    )


def parse_feed(xml: str) -> list[Filing]:
    """
    Parse a feed document into Form 4 filings.

    Every filing appears twice in the feed, once under the reporting owner and
    once under the issuer; only the reporting-owner entries are kept.
    """
    filings: list[Filing] = []
    for entry_xml in iter_entries(xml):
        filing = parse_entry(entry_xml)
        if filing.form_type == FORM_TYPE and filing.filer_type == FILER_TYPE:
            filings.append(filing)
    return filings
