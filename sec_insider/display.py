"""
Fixed-width table output for filings.
"""

from rich.console import Console

from sec_insider.models import Filing

COLUMNS = ["Company", "CIK", "Accession", "Updated"]
COLUMN_WIDTHS = [40, 12, 22, 25]
SEPARATOR = "=" * 105
EMPTY_MESSAGE = "No filings found matching criteria."


def truncate(text: str, max_len: int) -> str:
    """Shorten text to max_len characters, ending in '...' when cut."""
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."


def format_row(columns: list, widths: list[int]) -> str:
    """Pad or cut each column to its width and join them with ' | '."""
    return " | ".join(
        str(col).ljust(width)[:width] for col, width in zip(columns, widths)
    )


def render_table(filings: list[Filing]) -> list[str]:
    """Render filings as table lines, or a single message when there are none."""
    if not filings:
        return [EMPTY_MESSAGE]

    lines = ["", SEPARATOR, format_row(COLUMNS, COLUMN_WIDTHS), SEPARATOR]
    for filing in filings:
        row = [
            truncate(filing.company, COLUMN_WIDTHS[0]),
            filing.cik,
            filing.accession,
            filing.updated_display,
        ]
        lines.append(format_row(row, COLUMN_WIDTHS))
    lines.extend([SEPARATOR, "", f"Total filings: {len(filings)}", ""])
    return lines


def display_table(filings: list[Filing], console: Console) -> None:
    """Print the rendered table without rich markup or line wrapping."""
    for line in render_table(filings):
        console.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)
