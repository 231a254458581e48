"""Release date parsing and US-style formatting.

Hey future me - Spotify hands us release dates in a few ISO shapes depending on where
they come from:
- "1987-11-12"                (JSON-LD datePublished, releaseDate.isoString)
- "1987-11-12T00:00:00Z"      (full timestamps on some embed payloads)
- "1987" / "1987-11"          (releases with year/month precision)

We always render the CALENDAR date that was written, never shifted through a local
timezone. Missing or unparseable input gives None - we never emit "Invalid Date".
"""

import re
from datetime import date, datetime

# Year-only or year-month precision, which datetime.fromisoformat rejects.
_PARTIAL_DATE_RE = re.compile(r"^(\d{4})(?:-(\d{1,2}))?$")


def parse_release_date(value: str | None) -> date | None:
    """Parse an ISO-ish release date string into a calendar date.

    Args:
        value: Date string from Spotify, or None

    Returns:
        Parsed date, or None if value is empty or not a recognizable date
    """
    if value is None:
        return None
    text = value.strip()
    if not text:
        return None

    partial = _PARTIAL_DATE_RE.match(text)
    if partial:
        year = int(partial.group(1))
        month = int(partial.group(2) or 1)
        try:
            return date(year, month, 1)
        except ValueError:
            return None

    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def format_release_date(value: str | None) -> str | None:
    """Reformat a release date as MM/DD/YYYY.

    Example:
        format_release_date("1987-11-12")  # -> "11/12/1987"
        format_release_date(None)          # -> None
    """
    parsed = parse_release_date(value)
    if parsed is None:
        return None
    return f"{parsed.month:02d}/{parsed.day:02d}/{parsed.year:04d}"
