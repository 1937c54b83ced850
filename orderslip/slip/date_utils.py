"""Date helpers for order-slip parsing."""

import re
from datetime import date

MONTHS = {
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "may": 5,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}

_MONTH_NAME = r"\b(jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[a-z]*\.?"
_ORDINAL = r"(?:st|nd|rd|th)?"

YEAR_PATTERN = re.compile(r"\b(\d{4})\b")
ISO_DATE_PATTERN = re.compile(r"\b(\d{4})[./-](\d{1,2})[./-](\d{1,2})\b")
# "10-11 am" on a date line is a time range, not October 11
NUMERIC_DATE_PATTERN = re.compile(r"\b(\d{1,2})[/-](\d{1,2})(?:[/-](\d{4}|\d{2}))?\b(?!\s*[ap]m)", re.IGNORECASE)
MONTH_DAY_PATTERN = re.compile(
    _MONTH_NAME + r"\s*(\d{1,2})" + _ORDINAL + r"\b(?!\s*(?:[-:.]\d|[ap]m))",
    re.IGNORECASE,
)
DAY_MONTH_PATTERN = re.compile(r"\b(\d{1,2})" + _ORDINAL + r"\s+(?:of\s+)?" + _MONTH_NAME, re.IGNORECASE)


def ensure_year(text: str, today: date | None = None) -> str:
    """Append the current year when the text carries no 4-digit year."""
    if re.search(r"\d{4}", text):
        return text
    year = (today or date.today()).year
    return f"{text} {year}".strip()


def _safe_date(year: int, month: int, day: int) -> date | None:
    try:
        return date(year, month, day)
    except ValueError:
        return None


def parse_slip_date(text: str, today: date | None = None) -> date | None:
    """
    Parse the value of a slip "Date:" line.

    Supported shapes, with or without a year (the current year is assumed):
    - 2026-10-20
    - 10/20, 10/20/26, 10-20-2026 (month first)
    - Oct 20, October 20th, Tue Oct. 20
    - 20 Oct, 20th of October

    Month names are tried before numeric forms, and a numeric pair followed
    by am/pm is read as a time, so "Oct 20, 10-11 am" stays on October 20.

    Returns:
        The date, or None when nothing parses to a real calendar day
    """
    if not text or not text.strip():
        return None
    full = ensure_year(text.strip(), today)

    iso = ISO_DATE_PATTERN.search(full)
    if iso:
        return _safe_date(int(iso.group(1)), int(iso.group(2)), int(iso.group(3)))

    year_match = YEAR_PATTERN.search(full)
    year = int(year_match.group(1)) if year_match else (today or date.today()).year

    month_day = MONTH_DAY_PATTERN.search(full)
    if month_day:
        return _safe_date(year, MONTHS[month_day.group(1).lower()], int(month_day.group(2)))

    day_month = DAY_MONTH_PATTERN.search(full)
    if day_month:
        return _safe_date(year, MONTHS[day_month.group(2).lower()], int(day_month.group(1)))

    numeric = NUMERIC_DATE_PATTERN.search(full)
    if numeric:
        month, day = int(numeric.group(1)), int(numeric.group(2))
        if numeric.group(3):
            year = int(numeric.group(3))
            if year < 100:
                year += 2000
        return _safe_date(year, month, day)

    return None
