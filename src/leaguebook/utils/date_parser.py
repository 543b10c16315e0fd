"""Date parsing utilities."""

import re
from datetime import date, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

MONTH_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - ISO dates: "2024-01-15"
    - Day-first dates: "15/01/24", "15/01/2024"
    - Relative dates: "today", "yesterday", "tomorrow"
    - Other absolute dates: "January 15, 2024", etc.

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        return date.fromisoformat(date_str)
    except ValueError:
        pass

    # Slashes are read day first, like the league's paper records
    day_first = "/" in date_str
    try:
        dt = date_parser.parse(date_str, dayfirst=day_first)
        return dt.date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_month(month_str: str) -> str:
    """Parse a month into its "YYYY-MM" form.

    Supports:
    - "2024-03"
    - "03/2024"
    - "this-month" / "this month", "last-month" / "last month"

    Args:
        month_str: Month string

    Returns:
        Month as "YYYY-MM"

    Raises:
        ValueError: If month string cannot be parsed
    """
    month_str = month_str.strip().lower().replace(" ", "-")
    today = date.today()

    if month_str == "this-month":
        return today.strftime("%Y-%m")
    if month_str == "last-month":
        return (today - relativedelta(months=1)).strftime("%Y-%m")

    if "/" in month_str:
        parts = month_str.split("/")
        if len(parts) == 2 and parts[0].isdigit() and parts[1].isdigit():
            month_str = f"{int(parts[1]):04d}-{int(parts[0]):02d}"

    match = MONTH_PATTERN.match(month_str)
    if match is None or not 1 <= int(match.group(2)) <= 12:
        raise ValueError(f"Could not parse month '{month_str}'. Use YYYY-MM.")
    return month_str
