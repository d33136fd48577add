"""
Holiday Loader
==============
Parses the flat holidays file into Holiday records.

Every line has the shape:

  <Mandatory|Floating> holiday for <Name> on <Weekday>, <d-MMM-yyyy> in <City>

e.g. "Mandatory holiday for Republic Day on Monday, 15-Jan-2024 in Bangalore"

  • lines that don't match are skipped
  • lines whose date isn't a real calendar date are skipped with a warning
  • holidays falling on Saturday or Sunday are dropped

The file is read from scratch on every call, nothing is cached.
"""

import logging
import os
import re
from datetime import date
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from app.models.schemas import Holiday, HolidayType

logger = logging.getLogger(__name__)

HOLIDAYS_FILE = Path(os.getenv("HOLIDAYS_FILE_PATH", "data/bangalore_holidays.log"))

# type, name, weekday word (unused), date, city
LINE_PATTERN = re.compile(
    r"(Mandatory|Floating) holiday for (.+?) on (\w+), (\d{1,2}-[A-Za-z]{3}-\d{4}) in (.+)",
    re.ASCII,
)

MONTHS = {
    "Jan": 1, "Feb": 2, "Mar": 3, "Apr": 4,  "May": 5,  "Jun": 6,
    "Jul": 7, "Aug": 8, "Sep": 9, "Oct": 10, "Nov": 11, "Dec": 12,
}

TYPES = {
    "Mandatory": HolidayType.MANDATORY,
    "Floating":  HolidayType.FLOATING,
}


def get_holidays_file() -> Path:
    """FastAPI dependency: path of the configured holidays file."""
    return HOLIDAYS_FILE


def parse_date(token: str) -> date:
    """
    Parse a d-MMM-yyyy token such as "15-Jan-2024".
    Month abbreviations are English and case-sensitive, independent of locale.
    Raises ValueError for anything that isn't a real calendar date.
    """
    day, month, year = token.split("-")
    if month not in MONTHS:
        raise ValueError(f"Unknown month abbreviation '{month}'")
    return date(int(year), MONTHS[month], int(day))


def parse_line(line: str) -> Optional[Holiday]:
    """Parse one line of the holidays file. Returns None if it doesn't match."""
    stripped = line.strip()
    match = LINE_PATTERN.fullmatch(stripped)
    if not match:
        return None

    type_token, name, _weekday, date_token, city = match.groups()
    name = name.strip()
    if not name:
        logger.debug(f"Skipping line with blank holiday name: {stripped!r}")
        return None

    try:
        holiday_date = parse_date(date_token)
    except ValueError as exc:
        logger.warning(f"Skipping line with invalid date '{date_token}': {exc}")
        return None

    return Holiday(
        name=name,
        date=holiday_date,
        city=city.strip(),
        type=TYPES[type_token],
    )


def iter_holidays(lines: Iterable[str]) -> Iterator[Holiday]:
    """Lazily parse lines, skipping unparseable ones and weekend holidays."""
    for line in lines:
        holiday = parse_line(line)
        if holiday is None or holiday.day_of_week.is_weekend:
            continue
        yield holiday


def load_holidays(path: Path) -> List[Holiday]:
    """
    Load all weekday holidays from `path`, in file order.
    OSError (missing file, no permission, ...) is raised to the caller as is.
    """
    with open(path, "r", encoding="utf-8") as f:
        holidays = list(iter_holidays(f))
    logger.debug(f"Loaded {len(holidays)} holidays from {path}")
    return holidays
