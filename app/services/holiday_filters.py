"""
Query helpers over an already loaded list of holidays.
All of them return a new list and keep the input order.
"""

from typing import Iterable, List

from app.models.schemas import Holiday, HolidayType


def by_type(holidays: Iterable[Holiday], kind: HolidayType) -> List[Holiday]:
    return [h for h in holidays if h.type == kind]


def by_month(holidays: Iterable[Holiday], kind: HolidayType, month: int) -> List[Holiday]:
    # Months outside 1–12 simply match nothing.
    return [h for h in holidays if h.type == kind and h.date.month == month]


def by_name(holidays: Iterable[Holiday], keyword: str) -> List[Holiday]:
    """Case-insensitive substring search on the holiday name. "" matches everything."""
    needle = keyword.lower()
    return [h for h in holidays if needle in h.name.lower()]
