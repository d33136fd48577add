from pydantic import BaseModel, ConfigDict, computed_field
from datetime import date as Date
from enum import Enum


# ──────────────────────────────────────────────
# Enums
# ──────────────────────────────────────────────

class HolidayType(str, Enum):
    MANDATORY = "MANDATORY"
    FLOATING = "FLOATING"


class DayOfWeek(str, Enum):
    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"

    @classmethod
    def of(cls, day: Date) -> "DayOfWeek":
        # isoweekday(): Monday == 1 ... Sunday == 7
        return list(cls)[day.isoweekday() - 1]

    @property
    def is_weekend(self) -> bool:
        return self in (DayOfWeek.SATURDAY, DayOfWeek.SUNDAY)


# ──────────────────────────────────────────────
# Holiday
# ──────────────────────────────────────────────

class Holiday(BaseModel):
    """
    One entry of the holidays file.

    The day of week is always derived from `date`; the weekday word written
    in the source line is never trusted.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    date: Date
    city: str
    type: HolidayType

    @computed_field(alias="dayOfWeek")
    @property
    def day_of_week(self) -> DayOfWeek:
        return DayOfWeek.of(self.date)
