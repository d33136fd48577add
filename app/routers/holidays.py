from pathlib import Path
from typing import List

from fastapi import APIRouter, Depends

from app.models.schemas import Holiday, HolidayType
from app.services.holiday_filters import by_month, by_name, by_type
from app.services.holiday_loader import get_holidays_file, load_holidays

router = APIRouter()


@router.get("/mandatory", response_model=List[Holiday], summary="All mandatory holidays")
def get_mandatory_holidays(holidays_file: Path = Depends(get_holidays_file)):
    return by_type(load_holidays(holidays_file), HolidayType.MANDATORY)


@router.get("/floating", response_model=List[Holiday], summary="All floating holidays")
def get_floating_holidays(holidays_file: Path = Depends(get_holidays_file)):
    return by_type(load_holidays(holidays_file), HolidayType.FLOATING)


@router.get(
    "/mandatory/month/{month}",
    response_model=List[Holiday],
    summary="Mandatory holidays in one month",
)
def get_mandatory_holidays_by_month(
    month: int,
    holidays_file: Path = Depends(get_holidays_file),
):
    """`month` is 1–12; any other number returns an empty list."""
    return by_month(load_holidays(holidays_file), HolidayType.MANDATORY, month)


@router.get(
    "/floating/month/{month}",
    response_model=List[Holiday],
    summary="Floating holidays in one month",
)
def get_floating_holidays_by_month(
    month: int,
    holidays_file: Path = Depends(get_holidays_file),
):
    """`month` is 1–12; any other number returns an empty list."""
    return by_month(load_holidays(holidays_file), HolidayType.FLOATING, month)


@router.get("/search/{keyword}", response_model=List[Holiday], summary="Search holidays by name")
def search_holidays(keyword: str, holidays_file: Path = Depends(get_holidays_file)):
    """Case-insensitive substring match on the holiday name, any type."""
    return by_name(load_holidays(holidays_file), keyword)
