# tests/conftest.py
import os
import sys
from pathlib import Path
from typing import AsyncGenerator, Callable
import logging

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

logging.basicConfig(level=logging.WARNING)

# --- path setup ---
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from app.main import app
from app.services.holiday_loader import get_holidays_file


@pytest.fixture
def write_holidays(tmp_path: Path) -> Callable[..., Path]:
    """Write the given lines to a fresh holidays file and return its path."""
    def _write(*lines: str, newline: str = "\n") -> Path:
        path = tmp_path / "holidays.log"
        path.write_bytes(newline.join(lines).encode("utf-8"))
        return path
    return _write


@pytest.fixture
def holidays_file(write_holidays) -> Path:
    return write_holidays(
        "Mandatory holiday for New Year on Monday, 1-Jan-2024 in Bangalore",
        "Mandatory holiday for Republic Day on Monday, 15-Jan-2024 in Bangalore",
        "Floating holiday for Regional Festival on Tuesday, 16-Jan-2024 in Bangalore",
        "Mandatory holiday for Saturday Event on Saturday, 20-Jan-2024 in Bangalore",
        "Floating holiday for Optional Festival on Wednesday, 10-Apr-2024 in Mysore",
        "Mandatory holiday for May Day on Wednesday, 1-May-2024 in Bangalore",
        "Not a valid line",
        "Mandatory holiday for Independence Day on Thursday, 15-Aug-2024 in Bangalore",
    )


@pytest_asyncio.fixture
async def async_client(holidays_file: Path) -> AsyncGenerator[AsyncClient, None]:
    """AsyncClient bound to the app, reading `holidays_file`."""
    app.dependency_overrides[get_holidays_file] = lambda: holidays_file
    try:
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.pop(get_holidays_file, None)
