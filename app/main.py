from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from contextlib import asynccontextmanager
from pathlib import Path
import logging

from app.routers import holidays
from app.services.holiday_loader import HOLIDAYS_FILE

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
)
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"

ENDPOINTS = [
    "/api/holidays/mandatory",
    "/api/holidays/floating",
    "/api/holidays/mandatory/month/{month}",
    "/api/holidays/floating/month/{month}",
    "/api/holidays/search/{keyword}",
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting Holiday API, holidays file: {HOLIDAYS_FILE}")
    yield
    logger.info("Shutting down...")


app = FastAPI(
    title="Holiday Calendar API",
    description=(
        "Read-only lookup of mandatory and floating holidays. "
        "Weekend holidays are left out; the holidays file is re-read on every request."
    ),
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(holidays.router, prefix="/api/holidays", tags=["holidays"])
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


# A file with bytes that aren't valid UTF-8 is as unreadable as a missing one.
@app.exception_handler(OSError)
@app.exception_handler(UnicodeDecodeError)
async def holidays_file_error_handler(request: Request, exc: Exception):
    logger.error(f"Could not read holidays file for {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"detail": "Holidays file could not be read."},
    )


@app.get("/", include_in_schema=False)
async def index():
    """Browser front end for the holiday endpoints."""
    return FileResponse(STATIC_DIR / "index.html")


@app.get("/api/info", tags=["root"])
async def info():
    return {
        "api": "Holiday Calendar API",
        "version": "1.0.0",
        "holidays_file": str(HOLIDAYS_FILE),
        "endpoints": ENDPOINTS,
        "docs": "/docs",
    }


@app.get("/health", tags=["root"])
async def health():
    return {"status": "ok"}
