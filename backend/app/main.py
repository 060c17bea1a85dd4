import logging
import os
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings

# ─── Logging setup (file + console) ───
_LOG_DIR = Path(__file__).resolve().parent.parent / "logs"
_LOG_DIR.mkdir(exist_ok=True)

_log_level = getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO)

logging.basicConfig(
    level=_log_level,
    format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    handlers=[
        logging.StreamHandler(),
        RotatingFileHandler(
            _LOG_DIR / "hearthweek.log",
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        ),
    ],
)

# Quiet noisy libraries
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

from app.routers import events

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not settings.eventbrite_api_key:
        logger.warning("EVENTBRITE_API_KEY not configured, ticketed events disabled")
    if not settings.google_maps_api_key:
        logger.warning("GOOGLE_MAPS_API_KEY not configured, place visits disabled")

    yield

    # Shutdown
    from app.services.cache_service import cache_service
    from app.services.eventbrite_client import eventbrite_client
    from app.services.google_places_client import google_places_client

    await eventbrite_client.close()
    await google_places_client.close()
    await cache_service.close()
    logger.info("Upstream clients closed")


app = FastAPI(
    title="Hearthweek",
    description="Weekly local learning opportunities for family curricula",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(events.router, prefix="/api/events", tags=["events"])


@app.get("/api/health")
async def health_check():
    return {"status": "ok", "service": "hearthweek"}
