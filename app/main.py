"""FastAPI application entry point."""

import logging

from fastapi import FastAPI

from app import __version__
from app.api import analytics, health, optimization
from app.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

app = FastAPI(
    title="Rail Traffic Monitor",
    description="Section capacity scheduling and congestion prediction",
    version=__version__,
)

app.include_router(health.router, tags=["health"])
app.include_router(optimization.router, prefix="/optimization", tags=["optimization"])
app.include_router(analytics.router, prefix="/analytics", tags=["analytics"])
