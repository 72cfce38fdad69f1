"""
FastAPI application entry point.

The upstream QoS processor posts each collected record to /enrich and
continues with whatever comes back. Startup only logs where lookups will
go; connections are opened per record, never at startup.
"""

import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from api.routes import router
from config import settings
from fastapi import FastAPI
from storage.database import is_configured

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI):
    """Manage startup and shutdown lifecycle."""
    logger.info("Starting Origin Enrichment Service")

    if is_configured():
        logger.info("Lookup store: %s database=%s", settings.db_server, settings.db_name)
    else:
        logger.critical("Lookup store not configured, records will pass through unchanged")

    yield  # Application runs here

    logger.info("Service shutdown complete")


app = FastAPI(
    title="Origin Enrichment Service",
    description=(
        "Corrects the origin of UIM QoS records by looking up the owning "
        "account in the CMDB, using probe-specific naming rules."
    ),
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(router)


if __name__ == "__main__":
    uvicorn.run("server:app", host="0.0.0.0", port=8000, reload=False)
