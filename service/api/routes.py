import logging

from config import settings
from enrichment.pipeline import enrich_record
from fastapi import APIRouter
from models import EnrichResponse, HealthResponse, HealthStatus, MonitoringRecord
from storage.database import check_store_connection, is_configured

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/enrich", response_model=EnrichResponse)
def enrich(record: MonitoringRecord):
    """
    Corrects the origin of one QoS record and hands the record back.

    Always 200. A record that couldn't be enriched is returned unchanged,
    and `outcome` says why. The collector must never drop a record because
    the lookup store is down.
    """
    outcome = enrich_record(record)
    return EnrichResponse(outcome=outcome, record=record)


@router.get("/health", response_model=HealthResponse)
def health():
    """
    Lightweight health check. Opens and closes one store connection, runs no lookup.

    Status semantics:
      ok   — lookup store reachable
      down — not configured, or not reachable (every record passes through unchanged)
    """
    configured = is_configured()
    connected = configured and check_store_connection()

    return HealthResponse(
        status=HealthStatus.ok if connected else HealthStatus.down,
        configured=configured,
        store_connected=connected,
        store=f"{settings.db_server}/{settings.db_name}",
    )
