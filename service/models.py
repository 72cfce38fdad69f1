"""
Pydantic models — the data contracts for the service.

Separating models from routes lets us reuse schemas across the API,
the rule engine, and tests without circular imports.
"""

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel


class ProbeType(str, Enum):
    vmware = "vmware"
    pollagent = "pollagent"
    net_connect = "net_connect"
    url_response = "url_response"
    other = "other"

    @classmethod
    def _missing_(cls, value):
        # Unknown probe tags are routed to the no-op rule, never rejected
        return cls.other


class QueryShape(str, Enum):
    resource_pool_origin = "resource_pool_origin"
    account_origin_by_prefix = "account_origin_by_prefix"


class EnrichmentOutcome(str, Enum):
    enriched = "enriched"
    no_match = "no_match"
    skipped = "skipped"
    store_unavailable = "store_unavailable"
    lookup_failed = "lookup_failed"


# ── Monitoring record (what the collector hands us) ──────────────────────────


class MonitoringRecord(BaseModel):
    """One QoS record. Only origin is ever changed by enrichment."""

    probe: str
    source: str
    target: str
    qos: str
    robot: str
    origin: Optional[str] = None

    @property
    def probe_type(self) -> ProbeType:
        return ProbeType(self.probe)


# ── Rule engine values (transient, never persisted) ──────────────────────────


class Mnemonic(BaseModel):
    """Short account code pulled out of a source or target by a naming rule."""

    code: str
    rule: str


class QuerySpec(BaseModel):
    """A lookup query shape plus the values bound to its placeholders."""

    shape: QueryShape
    params: Tuple[str, ...]


# ── API response models ───────────────────────────────────────────────────────


class EnrichResponse(BaseModel):
    outcome: EnrichmentOutcome
    record: MonitoringRecord


class HealthStatus(str, Enum):
    ok = "ok"
    down = "down"


class HealthResponse(BaseModel):
    status: HealthStatus
    configured: bool
    store_connected: bool
    store: str
