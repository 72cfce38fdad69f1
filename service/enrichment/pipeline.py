"""
Enrichment pipeline: dispatch → connect → lookup → apply.

Orchestrates one record without knowing the API layer, so it can be
triggered from:
  - The POST /enrich hook (one call per collected QoS record)
  - Tests (directly, with a fake connection factory)
"""

import logging

import pymssql

from enrichment.applier import apply_lookup
from enrichment.rules import build_query
from errors import ConfigurationError, MalformedRowError, StoreConnectionError
from models import EnrichmentOutcome, MonitoringRecord
from storage.database import Connect, get_connection, lookup_cursor

logger = logging.getLogger(__name__)


def enrich_record(
    record: MonitoringRecord,
    connect: Connect = get_connection,
    log: logging.Logger = logger,
) -> EnrichmentOutcome:
    """
    Correct record.origin in place from the lookup store.

    Never raises. The record is either enriched
    or handed back untouched, and the outcome says which.

    No connection is opened for records no rule applies to.
    """
    query = build_query(record)
    if query is None:
        log.debug("No origin rule for probe=%s robot=%s", record.probe, record.robot)
        return EnrichmentOutcome.skipped

    try:
        with lookup_cursor(connect, log) as cursor:
            applied = apply_lookup(record, query, cursor, log)
    except ConfigurationError as exc:
        log.critical("Lookup store not configured: %s", exc)
        return EnrichmentOutcome.store_unavailable
    except StoreConnectionError as exc:
        log.critical("Connection failed: %s", exc)
        return EnrichmentOutcome.store_unavailable
    except (MalformedRowError, pymssql.Error) as exc:
        log.error("Origin lookup %s abandoned: %s", query.shape.value, exc)
        return EnrichmentOutcome.lookup_failed
    except Exception as exc:  # pylint: disable=broad-except
        # Last resort: the collector must get the record back whatever the driver does
        log.error("Unhandled error in origin lookup %s: %r", query.shape.value, exc)
        return EnrichmentOutcome.lookup_failed

    return EnrichmentOutcome.enriched if applied else EnrichmentOutcome.no_match
