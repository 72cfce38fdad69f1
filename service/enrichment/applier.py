"""
Applies origin lookup results to a monitoring record.

Update policy:
  - origin is only overwritten when the record already has one
  - every row overwrites in turn, so with several rows the last one wins
  - a NULL origin in a row is skipped, origin is never cleared
  - rows are checked before the first overwrite, so a malformed result
    leaves the record as it was
"""

import logging
from typing import Any, List, Optional

from errors import MalformedRowError
from models import MonitoringRecord, QuerySpec
from storage.origin_queries import run_query

logger = logging.getLogger(__name__)


def _origins(rows) -> List[Optional[str]]:
    origins = []
    for row in rows:
        try:
            origins.append(row["origin"])
        except (KeyError, TypeError, IndexError) as exc:
            raise MalformedRowError(f"Lookup row has no origin column: {row!r}") from exc
    return origins


def apply_lookup(
    record: MonitoringRecord,
    query: QuerySpec,
    cursor: Any,
    log: logging.Logger = logger,
) -> int:
    """Run the bound query on the cursor and apply each row. Returns the number of overwrites."""
    log.warning("Running query: %s params=%s", query.shape.value, query.params)
    origins = _origins(run_query(cursor, query))
    log.debug("Query %s returned %d row(s)", query.shape.value, len(origins))

    applied = 0
    for value in origins:
        if record.origin is None:
            continue
        if value is None:
            log.debug("Skipping NULL origin for probe=%s source=%s", record.probe, record.source)
            continue
        log.warning(
            "Probe: %s, Source: %s, Target: %s, Old Origin: %s",
            record.probe,
            record.source,
            record.target,
            record.origin,
        )
        record.origin = value
        log.warning(
            "Probe: %s, Source: %s, Target: %s, New Origin: %s",
            record.probe,
            record.source,
            record.target,
            record.origin,
        )
        applied += 1
    return applied
