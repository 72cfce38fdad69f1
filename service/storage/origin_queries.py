"""
Raw SQL for the two origin lookups against the UIM CMDB.

Each function takes a cursor and executes exactly one query.
No business logic, no loops, no conditionals — just SQL.
Values are always bound as driver parameters (pymssql pyformat), so a literal
percent sign in the SQL text has to be written as %%.
"""

from typing import Any, Dict, Iterator, Sequence

from models import QueryShape, QuerySpec

RESOURCE_POOL_ORIGIN_SQL = """
    SELECT DISTINCT cma.description, cmao.origin, sqs.source
    FROM cm_account cma
    JOIN cm_account_ownership cmao ON cma.account_id = cmao.account_id
    JOIN CM_DEVICE_ATTRIBUTE cmda ON cmda.dev_attr_value = cma.description
    JOIN CM_CONFIGURATION_ITEM cmci ON cmda.dev_id = cmci.dev_id
    JOIN CM_CONFIGURATION_ITEM_METRIC cmcim ON cmci.ci_id = cmcim.ci_id
    JOIN S_QOS_DATA sqs ON cmcim.ci_metric_id = sqs.ci_metric_id
    WHERE cmda.dev_attr_key = 'vmware.ResourcePoolvAppPath'
      AND sqs.source NOT LIKE '[0-9]%%'
      AND sqs.source = %s
      AND sqs.target = %s
      AND sqs.qos = %s
      AND sqs.robot = %s
"""

# Account names look like "ABC Some Customer"; a name with no space is compared whole
ACCOUNT_ORIGIN_BY_PREFIX_SQL = """
    SELECT DISTINCT cmao.origin, cma.name
    FROM cm_account cma
    JOIN cm_account_ownership cmao ON cma.account_id = cmao.account_id
    WHERE IIF(CHARINDEX(' ', cma.name) > 0,
              LEFT(cma.name, CHARINDEX(' ', cma.name) - 1),
              cma.name) COLLATE Latin1_General_CS_AS = %s
"""

Row = Dict[str, Any]


def _execute(cursor: Any, sql: str, params: Sequence[str]) -> Iterator[Row]:
    cursor.execute(sql, tuple(params))
    return iter(cursor)


def query_resource_pool_origin(cursor: Any, source: str, target: str, qos: str, robot: str) -> Iterator[Row]:
    """Origin of the account owning the resource pool behind a VMware QoS series."""
    return _execute(cursor, RESOURCE_POOL_ORIGIN_SQL, (source, target, qos, robot))


def query_account_origin_by_prefix(cursor: Any, mnemonic: str) -> Iterator[Row]:
    """Origin of accounts whose name starts with the mnemonic as its first word."""
    return _execute(cursor, ACCOUNT_ORIGIN_BY_PREFIX_SQL, (mnemonic,))


def run_query(cursor: Any, query: QuerySpec) -> Iterator[Row]:
    """Execute a bound QuerySpec. Rows come back forward-only, as dicts."""
    if query.shape is QueryShape.resource_pool_origin:
        return query_resource_pool_origin(cursor, *query.params)
    return query_account_origin_by_prefix(cursor, *query.params)
