"""
Rule dispatcher: probe type -> origin lookup rule -> bound query.

vmware       resource pool path of the VM's configuration item
pollagent    account mnemonic from the device name (snmp01 robots only)
net_connect  same as pollagent
url_response account mnemonic from the URL check name (nsmon03 robots only)

Anything else gets the no-op rule.
"""

import logging
from typing import Dict, Optional

from enrichment.base import OriginRule
from enrichment.mnemonic import extract_mnemonic
from models import MonitoringRecord, ProbeType, QueryShape, QuerySpec

logger = logging.getLogger(__name__)


class ResourcePoolRule(OriginRule):
    """VMware QoS: the origin belongs to the account named after the VM's resource pool."""

    def build_query(self, record: MonitoringRecord) -> Optional[QuerySpec]:
        return QuerySpec(
            shape=QueryShape.resource_pool_origin,
            params=(record.source, record.target, record.qos, record.robot),
        )


class MnemonicRule(OriginRule):
    """Account lookup keyed on the mnemonic embedded in the source or target."""

    def build_query(self, record: MonitoringRecord) -> Optional[QuerySpec]:
        mnemonic = extract_mnemonic(record.probe_type, record.source, record.target, record.robot)
        if mnemonic is None:
            logger.debug(
                "No mnemonic for probe=%s robot=%s source=%s target=%s",
                record.probe,
                record.robot,
                record.source,
                record.target,
            )
            return None
        return QuerySpec(shape=QueryShape.account_origin_by_prefix, params=(mnemonic.code,))


class NoOpRule(OriginRule):
    def build_query(self, record: MonitoringRecord) -> Optional[QuerySpec]:
        return None


_MNEMONIC_RULE = MnemonicRule()

RULES: Dict[ProbeType, OriginRule] = {
    ProbeType.vmware: ResourcePoolRule(),
    ProbeType.pollagent: _MNEMONIC_RULE,
    ProbeType.net_connect: _MNEMONIC_RULE,
    ProbeType.url_response: _MNEMONIC_RULE,
    ProbeType.other: NoOpRule(),
}


def build_query(record: MonitoringRecord) -> Optional[QuerySpec]:
    """Pick the rule for the record's probe type and let it bind the lookup."""
    return RULES[record.probe_type].build_query(record)
