"""
Mnemonic extraction from device and URL naming conventions.

Accounts in the CMDB are named "<MNEMONIC> <long name>". Monitored
devices and URL checks carry the same mnemonic at the start of their
source or target, in one of a few naming standards:

  C1-ABC-core-sw01   site code after a C/L/R + digit + dash prefix
  XYZ-router-02      bare three character code before a dash
  ABC_portal login   three character code before an underscore or space

Each standard is a NamingRule so it can be tested on its own. Matching is
ASCII-only and always runs on the upper-cased string.
"""

import re
from typing import Optional, Sequence

from models import Mnemonic, ProbeType


class NamingRule:
    """A single naming convention: a pattern anchored at the start whose first group is the mnemonic."""

    def __init__(self, name: str, pattern: str):
        self.name = name
        self.pattern = re.compile(pattern, re.ASCII)

    def match(self, value: str) -> Optional[Mnemonic]:
        m = self.pattern.match(value.upper())
        if m is None:
            return None
        return Mnemonic(code=m.group(1), rule=self.name)

    def __repr__(self) -> str:
        return f"NamingRule({self.name!r}, {self.pattern.pattern!r})"


PREFIXED_SITE_CODE = NamingRule("prefixed_site_code", r"[CLR]\d-(\w{2,3})")
DASHED_SITE_CODE = NamingRule("dashed_site_code", r"(\w{3})-")
URL_TARGET_CODE = NamingRule("url_target_code", r"(\w{3})[_\s]")

# Tried in order; first match wins
SNMP_SOURCE_RULES: Sequence[NamingRule] = (PREFIXED_SITE_CODE, DASHED_SITE_CODE)
URL_TARGET_RULES: Sequence[NamingRule] = (URL_TARGET_CODE,)

# Enrichment is scoped to the collectors in these two data centres
SNMP_ROBOT = re.compile(r"(?:oh|tx)os-snmp01", re.IGNORECASE)
NSMON_ROBOT = re.compile(r"(?:oh|tx)os-nsmon03", re.IGNORECASE)


def first_match(rules: Sequence[NamingRule], value: str) -> Optional[Mnemonic]:
    for rule in rules:
        mnemonic = rule.match(value)
        if mnemonic is not None:
            return mnemonic
    return None


def extract_mnemonic(probe_type: ProbeType, source: str, target: str, robot: str) -> Optional[Mnemonic]:
    """
    Derive the account mnemonic for a record, or None when no rule applies.

    pollagent / net_connect use the source when collected by an snmp01 robot;
    url_response uses the target when collected by an nsmon03 robot.
    vmware records are keyed on the raw source and never produce a mnemonic.
    """
    if probe_type in (ProbeType.pollagent, ProbeType.net_connect):
        if SNMP_ROBOT.search(robot):
            return first_match(SNMP_SOURCE_RULES, source)
        return None

    if probe_type is ProbeType.url_response:
        if NSMON_ROBOT.search(robot):
            return first_match(URL_TARGET_RULES, target)
        return None

    return None
