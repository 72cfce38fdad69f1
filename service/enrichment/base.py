"""
Abstract base class for all origin lookup rules.

Why a base class:
  Supporting a new probe = new rule implementing build_query(), registered
  against its ProbeType. The dispatcher calls rules without knowing their
  internals — Strategy pattern.
"""

from abc import ABC, abstractmethod
from typing import Optional

from models import MonitoringRecord, QuerySpec


class OriginRule(ABC):
    @abstractmethod
    def build_query(self, record: MonitoringRecord) -> Optional[QuerySpec]:
        """
        Returns the bound lookup for the record, or None when the record is
        out of scope for this rule. Must not modify the record.
        """
