"""
Exception types raised by the storage layer and the enrichment applier.

The pipeline catches these and reports them; none of them escape a single
enrichment invocation.
"""


class EnrichmentError(Exception):
    """Base class for failures that abandon one enrichment."""


class ConfigurationError(EnrichmentError):
    """The lookup store is not configured well enough to connect."""


class StoreConnectionError(EnrichmentError):
    """The lookup store is unreachable or rejected the credentials."""


class MalformedRowError(EnrichmentError):
    """A lookup row does not carry the expected origin column."""
