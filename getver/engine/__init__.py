"""Engine components: dedup → pooled registry lookups → aggregation."""

from .aggregator import ResultAggregator
from .dedup import deduplicate
from .registry import Lookup, RegistryClient
from .thread_pool import LookupPool

__all__ = [
    "Lookup",
    "LookupPool",
    "RegistryClient",
    "ResultAggregator",
    "deduplicate",
]
