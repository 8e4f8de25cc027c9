"""Network-facing discovery: host guard, bounded fetching, probing, health."""

from .fetcher import BoundedFetcher, Deadline, FetchResult
from .guard import is_private_host, validate_target_url
from .health import probe_health
from .orchestrator import PROBE_PATHS, DiscoveryState, SpecDetector, detect_api

__all__ = [
    "BoundedFetcher",
    "Deadline",
    "FetchResult",
    "is_private_host",
    "validate_target_url",
    "probe_health",
    "PROBE_PATHS",
    "DiscoveryState",
    "SpecDetector",
    "detect_api",
]
