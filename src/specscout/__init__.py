"""specscout - API spec discovery and normalization for marketplace listings.

Point specscout at a URL and it returns a normalized description of the API
behind it (name, base URL, auth scheme, endpoints, sample payloads, suggested
category and tags) suitable for pre-filling a listing.

Basic Usage:
    >>> from specscout import detect_api
    >>>
    >>> result = detect_api("https://api.acme.com")
    >>> result.detected, result.base_url
    (True, 'https://api.acme.com/v1')
    >>>
    >>> # Offline, from a spec on disk
    >>> from specscout import load_spec_file, summarize_spec
    >>> summary = summarize_spec(load_spec_file("openapi.yaml"))

Public API:
    Detection:
        - detect_api: Run discovery against a URL
        - SpecDetector: Reusable detector bound to settings

    Extraction:
        - extract_from_spec: Normalize an already-parsed spec document
        - summarize_spec: Local-file variant (no network access)
        - load_spec_file: Parse a JSON/YAML spec file

    Models:
        - DetectionResult, Endpoint, InputSchemaField, HealthCheckStatus
        - SpecSummary, AuthType, ListingType

    Errors:
        - TargetValidationError: Rejected target URL
        - SpecLoadError: Unreadable local spec file
"""

from .core.config import DetectorSettings, load_settings
from .core.errors import ConfigError, SpecLoadError, SpecScoutError, TargetValidationError
from .core.models import (
    AuthType,
    DetectionResult,
    Endpoint,
    HealthCheckStatus,
    InputSchemaField,
    ListingType,
    SpecSummary,
)
from .discovery import SpecDetector, detect_api
from .openapi import extract_from_spec, load_spec_file, summarize_spec
from .version import __version__

__all__ = [
    # Version
    "__version__",
    # Detection
    "detect_api",
    "SpecDetector",
    # Extraction
    "extract_from_spec",
    "summarize_spec",
    "load_spec_file",
    # Settings
    "DetectorSettings",
    "load_settings",
    # Models
    "DetectionResult",
    "Endpoint",
    "InputSchemaField",
    "HealthCheckStatus",
    "SpecSummary",
    "AuthType",
    "ListingType",
    # Errors
    "SpecScoutError",
    "TargetValidationError",
    "SpecLoadError",
    "ConfigError",
]
