"""SSRF protection: classify hostnames as private/reserved."""

import re
from urllib.parse import ParseResult, urlparse

from ..core.errors import TargetValidationError

PRIVATE_HOST_PATTERNS = (
    re.compile(r"^127\."),
    re.compile(r"^10\."),
    re.compile(r"^172\.(1[6-9]|2\d|3[01])\."),
    re.compile(r"^192\.168\."),
    re.compile(r"^0\."),
    re.compile(r"^169\.254\."),
    re.compile(r"^fc00:", re.IGNORECASE),
    re.compile(r"^fe80:", re.IGNORECASE),
    re.compile(r"^::1$"),
    re.compile(r"^localhost$", re.IGNORECASE),
)

ALLOWED_SCHEMES = ("http", "https")


def is_private_host(hostname: str) -> bool:
    """True if the hostname is loopback, private, link-local or unspecified.

    IPv6 literals may be given with or without their URL brackets.
    """
    host = hostname.strip().strip("[]")
    return any(pattern.search(host) for pattern in PRIVATE_HOST_PATTERNS)


def validate_target_url(url: str | None) -> ParseResult:
    """Validate a user-supplied target URL before any network access.

    Args:
        url: The URL to detect

    Returns:
        The parsed URL

    Raises:
        TargetValidationError: With a user-facing message if the URL is
            missing, malformed, not http(s), or points at a private host
    """
    url = (url or "").strip()
    if not url:
        raise TargetValidationError("URL is required")

    try:
        parsed = urlparse(url)
        parsed.port  # raises ValueError on a malformed port
    except ValueError as e:
        raise TargetValidationError("Invalid URL format") from e

    if not parsed.scheme:
        raise TargetValidationError("Invalid URL format")
    if parsed.scheme.lower() not in ALLOWED_SCHEMES:
        raise TargetValidationError("Only HTTP/HTTPS URLs are allowed")
    if not parsed.hostname:
        raise TargetValidationError("Invalid URL format")
    if is_private_host(parsed.hostname):
        raise TargetValidationError("Private/reserved IP addresses are not allowed")

    return parsed
