"""Exception hierarchy for specscout.

Only a small number of conditions are raised to callers. Network and parse
problems during discovery are expected and are reported through
``DetectionResult.warnings`` instead of exceptions.

All custom exceptions inherit from SpecScoutError, making it easy to catch
every specscout-specific error in a single except clause.
"""


class SpecScoutError(Exception):
    """Base exception for all specscout errors.

    Example:
        try:
            specscout.detect_api(url)
        except SpecScoutError as e:
            print(f"Detection error: {e}")
    """

    pass


class TargetValidationError(SpecScoutError):
    """The target URL was rejected before any network access.

    Raised when:
    - No URL was supplied
    - The URL cannot be parsed as an absolute URL
    - The scheme is not http or https
    - The hostname is private, reserved or loopback

    The message is user-facing and is returned verbatim by the HTTP layer
    as ``{"error": message}`` with status 400.

    Examples:
        - "URL is required"
        - "Invalid URL format"
        - "Only HTTP/HTTPS URLs are allowed"
        - "Private/reserved IP addresses are not allowed"
    """

    pass


class SpecLoadError(SpecScoutError):
    """A local spec file could not be loaded.

    Raised when:
    - The file does not exist or cannot be read
    - JSON/YAML syntax is invalid
    - The document root is not a mapping

    Examples:
        - "Spec file not found: openapi.yaml"
        - "Failed to parse spec file openapi.json: Expecting value"
    """

    pass


class ConfigError(SpecScoutError):
    """Configuration-related errors.

    Raised when:
    - A config file is missing or is not valid YAML
    - A timeout or size limit is not a positive number

    Examples:
        - "Configuration file not found: specscout.yaml"
        - "discovery_timeout must be positive (got 0)"
    """

    pass
