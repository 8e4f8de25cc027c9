"""Centralized version information for specscout."""

# Package version - follows semantic versioning (MAJOR.MINOR.PATCH)
__version__ = "0.3.0"
