"""Local spec files: the trusted, offline variant of detection.

Used by ``specscout inspect`` before a listing is created from a spec that
lives on disk. No host guard, probing, fallback or health check applies.
"""

import json
from pathlib import Path
from typing import Any, Optional
from urllib.parse import urlparse

import yaml

from ..core.errors import SpecLoadError
from ..core.logging import get_logger
from ..core.models import SpecSummary
from .extractor import extract_from_spec
from .parser import SpecDocument

logger = get_logger(__name__)

DEFAULT_NAME = "My API"
DEFAULT_VERSION = "1.0.0"


def load_spec_file(path: str | Path) -> dict[str, Any]:
    """Load and parse a spec file (JSON or YAML).

    Content starting with ``{`` or ``[`` is read as JSON, anything else as
    YAML.

    Args:
        path: Path to the specification file

    Returns:
        Parsed document mapping

    Raises:
        SpecLoadError: If the file cannot be read or parsed, or is not a mapping
    """
    path_obj = Path(path)

    if not path_obj.exists():
        raise SpecLoadError(f"Spec file not found: {path}")

    logger.info(f"Loading spec from {path}")

    try:
        content = path_obj.read_text(encoding="utf-8").strip()
        if content.startswith(("{", "[")):
            document = json.loads(content)
        else:
            document = yaml.safe_load(content)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise SpecLoadError(f"Failed to parse spec file {path}: {e}") from e

    if not isinstance(document, dict):
        raise SpecLoadError(f"Spec file {path} does not contain a mapping")

    return document


def summarize_spec(document: dict[str, Any], source_url: Optional[str] = None) -> SpecSummary:
    """Extract listing fields from an already-parsed spec document.

    Args:
        document: Parsed spec mapping
        source_url: Optional URL the spec is published at. Used only to
            resolve a relative base URL and to guess a docs URL.

    Returns:
        SpecSummary
    """
    result = extract_from_spec(document, source_url)

    docs_url = result.docs_url
    if not docs_url and source_url:
        parsed = urlparse(source_url)
        if parsed.scheme in ("http", "https") and parsed.netloc:
            docs_url = f"{parsed.scheme}://{parsed.netloc}/docs"

    return SpecSummary(
        name=result.name or DEFAULT_NAME,
        description=result.description,
        version=SpecDocument(document).version or DEFAULT_VERSION,
        base_url=result.base_url,
        docs_url=docs_url,
        auth_type=result.auth_type,
        listing_type=result.listing_type,
        endpoints=result.endpoints,
        sample_request=result.sample_request,
        sample_response=result.sample_response,
        input_schema_fields=result.input_schema_fields,
        suggested_category_slug=result.suggested_category_slug,
        tags=result.tags,
    )
