"""Document classification: is a fetched body an OpenAPI/Swagger document?

Strict JSON is tried first. Text that carries an ``openapi:``/``swagger:``
line is then handed to PyYAML, and if that does not yield a usable mapping a
minimal line-oriented recognizer pulls out the handful of single-line
scalars hand-written specs usually start with.
"""

import json
import re
from typing import Any, Optional

import yaml

from ..core.logging import get_logger

logger = get_logger(__name__)

_VERSION_KEY_PATTERN = re.compile(r"^\s*(openapi|swagger)\s*:", re.MULTILINE)
_VERSION_PATTERN = re.compile(
    r"^\s*(openapi|swagger)\s*:\s*[\"']?([^\"'\n]+)[\"']?", re.MULTILINE
)
_TITLE_PATTERN = re.compile(r"^\s{2,}title\s*:\s*[\"']?([^\"'\n]+)[\"']?", re.MULTILINE)
_DESCRIPTION_PATTERN = re.compile(
    r"^\s{2,}description\s*:\s*[\"']?([^\"'\n]+)[\"']?", re.MULTILINE
)
_SERVER_URL_PATTERN = re.compile(
    r"servers\s*:\s*\n\s+-\s*url\s*:\s*[\"']?([^\"'\n]+)[\"']?", re.MULTILINE
)


def is_candidate_spec(document: Any) -> bool:
    """True iff the parsed document has a truthy ``openapi`` or ``swagger`` key."""
    return isinstance(document, dict) and bool(
        document.get("openapi") or document.get("swagger")
    )


def classify_document(text: Optional[str]) -> Optional[dict[str, Any]]:
    """Parse raw text into a candidate spec object.

    Args:
        text: Response body or file content

    Returns:
        The parsed mapping when it is a candidate spec, otherwise None
    """
    if not text:
        return None

    try:
        document = json.loads(text)
    except ValueError:
        document = _parse_yaml(text)

    return document if is_candidate_spec(document) else None


def _parse_yaml(text: str) -> Optional[dict[str, Any]]:
    if not _VERSION_KEY_PATTERN.search(text):
        return None

    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as e:
        logger.debug(f"YAML parse failed, using line recognizer: {e}")
        document = None

    if is_candidate_spec(document):
        return document

    return parse_yaml_minimal(text)


def parse_yaml_minimal(text: str) -> Optional[dict[str, Any]]:
    """Best-effort recognizer for the top of a YAML spec.

    Only single-line scalars are understood: the version line, an indented
    ``title:``/``description:`` and the first ``- url:`` under ``servers:``.

    Returns:
        A partial spec mapping, or None if no version key is present
    """
    if not _VERSION_KEY_PATTERN.search(text):
        return None

    result: dict[str, Any] = {}

    version_match = _VERSION_PATTERN.search(text)
    if version_match:
        result[version_match.group(1)] = version_match.group(2).strip()

    title_match = _TITLE_PATTERN.search(text)
    description_match = _DESCRIPTION_PATTERN.search(text)
    if title_match or description_match:
        result["info"] = {
            "title": title_match.group(1).strip() if title_match else "",
            "description": description_match.group(1).strip() if description_match else "",
        }

    server_match = _SERVER_URL_PATTERN.search(text)
    if server_match:
        result["servers"] = [{"url": server_match.group(1).strip()}]

    if result.get("openapi") or result.get("swagger"):
        return result
    return None
