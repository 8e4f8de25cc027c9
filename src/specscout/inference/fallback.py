"""Listing inference from a non-spec response (HTML page and headers).

Used when no machine-readable spec could be located. Everything here is a
best guess meant to be reviewed by the provider.
"""

import html
import re
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urljoin, urlparse

from ..core.models import AuthType

_HOST_PREFIX = re.compile(r"^(www|api)\.")
_TITLE = re.compile(r"<title[^>]*>([^<]+)</title>", re.IGNORECASE)
_TITLE_SUFFIX = re.compile(r"\s*[-|]\s*$")
_META_NAME_FIRST = re.compile(
    r"<meta\b[^>]*?\bname=([\"'])description\1[^>]*?\bcontent=([\"'])(.*?)\2",
    re.IGNORECASE | re.DOTALL,
)
_META_CONTENT_FIRST = re.compile(
    r"<meta\b[^>]*?\bcontent=([\"'])(.*?)\1[^>]*?\bname=([\"'])description\3",
    re.IGNORECASE | re.DOTALL,
)
_DOCS_HREF = re.compile(
    r"href=([\"'])([^\"']*(?:docs|documentation|swagger|redoc|api-docs)[^\"']*)\1",
    re.IGNORECASE,
)


@dataclass
class InferredListing:
    """Fields recovered from a plain web page."""

    name: str = ""
    description: str = ""
    docs_url: str = ""
    auth_type: AuthType = AuthType.API_KEY


def infer_from_response(
    url: str,
    body: Optional[str],
    headers: Optional[dict[str, str]] = None,
) -> InferredListing:
    """Infer listing fields from a page body and its response headers.

    Args:
        url: The target URL the page was fetched from
        body: Response body, or None if the fetch failed
        headers: Response headers with lower-cased names

    Returns:
        InferredListing; fields that could not be inferred stay empty
    """
    inferred = InferredListing(name=name_from_host(url))

    if body:
        title = page_title(body)
        if title:
            inferred.name = title
        inferred.description = meta_description(body)
        inferred.docs_url = docs_link(body, url)

    if headers:
        www_authenticate = headers.get("www-authenticate", "").lower()
        if "bearer" in www_authenticate:
            inferred.auth_type = AuthType.JWT
        elif "oauth" in www_authenticate:
            inferred.auth_type = AuthType.OAUTH2

    return inferred


def name_from_host(url: str) -> str:
    """``https://api.acme.io/x`` -> ``"Acme API"``."""
    hostname = urlparse(url).hostname or ""
    label = _HOST_PREFIX.sub("", hostname).split(".")[0]
    if not label:
        return ""
    return f"{label[0].upper()}{label[1:]} API"


def page_title(body: str) -> str:
    match = _TITLE.search(body)
    if not match:
        return ""
    title = html.unescape(match.group(1)).strip()
    if not 2 < len(title) < 120:
        return ""
    return _TITLE_SUFFIX.sub("", title).strip()


def meta_description(body: str) -> str:
    match = _META_NAME_FIRST.search(body)
    if match:
        return html.unescape(match.group(3)).strip()
    match = _META_CONTENT_FIRST.search(body)
    if match:
        return html.unescape(match.group(2)).strip()
    return ""


def docs_link(body: str, page_url: str) -> str:
    """First docs-looking link on the page, as an absolute http(s) URL."""
    for match in _DOCS_HREF.finditer(body):
        href = urljoin(page_url, html.unescape(match.group(2)))
        if urlparse(href).scheme in ("http", "https"):
            return href
    return ""
