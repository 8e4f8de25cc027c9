"""Bounded HTTP fetching.

Every fetch is a single GET with a deadline and a response-size ceiling.
Failures of any kind (network error, timeout, abort, non-2xx, oversize
body) are not raised: the caller just gets nothing back and moves on to its
next strategy.
"""

import codecs
import socket
import threading
import time
from dataclasses import dataclass, field
from typing import Optional

import requests

from ..core.config import DetectorSettings
from ..core.logging import get_logger

logger = get_logger(__name__)

ACCEPT_HEADER = "application/json, application/yaml, text/yaml, */*"
CHUNK_SIZE = 64 * 1024


class Deadline:
    """A time budget shared by every fetch in one phase.

    Acts as the abort signal: fetches stop as soon as the budget runs out or
    ``abort()`` is called, whichever comes first.
    """

    def __init__(self, seconds: float):
        self.seconds = seconds
        self._expires_at = time.monotonic() + seconds
        self._aborted = threading.Event()

    def remaining(self) -> float:
        if self._aborted.is_set():
            return 0.0
        return max(0.0, self._expires_at - time.monotonic())

    @property
    def expired(self) -> bool:
        return self.remaining() <= 0.0

    def abort(self) -> None:
        self._aborted.set()


@dataclass
class FetchResult:
    """Outcome of a GET that reached the server."""

    url: str
    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    """Response headers with lower-cased names"""

    text: Optional[str] = None
    """Body, or None when the status was not 2xx or the body was too large"""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class BoundedFetcher:
    """Issues size- and time-bounded GET requests."""

    def __init__(self, settings: Optional[DetectorSettings] = None):
        self.settings = settings or DetectorSettings()
        self.headers = {"Accept": ACCEPT_HEADER, "User-Agent": self.settings.user_agent}

    def fetch(self, url: str, deadline: Deadline) -> Optional[FetchResult]:
        """GET a URL, keeping headers even when the body is unusable.

        Args:
            url: URL to fetch (redirects are followed)
            deadline: Shared time budget / abort signal

        Returns:
            FetchResult, or None if no response arrived in time
        """
        remaining = deadline.remaining()
        if remaining <= 0:
            return None

        try:
            response = requests.get(
                url,
                headers=self.headers,
                timeout=remaining,
                allow_redirects=True,
                stream=True,
            )
        except requests.exceptions.RequestException as e:
            logger.debug(f"Fetch failed for {url}: {e}")
            return None

        # Socket timeouts bound each read, not the whole body; sever at the deadline.
        watchdog = threading.Timer(deadline.remaining(), _sever, args=(response,))
        watchdog.daemon = True
        watchdog.start()

        try:
            with response:
                result = FetchResult(
                    url=url,
                    status_code=response.status_code,
                    headers={k.lower(): v for k, v in response.headers.items()},
                )
                if result.ok:
                    result.text = self._read_body(response, deadline)
                else:
                    logger.debug(f"Fetch of {url} returned HTTP {response.status_code}")
        finally:
            watchdog.cancel()

        if deadline.expired:
            # Aborted mid-read; treat the whole attempt as absent.
            return None
        return result

    def fetch_text(self, url: str, deadline: Deadline) -> Optional[str]:
        """Body of a successful, in-budget GET, or None."""
        result = self.fetch(url, deadline)
        return result.text if result is not None else None

    def _read_body(self, response: requests.Response, deadline: Deadline) -> Optional[str]:
        limit = self.settings.max_body_bytes

        content_length = response.headers.get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > limit:
            logger.debug(f"Skipping {response.url}: Content-Length {content_length} > {limit}")
            return None

        chunks = []
        size = 0
        try:
            for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                if deadline.expired:
                    return None
                size += len(chunk)
                if size > limit:
                    logger.debug(f"Skipping {response.url}: body exceeds {limit} bytes")
                    return None
                chunks.append(chunk)
        except requests.exceptions.RequestException as e:
            logger.debug(f"Reading body of {response.url} failed: {e}")
            return None

        return b"".join(chunks).decode(_body_encoding(response), errors="replace")


def _body_encoding(response: requests.Response) -> str:
    """Charset named in Content-Type, else UTF-8.

    requests assumes ISO-8859-1 for charset-less ``text/*`` types; those are
    read as UTF-8 here.
    """
    if "charset=" in response.headers.get("content-type", "").lower() and response.encoding:
        try:
            return codecs.lookup(response.encoding).name
        except LookupError:
            logger.debug(f"Unknown charset {response.encoding!r} from {response.url}")
    return "utf-8"


def _sever(response: requests.Response) -> None:
    """Shut down the socket under a streamed response so a blocked read returns."""
    connection = getattr(response.raw, "connection", None)
    sock = getattr(connection, "sock", None)
    if sock is None:
        return
    try:
        # Base-class call leaves TLS state intact; the reader then sees EOF.
        socket.socket.shutdown(sock, socket.SHUT_RDWR)
    except OSError as e:
        logger.debug(f"Socket already closed for {response.url}: {e}")
