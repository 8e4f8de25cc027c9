"""Discovery orchestration: target URL -> DetectionResult.

Sequence:
    VALIDATING -> DIRECT_FETCH -> {SPEC_FOUND | PROBING}
               -> {SPEC_FOUND | FALLBACK} -> HEALTH_CHECK -> DONE

Validation failures raise TargetValidationError before any network access.
Everything after validation degrades into warnings on the returned result.

Example:
    >>> result = detect_api("https://api.acme.com")
    >>> result.detected, result.name
    (True, 'Acme API')
"""

from concurrent.futures import ThreadPoolExecutor, wait
from enum import Enum
from typing import Any, Optional
from urllib.parse import ParseResult, urlparse

from ..core.config import DetectorSettings
from ..core.logging import get_logger
from ..core.models import DetectionResult, ListingType
from ..inference.fallback import InferredListing, infer_from_response
from ..openapi.classifier import classify_document
from ..openapi.extractor import extract_from_spec
from .fetcher import BoundedFetcher, Deadline, FetchResult
from .guard import is_private_host, validate_target_url
from .health import probe_health

logger = get_logger(__name__)

# Conventional spec locations, in precedence order.
PROBE_PATHS = (
    "/openapi.json",
    "/swagger.json",
    "/.well-known/openapi.json",
    "/api-docs",
    "/docs/openapi.json",
    "/v3/api-docs",
)

NO_SPEC_WARNINGS = (
    "No OpenAPI spec found. We inferred what we could from the page.",
    "Review and edit the fields below.",
)
MANUAL_ENTRY_WARNING = "You can fill in the fields manually below."


class DiscoveryState(str, Enum):
    """Stages of a detection request."""

    VALIDATING = "validating"
    DIRECT_FETCH = "direct_fetch"
    PROBING = "probing"
    SPEC_FOUND = "spec_found"
    FALLBACK = "fallback"
    HEALTH_CHECK = "health_check"
    DONE = "done"


class SpecDetector:
    """Locates and normalizes the machine-readable description of an API.

    Each ``detect()`` call is independent; the detector holds no per-request
    state and may be shared between threads.
    """

    def __init__(self, settings: Optional[DetectorSettings] = None):
        self.settings = settings or DetectorSettings()
        self.fetcher = BoundedFetcher(self.settings)

    def detect(self, url: str) -> DetectionResult:
        """Run detection against a target URL.

        Args:
            url: Absolute http(s) URL supplied by the provider

        Returns:
            DetectionResult; ``detected`` is False when only page-level
            inference was possible

        Raises:
            TargetValidationError: If the URL is malformed, not http(s), or
                points at a private/reserved host
        """
        self._enter(DiscoveryState.VALIDATING, url)
        parsed = validate_target_url(url)
        url = url.strip()

        deadline = Deadline(self.settings.discovery_timeout)
        try:
            result = self._discover(url, parsed, deadline)
        except Exception as e:
            logger.exception(f"Detection of {url} failed unexpectedly: {e}")
            message = (
                f"Request timed out ({self.settings.discovery_timeout:g}s)"
                if deadline.expired
                else "Failed to fetch the URL"
            )
            result = fallback_result(url, [message, MANUAL_ENTRY_WARNING])

        self._enter(DiscoveryState.DONE, url)
        return result

    def _discover(self, url: str, parsed: ParseResult, deadline: Deadline) -> DetectionResult:
        self._enter(DiscoveryState.DIRECT_FETCH, url)
        direct = self.fetcher.fetch(url, deadline)

        result = None
        spec = classify_document(direct.text if direct else None)
        if spec is not None:
            result = extract_from_spec(spec, url)
            self._enter(DiscoveryState.SPEC_FOUND, url)
        else:
            self._enter(DiscoveryState.PROBING, url)
            found = self.probe_spec_paths(origin_of(parsed), deadline)
            if found is not None:
                spec, spec_url = found
                result = extract_from_spec(spec, spec_url)
                self._enter(DiscoveryState.SPEC_FOUND, spec_url)

        if result is None:
            self._enter(DiscoveryState.FALLBACK, url)
            result = self._fallback(url, direct, timed_out=deadline.expired)
            health_target = url
        else:
            health_target = result.health_check_url or result.base_url

        # The discovery budget no longer applies; health has its own timeout.
        deadline.abort()

        if health_target:
            self._enter(DiscoveryState.HEALTH_CHECK, health_target)
            self._check_health(result, health_target)

        return result

    def probe_spec_paths(
        self, origin: str, deadline: Deadline
    ) -> Optional[tuple[dict[str, Any], str]]:
        """Fetch every probe path concurrently and pick by list order.

        All probes are issued at once, but the winner is the first candidate
        spec in PROBE_PATHS order, not the first response to arrive.

        Returns:
            (spec, probe_url) of the selected document, or None
        """
        probe_urls = [f"{origin}{path}" for path in PROBE_PATHS]

        executor = ThreadPoolExecutor(
            max_workers=len(probe_urls), thread_name_prefix="specscout-probe"
        )
        futures = [executor.submit(self._probe, probe_url, deadline) for probe_url in probe_urls]
        try:
            _, pending = wait(futures, timeout=deadline.remaining())
            if pending:
                logger.info(f"{len(pending)} probe(s) still running at deadline; aborting")
                deadline.abort()
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        for probe_url, future in zip(probe_urls, futures):
            if not future.done() or future.cancelled():
                continue
            spec = future.result()
            if spec is not None:
                logger.info(f"Spec found at probe path {probe_url}")
                return spec, probe_url

        logger.info(f"No spec found under {origin}")
        return None

    def _probe(self, probe_url: str, deadline: Deadline) -> Optional[dict[str, Any]]:
        return classify_document(self.fetcher.fetch_text(probe_url, deadline))

    def _fallback(
        self, url: str, direct: Optional[FetchResult], timed_out: bool
    ) -> DetectionResult:
        inferred = infer_from_response(
            url,
            direct.text if direct else None,
            direct.headers if direct else None,
        )
        warnings = list(NO_SPEC_WARNINGS)
        if timed_out:
            warnings.insert(
                0,
                f"Discovery timed out after {self.settings.discovery_timeout:g}s; "
                "some spec locations were not checked.",
            )
        return fallback_result(url, warnings, inferred)

    def _check_health(self, result: DetectionResult, target: str) -> None:
        hostname = urlparse(target).hostname
        if hostname and is_private_host(hostname):
            logger.warning(f"Not probing private health target {target}")
            result.warnings.append(
                f"Health check skipped: {hostname} is a private or reserved address."
            )
            return
        result.health_check_status = probe_health(target, self.settings)

    @staticmethod
    def _enter(state: DiscoveryState, subject: str) -> None:
        logger.debug(f"[{state.value}] {subject}")


def fallback_result(
    url: str, warnings: list[str], inferred: Optional[InferredListing] = None
) -> DetectionResult:
    """Result shape used when no spec could be located."""
    inferred = inferred or InferredListing()
    return DetectionResult(
        detected=False,
        name=inferred.name,
        description=inferred.description,
        base_url=url,
        docs_url=inferred.docs_url,
        auth_type=inferred.auth_type,
        listing_type=ListingType.REST_API,
        warnings=warnings,
    )


def origin_of(parsed: ParseResult) -> str:
    """``scheme://host[:port]`` of a parsed URL, without credentials."""
    netloc = parsed.netloc.rsplit("@", 1)[-1]
    return f"{parsed.scheme.lower()}://{netloc}"


def detect_api(url: str, settings: Optional[DetectorSettings] = None) -> DetectionResult:
    """Convenience wrapper around ``SpecDetector(settings).detect(url)``."""
    return SpecDetector(settings).detect(url)
