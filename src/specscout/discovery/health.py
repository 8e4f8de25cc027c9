"""Health probing of a candidate base or health-check URL."""

import time
from typing import Optional

import requests

from ..core.config import DetectorSettings
from ..core.logging import get_logger
from ..core.models import HealthCheckStatus
from .fetcher import ACCEPT_HEADER

logger = get_logger(__name__)


def probe_health(url: str, settings: Optional[DetectorSettings] = None) -> HealthCheckStatus:
    """GET ``url`` and report reachability plus latency. Never raises.

    Args:
        url: Health check or base URL
        settings: Supplies the probe timeout (default 5s)

    Returns:
        HealthCheckStatus; ``ok`` is False on any error or non-2xx status
    """
    settings = settings or DetectorSettings()
    start = time.monotonic()

    try:
        with requests.get(
            url,
            headers={"Accept": ACCEPT_HEADER, "User-Agent": settings.user_agent},
            timeout=settings.health_timeout,
            allow_redirects=True,
            stream=True,
        ) as response:
            ok = response.ok
    except Exception as e:
        logger.debug(f"Health probe of {url} failed: {e}")
        ok = False

    latency_ms = int((time.monotonic() - start) * 1000)
    logger.info(f"Health probe {url}: ok={ok} latency={latency_ms}ms")
    return HealthCheckStatus(ok=ok, latency_ms=latency_ms)
