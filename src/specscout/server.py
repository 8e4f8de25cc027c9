"""HTTP interface for detection.

Run with:
    uvicorn --factory specscout.server:create_app
or:
    specscout serve
"""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from .core.config import DetectorSettings, load_settings
from .core.errors import TargetValidationError
from .core.logging import get_logger
from .discovery import SpecDetector
from .version import __version__

logger = get_logger(__name__)


def create_app(settings: Optional[DetectorSettings] = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Detector settings (defaults to ``load_settings()``)

    Returns:
        FastAPI app with ``POST /detect`` and ``GET /health``
    """
    detector = SpecDetector(settings or load_settings())

    app = FastAPI(
        title="specscout",
        description="Detect and normalize API specs for marketplace listings",
        version=__version__,
    )

    @app.post("/detect")
    async def detect(request: Request):
        """Detect the API behind ``{"url": ...}``.

        Returns the DetectionResult, or 400 ``{"error": ...}`` when the
        request is rejected before any network access.
        """
        try:
            body = await request.json()
        except ValueError:
            return JSONResponse({"error": "Invalid JSON body"}, status_code=400)

        url = body.get("url") if isinstance(body, dict) else None
        if url is not None and not isinstance(url, str):
            return JSONResponse({"error": "Invalid URL format"}, status_code=400)

        try:
            result = await run_in_threadpool(detector.detect, url)
        except TargetValidationError as e:
            logger.info(f"Rejected detection target {url!r}: {e}")
            return JSONResponse({"error": str(e)}, status_code=400)

        return JSONResponse(result.to_dict())

    @app.get("/health")
    async def health():
        """Liveness check."""
        return {"status": "ok", "version": __version__}

    return app
