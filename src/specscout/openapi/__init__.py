"""OpenAPI / Swagger document handling.

This package classifies fetched text as a spec, wraps parsed documents,
synthesizes sample payloads and extracts normalized listing fields.
"""

from .classifier import classify_document, is_candidate_spec
from .extractor import extract_from_spec
from .loader import load_spec_file, summarize_spec
from .parser import SpecDocument, SpecFlavor
from .samples import generate_sample

__all__ = [
    "classify_document",
    "is_candidate_spec",
    "extract_from_spec",
    "load_spec_file",
    "summarize_spec",
    "SpecDocument",
    "SpecFlavor",
    "generate_sample",
]
