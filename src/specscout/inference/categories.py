"""Category and tag suggestion from spec text and endpoints."""

import re
from typing import Iterable, Optional

from ..core.models import Endpoint

MAX_TAGS = 10

# Ordered: the first category with any keyword hit wins.
CATEGORY_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("language-models", ("chat", "completion", "generate", "llm", "gpt", "language model")),
    ("translation", ("translate", "translation", "localize", "language")),
    ("sentiment-analysis", ("sentiment", "opinion", "emotion", "tone")),
    ("embeddings", ("embed", "embedding", "vector", "encode")),
    ("object-detection", ("detect", "object", "image", "vision", "recognition")),
    ("datasets", ("dataset", "data", "download", "bulk", "export")),
)

_VERSION_SEGMENT = re.compile(r"^v\d+$")


def suggest_category(text: str) -> Optional[str]:
    """Return the first category slug whose keywords occur in ``text``."""
    lower = text.lower()
    for slug, keywords in CATEGORY_KEYWORDS:
        if any(keyword in lower for keyword in keywords):
            return slug
    return None


def infer_tags(spec_tags: Iterable[str], endpoints: list[Endpoint]) -> list[str]:
    """Collect up to ten lower-cased tags.

    Precedence: spec-level tag names, then operation tags, then meaningful
    path segments (no parameters, no ``api``, no ``v1``-style versions,
    3 to 19 characters long).
    """
    tags: dict[str, None] = {}

    for name in spec_tags:
        tags[name.lower()] = None

    for endpoint in endpoints:
        for name in endpoint.tags:
            tags[name.lower()] = None

    for endpoint in endpoints:
        for segment in endpoint.path.split("/"):
            if not segment or segment.startswith("{"):
                continue
            if 2 < len(segment) < 20 and segment != "api" and not _VERSION_SEGMENT.match(segment):
                tags[segment.lower()] = None

    return list(tags)[:MAX_TAGS]
