"""Heuristic inference: categories, tags, descriptions and page fallbacks."""

from .categories import CATEGORY_KEYWORDS, infer_tags, suggest_category
from .description import synthesize_description
from .fallback import InferredListing, infer_from_response

__all__ = [
    "CATEGORY_KEYWORDS",
    "infer_tags",
    "suggest_category",
    "synthesize_description",
    "InferredListing",
    "infer_from_response",
]
