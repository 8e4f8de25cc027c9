"""Tests for category, tag, description and page-level inference."""

import pytest

from specscout.core.models import AuthType, Endpoint
from specscout.inference import (
    infer_from_response,
    infer_tags,
    suggest_category,
    synthesize_description,
)


def _endpoint(path, summary="", tags=None):
    return Endpoint(path=path, method="GET", summary=summary, tags=tags or [])


class TestSuggestCategory:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Chat completions for GPT", "language-models"),
            ("Translate documents", "translation"),
            ("Emotion scoring", "sentiment-analysis"),
            ("Vector embeddings", "embeddings"),
            ("Image recognition", "object-detection"),
            ("Bulk export", "datasets"),
            ("Weather forecasts", None),
        ],
    )
    def test_keywords(self, text, expected):
        assert suggest_category(text) == expected

    def test_first_match_wins_over_best_match(self):
        # "language" (translation) appears once, datasets keywords three times,
        # but translation comes first in the table.
        assert suggest_category("data dataset download in any language") == "translation"

    def test_case_insensitive(self):
        assert suggest_category("SENTIMENT") == "sentiment-analysis"


class TestInferTags:
    def test_precedence_and_dedupe(self):
        endpoints = [
            _endpoint("/v1/api/orders/{id}", tags=["Billing"]),
            _endpoint("/customers", tags=["billing", "CRM"]),
        ]
        assert infer_tags(["Core"], endpoints) == ["core", "billing", "crm", "orders", "customers"]

    def test_segment_filters(self):
        endpoints = [
            _endpoint("/api/v2/ab/abc/{param}/averyveryverylongsegment/Search"),
        ]
        assert infer_tags([], endpoints) == ["abc", "search"]

    def test_cap(self):
        endpoints = [_endpoint(f"/segment{i:02d}") for i in range(20)]
        assert len(infer_tags([], endpoints)) == 10


class TestSynthesizeDescription:
    def test_long_description_verbatim(self):
        text = "A comprehensive API for managing every widget."
        assert synthesize_description(text, "Acme", [_endpoint("/a", "List")]) == text

    def test_name_prefix_when_no_description(self):
        endpoints = [_endpoint("/a", "List widgets"), _endpoint("/b"), _endpoint("/c", "Get widget")]
        assert synthesize_description("", "Acme", endpoints) == (
            "Acme provides the following capabilities. List widgets. Get widget."
        )

    def test_generic_prefix_without_name(self):
        assert synthesize_description("", "", [_endpoint("/a", "Ping")]) == (
            "This API provides the following capabilities. Ping."
        )

    def test_at_most_five_capabilities(self):
        endpoints = [_endpoint(f"/{i}", f"Op{i}") for i in range(8)]
        assert synthesize_description("Short.", "X", endpoints) == (
            "Short. Op0. Op1. Op2. Op3. Op4."
        )

    def test_no_summaries(self):
        assert synthesize_description("Short.", "X", [_endpoint("/a")]) == "Short."
        assert synthesize_description("", "X", []) == "API service: X"


class TestInferFromResponse:
    PAGE = """
    <html><head>
      <title>Acme – Developer Portal</title>
      <meta name="description" content="Acme's widget API">
    </head><body>
      <a href="/pricing">Pricing</a>
      <a href="/developers/docs/start">Docs</a>
      <a href="https://acme.com/redoc">Reference</a>
    </body></html>
    """

    def test_page_fields(self):
        inferred = infer_from_response("https://www.acme.com/", self.PAGE)

        assert inferred.name == "Acme – Developer Portal"
        assert inferred.description == "Acme's widget API"
        assert inferred.docs_url == "https://www.acme.com/developers/docs/start"
        assert inferred.auth_type == AuthType.API_KEY

    def test_name_from_host(self):
        assert infer_from_response("https://api.widgetco.io/v1", None).name == "Widgetco API"

    def test_title_separator_stripped(self):
        page = "<title>Widgets | </title>"
        assert infer_from_response("https://acme.com", page).name == "Widgets"

    @pytest.mark.parametrize("title", ["ab", "x" * 130, " - "])
    def test_unusable_title_keeps_host_name(self, title):
        page = f"<title>{title}</title>"
        assert infer_from_response("https://acme.com", page).name == "Acme API"

    def test_meta_content_first(self):
        page = '<meta content="Reverse order" name="description">'
        assert infer_from_response("https://acme.com", page).description == "Reverse order"

    @pytest.mark.parametrize(
        "header,expected",
        [
            ('Bearer realm="api"', AuthType.JWT),
            ('OAuth realm="api"', AuthType.OAUTH2),
            ('Basic realm="api"', AuthType.API_KEY),
        ],
    )
    def test_www_authenticate(self, header, expected):
        inferred = infer_from_response("https://acme.com", None, {"www-authenticate": header})
        assert inferred.auth_type == expected
