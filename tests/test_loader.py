"""Tests for loading and summarizing local spec files."""

import json

import pytest

from specscout.core.errors import SpecLoadError
from specscout.core.models import AuthType
from specscout.openapi import load_spec_file, summarize_spec

YAML_SPEC = """\
openapi: 3.0.1
info:
  title: Weather Service
  version: 2.1
  description: Hourly forecasts and historical weather observations for any city.
servers:
  - url: /api
components:
  securitySchemes:
    oauth:
      type: oauth2
paths:
  /forecast:
    post:
      summary: Get a forecast
      requestBody:
        content:
          application/json:
            schema:
              type: object
              required: [city]
              properties:
                city:
                  type: string
                  example: Berlin
"""


class TestLoadSpecFile:
    def test_json_file(self, tmp_path):
        spec_file = tmp_path / "openapi.json"
        spec_file.write_text(json.dumps({"openapi": "3.0.0", "info": {"title": "T"}}))

        document = load_spec_file(spec_file)

        assert document["info"]["title"] == "T"

    def test_yaml_file(self, tmp_path):
        spec_file = tmp_path / "openapi.yaml"
        spec_file.write_text(YAML_SPEC)

        document = load_spec_file(str(spec_file))

        assert document["openapi"] == "3.0.1"
        assert "/forecast" in document["paths"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(SpecLoadError, match="not found"):
            load_spec_file(tmp_path / "nope.json")

    def test_malformed_json(self, tmp_path):
        spec_file = tmp_path / "broken.json"
        spec_file.write_text('{"openapi": ')

        with pytest.raises(SpecLoadError, match="Failed to parse"):
            load_spec_file(spec_file)

    def test_malformed_yaml(self, tmp_path):
        spec_file = tmp_path / "broken.yaml"
        spec_file.write_text("openapi: 3.0.0\ninfo: [unclosed\n")

        with pytest.raises(SpecLoadError):
            load_spec_file(spec_file)

    def test_non_mapping_root(self, tmp_path):
        spec_file = tmp_path / "list.json"
        spec_file.write_text("[1, 2, 3]")

        with pytest.raises(SpecLoadError, match="mapping"):
            load_spec_file(spec_file)


class TestSummarizeSpec:
    def test_yaml_summary(self, tmp_path):
        spec_file = tmp_path / "openapi.yaml"
        spec_file.write_text(YAML_SPEC)

        summary = summarize_spec(
            load_spec_file(spec_file), "https://weather.example.com/spec/openapi.yaml"
        )

        assert summary.name == "Weather Service"
        assert summary.version == "2.1"
        assert summary.base_url == "https://weather.example.com/api"
        assert summary.docs_url == "https://weather.example.com/docs"
        assert summary.auth_type == AuthType.OAUTH2
        assert summary.sample_request == {"city": "Berlin"}
        assert [f.name for f in summary.input_schema_fields] == ["city"]
        assert summary.input_schema_fields[0].required is True
        assert summary.suggested_category_slug is None

    def test_defaults_for_bare_document(self):
        summary = summarize_spec({"openapi": "3.0.0"})

        assert summary.name == "My API"
        assert summary.version == "1.0.0"
        assert summary.docs_url == ""
        assert summary.base_url == ""
        assert summary.endpoints == []

    def test_external_docs_win_over_guess(self):
        document = {
            "openapi": "3.0.0",
            "info": {"title": "Docs"},
            "externalDocs": {"url": "https://readme.example.com"},
        }

        summary = summarize_spec(document, "https://api.example.com/openapi.json")

        assert summary.docs_url == "https://readme.example.com"

    def test_non_http_source_url_not_used_for_docs(self):
        summary = summarize_spec({"openapi": "3.0.0"}, "file:///tmp/openapi.json")

        assert summary.docs_url == ""

    def test_summary_serializes_camel_case(self):
        data = summarize_spec({"openapi": "3.0.0", "info": {"title": "X"}}).to_dict()

        assert "baseUrl" in data
        assert "inputSchemaFields" in data
        assert data["version"] == "1.0.0"
