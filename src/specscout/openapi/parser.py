"""OpenAPI 3.x / Swagger 2.x document wrapper.

Wraps a parsed spec mapping and exposes the pieces extraction needs through
accessors that dispatch on the document flavor, so callers never probe
nested keys of an untyped mapping themselves.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Optional
from urllib.parse import urljoin, urlparse

from ..core.logging import get_logger
from ..core.models import AuthType, ListingType

logger = get_logger(__name__)

HTTP_METHODS = ("get", "post", "put", "patch", "delete")


class SpecFlavor(str, Enum):
    """Which family of spec a document belongs to."""

    OPENAPI3 = "openapi3"
    SWAGGER2 = "swagger2"
    UNRECOGNIZED = "unrecognized"


@dataclass
class Operation:
    """A single path + method entry of a spec document."""

    path: str
    method: str
    """Lower-case HTTP method"""

    raw: dict[str, Any] = field(default_factory=dict)

    @property
    def summary(self) -> str:
        return _as_str(self.raw.get("summary")) or _as_str(self.raw.get("description"))

    @property
    def tags(self) -> list[str]:
        tags = self.raw.get("tags")
        if not isinstance(tags, list):
            return []
        return [t for t in tags if isinstance(t, str)]


class SpecDocument:
    """Parsed OpenAPI/Swagger specification.

    Example:
        doc = SpecDocument(spec_dict)
        doc.flavor            # SpecFlavor.OPENAPI3
        doc.title             # "Acme API"
        doc.base_url("https://acme.com/openapi.json")
        for op in doc.operations():
            print(op.method, op.path)
    """

    def __init__(self, spec_dict: dict[str, Any]):
        """Initialize from a parsed spec dictionary.

        Args:
            spec_dict: Parsed specification (JSON/YAML as dict)
        """
        self.spec = spec_dict if isinstance(spec_dict, dict) else {}

        if self.spec.get("openapi"):
            self.flavor = SpecFlavor.OPENAPI3
        elif self.spec.get("swagger"):
            self.flavor = SpecFlavor.SWAGGER2
        else:
            self.flavor = SpecFlavor.UNRECOGNIZED

    @property
    def info(self) -> dict[str, Any]:
        return _as_dict(self.spec.get("info"))

    @property
    def title(self) -> str:
        return _as_str(self.info.get("title"))

    @property
    def description(self) -> str:
        return _as_str(self.info.get("description"))

    @property
    def version(self) -> str:
        version = self.info.get("version")
        # YAML turns `version: 1.0` into a float
        return str(version) if version not in (None, "") else ""

    @property
    def docs_url(self) -> str:
        return _as_str(_as_dict(self.spec.get("externalDocs")).get("url"))

    @property
    def listing_type(self) -> ListingType:
        return ListingType.WEBSOCKET if self.spec.get("asyncapi") else ListingType.REST_API

    @property
    def spec_tags(self) -> list[str]:
        """Names declared in the top-level ``tags`` list."""
        tags = self.spec.get("tags")
        if not isinstance(tags, list):
            return []
        return [
            t["name"] for t in tags if isinstance(t, dict) and isinstance(t.get("name"), str)
        ]

    def base_url(self, source_url: Optional[str] = None) -> str:
        """Resolve the API base URL.

        OpenAPI 3 uses the first ``servers[].url``; Swagger 2 builds it from
        ``schemes``, ``host`` and ``basePath``. A relative result is resolved
        against ``source_url``, the URL the document itself was read from.

        Args:
            source_url: URL the document was retrieved from, if any

        Returns:
            Base URL, or empty string when the document declares none
        """
        base_url = ""
        servers = self.spec.get("servers")

        if self.flavor != SpecFlavor.SWAGGER2 and isinstance(servers, list) and servers:
            base_url = _as_str(_as_dict(servers[0]).get("url"))
        elif self.flavor != SpecFlavor.OPENAPI3 and self.spec.get("host"):
            schemes = self.spec.get("schemes")
            scheme = schemes[0] if isinstance(schemes, list) and schemes else "https"
            base_path = _as_str(self.spec.get("basePath"))
            base_url = f"{scheme}://{self.spec['host']}{base_path}"

        if base_url and source_url and not urlparse(base_url).scheme:
            base_url = urljoin(source_url, base_url)

        return base_url

    def auth_type(self) -> AuthType:
        """Classify the first declared security scheme."""
        if self.flavor == SpecFlavor.SWAGGER2:
            schemes = self.spec.get("securityDefinitions")
        else:
            schemes = _as_dict(self.spec.get("components")).get("securitySchemes")

        if not isinstance(schemes, dict) or not schemes:
            return AuthType.NONE

        first = _as_dict(next(iter(schemes.values())))
        scheme_type = _as_str(first.get("type")).lower()

        if scheme_type == "oauth2":
            return AuthType.OAUTH2
        if scheme_type == "http" and _as_str(first.get("scheme")).lower() == "bearer":
            return AuthType.JWT
        return AuthType.API_KEY

    def operations(self) -> Iterator[Operation]:
        """Yield operations in document order, skipping non-method keys."""
        paths = self.spec.get("paths")
        if not isinstance(paths, dict):
            return

        for path, path_item in paths.items():
            if not isinstance(path_item, dict):
                continue
            for method, operation in path_item.items():
                if not isinstance(method, str) or method.lower() not in HTTP_METHODS:
                    continue
                if not isinstance(operation, dict):
                    continue
                yield Operation(path=str(path), method=method.lower(), raw=operation)

    def request_schema(self, operation: Operation) -> Optional[dict[str, Any]]:
        """JSON request-body schema of an operation.

        Looks at ``requestBody.content["application/json"].schema`` and, for
        Swagger 2 style operations, a ``parameters[]`` entry with ``in: body``.
        """
        content = _as_dict(_as_dict(operation.raw.get("requestBody")).get("content"))
        schema = _as_dict(content.get("application/json")).get("schema")
        if isinstance(schema, dict):
            return schema

        parameters = operation.raw.get("parameters")
        if isinstance(parameters, list):
            for parameter in parameters:
                if isinstance(parameter, dict) and parameter.get("in") == "body":
                    body_schema = parameter.get("schema")
                    return body_schema if isinstance(body_schema, dict) else None

        return None

    def response_schemas(self, operation: Operation) -> list[dict[str, Any]]:
        """Candidate schemas of the 200 (or else 201) response, best first.

        The JSON media-type schema comes first, then a Swagger 2 style
        top-level ``schema``.
        """
        responses = _as_dict(operation.raw.get("responses"))
        success = responses.get("200") or responses.get("201")
        if not isinstance(success, dict):
            # YAML specs frequently use integer status keys
            success = responses.get(200) or responses.get(201)
        if not isinstance(success, dict):
            return []

        content = _as_dict(success.get("content"))
        candidates = [
            _as_dict(content.get("application/json")).get("schema"),
            success.get("schema"),
        ]
        return [schema for schema in candidates if isinstance(schema, dict)]


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""
