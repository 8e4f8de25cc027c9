"""Data models for specscout.

This module defines the Pydantic models produced by detection. Attributes are
snake_case in Python and serialize to camelCase on the wire, which is the
shape listing forms and the CLI deploy flow consume.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AuthType(str, Enum):
    """Authentication scheme a listing advertises."""

    NONE = "none"
    API_KEY = "api_key"
    OAUTH2 = "oauth2"
    JWT = "jwt"


class ListingType(str, Enum):
    """Transport kind of a listing."""

    REST_API = "REST_API"
    WEBSOCKET = "WEBSOCKET"


class WireModel(BaseModel):
    """Base model with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready camelCase representation."""
        return self.model_dump(by_alias=True, mode="json")


class Endpoint(WireModel):
    """A single operation (path + method) found in a spec document."""

    path: str
    method: str
    summary: str = ""
    request_schema: Optional[dict[str, Any]] = None
    # Only used for tag inference; never serialized.
    tags: list[str] = Field(default_factory=list, exclude=True)

    def __str__(self) -> str:
        summary = f" - {self.summary}" if self.summary else ""
        return f"{self.method} {self.path}{summary}"


class InputSchemaField(WireModel):
    """A request-body property of the sample operation."""

    name: str
    type: str = "string"
    required: bool = False
    description: str = ""


class HealthCheckStatus(WireModel):
    """Outcome of a single health probe."""

    ok: bool
    latency_ms: int


class DetectionResult(WireModel):
    """Normalized description of an API, ready to pre-fill a listing."""

    detected: bool
    name: str = ""
    description: str = ""
    base_url: str = ""
    health_check_url: str = ""
    docs_url: str = ""
    auth_type: AuthType = AuthType.NONE
    listing_type: ListingType = ListingType.REST_API
    sample_request: Optional[Any] = None
    sample_response: Optional[Any] = None
    endpoints: list[Endpoint] = Field(default_factory=list)
    input_schema_fields: list[InputSchemaField] = Field(default_factory=list)
    suggested_category_slug: Optional[str] = None
    tags: list[str] = Field(default_factory=list, max_length=10)
    health_check_status: Optional[HealthCheckStatus] = None
    warnings: list[str] = Field(default_factory=list)


class SpecSummary(WireModel):
    """Listing fields extracted from a local spec file (no network access)."""

    name: str
    description: str = ""
    version: str = "1.0.0"
    base_url: str = ""
    docs_url: str = ""
    auth_type: AuthType = AuthType.NONE
    listing_type: ListingType = ListingType.REST_API
    endpoints: list[Endpoint] = Field(default_factory=list)
    sample_request: Optional[Any] = None
    sample_response: Optional[Any] = None
    input_schema_fields: list[InputSchemaField] = Field(default_factory=list)
    suggested_category_slug: Optional[str] = None
    tags: list[str] = Field(default_factory=list, max_length=10)
