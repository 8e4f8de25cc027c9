"""Spec extraction: candidate spec document -> normalized listing fields."""

from typing import Any, Optional

from ..core.logging import get_logger
from ..core.models import DetectionResult, Endpoint, InputSchemaField
from ..inference.categories import infer_tags, suggest_category
from ..inference.description import synthesize_description
from .parser import Operation, SpecDocument
from .samples import generate_sample, schema_type

logger = get_logger(__name__)


def extract_from_spec(spec: dict[str, Any], source_url: Optional[str] = None) -> DetectionResult:
    """Extract a DetectionResult from a parsed OpenAPI 3.x / Swagger 2.x document.

    Args:
        spec: Candidate spec mapping
        source_url: URL the document was retrieved from; a relative base URL
            is resolved against it

    Returns:
        DetectionResult with ``detected=True`` and no health status yet

    Example:
        >>> result = extract_from_spec(doc, "https://acme.com/openapi.json")
        >>> result.base_url
        'https://acme.com/v2'
    """
    document = SpecDocument(spec)
    name = document.title
    raw_description = document.description
    base_url = document.base_url(source_url)

    endpoints: list[Endpoint] = []
    health_check_url = ""
    sample_operation: Optional[Operation] = None
    sample_schema: Optional[dict[str, Any]] = None

    for operation in document.operations():
        request_schema = document.request_schema(operation)
        endpoints.append(
            Endpoint(
                path=operation.path,
                method=operation.method.upper(),
                summary=operation.summary,
                request_schema=request_schema,
                tags=operation.tags,
            )
        )

        if operation.method == "get" and not health_check_url and "health" in operation.path.lower():
            health_check_url = (
                f"{base_url.rstrip('/')}{operation.path}" if base_url else operation.path
            )

        if operation.method == "post" and sample_operation is None and request_schema:
            sample_operation = operation
            sample_schema = request_schema

    sample_request = None
    sample_response = None
    input_schema_fields: list[InputSchemaField] = []

    if sample_operation is not None:
        sample_request = generate_sample(sample_schema)
        input_schema_fields = input_fields(sample_schema)
        for schema in document.response_schemas(sample_operation):
            sample_response = generate_sample(schema)
            if sample_response is not None:
                break
        logger.debug(
            f"Samples taken from {sample_operation.method.upper()} {sample_operation.path}"
        )

    summaries = " ".join(e.summary for e in endpoints)
    combined_text = f"{name} {raw_description} {summaries}"

    logger.info(
        f"Extracted spec '{name}' ({document.flavor.value}): {len(endpoints)} endpoints"
    )

    return DetectionResult(
        detected=True,
        name=name,
        description=synthesize_description(raw_description, name, endpoints),
        base_url=base_url,
        health_check_url=health_check_url,
        docs_url=document.docs_url,
        auth_type=document.auth_type(),
        listing_type=document.listing_type,
        sample_request=sample_request,
        sample_response=sample_response,
        endpoints=endpoints,
        input_schema_fields=input_schema_fields,
        suggested_category_slug=suggest_category(combined_text),
        tags=infer_tags(document.spec_tags, endpoints),
    )


def input_fields(schema: dict[str, Any]) -> list[InputSchemaField]:
    """Describe the top-level properties of a request schema, in order."""
    properties = schema.get("properties")
    if not isinstance(properties, dict):
        return []

    required = schema.get("required")
    required = required if isinstance(required, list) else []

    fields = []
    for key, prop in properties.items():
        prop = prop if isinstance(prop, dict) else {}
        description = prop.get("description")
        fields.append(
            InputSchemaField(
                name=str(key),
                type=schema_type(prop),
                required=key in required,
                description=description if isinstance(description, str) else "",
            )
        )
    return fields
