"""Sample payload synthesis from JSON-Schema fragments."""

from typing import Any, Optional


def generate_sample(schema: Any) -> Optional[Any]:
    """Build a representative example value for a schema.

    A top-level ``example`` object (or array) is returned verbatim. Otherwise
    each property contributes its own ``example`` or a placeholder derived
    from its declared type.

    Args:
        schema: JSON-Schema fragment (request or response body)

    Returns:
        Example value, or None if the schema has no usable properties

    Example:
        >>> generate_sample({"properties": {"mode": {"type": "string", "enum": ["a", "b"]}}})
        {'mode': 'a'}
    """
    if not isinstance(schema, dict):
        return None

    example = schema.get("example")
    if isinstance(example, (dict, list)):
        return example

    properties = schema.get("properties")
    if not isinstance(properties, dict):
        return None

    sample: dict[str, Any] = {}
    for key, prop in properties.items():
        if not isinstance(prop, dict):
            prop = {}
        if "example" in prop:
            sample[key] = prop["example"]
        else:
            sample[key] = _placeholder(key, prop)

    return sample or None


def schema_type(prop: dict[str, Any]) -> str:
    """Declared type of a property, ``"string"`` when absent.

    OpenAPI 3.1 type lists (``["string", "null"]``) resolve to their first
    non-null member.
    """
    declared = prop.get("type")
    if isinstance(declared, list):
        declared = next((t for t in declared if t != "null"), None)
    return declared if isinstance(declared, str) and declared else "string"


def _placeholder(key: str, prop: dict[str, Any]) -> Any:
    declared = schema_type(prop)
    if declared == "string":
        enum = prop.get("enum")
        if isinstance(enum, list) and enum:
            return enum[0]
        return f"example_{key}"
    if declared in ("number", "integer"):
        return 0
    if declared == "boolean":
        return True
    if declared == "array":
        return []
    if declared == "object":
        return {}
    return f"example_{key}"
