"""Marketplace description synthesis."""

from ..core.models import Endpoint

MIN_DESCRIPTION_LENGTH = 30
MAX_CAPABILITIES = 5


def synthesize_description(spec_description: str, name: str, endpoints: list[Endpoint]) -> str:
    """Produce a human-readable summary for a listing.

    A spec description longer than 30 characters is used verbatim. Otherwise
    the summaries of the first five summarized endpoints are listed as
    capabilities.

    Example:
        >>> synthesize_description("", "Acme", [Endpoint(path="/a", method="GET", summary="List widgets")])
        'Acme provides the following capabilities. List widgets.'
    """
    if spec_description and len(spec_description) > MIN_DESCRIPTION_LENGTH:
        return spec_description

    capabilities = [e.summary for e in endpoints if e.summary][:MAX_CAPABILITIES]

    if not capabilities:
        return spec_description or f"API service: {name}"

    if spec_description:
        prefix = f"{spec_description} "
    else:
        prefix = f"{name or 'This API'} provides the following capabilities. "

    return f"{prefix}{'. '.join(capabilities)}."
