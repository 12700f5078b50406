# This project was developed with assistance from AI tools.
"""RFC 7807 Problem Details error response schema."""

from pydantic import BaseModel, Field

from . import FieldError


class ErrorResponse(BaseModel):
    """RFC 7807 Problem Details body returned by every failing endpoint.

    ``errors`` carries per-field validation failures for wizard submissions so
    the form can show them inline next to the offending step.
    """

    type: str = Field(default="about:blank", description="Problem type URI.")
    title: str = Field(description="Short human-readable summary of the problem.")
    status: int = Field(description="HTTP status code.")
    detail: str = Field(default="", description="Explanation specific to this occurrence.")
    request_id: str = Field(default="", description="Correlation ID for tracing in logs.")
    errors: list[FieldError] = Field(
        default_factory=list,
        description="Field-level validation failures, when the problem is a bad form.",
    )
