"""Base Pydantic schemas with common patterns.

This module defines the base schema and the shared response shapes used
across the API.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class BaseSchema(BaseModel):
    """Base schema with common configuration for all schemas.

    Configures Pydantic v2 settings for consistent behavior across all schemas.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        str_strip_whitespace=True,
        use_enum_values=True,
    )


class ErrorResponse(BaseSchema):
    """Standard error response schema."""

    error: str = Field(
        ...,
        description="Error type identifier",
        examples=["InvalidGraphInputError"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Workflow nodes must be a list"],
    )
    details: dict[str, Any] | None = Field(
        default=None,
        description="Additional error details",
        examples=[{"errors": [{"loc": ["nodes"], "msg": "Input should be a valid list"}]}],
    )


__all__ = [
    "BaseSchema",
    "ErrorResponse",
]
