"""Workflow validation exceptions.

Anomalies in a well-typed graph are reported as diagnostics, never raised.
The exceptions here cover precondition violations only: input that is not
a list of node/edge shaped objects at all.
"""

from typing import Any


class WorkflowValidationError(ValueError):
    """Base exception for workflow validation errors.

    Attributes:
        message: Human-readable error message.
        error_code: Machine-readable error code for API responses.
        details: Additional error context as dictionary.
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class InvalidGraphInputError(WorkflowValidationError):
    """Raised when nodes or edges are not well-typed collections.

    Attributes:
        collection: Which input failed ("nodes" or "edges").
        errors: Pydantic error entries describing the failure.
    """

    def __init__(self, collection: str, errors: list[dict[str, Any]]) -> None:
        super().__init__(
            message=f"Invalid workflow {collection}: {len(errors)} validation error(s)",
            error_code="INVALID_GRAPH_INPUT",
            details={"collection": collection, "errors": errors},
        )
        self.collection = collection
        self.errors = errors


__all__ = [
    "InvalidGraphInputError",
    "WorkflowValidationError",
]
