"""Pydantic schemas for request/response validation.

This package contains all Pydantic models for the validator and its API.
Exports all schemas for convenient importing.
"""

from flowcheck.schemas.base import BaseSchema, ErrorResponse
from flowcheck.schemas.validation import (
    ValidationIssue,
    ValidationOptions,
    ValidationResult,
    ValidationSummaryResponse,
    WorkflowValidationRequest,
)
from flowcheck.schemas.workflow import (
    ActionNode,
    BaseNode,
    ControlNode,
    GenericNode,
    IntegrationNode,
    TriggerNode,
    WorkflowEdge,
    WorkflowNode,
)

__all__ = [
    # Base
    "BaseSchema",
    "ErrorResponse",
    # Workflow graph
    "ActionNode",
    "BaseNode",
    "ControlNode",
    "GenericNode",
    "IntegrationNode",
    "TriggerNode",
    "WorkflowEdge",
    "WorkflowNode",
    # Validation
    "ValidationIssue",
    "ValidationOptions",
    "ValidationResult",
    "ValidationSummaryResponse",
    "WorkflowValidationRequest",
]
