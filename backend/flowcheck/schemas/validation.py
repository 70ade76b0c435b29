"""Pydantic schemas for workflow graph validation.

This module defines the request/response shapes of the validator: the
diagnostics it emits, the aggregated result, and the options that tune a
validation run. All validation results use consistent issue codes and
human-readable messages.
"""

from __future__ import annotations

from pydantic import ConfigDict, Field

from flowcheck.models.enums import IssueCode, IssueSeverity
from flowcheck.schemas.base import BaseSchema
from flowcheck.schemas.workflow import WorkflowEdge, WorkflowNode

# =============================================================================
# Validation Options
# =============================================================================


class ValidationOptions(BaseSchema):
    """Options for a validation run.

    Size limits are disabled unless set. Dropping warnings never changes
    the verdict, since validity depends on errors only.
    """

    max_nodes: int | None = Field(
        default=None,
        ge=1,
        description="Maximum allowed nodes (None for no limit)",
    )
    max_edges: int | None = Field(
        default=None,
        ge=0,
        description="Maximum allowed edges (None for no limit)",
    )
    include_warnings: bool = Field(
        default=True,
        description="Include non-blocking warnings in the result",
    )


# =============================================================================
# Validation Result Schemas
# =============================================================================


class ValidationIssue(BaseSchema):
    """Single diagnostic produced by a validation phase.

    Issues are immutable once created. ``node_id``, ``edge_id`` and
    ``field`` attribute the issue to a part of the graph so the editor can
    render it next to the implicated element.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(
        ...,
        description="Issue identifier, sequential within one validation run",
        examples=["issue-1"],
    )
    severity: IssueSeverity = Field(
        ...,
        description="Blocking error or advisory warning",
    )
    code: IssueCode = Field(
        ...,
        description="Machine-readable issue code",
    )
    message: str = Field(
        ...,
        description="Human-readable message",
    )
    node_id: str | None = Field(
        default=None,
        description="Affected node ID if applicable",
    )
    edge_id: str | None = Field(
        default=None,
        description="Affected edge ID if applicable",
    )
    field: str | None = Field(
        default=None,
        description="Affected node field if applicable",
    )
    suggestion: str | None = Field(
        default=None,
        description="Suggested fix or action",
    )
    auto_fixable: bool = Field(
        default=False,
        description="Whether the editor can fix the issue automatically",
    )


class ValidationResult(BaseSchema):
    """Complete validation result.

    ``valid`` is true iff no issue has severity ``error``.
    ``execution_order`` is only set when the graph has at least one
    trigger node and no cycle.
    """

    valid: bool = Field(
        ...,
        description="Whether the workflow passed validation",
    )
    issues: list[ValidationIssue] = Field(
        default_factory=list,
        description="Diagnostics in phase order, then discovery order",
    )
    execution_order: list[str] | None = Field(
        default=None,
        description="Deterministic topological order of node IDs",
    )
    execution_levels: list[list[str]] | None = Field(
        default=None,
        description="Node IDs grouped by dependency depth",
    )
    node_count: int = Field(
        default=0,
        ge=0,
        description="Number of nodes submitted",
    )
    edge_count: int = Field(
        default=0,
        ge=0,
        description="Number of edges submitted",
    )


# =============================================================================
# API Request/Response Schemas
# =============================================================================


class WorkflowValidationRequest(BaseSchema):
    """Request body for validating a workflow graph snapshot."""

    nodes: list[WorkflowNode] = Field(
        ...,
        description="Workflow nodes in editor order",
    )
    edges: list[WorkflowEdge] = Field(
        default_factory=list,
        description="Workflow edges in editor order",
    )
    options: ValidationOptions | None = Field(
        default=None,
        description="Validation options (server defaults when omitted)",
    )


class ValidationSummaryResponse(BaseSchema):
    """One-line summary of a validation run."""

    valid: bool = Field(
        ...,
        description="Whether the workflow passed validation",
    )
    summary: str = Field(
        ...,
        description="Human-readable summary",
        examples=["2 errors, 1 warning"],
    )
    error_count: int = Field(
        ...,
        ge=0,
        description="Number of errors",
    )
    warning_count: int = Field(
        ...,
        ge=0,
        description="Number of warnings",
    )


__all__ = [
    "ValidationIssue",
    "ValidationOptions",
    "ValidationResult",
    "ValidationSummaryResponse",
    "WorkflowValidationRequest",
]
