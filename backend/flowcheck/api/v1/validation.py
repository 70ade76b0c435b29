"""Validation API Router.

This module provides REST API endpoints for validating workflow graph
snapshots submitted by the workflow editor. The endpoints are stateless:
the graph travels in the request body and nothing is persisted.
"""

from __future__ import annotations

from fastapi import APIRouter

from flowcheck.core.config import settings
from flowcheck.core.logging import get_logger
from flowcheck.models.enums import IssueSeverity
from flowcheck.schemas.validation import (
    ValidationOptions,
    ValidationResult,
    ValidationSummaryResponse,
    WorkflowValidationRequest,
)
from flowcheck.services.workflow import (
    filter_issues_by_severity,
    get_validation_summary,
    validate_workflow,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/validation", tags=["validation"])


def _resolve_options(options: ValidationOptions | None) -> ValidationOptions:
    """Fall back to the configured size limits when no options are sent."""
    if options is not None:
        return options
    return ValidationOptions(
        max_nodes=settings.VALIDATION_MAX_NODES,
        max_edges=settings.VALIDATION_MAX_EDGES,
    )


# =============================================================================
# Validation Endpoints
# =============================================================================


@router.post(
    "/workflows",
    response_model=ValidationResult,
    summary="Validate Workflow Graph",
    description="Validate structure, connectivity and acyclicity of a workflow graph.",
    responses={
        200: {"description": "Validation completed (see `valid` for the verdict)"},
        422: {"description": "Request body is not a node/edge graph"},
    },
)
async def validate_workflow_graph(request: WorkflowValidationRequest) -> ValidationResult:
    """Validate a workflow graph snapshot.

    Always answers 200 for a well-formed graph; problems with the graph
    itself are reported as issues in the result.

    Args:
        request: Nodes, edges and optional validation options.

    Returns:
        ValidationResult with issues and, when available, execution order.
    """
    result = validate_workflow(
        request.nodes,
        request.edges,
        _resolve_options(request.options),
    )
    logger.info(
        "Workflow graph validated",
        extra={
            "context": {
                "action": "validate_workflow",
                "valid": result.valid,
                "node_count": result.node_count,
                "issue_count": len(result.issues),
            }
        },
    )
    return result


@router.post(
    "/workflows/summary",
    response_model=ValidationSummaryResponse,
    summary="Summarize Workflow Validation",
    description="Validate a workflow graph and return only the verdict and issue counts.",
    responses={
        200: {"description": "Validation completed"},
        422: {"description": "Request body is not a node/edge graph"},
    },
)
async def summarize_workflow_graph(
    request: WorkflowValidationRequest,
) -> ValidationSummaryResponse:
    """Validate a workflow graph and summarize the outcome.

    Lightweight variant for editor status bars.
    """
    result = validate_workflow(
        request.nodes,
        request.edges,
        _resolve_options(request.options),
    )
    return ValidationSummaryResponse(
        valid=result.valid,
        summary=get_validation_summary(result),
        error_count=len(filter_issues_by_severity(result.issues, IssueSeverity.ERROR)),
        warning_count=len(filter_issues_by_severity(result.issues, IssueSeverity.WARNING)),
    )
