"""Workflow graph validation service.

This module provides the WorkflowValidator, which runs every validation
phase over a graph snapshot, aggregates the diagnostics into one ordered
list and derives the verdict. It also provides pure projections over an
existing result (severity/node filters and a one-line summary).

The validator is stateless: every call builds its own graph and working
sets, so concurrent callers need no coordination.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from pydantic import TypeAdapter, ValidationError

from flowcheck.core.logging import get_logger
from flowcheck.models.enums import IssueSeverity
from flowcheck.schemas.validation import (
    ValidationIssue,
    ValidationOptions,
    ValidationResult,
)
from flowcheck.schemas.workflow import BaseNode, WorkflowEdge, WorkflowNode
from flowcheck.services.workflow.algorithms import GraphAlgorithms
from flowcheck.services.workflow.checks import DEFAULT_CHECKS, CheckContext
from flowcheck.services.workflow.exceptions import InvalidGraphInputError
from flowcheck.services.workflow.graph import WorkflowGraph

logger = get_logger(__name__)

_NODES_ADAPTER: TypeAdapter[list[BaseNode]] = TypeAdapter(list[WorkflowNode])
_EDGES_ADAPTER: TypeAdapter[list[WorkflowEdge]] = TypeAdapter(list[WorkflowEdge])


class WorkflowValidator:
    """Stateless workflow graph validator.

    Runs the structural, edge, connectivity and topology phases in that
    order. ``valid`` is true iff no issue has severity error; the
    execution order is attached only when the graph has a trigger node
    and no cycle.

    Example:
        >>> validator = WorkflowValidator()
        >>> result = validator.validate(nodes, edges)
        >>> if result.valid:
        ...     print(result.execution_order)
    """

    def __init__(self, options: ValidationOptions | None = None) -> None:
        """Initialize the validator.

        Args:
            options: Validation settings applied to every call.
        """
        self.options = options or ValidationOptions()

    def validate(
        self,
        nodes: Sequence[BaseNode | dict[str, Any]],
        edges: Sequence[WorkflowEdge | dict[str, Any]],
        options: ValidationOptions | None = None,
    ) -> ValidationResult:
        """Validate a workflow graph snapshot.

        Nodes and edges may be schema instances or plain mappings in the
        editor's shape. The inputs are never mutated.

        Args:
            nodes: Workflow nodes in editor order.
            edges: Workflow edges in editor order.
            options: Options for this call only. Defaults to the
                validator's options.

        Returns:
            ValidationResult with the ordered issues and, when available,
            the execution order.

        Raises:
            InvalidGraphInputError: If nodes or edges are not lists of
                node/edge shaped objects.
        """
        options = options or self.options
        node_models = _coerce("nodes", _NODES_ADAPTER, nodes)
        edge_models = _coerce("edges", _EDGES_ADAPTER, edges)

        graph = WorkflowGraph(node_models, edge_models)
        context = CheckContext(graph=graph, options=options)
        for check in DEFAULT_CHECKS:
            check().run(context)

        issues = context.issues.issues
        valid = not any(issue.severity == IssueSeverity.ERROR for issue in issues)
        if not options.include_warnings:
            issues = filter_issues_by_severity(issues, IssueSeverity.ERROR)

        execution_order: list[str] | None = None
        execution_levels: list[list[str]] | None = None
        topology = context.topology
        if topology is not None and not topology.has_cycle and graph.entry_points():
            execution_order = [graph.node_at(index).id for index in topology.order]
            execution_levels = [
                [graph.node_at(index).id for index in level]
                for level in GraphAlgorithms.group_levels(topology)
            ]

        logger.debug(
            "Workflow validation completed",
            extra={
                "context": {
                    "node_count": len(node_models),
                    "edge_count": len(edge_models),
                    "issue_count": len(issues),
                    "valid": valid,
                }
            },
        )

        return ValidationResult(
            valid=valid,
            issues=issues,
            execution_order=execution_order,
            execution_levels=execution_levels,
            node_count=len(node_models),
            edge_count=len(edge_models),
        )


def validate_workflow(
    nodes: Sequence[BaseNode | dict[str, Any]],
    edges: Sequence[WorkflowEdge | dict[str, Any]],
    options: ValidationOptions | None = None,
) -> ValidationResult:
    """Validate a workflow graph snapshot with the given options."""
    return WorkflowValidator().validate(nodes, edges, options)


def filter_issues_by_severity(
    issues: Iterable[ValidationIssue],
    severity: IssueSeverity | str,
) -> list[ValidationIssue]:
    """Filter issues by severity."""
    return [issue for issue in issues if issue.severity == severity]


def get_issues_for_node(
    issues: Iterable[ValidationIssue],
    node_id: str,
) -> list[ValidationIssue]:
    """Get issues attributed to a specific node."""
    return [issue for issue in issues if issue.node_id == node_id]


def get_validation_summary(result: ValidationResult) -> str:
    """Get human-readable summary of a validation result.

    Example:
        >>> get_validation_summary(result)
        '2 errors, 1 warning'
    """
    error_count = len(filter_issues_by_severity(result.issues, IssueSeverity.ERROR))
    warning_count = len(filter_issues_by_severity(result.issues, IssueSeverity.WARNING))

    parts: list[str] = []
    if error_count > 0:
        parts.append(f"{error_count} error{'s' if error_count > 1 else ''}")
    if warning_count > 0:
        parts.append(f"{warning_count} warning{'s' if warning_count > 1 else ''}")

    if not parts:
        return "Workflow is valid"

    return ", ".join(parts)


def _coerce(collection: str, adapter: TypeAdapter[Any], value: Any) -> list[Any]:
    """Validate raw input into schema instances or raise a precondition error."""
    try:
        return adapter.validate_python(value)
    except ValidationError as e:
        raise InvalidGraphInputError(
            collection,
            e.errors(include_url=False, include_context=False, include_input=False),
        ) from e


__all__ = [
    "WorkflowValidator",
    "filter_issues_by_severity",
    "get_issues_for_node",
    "get_validation_summary",
    "validate_workflow",
]
