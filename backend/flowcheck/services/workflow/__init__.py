"""Workflow graph validation package.

This package validates a workflow definition (typed nodes plus directed
edges) for structural soundness, connectivity from its trigger nodes and
absence of cycles, and computes a deterministic execution order for
valid graphs. It is a pure function of the graph snapshot: no I/O, no
state shared between calls.

Components:
- WorkflowGraph: Indexed graph model built from the node/edge lists
- GraphAlgorithms: Reachability, Kahn's topological sort, cycle extraction
- Checks: Structural, edge, connectivity and topology phases
- WorkflowValidator: Runs the phases and aggregates the diagnostics
- Exceptions: Precondition violations on malformed input

Example:
    >>> from flowcheck.services.workflow import validate_workflow, get_validation_summary
    >>> result = validate_workflow(nodes, edges)
    >>> get_validation_summary(result)
    'Workflow is valid'
"""

from flowcheck.services.workflow.algorithms import GraphAlgorithms, TopologicalSort
from flowcheck.services.workflow.checks import (
    DEFAULT_CHECKS,
    CheckContext,
    ConnectivityCheck,
    EdgeCheck,
    GraphCheck,
    IssueCollector,
    StructuralCheck,
    TopologyCheck,
)
from flowcheck.services.workflow.exceptions import (
    InvalidGraphInputError,
    WorkflowValidationError,
)
from flowcheck.services.workflow.graph import WorkflowGraph
from flowcheck.services.workflow.validator import (
    WorkflowValidator,
    filter_issues_by_severity,
    get_issues_for_node,
    get_validation_summary,
    validate_workflow,
)

__all__ = [
    # Data structures
    "WorkflowGraph",
    # Algorithms
    "GraphAlgorithms",
    "TopologicalSort",
    # Checks
    "DEFAULT_CHECKS",
    "CheckContext",
    "ConnectivityCheck",
    "EdgeCheck",
    "GraphCheck",
    "IssueCollector",
    "StructuralCheck",
    "TopologyCheck",
    # Validator
    "WorkflowValidator",
    "filter_issues_by_severity",
    "get_issues_for_node",
    "get_validation_summary",
    "validate_workflow",
    # Exceptions
    "InvalidGraphInputError",
    "WorkflowValidationError",
]
