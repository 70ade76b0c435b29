"""Business logic services.

This package contains the workflow validation service.
"""

from flowcheck.services.workflow import (
    WorkflowValidator,
    filter_issues_by_severity,
    get_issues_for_node,
    get_validation_summary,
    validate_workflow,
)

__all__ = [
    "WorkflowValidator",
    "filter_issues_by_severity",
    "get_issues_for_node",
    "get_validation_summary",
    "validate_workflow",
]
