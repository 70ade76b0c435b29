"""Base classes shared by the validation phases."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar

from flowcheck.models.enums import IssueCode, IssueSeverity
from flowcheck.schemas.validation import ValidationIssue, ValidationOptions

if TYPE_CHECKING:
    from flowcheck.services.workflow.algorithms import TopologicalSort
    from flowcheck.services.workflow.graph import WorkflowGraph


class IssueCollector:
    """Append-only diagnostics list for one validation run.

    Issue ids are sequential per collector, so validating the same input
    twice yields identical ids.
    """

    def __init__(self) -> None:
        self._issues: list[ValidationIssue] = []

    @property
    def issues(self) -> list[ValidationIssue]:
        """Issues in the order they were added."""
        return list(self._issues)

    def add(
        self,
        severity: IssueSeverity,
        code: IssueCode,
        message: str,
        *,
        node_id: str | None = None,
        edge_id: str | None = None,
        field: str | None = None,
        suggestion: str | None = None,
        auto_fixable: bool = False,
    ) -> ValidationIssue:
        """Create an issue and append it."""
        issue = ValidationIssue(
            id=f"issue-{len(self._issues) + 1}",
            severity=severity,
            code=code,
            message=message,
            node_id=node_id,
            edge_id=edge_id,
            field=field,
            suggestion=suggestion,
            auto_fixable=auto_fixable,
        )
        self._issues.append(issue)
        return issue

    def error(self, code: IssueCode, message: str, **attribution: Any) -> ValidationIssue:
        """Append a blocking error."""
        return self.add(IssueSeverity.ERROR, code, message, **attribution)

    def warning(self, code: IssueCode, message: str, **attribution: Any) -> ValidationIssue:
        """Append an advisory warning."""
        return self.add(IssueSeverity.WARNING, code, message, **attribution)

    def __len__(self) -> int:
        return len(self._issues)


@dataclass
class CheckContext:
    """Working state of one validation run, shared by all phases.

    Attributes:
        graph: Graph built from the submitted snapshot.
        options: Options of this run.
        issues: Collector every phase appends to.
        topology: Kahn's algorithm outcome, set by the topology phase.
    """

    graph: WorkflowGraph
    options: ValidationOptions
    issues: IssueCollector = field(default_factory=IssueCollector)
    topology: TopologicalSort | None = None


class GraphCheck(ABC):
    """Abstract base class for a validation phase.

    A phase inspects the graph and appends diagnostics to the context.
    Phases never depend on one another's findings.
    """

    name: ClassVar[str]

    @abstractmethod
    def run(self, context: CheckContext) -> None:
        """Inspect ``context.graph`` and append issues to ``context.issues``."""


__all__ = [
    "CheckContext",
    "GraphCheck",
    "IssueCollector",
]
