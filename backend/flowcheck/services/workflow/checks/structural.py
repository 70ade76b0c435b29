"""Structural checks: emptiness, entry points, size limits, node completeness."""

from __future__ import annotations

from flowcheck.models.enums import IssueCode
from flowcheck.services.workflow.checks.base import CheckContext, GraphCheck


class StructuralCheck(GraphCheck):
    """Validate the overall shape of the node list.

    - Empty workflow: one error, nothing else is inspected.
    - Size limits (when configured): one error per exceeded limit.
    - No trigger node: error. Several trigger nodes: warning.
    - Per node: missing display name is a warning on ``field="label"``;
      a repeated node id is an error.
    """

    name = "structural"

    def run(self, context: CheckContext) -> None:
        graph = context.graph
        issues = context.issues

        if not graph.submitted_nodes:
            issues.error(
                IssueCode.EMPTY_WORKFLOW,
                "Workflow is empty",
                suggestion="Add at least one trigger node to start your workflow",
            )
            return

        self._check_size_limits(context)

        trigger_count = len(graph.entry_points())
        if trigger_count == 0:
            issues.error(
                IssueCode.NO_TRIGGER_NODE,
                "Workflow must have a trigger",
                suggestion="Add a Webhook, Schedule, or Manual trigger node",
            )
        elif trigger_count > 1:
            issues.warning(
                IssueCode.MULTIPLE_TRIGGER_NODES,
                f"Workflow has multiple trigger nodes ({trigger_count})",
                suggestion="Consider using a single trigger for clarity, or use parallel execution",
            )

        seen_ids: set[str] = set()
        for node in graph.submitted_nodes:
            if node.label is None:
                issues.warning(
                    IssueCode.MISSING_LABEL,
                    "Node has no name",
                    node_id=node.id,
                    field="label",
                    suggestion="Add a descriptive name to help identify this node",
                    auto_fixable=True,
                )

            if node.id in seen_ids:
                issues.error(
                    IssueCode.DUPLICATE_NODE_ID,
                    f"Duplicate node ID detected: {node.id}",
                    node_id=node.id,
                    suggestion="This is a system error. Please reload the workflow.",
                )
            seen_ids.add(node.id)

    def _check_size_limits(self, context: CheckContext) -> None:
        """Validate submitted graph size against configured limits."""
        options = context.options
        node_total = len(context.graph.submitted_nodes)
        edge_total = len(context.graph.edges)

        if options.max_nodes is not None and node_total > options.max_nodes:
            context.issues.error(
                IssueCode.GRAPH_TOO_LARGE,
                f"Workflow exceeds maximum node limit ({node_total} > {options.max_nodes})",
                suggestion="Split the workflow into smaller workflows",
            )

        if options.max_edges is not None and edge_total > options.max_edges:
            context.issues.error(
                IssueCode.GRAPH_TOO_LARGE,
                f"Workflow exceeds maximum edge limit ({edge_total} > {options.max_edges})",
                suggestion="Split the workflow into smaller workflows",
            )


__all__ = ["StructuralCheck"]
