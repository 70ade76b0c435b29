"""Edge checks: self-loops, dangling references, duplicate connections."""

from __future__ import annotations

from flowcheck.models.enums import IssueCode
from flowcheck.services.workflow.checks.base import CheckContext, GraphCheck


class EdgeCheck(GraphCheck):
    """Validate every submitted edge, dangling ones included."""

    name = "edges"

    def run(self, context: CheckContext) -> None:
        graph = context.graph
        issues = context.issues

        for edge in graph.edges:
            if edge.source == edge.target:
                issues.error(
                    IssueCode.SELF_LOOP,
                    f"Node {edge.source} cannot connect to itself",
                    node_id=edge.source,
                    edge_id=edge.id,
                    suggestion="Remove the self-referencing connection",
                )

            if edge.source not in graph:
                issues.error(
                    IssueCode.DANGLING_EDGE,
                    f"Edge references non-existent source node: {edge.source}",
                    edge_id=edge.id,
                    suggestion="Remove or reconnect this edge",
                )

            # a self-loop on a missing node is reported once
            if edge.target != edge.source and edge.target not in graph:
                issues.error(
                    IssueCode.DANGLING_EDGE,
                    f"Edge references non-existent target node: {edge.target}",
                    edge_id=edge.id,
                    suggestion="Remove or reconnect this edge",
                )

        seen_pairs: set[tuple[str, str]] = set()
        for edge in graph.edges:
            pair = (edge.source, edge.target)
            if pair in seen_pairs:
                issues.warning(
                    IssueCode.DUPLICATE_EDGE,
                    f"Duplicate connection from {edge.source} to {edge.target}",
                    edge_id=edge.id,
                    suggestion="Remove the duplicate connection",
                )
            seen_pairs.add(pair)


__all__ = ["EdgeCheck"]
