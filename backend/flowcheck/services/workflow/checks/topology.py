"""Cycle detection and topological sorting."""

from __future__ import annotations

from flowcheck.models.enums import IssueCode
from flowcheck.services.workflow.algorithms import GraphAlgorithms
from flowcheck.services.workflow.checks.base import CheckContext, GraphCheck


class TopologyCheck(GraphCheck):
    """Run Kahn's algorithm and report one error if a cycle remains.

    The sort outcome is stored on the context so the validator can attach
    the execution order. The error names one representative cycle and is
    attributed to its first node and to the edge leaving that node along
    the cycle.
    """

    name = "topology"

    def run(self, context: CheckContext) -> None:
        graph = context.graph
        result = GraphAlgorithms.topological_sort(graph)
        context.topology = result

        cycle = GraphAlgorithms.find_cycle(graph, result.remaining)
        if cycle is None:
            return

        ids = [graph.node_at(index).id for index in cycle]
        edge = next(e for e in graph.outgoing_edges(cycle[0]) if e.target == ids[1])
        context.issues.error(
            IssueCode.CYCLE_DETECTED,
            f"Cycle detected: {' -> '.join(ids)}",
            node_id=ids[0],
            edge_id=edge.id,
            suggestion="Remove one of the connections to break the cycle",
        )


__all__ = ["TopologyCheck"]
