"""Connectivity analysis: isolated and unreachable nodes.

Every node is classified from a forward BFS seeded with all trigger nodes
at once:

- isolated: no incident edge in either direction ("not connected"). A
  trigger without outgoing edges counts as isolated too, since it cannot
  drive any downstream work.
- unreachable: has incident edges but the BFS never visited it.

The two classes are mutually exclusive; trigger nodes are always visited
and so never unreachable.
"""

from __future__ import annotations

from flowcheck.models.enums import IssueCode
from flowcheck.services.workflow.algorithms import GraphAlgorithms
from flowcheck.services.workflow.checks.base import CheckContext, GraphCheck


class ConnectivityCheck(GraphCheck):
    """Classify every node as reachable, isolated or unreachable."""

    name = "connectivity"

    def run(self, context: CheckContext) -> None:
        graph = context.graph
        issues = context.issues

        reachable = GraphAlgorithms.find_reachable_from(graph, graph.entry_points())
        isolated = set(GraphAlgorithms.find_isolated_nodes(graph))

        for index in graph:
            node = graph.node_at(index)

            if node.is_entry_point:
                if graph.get_in_degree(index) > 0:
                    issues.warning(
                        IssueCode.TRIGGER_HAS_INCOMING,
                        "Trigger node has incoming connections",
                        node_id=node.id,
                        suggestion="Triggers start workflows - remove incoming connections",
                    )
                if graph.get_out_degree(index) == 0:
                    issues.warning(
                        IssueCode.ISOLATED_NODE,
                        "Trigger is not connected to any other node",
                        node_id=node.id,
                        suggestion="Connect this trigger to an action or control node",
                    )
            elif index in isolated:
                issues.warning(
                    IssueCode.ISOLATED_NODE,
                    "Node is not connected to the workflow",
                    node_id=node.id,
                    suggestion="Connect this node to a trigger or another node",
                )
            elif index not in reachable:
                issues.warning(
                    IssueCode.UNREACHABLE_NODE,
                    "Node is unreachable from any trigger",
                    node_id=node.id,
                    suggestion="Connect this node to the main workflow path",
                )


__all__ = ["ConnectivityCheck"]
