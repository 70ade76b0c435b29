"""Validation phases.

Phases run in a fixed order (structural, edges, connectivity, topology)
and append to one shared issue collector.
"""

from flowcheck.services.workflow.checks.base import CheckContext, GraphCheck, IssueCollector
from flowcheck.services.workflow.checks.connectivity import ConnectivityCheck
from flowcheck.services.workflow.checks.edges import EdgeCheck
from flowcheck.services.workflow.checks.structural import StructuralCheck
from flowcheck.services.workflow.checks.topology import TopologyCheck

DEFAULT_CHECKS: tuple[type[GraphCheck], ...] = (
    StructuralCheck,
    EdgeCheck,
    ConnectivityCheck,
    TopologyCheck,
)

__all__ = [
    "DEFAULT_CHECKS",
    "CheckContext",
    "ConnectivityCheck",
    "EdgeCheck",
    "GraphCheck",
    "IssueCollector",
    "StructuralCheck",
    "TopologyCheck",
]
