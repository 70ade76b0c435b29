"""Indexed directed graph built from a workflow snapshot.

This module normalizes the raw node/edge lists into an arena: every node
gets an integer index equal to its position among the distinct node ids,
and adjacency is stored as integer-indexed lists of edge positions. The
node index doubles as the deterministic tie-break key used by the graph
algorithms.

Time Complexity:
- Construction: O(V + E)
- Successor/predecessor lookup: O(1) per neighbor

Space Complexity: O(V + E)
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from flowcheck.schemas.workflow import BaseNode, WorkflowEdge


class WorkflowGraph:
    """Directed graph over a workflow's nodes and edges.

    The graph keeps the submitted node and edge sequences untouched and
    builds, on top of them:

    - an arena of distinct nodes (first occurrence wins for repeated ids),
    - an id -> index mapping,
    - per-index outgoing and incoming edge positions, in edge-list order.

    Edges whose source or target is not a known node are left out of the
    adjacency lists but stay visible through ``edges``.

    Example:
        >>> graph = WorkflowGraph(nodes, edges)
        >>> a = graph.index_of("trigger-1")
        >>> [graph.node_at(i).id for i in graph.get_successors(a)]
        ['action-1']
    """

    __slots__ = (
        "_edge_count",
        "_edges",
        "_incoming",
        "_index",
        "_nodes",
        "_outgoing",
        "_submitted_nodes",
    )

    def __init__(
        self,
        nodes: Sequence[BaseNode],
        edges: Sequence[WorkflowEdge],
    ) -> None:
        """Build the arena and adjacency lists in a single pass each.

        Args:
            nodes: Workflow nodes in editor order.
            edges: Workflow edges in editor order.
        """
        self._submitted_nodes: tuple[BaseNode, ...] = tuple(nodes)
        self._edges: tuple[WorkflowEdge, ...] = tuple(edges)
        self._nodes: list[BaseNode] = []
        self._index: dict[str, int] = {}

        for node in self._submitted_nodes:
            if node.id not in self._index:
                self._index[node.id] = len(self._nodes)
                self._nodes.append(node)

        self._outgoing: list[list[int]] = [[] for _ in self._nodes]
        self._incoming: list[list[int]] = [[] for _ in self._nodes]
        self._edge_count = 0

        for position, edge in enumerate(self._edges):
            source = self._index.get(edge.source)
            target = self._index.get(edge.target)
            if source is None or target is None:
                continue
            self._outgoing[source].append(position)
            self._incoming[target].append(position)
            self._edge_count += 1

    @property
    def node_count(self) -> int:
        """Get the number of distinct nodes in the arena."""
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        """Get the number of edges whose endpoints both exist."""
        return self._edge_count

    @property
    def submitted_nodes(self) -> tuple[BaseNode, ...]:
        """Nodes exactly as submitted, repeated ids included."""
        return self._submitted_nodes

    @property
    def edges(self) -> tuple[WorkflowEdge, ...]:
        """Edges exactly as submitted, dangling ones included."""
        return self._edges

    @property
    def nodes(self) -> tuple[BaseNode, ...]:
        """Distinct nodes in arena (index) order."""
        return tuple(self._nodes)

    def index_of(self, node_id: str) -> int | None:
        """Get the arena index of a node id, or None if unknown."""
        return self._index.get(node_id)

    def node_at(self, index: int) -> BaseNode:
        """Get the node stored at an arena index."""
        return self._nodes[index]

    def entry_points(self) -> list[int]:
        """Get the indexes of all trigger nodes, in node-list order."""
        return [i for i, node in enumerate(self._nodes) if node.is_entry_point]

    def get_successors(self, index: int) -> list[int]:
        """Get target indexes of outgoing edges, in edge-list order.

        A target reached by several parallel edges appears once per edge.
        """
        return [self._index[self._edges[p].target] for p in self._outgoing[index]]

    def get_predecessors(self, index: int) -> list[int]:
        """Get source indexes of incoming edges, in edge-list order."""
        return [self._index[self._edges[p].source] for p in self._incoming[index]]

    def outgoing_edges(self, index: int) -> list[WorkflowEdge]:
        """Get outgoing edges of a node, in edge-list order."""
        return [self._edges[p] for p in self._outgoing[index]]

    def incoming_edges(self, index: int) -> list[WorkflowEdge]:
        """Get incoming edges of a node, in edge-list order."""
        return [self._edges[p] for p in self._incoming[index]]

    def get_in_degree(self, index: int) -> int:
        """Get the number of incoming edges for a node."""
        return len(self._incoming[index])

    def get_out_degree(self, index: int) -> int:
        """Get the number of outgoing edges for a node."""
        return len(self._outgoing[index])

    def __contains__(self, node_id: object) -> bool:
        """Check if a node id exists in the graph."""
        return node_id in self._index

    def __iter__(self) -> Iterator[int]:
        """Iterate over arena indexes in node-list order."""
        return iter(range(len(self._nodes)))

    def __len__(self) -> int:
        """Get the number of distinct nodes in the graph."""
        return len(self._nodes)

    def __repr__(self) -> str:
        """Return string representation of the graph."""
        return f"WorkflowGraph(nodes={self.node_count}, edges={self.edge_count})"


__all__ = ["WorkflowGraph"]
