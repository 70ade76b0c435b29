"""Graph algorithms for workflow validation and topology analysis.

This module provides the graph algorithms behind the validator:
- Reachability analysis using BFS from the entry points
- Isolated node detection
- Topological sort using Kahn's algorithm with a stable tie-break
- Cycle path extraction from the nodes Kahn's algorithm could not place
- Execution level grouping

All algorithms operate on arena indexes of a WorkflowGraph. Ties are
always broken by ascending index, i.e. by original node-list order.

Time Complexity:
- Reachability: O(V + E)
- Topological sort: O(V + E + V log V)
- Cycle extraction: O(V + E)

Space Complexity: O(V + E) for all algorithms.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from flowcheck.services.workflow.graph import WorkflowGraph


@dataclass(frozen=True, slots=True)
class TopologicalSort:
    """Outcome of Kahn's algorithm.

    Attributes:
        order: Placed node indexes in execution order.
        depths: Longest predecessor chain per placed node index.
        remaining: Indexes that could not be placed, in node-list order.
            Non-empty iff the graph has a cycle.
    """

    order: list[int]
    depths: dict[int, int]
    remaining: list[int]

    @property
    def has_cycle(self) -> bool:
        """Whether some nodes sit on or behind a cycle."""
        return bool(self.remaining)


class GraphAlgorithms:
    """Collection of graph algorithms for workflow validation.

    This class provides static methods for the graph operations needed by
    the validation phases. All algorithms operate on the WorkflowGraph
    arena and never mutate it.

    Example:
        >>> graph = WorkflowGraph(nodes, edges)
        >>> result = GraphAlgorithms.topological_sort(graph)
        >>> if result.has_cycle:
        ...     print(GraphAlgorithms.find_cycle(graph, result.remaining))
    """

    @staticmethod
    def find_reachable_from(
        graph: WorkflowGraph,
        start_nodes: Iterable[int],
    ) -> set[int]:
        """Find all nodes reachable from any start node using BFS.

        The start nodes themselves are always part of the result.

        Args:
            graph: The graph to analyze.
            start_nodes: Indexes to start from (typically trigger nodes).

        Returns:
            Set of reachable node indexes.

        Example:
            >>> # a -> b, c -> d
            >>> GraphAlgorithms.find_reachable_from(graph, [a])
            {a, b}
        """
        reachable: set[int] = set(start_nodes)
        queue: deque[int] = deque(sorted(reachable))

        while queue:
            current = queue.popleft()
            for successor in graph.get_successors(current):
                if successor not in reachable:
                    reachable.add(successor)
                    queue.append(successor)

        return reachable

    @staticmethod
    def find_isolated_nodes(graph: WorkflowGraph) -> list[int]:
        """Find nodes with no incoming or outgoing edges.

        Only edges between known nodes count, so a node whose sole edge is
        dangling is isolated.

        Returns:
            Isolated node indexes in node-list order.
        """
        return [
            index
            for index in graph
            if graph.get_in_degree(index) == 0 and graph.get_out_degree(index) == 0
        ]

    @staticmethod
    def topological_sort(graph: WorkflowGraph) -> TopologicalSort:
        """Kahn's algorithm with a deterministic tie-break.

        The queue is seeded with every zero in-degree node in node-list
        order. Nodes that become ready while processing the same node are
        enqueued in node-list order too, so the output is a function of
        the input ordering alone.

        Args:
            graph: The graph to sort.

        Returns:
            TopologicalSort with the order, per-node depths and the
            nodes left over by a cycle.

        Example:
            >>> # a -> b, a -> c, b -> d, c -> d
            >>> GraphAlgorithms.topological_sort(graph).order
            [a, b, c, d]
        """
        in_degree = [graph.get_in_degree(index) for index in graph]
        depths: dict[int, int] = {}
        queue: deque[int] = deque(index for index in graph if in_degree[index] == 0)
        for index in queue:
            depths[index] = 0

        order: list[int] = []
        while queue:
            current = queue.popleft()
            order.append(current)

            ready: list[int] = []
            for successor in graph.get_successors(current):
                in_degree[successor] -= 1
                depths[successor] = max(depths.get(successor, 0), depths[current] + 1)
                if in_degree[successor] == 0:
                    ready.append(successor)
            queue.extend(sorted(ready))

        remaining = [index for index in graph if in_degree[index] > 0]
        for index in remaining:
            depths.pop(index, None)

        return TopologicalSort(order=order, depths=depths, remaining=remaining)

    @staticmethod
    def find_cycle(graph: WorkflowGraph, remaining: list[int]) -> list[int] | None:
        """Extract one cycle from the nodes Kahn's algorithm left over.

        Every leftover node still has a leftover predecessor, so walking
        predecessors from any of them must revisit a node. The revisited
        stretch, reversed, is a cycle.

        Args:
            graph: The graph that was sorted.
            remaining: ``TopologicalSort.remaining``.

        Returns:
            Closed cycle path starting and ending at its lowest index
            (e.g. ``[a, b, a]``), or None when nothing was left over.
        """
        if not remaining:
            return None

        members = set(remaining)
        position: dict[int, int] = {}
        walk: list[int] = []
        current = remaining[0]

        while current not in position:
            position[current] = len(walk)
            walk.append(current)
            current = next(
                p for p in graph.get_predecessors(current) if p in members
            )

        cycle = walk[position[current] :]
        cycle.reverse()
        start = cycle.index(min(cycle))
        cycle = cycle[start:] + cycle[:start]
        return [*cycle, cycle[0]]

    @staticmethod
    def group_levels(result: TopologicalSort) -> list[list[int]]:
        """Group sorted nodes by depth.

        Nodes at the same level have no path between them and could run
        in parallel. Within a level, execution order is preserved.

        Example:
            >>> # a -> b, a -> c, b -> d, c -> d
            >>> GraphAlgorithms.group_levels(GraphAlgorithms.topological_sort(graph))
            [[a], [b, c], [d]]
        """
        levels: list[list[int]] = []
        for index in result.order:
            depth = result.depths[index]
            while len(levels) <= depth:
                levels.append([])
            levels[depth].append(index)
        return levels


__all__ = [
    "GraphAlgorithms",
    "TopologicalSort",
]
