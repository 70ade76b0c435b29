"""Tests for GraphAlgorithms class.

Test Coverage Strategy:
- Unit tests for each graph algorithm
- Edge cases (empty graphs, single nodes, self-loops)
- Deterministic tie-breaking of the topological order
- Cycle extraction from the nodes Kahn's algorithm leaves over
"""

import pytest

from flowcheck.schemas.workflow import ActionNode, BaseNode, TriggerNode, WorkflowEdge
from flowcheck.services.workflow.algorithms import GraphAlgorithms
from flowcheck.services.workflow.graph import WorkflowGraph

# =============================================================================
# TEST HELPERS
# =============================================================================


def build_graph(node_ids: list[str], pairs: list[tuple[str, str]]) -> WorkflowGraph:
    """Build a graph whose first node is the trigger."""
    nodes: list[BaseNode] = [
        TriggerNode(id=node_id) if i == 0 else ActionNode(id=node_id)
        for i, node_id in enumerate(node_ids)
    ]
    edges = [
        WorkflowEdge(id=f"e{i}", source=source, target=target)
        for i, (source, target) in enumerate(pairs)
    ]
    return WorkflowGraph(nodes, edges)


def ids(graph: WorkflowGraph, indexes: list[int]) -> list[str]:
    return [graph.node_at(i).id for i in indexes]


@pytest.fixture
def diamond_graph() -> WorkflowGraph:
    """Create a diamond DAG: a -> b, a -> c, b -> d, c -> d."""
    return build_graph(
        ["a", "b", "c", "d"],
        [("a", "b"), ("a", "c"), ("b", "d"), ("c", "d")],
    )


# =============================================================================
# REACHABILITY TESTS
# =============================================================================


class TestFindReachableFrom:
    """Tests for find_reachable_from method."""

    def test_follows_edges_forward(self):
        """Only nodes downstream of the start are reachable."""
        graph = build_graph(["a", "b", "c", "d"], [("a", "b"), ("c", "d")])
        assert GraphAlgorithms.find_reachable_from(graph, [0]) == {0, 1}

    def test_start_nodes_are_reachable(self):
        """Start nodes are included even without edges."""
        graph = build_graph(["a", "b"], [])
        assert GraphAlgorithms.find_reachable_from(graph, [0]) == {0}

    def test_multiple_start_nodes(self):
        """Traversal starts from all start nodes at once."""
        graph = build_graph(["a", "b", "c", "d"], [("a", "b"), ("c", "d")])
        assert GraphAlgorithms.find_reachable_from(graph, [0, 2]) == {0, 1, 2, 3}

    def test_no_start_nodes(self):
        """Nothing is reachable without start nodes."""
        graph = build_graph(["a", "b"], [("a", "b")])
        assert GraphAlgorithms.find_reachable_from(graph, []) == set()

    def test_terminates_on_cycle(self):
        """BFS visits each node once even when the graph loops."""
        graph = build_graph(["a", "b", "c"], [("a", "b"), ("b", "c"), ("c", "b")])
        assert GraphAlgorithms.find_reachable_from(graph, [0]) == {0, 1, 2}


# =============================================================================
# ISOLATED NODE TESTS
# =============================================================================


class TestFindIsolatedNodes:
    """Tests for find_isolated_nodes method."""

    def test_finds_nodes_without_edges(self):
        graph = build_graph(["a", "b", "c"], [("a", "b")])
        assert GraphAlgorithms.find_isolated_nodes(graph) == [2]

    def test_single_node_is_isolated(self):
        graph = build_graph(["a"], [])
        assert GraphAlgorithms.find_isolated_nodes(graph) == [0]

    def test_empty_graph(self):
        graph = build_graph([], [])
        assert GraphAlgorithms.find_isolated_nodes(graph) == []


# =============================================================================
# TOPOLOGICAL SORT TESTS
# =============================================================================


class TestTopologicalSort:
    """Tests for topological_sort method."""

    def test_simple_chain(self):
        """a -> b -> c sorts to [a, b, c]."""
        graph = build_graph(["a", "b", "c"], [("a", "b"), ("b", "c")])
        result = GraphAlgorithms.topological_sort(graph)

        assert ids(graph, result.order) == ["a", "b", "c"]
        assert result.has_cycle is False
        assert result.remaining == []

    def test_chain_listed_backwards(self):
        """Node-list order does not override edge direction."""
        graph = build_graph(["a", "c", "b"], [("b", "c"), ("a", "b")])
        result = GraphAlgorithms.topological_sort(graph)
        assert ids(graph, result.order) == ["a", "b", "c"]

    def test_diamond(self, diamond_graph: WorkflowGraph):
        """Siblings that become ready together keep node-list order."""
        result = GraphAlgorithms.topological_sort(diamond_graph)
        assert ids(diamond_graph, result.order) == ["a", "b", "c", "d"]

    def test_ready_siblings_sorted_by_node_list_position(self):
        """Edge order does not decide the order of ready siblings."""
        graph = build_graph(["a", "b", "c"], [("a", "c"), ("a", "b")])
        result = GraphAlgorithms.topological_sort(graph)
        assert ids(graph, result.order) == ["a", "b", "c"]

    def test_independent_nodes_follow_input_order(self):
        """Reordering independent nodes reorders them identically."""
        forward = build_graph(["t", "x", "y"], [])
        backward = build_graph(["t", "y", "x"], [])

        assert ids(forward, GraphAlgorithms.topological_sort(forward).order) == ["t", "x", "y"]
        assert ids(backward, GraphAlgorithms.topological_sort(backward).order) == ["t", "y", "x"]

    def test_cycle_leaves_remaining_nodes(self):
        """Nodes on or behind a cycle are not placed."""
        graph = build_graph(
            ["a", "b", "c", "d"],
            [("a", "b"), ("b", "c"), ("c", "b"), ("c", "d")],
        )
        result = GraphAlgorithms.topological_sort(graph)

        assert ids(graph, result.order) == ["a"]
        assert ids(graph, result.remaining) == ["b", "c", "d"]
        assert result.has_cycle is True

    def test_self_loop_is_a_cycle(self):
        graph = build_graph(["a"], [("a", "a")])
        result = GraphAlgorithms.topological_sort(graph)
        assert result.order == []
        assert result.remaining == [0]

    def test_parallel_edges(self):
        """Duplicate edges are counted and released one by one."""
        graph = build_graph(["a", "b"], [("a", "b"), ("a", "b")])
        result = GraphAlgorithms.topological_sort(graph)
        assert ids(graph, result.order) == ["a", "b"]

    def test_empty_graph(self):
        graph = build_graph([], [])
        result = GraphAlgorithms.topological_sort(graph)
        assert result.order == []
        assert result.has_cycle is False


# =============================================================================
# CYCLE EXTRACTION TESTS
# =============================================================================


class TestFindCycle:
    """Tests for find_cycle method."""

    def test_no_remaining_nodes(self):
        graph = build_graph(["a", "b"], [("a", "b")])
        assert GraphAlgorithms.find_cycle(graph, []) is None

    def test_two_node_cycle(self):
        graph = build_graph(["a", "b"], [("a", "b"), ("b", "a")])
        result = GraphAlgorithms.topological_sort(graph)
        cycle = GraphAlgorithms.find_cycle(graph, result.remaining)
        assert ids(graph, cycle) == ["a", "b", "a"]

    def test_three_node_cycle_starts_at_lowest_index(self):
        graph = build_graph(["t", "a", "b", "c"], [("t", "b"), ("b", "c"), ("c", "a"), ("a", "b")])
        result = GraphAlgorithms.topological_sort(graph)
        cycle = GraphAlgorithms.find_cycle(graph, result.remaining)
        assert ids(graph, cycle) == ["a", "b", "c", "a"]

    def test_self_loop(self):
        graph = build_graph(["a"], [("a", "a")])
        result = GraphAlgorithms.topological_sort(graph)
        assert ids(graph, GraphAlgorithms.find_cycle(graph, result.remaining)) == ["a", "a"]

    def test_nodes_downstream_of_cycle_are_skipped(self):
        """A node merely behind a cycle is never part of the reported path."""
        graph = build_graph(
            ["t", "d", "b", "c"],
            [("t", "b"), ("b", "c"), ("c", "b"), ("c", "d")],
        )
        result = GraphAlgorithms.topological_sort(graph)
        cycle = GraphAlgorithms.find_cycle(graph, result.remaining)
        assert ids(graph, cycle) == ["b", "c", "b"]

    def test_cycle_path_follows_edges(self):
        """Every consecutive pair of the cycle is an edge."""
        graph = build_graph(
            ["a", "b", "c", "d", "e"],
            [("a", "b"), ("b", "c"), ("c", "d"), ("d", "e"), ("e", "c")],
        )
        result = GraphAlgorithms.topological_sort(graph)
        cycle = GraphAlgorithms.find_cycle(graph, result.remaining)

        assert cycle[0] == cycle[-1]
        for source, target in zip(cycle, cycle[1:], strict=False):
            assert target in graph.get_successors(source)


# =============================================================================
# EXECUTION LEVEL TESTS
# =============================================================================


class TestGroupLevels:
    """Tests for group_levels method."""

    def test_diamond_levels(self, diamond_graph: WorkflowGraph):
        result = GraphAlgorithms.topological_sort(diamond_graph)
        levels = GraphAlgorithms.group_levels(result)
        assert [ids(diamond_graph, level) for level in levels] == [["a"], ["b", "c"], ["d"]]

    def test_level_is_longest_predecessor_chain(self):
        """a -> b -> c and a -> c puts c on level 2."""
        graph = build_graph(["a", "b", "c"], [("a", "b"), ("b", "c"), ("a", "c")])
        levels = GraphAlgorithms.group_levels(GraphAlgorithms.topological_sort(graph))
        assert [ids(graph, level) for level in levels] == [["a"], ["b"], ["c"]]

    def test_unconnected_nodes_share_level_zero(self):
        graph = build_graph(["a", "b"], [])
        levels = GraphAlgorithms.group_levels(GraphAlgorithms.topological_sort(graph))
        assert [ids(graph, level) for level in levels] == [["a", "b"]]
