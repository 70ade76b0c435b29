"""Tests for WorkflowGraph data structure.

Test suite for the indexed graph model including arena construction,
adjacency lookups, dangling edge handling and repeated node ids.
"""

from flowcheck.schemas.workflow import ActionNode, TriggerNode, WorkflowEdge
from flowcheck.services.workflow.graph import WorkflowGraph


def _edge(source: str, target: str, edge_id: str | None = None) -> WorkflowEdge:
    return WorkflowEdge(id=edge_id or f"{source}-{target}", source=source, target=target)


class TestGraphInitialization:
    """Tests for WorkflowGraph construction and basic properties."""

    def test_empty_graph_initialization(self) -> None:
        """Test that a graph built from nothing is empty."""
        graph = WorkflowGraph([], [])
        assert graph.node_count == 0
        assert graph.edge_count == 0
        assert len(graph) == 0
        assert graph.entry_points() == []

    def test_graph_repr(self) -> None:
        """Test string representation of graph."""
        graph = WorkflowGraph([TriggerNode(id="t"), ActionNode(id="a")], [_edge("t", "a")])
        assert repr(graph) == "WorkflowGraph(nodes=2, edges=1)"

    def test_indexes_follow_node_list_order(self) -> None:
        """Test that arena indexes equal node-list positions."""
        graph = WorkflowGraph(
            [ActionNode(id="b"), TriggerNode(id="a"), ActionNode(id="c")],
            [],
        )
        assert graph.index_of("b") == 0
        assert graph.index_of("a") == 1
        assert graph.index_of("c") == 2
        assert graph.node_at(1).id == "a"
        assert list(graph) == [0, 1, 2]

    def test_unknown_id_has_no_index(self) -> None:
        """Test lookups of ids that are not in the graph."""
        graph = WorkflowGraph([ActionNode(id="a")], [])
        assert graph.index_of("missing") is None
        assert "missing" not in graph
        assert "a" in graph

    def test_entry_points_are_trigger_nodes(self) -> None:
        """Test that only trigger nodes are entry points, in order."""
        graph = WorkflowGraph(
            [ActionNode(id="a"), TriggerNode(id="t2"), TriggerNode(id="t1")],
            [],
        )
        assert graph.entry_points() == [1, 2]


class TestRepeatedNodeIds:
    """Tests for node lists that repeat an id."""

    def test_first_occurrence_wins(self) -> None:
        """Test that a repeated id keeps the first node in the arena."""
        first = ActionNode(id="a", data={"label": "first"})
        second = ActionNode(id="a", data={"label": "second"})
        graph = WorkflowGraph([first, second], [])

        assert graph.node_count == 1
        assert graph.node_at(0).label == "first"
        assert graph.submitted_nodes == (first, second)


class TestAdjacency:
    """Tests for successor/predecessor lookups."""

    def test_successors_and_predecessors(self) -> None:
        """Test adjacency in a diamond a -> b, a -> c, b -> d, c -> d."""
        nodes = [TriggerNode(id="a"), ActionNode(id="b"), ActionNode(id="c"), ActionNode(id="d")]
        edges = [_edge("a", "b"), _edge("a", "c"), _edge("b", "d"), _edge("c", "d")]
        graph = WorkflowGraph(nodes, edges)

        assert graph.get_successors(0) == [1, 2]
        assert graph.get_predecessors(3) == [1, 2]
        assert graph.get_out_degree(0) == 2
        assert graph.get_in_degree(0) == 0
        assert graph.get_in_degree(3) == 2
        assert [e.id for e in graph.outgoing_edges(0)] == ["a-b", "a-c"]
        assert [e.id for e in graph.incoming_edges(3)] == ["b-d", "c-d"]

    def test_parallel_edges_are_kept(self) -> None:
        """Test that duplicate edges each contribute to adjacency."""
        graph = WorkflowGraph(
            [TriggerNode(id="a"), ActionNode(id="b")],
            [_edge("a", "b", "e1"), _edge("a", "b", "e2")],
        )
        assert graph.get_successors(0) == [1, 1]
        assert graph.get_in_degree(1) == 2
        assert graph.edge_count == 2

    def test_self_loop_is_in_adjacency(self) -> None:
        """Test that a self-loop between known nodes is kept."""
        graph = WorkflowGraph([ActionNode(id="a")], [_edge("a", "a")])
        assert graph.get_successors(0) == [0]
        assert graph.get_predecessors(0) == [0]


class TestDanglingEdges:
    """Tests for edges referencing unknown nodes."""

    def test_dangling_edge_excluded_from_adjacency(self) -> None:
        """Test that dangling edges do not crash and stay out of adjacency."""
        edges = [_edge("a", "ghost"), _edge("ghost", "a"), _edge("a", "b")]
        graph = WorkflowGraph([TriggerNode(id="a"), ActionNode(id="b")], edges)

        assert graph.get_successors(0) == [1]
        assert graph.get_in_degree(0) == 0
        assert graph.edge_count == 1

    def test_dangling_edge_still_visible(self) -> None:
        """Test that the raw edge list is preserved for later checks."""
        edges = [_edge("a", "ghost")]
        graph = WorkflowGraph([TriggerNode(id="a")], edges)
        assert [e.id for e in graph.edges] == ["a-ghost"]
