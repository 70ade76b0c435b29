"""Domain enum definitions for flowcheck.

This module defines all enum types used across the validator for
type-safe representation of node categories and diagnostics.
"""

from enum import Enum


class NodeCategory(str, Enum):
    """Workflow node categories.

    Defines the categories of nodes produced by the workflow editor.
    Only TRIGGER nodes act as entry points of a workflow graph.
    """

    TRIGGER = "trigger"
    ACTION = "action"
    CONTROL = "control"
    INTEGRATION = "integration"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value


class IssueSeverity(str, Enum):
    """Diagnostic severity.

    ERROR blocks save/execution of a workflow. WARNING is advisory only
    and never affects validity.
    """

    ERROR = "error"
    WARNING = "warning"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value


class IssueCode(str, Enum):
    """Machine-readable diagnostic codes."""

    # Structural
    EMPTY_WORKFLOW = "EMPTY_WORKFLOW"
    NO_TRIGGER_NODE = "NO_TRIGGER_NODE"
    MULTIPLE_TRIGGER_NODES = "MULTIPLE_TRIGGER_NODES"
    MISSING_LABEL = "MISSING_LABEL"
    DUPLICATE_NODE_ID = "DUPLICATE_NODE_ID"
    GRAPH_TOO_LARGE = "GRAPH_TOO_LARGE"

    # Edges
    SELF_LOOP = "SELF_LOOP"
    DANGLING_EDGE = "DANGLING_EDGE"
    DUPLICATE_EDGE = "DUPLICATE_EDGE"

    # Connectivity
    ISOLATED_NODE = "ISOLATED_NODE"
    UNREACHABLE_NODE = "UNREACHABLE_NODE"
    TRIGGER_HAS_INCOMING = "TRIGGER_HAS_INCOMING"

    # Topology
    CYCLE_DETECTED = "CYCLE_DETECTED"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value
