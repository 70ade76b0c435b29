"""Pydantic schemas for workflow graph input.

This module defines the node and edge shapes produced by the workflow
editor canvas. Nodes are a tagged variant keyed on their category, with a
shared minimal base (id, category, label) so the validator can inspect
base fields without knowing category-specific internals.
"""

from __future__ import annotations

from typing import Annotated, Any, ClassVar, Literal

from pydantic import ConfigDict, Discriminator, Field, Tag, field_validator

from flowcheck.models.enums import NodeCategory
from flowcheck.schemas.base import BaseSchema

GENERIC_NODE_TAG = "generic"

_CATEGORY_TAGS = frozenset(category.value for category in NodeCategory)

_LABEL_KEYS = ("label", "name")


class BaseNode(BaseSchema):
    """Shared base structure of every workflow node.

    The ``category`` field is read from the ``type`` key emitted by the
    canvas. ``data`` is an opaque payload; only the display name is
    inspected here.
    """

    # ids are opaque; "a" and "a " are distinct nodes
    model_config = ConfigDict(str_strip_whitespace=False)

    is_entry_point: ClassVar[bool] = False

    id: str = Field(
        ...,
        description="Node identifier, unique within a workflow",
        examples=["trigger-1"],
    )
    category: str = Field(
        ...,
        alias="type",
        description="Node category (trigger, action, control, integration, ...)",
        examples=["action"],
    )
    data: dict[str, Any] = Field(
        default_factory=dict,
        description="Opaque category-specific payload",
        examples=[{"label": "Send Email", "nodeType": "email"}],
    )

    @field_validator("data", mode="before")
    @classmethod
    def default_missing_data(cls, v: Any) -> Any:
        """Treat an explicit null payload as empty."""
        return {} if v is None else v

    @property
    def label(self) -> str | None:
        """Display name of the node, or None when absent or blank."""
        for key in _LABEL_KEYS:
            value = self.data.get(key)
            if isinstance(value, str) and value.strip():
                return value
        return None


class TriggerNode(BaseNode):
    """Entry point of a workflow (webhook, schedule, manual, ...)."""

    is_entry_point: ClassVar[bool] = True

    category: Literal["trigger"] = Field(default="trigger", alias="type")


class ActionNode(BaseNode):
    """Node performing a unit of work (HTTP call, transform, email, ...)."""

    category: Literal["action"] = Field(default="action", alias="type")


class ControlNode(BaseNode):
    """Flow control node (condition, loop, parallel, delay, ...)."""

    category: Literal["control"] = Field(default="control", alias="type")


class IntegrationNode(BaseNode):
    """Node talking to a third-party service (Slack, GitHub, ...)."""

    category: Literal["integration"] = Field(default="integration", alias="type")


class GenericNode(BaseNode):
    """Node of a category unknown to the validator."""


def node_category_tag(value: Any) -> str:
    """Pick the variant tag for raw or already-built node input.

    Unknown or missing categories fall back to the generic variant.
    """
    if isinstance(value, dict):
        category = value.get("type", value.get("category"))
    else:
        category = getattr(value, "category", None)
    category = getattr(category, "value", category)
    if isinstance(category, str) and category in _CATEGORY_TAGS:
        return category
    return GENERIC_NODE_TAG


WorkflowNode = Annotated[
    Annotated[TriggerNode, Tag(NodeCategory.TRIGGER.value)]
    | Annotated[ActionNode, Tag(NodeCategory.ACTION.value)]
    | Annotated[ControlNode, Tag(NodeCategory.CONTROL.value)]
    | Annotated[IntegrationNode, Tag(NodeCategory.INTEGRATION.value)]
    | Annotated[GenericNode, Tag(GENERIC_NODE_TAG)],
    Discriminator(node_category_tag),
]


class WorkflowEdge(BaseSchema):
    """Directed connection ``source -> target`` between two nodes."""

    model_config = ConfigDict(str_strip_whitespace=False)

    id: str = Field(
        ...,
        description="Edge identifier, used for diagnostic attribution",
        examples=["e-trigger-1-action-1"],
    )
    source: str = Field(
        ...,
        description="Source node ID",
        examples=["trigger-1"],
    )
    target: str = Field(
        ...,
        description="Target node ID",
        examples=["action-1"],
    )
    label: Any = Field(
        default=None,
        description="Optional edge label (e.g. branch name), never inspected",
    )


__all__ = [
    "GENERIC_NODE_TAG",
    "ActionNode",
    "BaseNode",
    "ControlNode",
    "GenericNode",
    "IntegrationNode",
    "TriggerNode",
    "WorkflowEdge",
    "WorkflowNode",
    "node_category_tag",
]
