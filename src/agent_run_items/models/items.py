"""
Run item variants: typed wrappers around the raw records produced during a run.

Every variant pairs a raw record with the agent that produced it and exposes
the same surface (``type``, ``raw_item``, ``agent``, ``to_json()``). Variants
are frozen and compare by identity; the raw record is held by reference and
never copied or mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Mapping, Union

from agent_run_items.core.reasoning import strip_leaked_reasoning
from agent_run_items.models.agent import AgentReference
from agent_run_items.models.raw import RawItem


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()
"""Default for optional fields that may legitimately be ``None``."""


class RunItemType(str, Enum):
    """Discriminants of the run item variants. Part of the serialized format."""
    MESSAGE_OUTPUT = "message_output_item"
    TOOL_CALL = "tool_call_item"
    TOOL_CALL_OUTPUT = "tool_call_output_item"
    REASONING = "reasoning_item"
    HANDOFF_CALL = "handoff_call_item"
    HANDOFF_OUTPUT = "handoff_output_item"
    TOOL_APPROVAL = "tool_approval_item"


class RunItemBase:
    """
    Shared behaviour of all run item variants.

    Subclasses are frozen dataclasses declaring ``raw_item`` and the agent
    reference(s); they add variant-specific fields through ``_extra_json``.
    """
    type: ClassVar[RunItemType]
    raw_item: RawItem
    agent: AgentReference

    @property
    def call_id(self) -> str | None:
        return self.raw_item.get("callId")

    def to_json(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": self.type.value,
            "rawItem": self.raw_item,
            "agent": self.agent.to_json(),
        }
        data.update(self._extra_json())
        return data

    def to_input_item(self) -> dict[str, Any]:
        """The raw record as an input item for the next model turn."""
        return dict(self.raw_item)

    def _extra_json(self) -> dict[str, Any]:
        return {}


@dataclass(frozen=True, eq=False)
class MessageOutputItem(RunItemBase):
    """A message produced by the model."""
    type: ClassVar[RunItemType] = RunItemType.MESSAGE_OUTPUT
    raw_item: RawItem
    agent: AgentReference

    @property
    def content(self) -> str:
        """Concatenated ``output_text`` segments, with leaked reasoning removed."""
        return strip_leaked_reasoning(joined_output_text(self.raw_item))


@dataclass(frozen=True, eq=False)
class ToolCallItem(RunItemBase):
    """A tool call requested by the model."""
    type: ClassVar[RunItemType] = RunItemType.TOOL_CALL
    raw_item: RawItem
    agent: AgentReference


@dataclass(frozen=True, eq=False)
class ToolCallOutputItem(RunItemBase):
    """
    The result of a tool call.

    ``output`` is what the agent saw, ``None`` included. When not given it is
    derived from the raw record's ``output`` payload (see
    ``tool_output_from_payload``).
    """
    type: ClassVar[RunItemType] = RunItemType.TOOL_CALL_OUTPUT
    raw_item: RawItem
    agent: AgentReference
    output: Any = UNSET

    def __post_init__(self):
        if self.output is UNSET:
            object.__setattr__(self, "output", tool_output_from_payload(self.raw_item.get("output")))

    def _extra_json(self) -> dict[str, Any]:
        return {"output": self.output}


@dataclass(frozen=True, eq=False)
class ReasoningItem(RunItemBase):
    """Reasoning produced by the model. Its segments are never exposed as content."""
    type: ClassVar[RunItemType] = RunItemType.REASONING
    raw_item: RawItem
    agent: AgentReference


@dataclass(frozen=True, eq=False)
class HandoffCallItem(RunItemBase):
    """A tool call asking to hand control over to another agent."""
    type: ClassVar[RunItemType] = RunItemType.HANDOFF_CALL
    raw_item: RawItem
    agent: AgentReference


@dataclass(frozen=True, eq=False)
class HandoffOutputItem(RunItemBase):
    """
    The result of a handoff.

    ``source_agent`` initiated the transfer and owns the item, so it is also
    exposed as ``agent``; ``target_agent`` receives control.
    """
    type: ClassVar[RunItemType] = RunItemType.HANDOFF_OUTPUT
    raw_item: RawItem
    source_agent: AgentReference
    target_agent: AgentReference

    @property
    def agent(self) -> AgentReference:
        return self.source_agent

    def _extra_json(self) -> dict[str, Any]:
        return {
            "sourceAgent": self.source_agent.to_json(),
            "targetAgent": self.target_agent.to_json(),
        }


@dataclass(frozen=True, eq=False)
class ToolApprovalItem(RunItemBase):
    """
    A tool call waiting for a human or policy decision before it runs.

    ``tool_name`` defaults to the raw record's ``name`` and falls back to an
    empty string when the record has none.
    """
    type: ClassVar[RunItemType] = RunItemType.TOOL_APPROVAL
    raw_item: RawItem
    agent: AgentReference
    tool_name: str | None = None

    def __post_init__(self):
        if self.tool_name is None:
            object.__setattr__(self, "tool_name", self.raw_item.get("name") or "")

    @property
    def arguments(self) -> str | None:
        return self.raw_item.get("arguments")

    def _extra_json(self) -> dict[str, Any]:
        return {"toolName": self.tool_name}


RunItem = Union[
    MessageOutputItem,
    ToolCallItem,
    ToolCallOutputItem,
    ReasoningItem,
    HandoffCallItem,
    HandoffOutputItem,
    ToolApprovalItem,
]


def tool_output_from_payload(payload: Any) -> Any:
    """
    Agent-visible value of a raw tool result payload.

    Text records collapse to their text, lists are mapped element-wise, anything
    else is returned as is. A missing payload becomes an empty string.
    """
    if payload is None:
        return ""
    if isinstance(payload, Mapping):
        if payload.get("type") == "text":
            return payload.get("text") or ""
        return payload
    if isinstance(payload, list):
        return [tool_output_from_payload(entry) for entry in payload]
    return payload


def joined_output_text(raw_item: RawItem) -> str:
    """Concatenation of the ``output_text`` segments of a raw message."""
    return "".join(
        part.get("text") or ""
        for part in raw_item.get("content") or []
        if isinstance(part, Mapping) and part.get("type") == "output_text"
    )
