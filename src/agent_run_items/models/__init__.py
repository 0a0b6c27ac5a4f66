from agent_run_items.models.agent import Agent, AgentReference, AgentRegistry
from agent_run_items.models.items import (
    HandoffCallItem,
    HandoffOutputItem,
    MessageOutputItem,
    ReasoningItem,
    RunItem,
    RunItemBase,
    RunItemType,
    ToolApprovalItem,
    ToolCallItem,
    ToolCallOutputItem,
)
from agent_run_items.models.raw import RawItem

__all__ = [
    "Agent",
    "AgentReference",
    "AgentRegistry",
    "HandoffCallItem",
    "HandoffOutputItem",
    "MessageOutputItem",
    "ReasoningItem",
    "RunItem",
    "RunItemBase",
    "RunItemType",
    "ToolApprovalItem",
    "ToolCallItem",
    "ToolCallOutputItem",
    "RawItem",
]
