"""
Agent Run Items - the typed record of everything that happens during an agent run.

This package provides:
- One variant per kind of run event (messages, tool calls and outputs,
  reasoning, handoffs, tool approvals), all sharing a JSON shape
- Text aggregation over a run's items
- Removal of leaked reasoning from user-facing message text
- Rebuilding serialized items against a registry of agents

Example:
    from agent_run_items import Agent, MessageOutputItem, extract_all_text_output

    agent = Agent(name="assistant")
    item = MessageOutputItem(
        {"type": "message", "role": "assistant",
         "content": [{"type": "output_text", "text": "Hello"}]},
        agent,
    )
    extract_all_text_output([item])  # "Hello"
"""

import logging

__version__ = "0.1.0"

from agent_run_items.config.settings import RunItemSettings, configure_logging
from agent_run_items.exceptions import (
    AgentNotFoundError,
    MalformedRunItemError,
    RunItemError,
    UnknownRunItemTypeError,
)
from agent_run_items.models import (
    Agent,
    AgentReference,
    AgentRegistry,
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
from agent_run_items.core.reasoning import REASONING_MARKER, strip_leaked_reasoning
from agent_run_items.core.text import (
    extract_all_text_output,
    extract_last_text,
    get_last_text_from_output_message,
    get_output_text,
)
from agent_run_items.core.serialization import item_from_json, items_from_json, items_to_json

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Models
    "Agent",
    "AgentReference",
    "AgentRegistry",
    "RunItem",
    "RunItemBase",
    "RunItemType",
    "MessageOutputItem",
    "ToolCallItem",
    "ToolCallOutputItem",
    "ReasoningItem",
    "HandoffCallItem",
    "HandoffOutputItem",
    "ToolApprovalItem",
    # Text
    "REASONING_MARKER",
    "strip_leaked_reasoning",
    "extract_all_text_output",
    "extract_last_text",
    "get_output_text",
    "get_last_text_from_output_message",
    # Serialization
    "items_to_json",
    "item_from_json",
    "items_from_json",
    # Config
    "RunItemSettings",
    "configure_logging",
    # Errors
    "RunItemError",
    "MalformedRunItemError",
    "UnknownRunItemTypeError",
    "AgentNotFoundError",
]
