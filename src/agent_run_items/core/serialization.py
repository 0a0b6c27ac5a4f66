"""
Serialize run items to their JSON shape and rebuild them from it.

The serialized form is what ``RunItemBase.to_json()`` produces. Agents are
stored as their own summaries and resolved back through an ``AgentRegistry``.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Mapping

from agent_run_items.config.settings import RunItemSettings
from agent_run_items.exceptions import MalformedRunItemError, RunItemError, UnknownRunItemTypeError
from agent_run_items.models.agent import AgentRegistry
from agent_run_items.models.items import (
    HandoffCallItem,
    HandoffOutputItem,
    MessageOutputItem,
    ReasoningItem,
    RunItem,
    RunItemType,
    ToolApprovalItem,
    ToolCallItem,
    ToolCallOutputItem,
    UNSET,
)

logger = logging.getLogger(__name__)


def items_to_json(items: Iterable[RunItem]) -> list[dict[str, Any]]:
    return [item.to_json() for item in items]


def _message_output(data: Mapping[str, Any], raw: Mapping[str, Any], registry: AgentRegistry) -> RunItem:
    return MessageOutputItem(raw, registry.resolve(data.get("agent")))


def _tool_call(data: Mapping[str, Any], raw: Mapping[str, Any], registry: AgentRegistry) -> RunItem:
    return ToolCallItem(raw, registry.resolve(data.get("agent")))


def _tool_call_output(data: Mapping[str, Any], raw: Mapping[str, Any], registry: AgentRegistry) -> RunItem:
    return ToolCallOutputItem(raw, registry.resolve(data.get("agent")), data.get("output", UNSET))


def _reasoning(data: Mapping[str, Any], raw: Mapping[str, Any], registry: AgentRegistry) -> RunItem:
    return ReasoningItem(raw, registry.resolve(data.get("agent")))


def _handoff_call(data: Mapping[str, Any], raw: Mapping[str, Any], registry: AgentRegistry) -> RunItem:
    return HandoffCallItem(raw, registry.resolve(data.get("agent")))


def _handoff_output(data: Mapping[str, Any], raw: Mapping[str, Any], registry: AgentRegistry) -> RunItem:
    source = data.get("sourceAgent", data.get("agent"))
    return HandoffOutputItem(raw, registry.resolve(source), registry.resolve(data.get("targetAgent")))


def _tool_approval(data: Mapping[str, Any], raw: Mapping[str, Any], registry: AgentRegistry) -> RunItem:
    return ToolApprovalItem(raw, registry.resolve(data.get("agent")), data.get("toolName"))


_BUILDERS: dict[RunItemType, Callable[[Mapping[str, Any], Mapping[str, Any], AgentRegistry], RunItem]] = {
    RunItemType.MESSAGE_OUTPUT: _message_output,
    RunItemType.TOOL_CALL: _tool_call,
    RunItemType.TOOL_CALL_OUTPUT: _tool_call_output,
    RunItemType.REASONING: _reasoning,
    RunItemType.HANDOFF_CALL: _handoff_call,
    RunItemType.HANDOFF_OUTPUT: _handoff_output,
    RunItemType.TOOL_APPROVAL: _tool_approval,
}


def item_from_json(data: Mapping[str, Any], registry: AgentRegistry) -> RunItem:
    """
    Rebuild a run item from its ``to_json()`` form.

    The ``rawItem`` mapping is reused as is. Agents are looked up by name.

    Raises:
        UnknownRunItemTypeError: If ``type`` is missing or not a known discriminant.
        MalformedRunItemError: If ``rawItem`` is missing or not a mapping,
            or the entry itself is not a mapping.
        AgentNotFoundError: If a referenced agent is not in ``registry``.
    """
    if not isinstance(data, Mapping):
        raise MalformedRunItemError(f"Run item entry is not a mapping: {type(data).__name__}")

    item_type = data.get("type")
    try:
        builder = _BUILDERS[RunItemType(item_type)]
    except ValueError:
        raise UnknownRunItemTypeError(item_type) from None

    raw = data.get("rawItem")
    if not isinstance(raw, Mapping):
        raise MalformedRunItemError(f"Run item '{item_type}' has no rawItem mapping", item_type=item_type)

    item = builder(data, raw, registry)
    logger.debug(f"Rebuilt {item_type} (call_id: {item.call_id})")
    return item


def items_from_json(
    data: Iterable[Mapping[str, Any]],
    registry: AgentRegistry,
    settings: RunItemSettings | None = None,
) -> list[RunItem]:
    """
    Rebuild a list of run items.

    In strict mode the first failure propagates. Otherwise bad entries are
    skipped with a warning.
    """
    strict = settings.strict_deserialization if settings else False
    items: list[RunItem] = []
    for index, entry in enumerate(data):
        try:
            items.append(item_from_json(entry, registry))
        except RunItemError as e:
            if strict:
                raise
            logger.warning(f"Skipping run item at index {index}: {e}")
    return items
