"""
Text helpers over run items and raw message records.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from agent_run_items.models.items import MessageOutputItem, RunItem, joined_output_text


def extract_all_text_output(items: Iterable[RunItem]) -> str:
    """
    Concatenate the content of every message output item, in order.

    Other variants are skipped. No separator is inserted between messages.
    """
    return "".join(item.content for item in items if isinstance(item, MessageOutputItem))


def extract_last_text(items: Iterable[RunItem]) -> str | None:
    """Content of the last message output item, or None if there is none."""
    last: str | None = None
    for item in items:
        if isinstance(item, MessageOutputItem):
            last = item.content
    return last


def get_output_text(raw_item: Mapping[str, Any]) -> str:
    """Concatenated ``output_text`` segments of a raw message, unsanitized."""
    if raw_item.get("type") != "message":
        return ""
    return joined_output_text(raw_item)


def get_last_text_from_output_message(raw_item: Mapping[str, Any]) -> str | None:
    """Text of the last ``output_text`` segment of an assistant message."""
    if raw_item.get("type") != "message" or raw_item.get("role") != "assistant":
        return None
    content = raw_item.get("content") or []
    if not content:
        return None
    last = content[-1]
    if isinstance(last, Mapping) and last.get("type") == "output_text":
        return last.get("text")
    return None
