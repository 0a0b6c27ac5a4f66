"""
Guard against internal reasoning leaking into user-facing text.

Some model endpoints append their reasoning to the visible answer behind a
``response_reasoning:`` marker. Everything from the first marker on is dropped.
"""

import logging

logger = logging.getLogger(__name__)

REASONING_MARKER = "response_reasoning:"


def strip_leaked_reasoning(text: str) -> str:
    """
    Remove a leaked reasoning section from ``text``.

    Returns the text before the first occurrence of the marker, with trailing
    whitespace removed. Text without the marker is returned unchanged. Only the
    exact marker counts; the word "reasoning" in ordinary prose is left alone.
    """
    index = text.find(REASONING_MARKER)
    if index == -1:
        return text
    logger.debug(f"Stripped leaked reasoning ({len(text) - index} chars) from message text")
    return text[:index].rstrip()
