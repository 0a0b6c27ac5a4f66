"""
Root conftest.py: shared fixtures for all tests.
"""

import pytest

from agent_run_items.models.agent import Agent, AgentRegistry


# ---------------------------------------------------------------------------
# Raw item helpers
# ---------------------------------------------------------------------------

def _make_message(text: str, **overrides) -> dict:
    """An assistant message with a single output_text segment."""
    raw = {
        "id": "msg_123",
        "type": "message",
        "role": "assistant",
        "status": "completed",
        "content": [{"type": "output_text", "text": text}],
    }
    raw.update(overrides)
    return raw


@pytest.fixture
def make_message():
    """Factory for assistant messages with a given text."""
    return _make_message


@pytest.fixture
def agent():
    return Agent(name="TestAgent")


@pytest.fixture
def other_agent():
    return Agent(name="OtherAgent")


@pytest.fixture
def registry(agent, other_agent):
    return AgentRegistry([agent, other_agent])


@pytest.fixture
def message_raw():
    """The model message used across tests: 'Hello World'."""
    return _make_message("Hello World")


@pytest.fixture
def function_call_raw():
    return {
        "id": "test",
        "type": "function_call",
        "callId": "test",
        "name": "test",
        "arguments": "test",
        "status": "completed",
    }


@pytest.fixture
def function_call_result_raw():
    return {
        "id": "test",
        "type": "function_call_result",
        "callId": "test",
        "name": "test",
        "output": {"type": "text", "text": "test"},
        "status": "completed",
    }


@pytest.fixture
def reasoning_raw():
    return {
        "id": "test",
        "type": "reasoning",
        "content": [{"type": "input_text", "text": "test"}],
    }
