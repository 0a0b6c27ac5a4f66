"""
Unit tests for agent_run_items.core.reasoning

Covers: strip_leaked_reasoning, REASONING_MARKER
"""

import logging

import pytest

from agent_run_items.core.reasoning import REASONING_MARKER, strip_leaked_reasoning


class TestStripLeakedReasoning:
    def test_marker_value(self):
        assert REASONING_MARKER == "response_reasoning:"

    def test_empty_string(self):
        assert strip_leaked_reasoning("") == ""

    def test_normal_text_unchanged(self):
        text = "Hello, how can I help you today?"
        assert strip_leaked_reasoning(text) == text

    def test_strips_marker_and_everything_after(self):
        text = "Here is the answer.\nresponse_reasoning:\nThis is internal reasoning."
        assert strip_leaked_reasoning(text) == "Here is the answer."

    def test_strips_with_multiple_newlines(self):
        text = "User message here.\n\nresponse_reasoning:\n\nMultiple lines of reasoning.\nMore reasoning."
        assert strip_leaked_reasoning(text) == "User message here."

    def test_strips_without_leading_newline(self):
        text = "Short answer.response_reasoning:\nreasoning text"
        assert strip_leaked_reasoning(text) == "Short answer."

    def test_only_marker(self):
        assert strip_leaked_reasoning("response_reasoning:\nonly reasoning") == ""

    def test_word_reasoning_is_not_a_marker(self):
        text = "My reasoning for this is that it works well."
        assert strip_leaked_reasoning(text) == text

    def test_marker_needs_colon(self):
        text = "The field is called response_reasoning in the payload."
        assert strip_leaked_reasoning(text) == text

    def test_first_marker_wins(self):
        text = "Answer.response_reasoning: one response_reasoning: two"
        assert strip_leaked_reasoning(text) == "Answer."

    def test_unmarked_whitespace_preserved(self):
        text = "  padded answer \n"
        assert strip_leaked_reasoning(text) == text

    @pytest.mark.parametrize("suffix", ["", "x", "\nmulti\nline\n", REASONING_MARKER])
    def test_any_suffix_is_dropped(self, suffix):
        assert strip_leaked_reasoning("prefix" + REASONING_MARKER + suffix) == "prefix"

    def test_logs_when_stripping(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="agent_run_items.core.reasoning"):
            strip_leaked_reasoning("ok response_reasoning: hidden")
        assert "Stripped leaked reasoning" in caplog.text

    def test_no_log_for_clean_text(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="agent_run_items.core.reasoning"):
            strip_leaked_reasoning("clean")
        assert caplog.records == []
