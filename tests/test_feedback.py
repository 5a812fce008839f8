"""
Tests for feedback logging and the auto-clearing submitted flag.
"""

from __future__ import annotations

import logging

from feedback import FEEDBACK_RESET_SECONDS, FeedbackState, record_feedback


def test_record_feedback_logs_correct(caplog):
    with caplog.at_level(logging.INFO, logger="feedback"):
        assert record_feedback("https://example.com", True) is None
    assert "Feedback submitted for https://example.com: Analysis correct" in caplog.text


def test_record_feedback_logs_incorrect(caplog):
    with caplog.at_level(logging.INFO, logger="feedback"):
        record_feedback("http://1.2.3.4", False)
    assert "Analysis incorrect" in caplog.text


def test_state_starts_cleared():
    assert FeedbackState().is_submitted(now=0.0) is False


def test_state_clears_after_window():
    state = FeedbackState()
    state.mark(now=100.0)
    assert state.is_submitted(now=100.0)
    assert state.is_submitted(now=100.0 + FEEDBACK_RESET_SECONDS - 0.1)
    assert not state.is_submitted(now=100.0 + FEEDBACK_RESET_SECONDS)
    # stays cleared once expired
    assert not state.is_submitted(now=100.0)


def test_state_reset_and_custom_window():
    state = FeedbackState(reset_after=1.0)
    state.mark(now=0.0)
    assert state.is_submitted(now=0.5)
    state.reset()
    assert not state.is_submitted(now=0.5)


def test_state_uses_monotonic_clock_by_default():
    state = FeedbackState()
    state.mark()
    assert state.is_submitted()
