"""
Feedback on analysis results.

record_feedback() only logs; nothing is stored or transmitted. FeedbackState
is the "feedback submitted" flag for callers without a page (scripts, other
UIs); the bundled page keeps the same 5 second flag in its own JS.
"""

import logging
import time

logger = logging.getLogger(__name__)

FEEDBACK_RESET_SECONDS = 5.0


def record_feedback(url: str, was_correct: bool) -> None:
    """Log the user's verdict on an analysis. Nothing is stored or sent."""
    logger.info(
        "Feedback submitted for %s: Analysis %s",
        url,
        "correct" if was_correct else "incorrect",
    )


class FeedbackState:
    """
    Transient "feedback submitted" flag.

    The flag turns on with mark() and clears itself once the reset window
    has passed. Callers may pass their own clock reading as ``now``.
    """

    def __init__(self, reset_after: float = FEEDBACK_RESET_SECONDS):
        self.reset_after = reset_after
        self._submitted_at = None

    def mark(self, now=None):
        self._submitted_at = time.monotonic() if now is None else now

    def reset(self):
        self._submitted_at = None

    def is_submitted(self, now=None) -> bool:
        if self._submitted_at is None:
            return False
        if now is None:
            now = time.monotonic()
        if now - self._submitted_at >= self.reset_after:
            self._submitted_at = None
            return False
        return True
