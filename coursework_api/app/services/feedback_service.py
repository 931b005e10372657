"""
Service layer for the feedback counter.

The counter collects three kinds of feedback (good, neutral, bad).  Each
click adds exactly one to a single counter; counters never decrease
except through ``reset``.  Statistics are derived on demand by the pure
function ``compute_statistics`` and are never stored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from coursework_api.app.schemas.feedback import (
    FeedbackCountersRead,
    FeedbackRead,
    FeedbackStatisticsRead,
)

NO_FEEDBACK_MESSAGE = "No feedback given"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FeedbackCounters:
    good: int = 0
    neutral: int = 0
    bad: int = 0


@dataclass(frozen=True)
class FeedbackStatistics:
    total: int
    average: float
    positive_percent: float


def compute_statistics(good: int, neutral: int, bad: int) -> Optional[FeedbackStatistics]:
    """Return statistics for the given counts, or ``None`` if all are zero.

    ``average`` scores good as 1, neutral as 0 and bad as -1;
    ``positive_percent`` is the share of good feedback in percent.
    """
    total = good + neutral + bad
    if total == 0:
        return None
    return FeedbackStatistics(
        total=total,
        average=(good - bad) / total,
        positive_percent=good / total * 100,
    )


class FeedbackCounter:
    """Mutable holder for one set of feedback counters."""

    def __init__(self) -> None:
        self._counters = FeedbackCounters()

    def record_good(self) -> FeedbackCounters:
        c = self._counters
        self._counters = FeedbackCounters(c.good + 1, c.neutral, c.bad)
        return self._counters

    def record_neutral(self) -> FeedbackCounters:
        c = self._counters
        self._counters = FeedbackCounters(c.good, c.neutral + 1, c.bad)
        return self._counters

    def record_bad(self) -> FeedbackCounters:
        c = self._counters
        self._counters = FeedbackCounters(c.good, c.neutral, c.bad + 1)
        return self._counters

    def record(self, kind: str) -> FeedbackCounters:
        """Record one piece of feedback by name.

        Raises ``ValueError`` for anything other than ``good``,
        ``neutral`` or ``bad``.
        """
        recorders = {
            "good": self.record_good,
            "neutral": self.record_neutral,
            "bad": self.record_bad,
        }
        if kind not in recorders:
            raise ValueError(f"Unknown feedback kind: {kind}")
        counters = recorders[kind]()
        logger.debug("Recorded %s feedback, counters now %s", kind, counters)
        return counters

    def snapshot(self) -> FeedbackCounters:
        return self._counters

    def reset(self) -> None:
        self._counters = FeedbackCounters()
        logger.info("Feedback counters reset")

    def to_read(self) -> FeedbackRead:
        """Map the current state to its wire representation."""
        c = self._counters
        stats = compute_statistics(c.good, c.neutral, c.bad)
        counters = FeedbackCountersRead(good=c.good, neutral=c.neutral, bad=c.bad)
        if stats is None:
            return FeedbackRead(counters=counters, statistics=None, message=NO_FEEDBACK_MESSAGE)
        return FeedbackRead(
            counters=counters,
            statistics=FeedbackStatisticsRead(
                total=stats.total,
                average=stats.average,
                positive_percent=stats.positive_percent,
            ),
        )
