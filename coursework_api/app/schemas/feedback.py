"""Pydantic schemas for the feedback counter."""

from typing import Optional

from pydantic import BaseModel, Field


class FeedbackCountersRead(BaseModel):
    """Current value of each counter."""

    good: int = Field(..., ge=0)
    neutral: int = Field(..., ge=0)
    bad: int = Field(..., ge=0)


class FeedbackStatisticsRead(BaseModel):
    """Statistics derived from the counters."""

    total: int
    average: float
    positive_percent: float


class FeedbackRead(BaseModel):
    """Counters together with their statistics.

    ``statistics`` is ``None`` while no feedback has been given; in that
    case ``message`` carries the text shown instead.
    """

    counters: FeedbackCountersRead
    statistics: Optional[FeedbackStatisticsRead] = None
    message: Optional[str] = None
