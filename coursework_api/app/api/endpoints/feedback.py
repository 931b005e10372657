"""
Feedback counter endpoints.

Each ``POST`` corresponds to one button click and returns the updated
counters along with the derived statistics.
"""

from enum import Enum

from fastapi import APIRouter, Depends, Request, status

from coursework_api.app.schemas.feedback import FeedbackRead
from coursework_api.app.services.feedback_service import FeedbackCounter

router = APIRouter()


class FeedbackKind(str, Enum):
    good = "good"
    neutral = "neutral"
    bad = "bad"


def get_feedback_counter(request: Request) -> FeedbackCounter:
    """Return the counter owned by the running application."""
    return request.app.state.feedback


@router.get("", response_model=FeedbackRead)
async def get_feedback(counter: FeedbackCounter = Depends(get_feedback_counter)) -> FeedbackRead:
    """Return the counters and their statistics."""
    return counter.to_read()


@router.post("/{kind}", response_model=FeedbackRead)
async def record_feedback(
    kind: FeedbackKind,
    counter: FeedbackCounter = Depends(get_feedback_counter),
) -> FeedbackRead:
    """Add one piece of feedback of the given kind."""
    counter.record(kind.value)
    return counter.to_read()


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def reset_feedback(counter: FeedbackCounter = Depends(get_feedback_counter)) -> None:
    """Set every counter back to zero."""
    counter.reset()
    return None
