# api/waitlist/usecases.py
from typing import Any
import logging

from pydantic import ValidationError

from models import WaitlistEvent, FEATURES_PLACEHOLDER
from services import waitlist_service
from .exceptions import SubmissionInternalError, SubmissionValidationError
from .schemas import WaitlistSubmissionRequest

logger = logging.getLogger(__name__)


def parse_submission(payload: Any) -> WaitlistSubmissionRequest:
    """
    Validate a decoded request body

    Raises:
        SubmissionValidationError: email missing, not a string, or without '@'
    """
    try:
        return WaitlistSubmissionRequest.model_validate(payload)
    except ValidationError as e:
        raise SubmissionValidationError(str(e)) from e


def build_event(submission: WaitlistSubmissionRequest) -> WaitlistEvent:
    """Build the event recorded for an accepted submission"""
    return WaitlistEvent(
        email=submission.email,
        features=submission.features or FEATURES_PLACEHOLDER
    )


def process_submission(payload: Any) -> WaitlistEvent:
    """
    Validate a submission and record it to the observability sink

    Args:
        payload: Decoded JSON request body

    Returns:
        The recorded WaitlistEvent
    """
    submission = parse_submission(payload)

    try:
        event = build_event(submission)
        waitlist_service.waitlist_recorder.record(event)
    except Exception as e:
        raise SubmissionInternalError(f"Could not record submission: {e}") from e

    return event
