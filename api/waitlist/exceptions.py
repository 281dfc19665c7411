VALIDATION_ERROR_MESSAGE = "Valid email is required"
INTERNAL_ERROR_MESSAGE = "Failed to process submission"


class WaitlistError(Exception):
    """Base class for waitlist submission failures."""

    status_code = 500
    public_message = INTERNAL_ERROR_MESSAGE


class SubmissionValidationError(WaitlistError):
    """Raised when the submitted email is missing or has no '@'."""

    status_code = 400
    public_message = VALIDATION_ERROR_MESSAGE


class SubmissionInternalError(WaitlistError):
    """Raised for any other failure while processing a submission."""

    status_code = 500
    public_message = INTERNAL_ERROR_MESSAGE
