from flask import request, jsonify
from werkzeug.exceptions import BadRequest
import logging

from services import waitlist_service
from ..base.base_schemas import ErrorResponse, SuccessResponse
from .exceptions import SubmissionInternalError, SubmissionValidationError
from .usecases import process_submission

from . import waitlist_bp

logger = logging.getLogger(__name__)


def read_payload():
    """Decode the request body as JSON whatever its declared content type"""
    try:
        payload = request.get_json(force=True)
    except BadRequest as e:
        raise SubmissionInternalError(f"Malformed request body: {e}") from e

    if payload is None:
        raise SubmissionInternalError("Request body is JSON null")
    return payload


@waitlist_bp.route('/waitlist', methods=['POST'])
def join_waitlist():
    """
    Join the waitlist

    Request Body:
        WaitlistSubmissionRequest (see schemas.py)

    Request Example:
        {
            "email": "trader@example.com",
            "features": "dark mode"
        }

    Responses:
        200 {"success": true}
        400 {"error": "Valid email is required"}
        500 {"error": "Failed to process submission"}
    """
    try:
        process_submission(read_payload())
        return jsonify(SuccessResponse().model_dump())

    except SubmissionValidationError as e:
        logger.info(f"Rejected waitlist submission: {e}")
        response = ErrorResponse.from_message(e.public_message)
        return jsonify(response.model_dump()), e.status_code

    except Exception as e:
        waitlist_service.waitlist_recorder.record_failure(e)
        response = ErrorResponse.from_message(SubmissionInternalError.public_message)
        return jsonify(response.model_dump()), SubmissionInternalError.status_code
