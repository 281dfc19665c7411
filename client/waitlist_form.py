# client/waitlist_form.py
from enum import Enum
from typing import Callable, Optional
import logging
import threading

import httpx

from config.settings import settings

logger = logging.getLogger(__name__)

EMAIL_REQUIRED_MESSAGE = "Please enter your email address."
GENERIC_ERROR_MESSAGE = "Something went wrong. Please try again."


class FormState(str, Enum):
    EDITING = "editing"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"


class FormEvent(str, Enum):
    SUBMIT = "submit"
    SUCCEED = "succeed"
    FAIL = "fail"
    RESET = "reset"


class InvalidTransitionError(ValueError):
    """Raised when an event is not allowed in the current form state."""


TRANSITIONS = {
    (FormState.EDITING, FormEvent.SUBMIT): FormState.SUBMITTING,
    (FormState.SUBMITTING, FormEvent.SUCCEED): FormState.SUBMITTED,
    (FormState.SUBMITTING, FormEvent.FAIL): FormState.EDITING,
    (FormState.SUBMITTED, FormEvent.RESET): FormState.EDITING,
}


def next_state(state: FormState, event: FormEvent) -> FormState:
    """Return the state reached from `state` on `event`"""
    try:
        return TRANSITIONS[(state, event)]
    except KeyError:
        raise InvalidTransitionError(f"Cannot {event.value} while {state.value}") from None


class WaitlistForm:
    """
    Waitlist signup form

    Holds what the user typed, posts it to the waitlist endpoint and tracks
    the editing -> submitting -> submitted flow. A failed submission returns
    the form to editing with a generic error and keeps the entered values.
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        http_client: Optional[httpx.Client] = None,
        on_success: Optional[Callable[[], None]] = None,
        confirmation_delay: Optional[float] = None,
        timer_factory: Callable[..., threading.Timer] = threading.Timer,
    ):
        self.endpoint = endpoint or settings.WAITLIST_API_URL
        self._owns_client = http_client is None
        self.http_client = http_client or httpx.Client(timeout=settings.WAITLIST_REQUEST_TIMEOUT_SECONDS)
        self.on_success = on_success
        self.confirmation_delay = (
            settings.WAITLIST_CONFIRMATION_DELAY_SECONDS
            if confirmation_delay is None else confirmation_delay
        )
        self.timer_factory = timer_factory

        self.email = ""
        self.features = ""
        self.error = ""
        self.state = FormState.EDITING
        self.confirmation_timer: Optional[threading.Timer] = None

    @property
    def is_submitting(self) -> bool:
        return self.state is FormState.SUBMITTING

    @property
    def is_submitted(self) -> bool:
        return self.state is FormState.SUBMITTED

    def submit(self, email: Optional[str] = None, features: Optional[str] = None) -> bool:
        """
        Submit the form

        Args:
            email: Replaces the current email field when given
            features: Replaces the current features field when given

        Returns:
            True once the endpoint acknowledged the submission
        """
        if email is not None:
            self.email = email
        if features is not None:
            self.features = features

        if not self.email:
            self.error = EMAIL_REQUIRED_MESSAGE
            return False

        self.error = ""
        self.state = next_state(self.state, FormEvent.SUBMIT)

        try:
            response = self.http_client.post(
                self.endpoint,
                json={"email": self.email, "features": self.features}
            )
            response.raise_for_status()
        except Exception as e:
            logger.warning(f"Waitlist submission failed: {e}")
            self.error = GENERIC_ERROR_MESSAGE
            self.state = next_state(self.state, FormEvent.FAIL)
            return False

        self.state = next_state(self.state, FormEvent.SUCCEED)
        self.email = ""
        self.features = ""
        self._schedule_confirmation()
        return True

    def reset(self):
        """Show an empty form again after a confirmation"""
        self.state = next_state(self.state, FormEvent.RESET)
        self.error = ""

    def _schedule_confirmation(self):
        if self.on_success is None:
            return

        timer = self.timer_factory(self.confirmation_delay, self.on_success)
        timer.daemon = True
        timer.start()
        self.confirmation_timer = timer

    def close(self):
        if self.confirmation_timer is not None:
            self.confirmation_timer.cancel()
            self.confirmation_timer = None
        if self._owns_client:
            self.http_client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
