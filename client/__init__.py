from .waitlist_form import FormEvent, FormState, InvalidTransitionError, WaitlistForm, next_state

__all__ = ['FormEvent', 'FormState', 'InvalidTransitionError', 'WaitlistForm', 'next_state']
