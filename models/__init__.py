# models/__init__.py
from .waitlist_models import WaitlistEvent, FEATURES_PLACEHOLDER

__all__ = [
    "WaitlistEvent",
    "FEATURES_PLACEHOLDER",
]
