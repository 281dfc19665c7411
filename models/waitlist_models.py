# models/waitlist_models.py
from pydantic import BaseModel, Field

from utils.helpers import utc_timestamp

FEATURES_PLACEHOLDER = "No features specified"

class WaitlistEvent(BaseModel):
    """A single waitlist submission as written to the observability sink"""
    email: str
    features: str = FEATURES_PLACEHOLDER
    timestamp: str = Field(default_factory=utc_timestamp)
