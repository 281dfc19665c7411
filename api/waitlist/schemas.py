from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Any, Optional

# REQUEST SCHEMAS

class WaitlistSubmissionRequest(BaseModel):
    """
    Request body for POST /api/waitlist

    Example:
        {"email": "trader@example.com", "features": "dark mode"}
    """
    model_config = ConfigDict(extra='ignore')

    email: str = Field(..., description="Email address, must contain '@'")
    features: Optional[str] = Field(None, description="Free-text feature suggestions")

    @field_validator('email')
    @classmethod
    def email_must_contain_at(cls, value: str) -> str:
        if "@" not in value:
            raise ValueError("email must contain '@'")
        return value

    @field_validator('features', mode='before')
    @classmethod
    def coerce_features(cls, value: Any) -> Optional[str]:
        if value is None or isinstance(value, str):
            return value
        return str(value)
