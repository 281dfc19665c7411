# api/base/base_schemas.py
from pydantic import BaseModel, Field


class SuccessResponse(BaseModel):
    success: bool = Field(True, description="Always true for an accepted request")


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Human-friendly error message")

    @classmethod
    def from_message(cls, message: str):
        return cls(error=message)
