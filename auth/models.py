"""Session Pydantic models."""
from pydantic import BaseModel, Field


class Session(BaseModel):
    """Identity of the caller, decoded from a bearer token."""
    user_id: str = Field(..., min_length=1)
