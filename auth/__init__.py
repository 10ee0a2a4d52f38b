"""Session token verification."""
from auth.models import Session
from auth.services import (
    create_access_token,
    decode_token,
    get_current_session
)

__all__ = [
    "Session",
    "create_access_token",
    "decode_token",
    "get_current_session"
]
